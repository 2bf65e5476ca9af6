# api/sessions.py

from __future__ import annotations

import threading
import uuid
from dataclasses import dataclass, field
from typing import Dict, Optional

from ner_annotator.widget import Annotator, RecordingBridge


@dataclass
class Session:
    id: str
    widget: Annotator
    bridge: RecordingBridge
    lock: threading.Lock = field(default_factory=threading.Lock)


class SessionRegistry:
    """In-process widgets keyed by session id."""

    def __init__(self) -> None:
        self._sessions: Dict[str, Session] = {}
        self._lock = threading.Lock()

    def open(self, widget: Annotator, bridge: RecordingBridge) -> Session:
        session = Session(id=uuid.uuid4().hex, widget=widget, bridge=bridge)
        with self._lock:
            self._sessions[session.id] = session
        return session

    def get(self, session_id: str) -> Optional[Session]:
        with self._lock:
            return self._sessions.get(session_id)

    def close(self, session_id: str) -> bool:
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
