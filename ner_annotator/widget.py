# ner_annotator/widget.py

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Protocol, Sequence, Union

from ner_annotator.boundaries import Direction
from ner_annotator.compose import compose_segments
from ner_annotator.models import AnnotatorOptions, EditableSpan, Segment, Span
from ner_annotator.store import SpanStore
from ner_annotator.text_model import TextModel

logger = logging.getLogger(__name__)

SpanInput = Union[Span, Mapping[str, Any]]


class HostBridge(Protocol):
    """What the embedding application has to provide."""

    def publish(self, spans: List[Dict[str, Any]]) -> None:
        ...

    def request_resize(self) -> None:
        ...


class RecordingBridge:
    """Bridge that keeps the latest published value and a publish count."""

    def __init__(self) -> None:
        self.latest: List[Dict[str, Any]] = []
        self.publish_count = 0
        self.resize_requests = 0

    def publish(self, spans: List[Dict[str, Any]]) -> None:
        self.latest = spans
        self.publish_count += 1

    def request_resize(self) -> None:
        self.resize_requests += 1


def coerce_spans(raw: Iterable[SpanInput]) -> List[Span]:
    spans: List[Span] = []
    for item in raw or []:
        if isinstance(item, Span):
            spans.append(item)
            continue
        try:
            spans.append(Span.from_dict(dict(item)))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping malformed span %r: %s", item, e)
    return spans


class Annotator:
    """
    The annotation widget: text, editable spans and the host connection.

    Each store change re-composes the display segments, publishes the
    committed spans to the host and asks it to re-measure the frame.
    """

    def __init__(
        self,
        text: str,
        spans: Optional[Iterable[SpanInput]] = None,
        labels: Optional[Sequence[str]] = None,
        colors: Optional[Mapping[str, str]] = None,
        options: Optional[AnnotatorOptions] = None,
        bridge: Optional[HostBridge] = None,
    ):
        self.text = TextModel(text)
        self.labels: List[str] = list(labels or [])
        self.colors: Dict[str, str] = dict(colors or {})
        self.options = options or AnnotatorOptions()
        self.bridge: HostBridge = bridge if bridge is not None else RecordingBridge()
        self.segments: List[Segment] = []

        self.store = SpanStore(self.text, self.labels, on_change=self._on_change)
        self.store.seed(coerce_spans(spans or []))

    def _on_change(self, committed: List[Span]) -> None:
        self.segments = compose_segments(self.text, self.store.spans)
        self.bridge.publish([s.to_dict() for s in committed])
        self.bridge.request_resize()

    # ------------------------------------------------------------------
    # User actions
    # ------------------------------------------------------------------
    def select(self, a: Optional[int], b: Optional[int]) -> Optional[EditableSpan]:
        return self.store.create_from_selection(a, b)

    def toggle_edit(self, span_id: int) -> None:
        self.store.toggle_edit(span_id)

    def change_label(self, span_id: int, label: str) -> None:
        self.store.set_pending_label(span_id, label)

    def approve(self, span_id: int) -> None:
        self.store.approve(span_id)

    def adjust_start(self, span_id: int, direction: Union[Direction, str]) -> None:
        self.store.adjust_start(span_id, Direction(direction))

    def adjust_end(self, span_id: int, direction: Union[Direction, str]) -> None:
        self.store.adjust_end(span_id, Direction(direction))

    def remove(self, span_id: int) -> None:
        self.store.remove(span_id)

    # ------------------------------------------------------------------
    def value(self) -> List[Dict[str, Any]]:
        return [s.to_dict() for s in self.store.committed()]

    def entities(self) -> List[EditableSpan]:
        return self.store.spans
