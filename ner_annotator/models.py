# ner_annotator/models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple


@dataclass
class Span:
    start: int
    end: int
    label: str

    def __post_init__(self):
        if self.start < 0 or self.start >= self.end:
            raise ValueError(f"Invalid span [{self.start}, {self.end})")

    def to_dict(self) -> Dict[str, Any]:
        return {"start": self.start, "end": self.end, "label": self.label}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Span":
        # Older hosts send start_token/end_token for character offsets
        start = data["start"] if "start" in data else data["start_token"]
        end = data["end"] if "end" in data else data["end_token"]
        return cls(start=int(start), end=int(end), label=str(data["label"]))


@dataclass
class EditableSpan(Span):
    id: int = 0
    editing: bool = False
    pending_label: Optional[str] = None

    def __post_init__(self):
        super().__post_init__()
        if self.pending_label is None:
            self.pending_label = self.label

    def committed(self) -> Span:
        return Span(start=self.start, end=self.end, label=self.label)


@dataclass
class AnnotatorOptions:
    """
    Host-supplied switches. All of them are presentation-only:

    - disable_boundary_controls: hide the word-boundary arrows. The
      adjust operations stay available to API callers.
    """

    disable_boundary_controls: bool = False

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "AnnotatorOptions":
        data = data or {}
        # older hosts use disable_span_position_edit
        flag = data.get(
            "disable_boundary_controls",
            data.get("disable_span_position_edit", False),
        )
        return cls(disable_boundary_controls=bool(flag))


@dataclass
class Segment:
    kind: str  # "text" or "entity"
    start: int
    end: int
    text: str
    span: Optional[EditableSpan] = None

    @property
    def is_entity(self) -> bool:
        return self.kind == "entity"

    def characters(self) -> Iterator[Tuple[int, str]]:
        """One (offset, char) unit per character, so selections map back to offsets."""
        for i, ch in enumerate(self.text):
            yield self.start + i, ch
