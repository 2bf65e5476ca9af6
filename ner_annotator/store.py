# ner_annotator/store.py

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Iterable, Iterator, List, Optional, Sequence

from ner_annotator.boundaries import Direction, adjusted_end, adjusted_start
from ner_annotator.models import EditableSpan, Span
from ner_annotator.selection import default_label, translate_selection
from ner_annotator.text_model import TextModel

logger = logging.getLogger(__name__)

ChangeListener = Callable[[List[Span]], None]


class SpanStore:
    """
    Owns the editable spans of one widget.

    Every public mutator ends with exactly one change notification carrying
    the committed spans, even when the call turned out to be a no-op
    (unknown id, boundary limit, rejected selection). Spans are kept
    disjoint: creates and adjusts that would overlap another span are
    refused.
    """

    def __init__(
        self,
        text: TextModel,
        allowed_labels: Sequence[str],
        on_change: Optional[ChangeListener] = None,
    ):
        self.text = text
        self.allowed_labels = list(allowed_labels)
        self._spans: List[EditableSpan] = []
        self._next_id = 1
        self._listeners: List[ChangeListener] = []
        if on_change is not None:
            self._listeners.append(on_change)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._spans)

    def __iter__(self) -> Iterator[EditableSpan]:
        return iter(list(self._spans))

    @property
    def spans(self) -> List[EditableSpan]:
        return list(self._spans)

    def get(self, span_id: int) -> Optional[EditableSpan]:
        for span in self._spans:
            if span.id == span_id:
                return span
        return None

    def committed(self) -> List[Span]:
        return [s.committed() for s in self._spans]

    # ------------------------------------------------------------------
    # Seeding
    # ------------------------------------------------------------------
    def seed(self, spans: Iterable[Span]) -> None:
        """Load host-supplied spans, dropping disallowed labels and bad offsets."""
        allowed = set(self.allowed_labels)
        for span in spans:
            if span.label not in allowed:
                logger.debug("Dropping seed span %s: label not allowed", span)
                continue
            if not self._in_bounds(span.start, span.end):
                logger.warning("Dropping seed span %s: outside text", span)
                continue
            if self._overlaps_any(span.start, span.end):
                logger.warning("Dropping seed span %s: overlaps another span", span)
                continue
            self._spans.append(
                EditableSpan(
                    start=span.start,
                    end=span.end,
                    label=span.label,
                    id=self._take_id(),
                    editing=False,
                    pending_label=span.label,
                )
            )
        self._emit()

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------
    def create(self, span: EditableSpan) -> Optional[EditableSpan]:
        """Insert a new span in edit mode; disallowed labels fall back to the default."""
        created = None
        if not self._in_bounds(span.start, span.end):
            logger.debug("Rejecting span [%d, %d): outside text", span.start, span.end)
        elif self._overlaps_any(span.start, span.end):
            logger.debug("Rejecting span [%d, %d): overlaps", span.start, span.end)
        else:
            label = span.label if self._label_ok(span.label) else default_label(self.allowed_labels)
            created = replace(
                span,
                id=self._take_id(),
                label=label,
                editing=True,
                pending_label=label,
            )
            self._spans.append(created)
        self._emit()
        return created

    def create_from_selection(self, a: Optional[int], b: Optional[int]) -> Optional[EditableSpan]:
        candidate = translate_selection(self.text, a, b, self.allowed_labels, span_id=0)
        if candidate is None:
            logger.debug("Ignoring selection (%s, %s)", a, b)
            self._emit()
            return None
        return self.create(candidate)

    def toggle_edit(self, span_id: int) -> None:
        span = self.get(span_id)
        if span is not None:
            span.editing = not span.editing
            # entering copies the label in, leaving without approve discards edits
            span.pending_label = span.label
        self._emit()

    def set_pending_label(self, span_id: int, value: str) -> None:
        span = self.get(span_id)
        if span is not None and span.editing and self._label_ok(value):
            span.pending_label = value
        self._emit()

    def approve(self, span_id: int) -> None:
        span = self.get(span_id)
        if span is not None and span.editing:
            span.label = span.pending_label or span.label
            span.editing = False
        self._emit()

    def adjust_start(self, span_id: int, direction: Direction) -> None:
        span = self.get(span_id)
        if span is not None:
            new_start = adjusted_start(self.text, span, direction)
            if not self._overlaps_any(new_start, span.end, exclude=span.id):
                span.start = new_start
        self._emit()

    def adjust_end(self, span_id: int, direction: Direction) -> None:
        span = self.get(span_id)
        if span is not None:
            new_end = adjusted_end(self.text, span, direction)
            if not self._overlaps_any(span.start, new_end, exclude=span.id):
                span.end = new_end
        self._emit()

    def remove(self, span_id: int) -> None:
        self._spans = [s for s in self._spans if s.id != span_id]
        self._emit()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _take_id(self) -> int:
        span_id = self._next_id
        self._next_id += 1
        return span_id

    def _in_bounds(self, start: int, end: int) -> bool:
        return 0 <= start < end <= len(self.text)

    def _overlaps_any(self, start: int, end: int, exclude: Optional[int] = None) -> bool:
        for other in self._spans:
            if other.id == exclude:
                continue
            if not (end <= other.start or other.end <= start):
                return True
        return False

    def _label_ok(self, value: str) -> bool:
        if self.allowed_labels:
            return value in self.allowed_labels
        return bool(value)

    def _emit(self) -> None:
        committed = self.committed()
        for listener in self._listeners:
            listener(committed)

