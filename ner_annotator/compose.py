# ner_annotator/compose.py

from __future__ import annotations

from typing import Iterable, List

from ner_annotator.models import EditableSpan, Segment
from ner_annotator.text_model import TextModel


def compose_segments(text: TextModel, spans: Iterable[EditableSpan]) -> List[Segment]:
    """
    Interleave spans with the plain text around them.

    Spans are ordered by start (stable, so ties keep insertion order) and
    assumed disjoint; the returned segments then cover the whole text once.
    """
    spans_sorted = sorted(spans, key=lambda s: s.start)
    segments: List[Segment] = []
    cursor = 0

    for span in spans_sorted:
        if cursor < span.start:
            segments.append(
                Segment(kind="text", start=cursor, end=span.start,
                        text=text.slice(cursor, span.start))
            )
        segments.append(
            Segment(kind="entity", start=span.start, end=span.end,
                    text=text.slice(span.start, span.end), span=span)
        )
        cursor = span.end

    if cursor < len(text):
        segments.append(
            Segment(kind="text", start=cursor, end=len(text),
                    text=text.slice(cursor, len(text)))
        )

    return segments
