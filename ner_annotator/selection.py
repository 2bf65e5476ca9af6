# ner_annotator/selection.py

from __future__ import annotations

from typing import Optional, Sequence

from ner_annotator.models import EditableSpan
from ner_annotator.text_model import TextModel

FALLBACK_LABEL = "MISC"


def default_label(allowed_labels: Sequence[str]) -> str:
    return allowed_labels[0] if allowed_labels else FALLBACK_LABEL


def translate_selection(
    text: TextModel,
    a: Optional[int],
    b: Optional[int],
    allowed_labels: Sequence[str],
    span_id: int,
) -> Optional[EditableSpan]:
    """
    Turn an inclusive character selection (a, b) into a new span.

    The indices are the first and last selected characters as reported by
    the presentation layer; their order does not matter. Returns None when
    the selection cannot form a valid span. New spans open in edit mode so
    the user confirms a label straight away.
    """
    if a is None or b is None or a < 0 or b < 0:
        return None

    start = min(a, b)
    end = max(a, b) + 1
    if end <= start or end > len(text):
        return None

    label = default_label(allowed_labels)
    return EditableSpan(
        start=start,
        end=end,
        label=label,
        id=span_id,
        editing=True,
        pending_label=label,
    )
