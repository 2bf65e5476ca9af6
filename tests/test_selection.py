# tests/test_selection.py

from ner_annotator.selection import FALLBACK_LABEL, translate_selection
from ner_annotator.text_model import TextModel

TEXT = TextModel("The quick fox")
LABELS = ["PERSON", "ORG"]


def test_selection_becomes_span_in_edit_mode():
    span = translate_selection(TEXT, 4, 8, LABELS, span_id=7)
    assert (span.start, span.end, span.label) == (4, 9, "PERSON")
    assert span.pending_label == "PERSON"
    assert span.editing is True
    assert span.id == 7


def test_backwards_selection_is_normalised():
    span = translate_selection(TEXT, 8, 4, LABELS, span_id=1)
    assert (span.start, span.end) == (4, 9)


def test_single_character_selection():
    span = translate_selection(TEXT, 12, 12, LABELS, span_id=1)
    assert (span.start, span.end) == (12, 13)


def test_invalid_selections_are_ignored():
    assert translate_selection(TEXT, None, 3, LABELS, span_id=1) is None
    assert translate_selection(TEXT, -1, 3, LABELS, span_id=1) is None
    assert translate_selection(TEXT, 10, 13, LABELS, span_id=1) is None


def test_empty_label_list_uses_fallback():
    span = translate_selection(TEXT, 0, 2, [], span_id=1)
    assert span.label == FALLBACK_LABEL
    assert span.pending_label == FALLBACK_LABEL
