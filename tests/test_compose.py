# tests/test_compose.py

from ner_annotator.compose import compose_segments
from ner_annotator.models import EditableSpan
from ner_annotator.text_model import TextModel

TEXT = TextModel("The quick fox")


def _layout(segments):
    return [(seg.kind, seg.start, seg.end) for seg in segments]


def test_segments_partition_the_text():
    spans = [EditableSpan(10, 13, "ANIMAL", id=2), EditableSpan(4, 9, "ADJ", id=1)]
    segments = compose_segments(TEXT, spans)

    assert _layout(segments) == [
        ("text", 0, 4),
        ("entity", 4, 9),
        ("text", 9, 10),
        ("entity", 10, 13),
    ]
    assert "".join(seg.text for seg in segments) == TEXT.text
    assert segments[1].span.id == 1


def test_no_spans_gives_single_text_segment():
    segments = compose_segments(TEXT, [])
    assert _layout(segments) == [("text", 0, 13)]


def test_span_covering_everything():
    segments = compose_segments(TEXT, [EditableSpan(0, 13, "ALL", id=1)])
    assert _layout(segments) == [("entity", 0, 13)]


def test_empty_text():
    assert compose_segments(TextModel(""), []) == []


def test_equal_starts_keep_insertion_order():
    spans = [EditableSpan(4, 9, "A", id=1), EditableSpan(4, 6, "B", id=2)]
    segments = compose_segments(TEXT, spans)
    entity_ids = [seg.span.id for seg in segments if seg.is_entity]
    assert entity_ids == [1, 2]


def test_plain_characters_are_addressable():
    segments = compose_segments(TEXT, [EditableSpan(0, 3, "A", id=1)])
    tail = segments[-1]
    assert list(tail.characters())[:3] == [(3, " "), (4, "q"), (5, "u")]
    offsets = [i for seg in segments if not seg.is_entity for i, _ in seg.characters()]
    assert offsets == list(range(3, 13))
