# tests/test_boundaries.py

from ner_annotator.boundaries import (
    Direction,
    adjusted_end,
    adjusted_start,
    move_end_left,
    move_end_right,
    move_start_left,
    move_start_right,
)
from ner_annotator.models import Span
from ner_annotator.text_model import TextModel

TEXT = TextModel("The quick fox")


def test_start_left_lands_on_previous_word():
    assert move_start_left(TEXT, Span(9, 13, "X")) == 4
    assert move_start_left(TEXT, Span(10, 13, "X")) == 4
    assert move_start_left(TEXT, Span(4, 9, "X")) == 0


def test_start_left_at_zero_is_unchanged():
    assert move_start_left(TEXT, Span(0, 3, "X")) == 0


def test_start_left_skips_runs_of_whitespace():
    text = TextModel("a   b")
    assert move_start_left(text, Span(4, 5, "X")) == 0


def test_start_right_moves_to_next_word():
    assert move_start_right(TEXT, Span(0, 9, "X")) == 4


def test_start_right_clamps_before_end():
    assert move_start_right(TEXT, Span(0, 3, "X")) == 2


def test_start_right_at_last_char_is_unchanged():
    assert move_start_right(TEXT, Span(12, 13, "X")) == 12


def test_end_right_moves_past_next_word():
    assert move_end_right(TEXT, Span(0, 3, "X")) == 9
    assert move_end_right(TEXT, Span(4, 9, "X")) == 13


def test_end_right_at_text_end_is_unchanged():
    assert move_end_right(TEXT, Span(10, 13, "X")) == 13


def test_end_left_moves_to_start_of_last_word():
    assert move_end_left(TEXT, Span(0, 13, "X")) == 10


def test_end_left_keeps_one_character():
    assert move_end_left(TEXT, Span(4, 9, "X")) == 5
    assert move_end_left(TEXT, Span(4, 5, "X")) == 5


def test_adjusted_helpers_accept_plain_strings():
    assert adjusted_start(TEXT, Span(9, 13, "X"), "left") == 4
    assert adjusted_end(TEXT, Span(0, 3, "X"), Direction.RIGHT) == 9


def test_any_sequence_of_adjustments_keeps_span_valid():
    moves = [
        ("start", Direction.LEFT),
        ("start", Direction.RIGHT),
        ("end", Direction.LEFT),
        ("end", Direction.RIGHT),
    ]
    n = len(TEXT)
    for start in range(n):
        for end in range(start + 1, n + 1):
            span = Span(start, end, "X")
            for _ in range(3):
                for which, direction in moves:
                    if which == "start":
                        span.start = adjusted_start(TEXT, span, direction)
                    else:
                        span.end = adjusted_end(TEXT, span, direction)
                    assert 0 <= span.start < span.end <= n
