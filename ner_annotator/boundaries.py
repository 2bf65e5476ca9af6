# ner_annotator/boundaries.py

from __future__ import annotations

from enum import Enum

from ner_annotator.models import Span
from ner_annotator.text_model import TextModel


class Direction(str, Enum):
    LEFT = "left"
    RIGHT = "right"


def move_start_left(text: TextModel, span: Span) -> int:
    """Move the start boundary left by one word."""
    if span.start <= 0:
        return span.start

    i = span.start - 1
    while i > 0 and text.is_whitespace(i):
        i -= 1
    while i > 0 and not text.is_whitespace(i - 1):
        i -= 1
    return max(0, i)


def move_start_right(text: TextModel, span: Span) -> int:
    """Move the start boundary right by one word, never reaching the end."""
    n = len(text)
    if span.start >= n - 1:
        return span.start

    i = span.start
    # skip current word
    while i < n and not text.is_whitespace(i):
        i += 1
    # skip whitespace
    while i < n and text.is_whitespace(i):
        i += 1

    if i >= span.end:
        i = max(0, span.end - 1)
    return i


def move_end_left(text: TextModel, span: Span) -> int:
    """Move the end boundary left by one word, keeping at least one character."""
    if span.end <= span.start + 1:
        return span.end

    i = span.end - 1
    while i > span.start and text.is_whitespace(i):
        i -= 1
    while i > span.start and not text.is_whitespace(i - 1):
        i -= 1

    if i <= span.start:
        i = span.start + 1
    return i


def move_end_right(text: TextModel, span: Span) -> int:
    """Move the end boundary right by one word."""
    n = len(text)
    if span.end >= n:
        return span.end

    i = span.end
    while i < n and text.is_whitespace(i):
        i += 1
    while i < n and not text.is_whitespace(i):
        i += 1

    if i <= span.start:
        i = span.start + 1
    if i > n:
        i = n
    return i


def adjusted_start(text: TextModel, span: Span, direction: Direction) -> int:
    if Direction(direction) is Direction.LEFT:
        new_start = move_start_left(text, span)
    else:
        new_start = move_start_right(text, span)

    # never invert the span
    if new_start >= span.end:
        new_start = max(0, span.end - 1)
    return new_start


def adjusted_end(text: TextModel, span: Span, direction: Direction) -> int:
    if Direction(direction) is Direction.LEFT:
        new_end = move_end_left(text, span)
    else:
        new_end = move_end_right(text, span)

    if new_end <= span.start:
        new_end = span.start + 1
    return new_end
