# ner_annotator/text_model.py

from __future__ import annotations

import regex as re


WHITESPACE_RE = re.compile(r"\s")


class TextModel:
    """Read-only view over the source text with whitespace queries."""

    def __init__(self, text: str):
        self._text = text or ""

    @property
    def text(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def is_whitespace(self, i: int) -> bool:
        # out-of-range is "not whitespace"; callers clamp
        if i < 0 or i >= len(self._text):
            return False
        return WHITESPACE_RE.match(self._text[i]) is not None

    def slice(self, start: int, end: int) -> str:
        return self._text[start:end]
