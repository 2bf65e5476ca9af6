# tests/test_detect_ner.py

import pytest
import spacy

from ner_annotator import detect_ner
from ner_annotator.models import Span


@pytest.fixture
def ruler_model(monkeypatch):
    nlp = spacy.blank("en")
    ruler = nlp.add_pipe("entity_ruler")
    ruler.add_patterns(
        [
            {"label": "PERSON", "pattern": "Alice"},
            {"label": "GPE", "pattern": "Paris"},
        ]
    )
    monkeypatch.setitem(detect_ner._NLP, "ruler", nlp)
    return "ruler"


def test_ner_spans_from_entities(ruler_model):
    spans = detect_ner.ner_spans("Alice flew to Paris.", model=ruler_model)
    assert spans == [Span(0, 5, "PERSON"), Span(14, 19, "GPE")]


def test_ner_spans_label_filter(ruler_model):
    spans = detect_ner.ner_spans("Alice flew to Paris.", labels=["GPE"], model=ruler_model)
    assert spans == [Span(14, 19, "GPE")]


def test_empty_text_skips_model():
    assert detect_ner.ner_spans("", model="not-installed") == []
