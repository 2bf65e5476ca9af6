from __future__ import annotations

from typing import Dict, Iterable, List, Optional
from ner_annotator.models import Span

import spacy

# Lazy-loaded spaCy pipelines, one per model name
_NLP: Dict[str, "spacy.language.Language"] = {}


def _get_nlp(model: str = "en_core_web_sm") -> "spacy.language.Language":
    if model not in _NLP:
        _NLP[model] = spacy.load(model)
    return _NLP[model]


def ner_spans(
    text: str,
    labels: Optional[Iterable[str]] = None,
    model: str = "en_core_web_sm",
) -> List[Span]:
    """
    Candidate spans from spaCy NER, used to pre-fill the widget.

    labels:
      - If None: keep every entity the model finds.
      - If iterable: keep only entities whose label is in it.
    """
    if not text:
        return []

    nlp = _get_nlp(model)
    doc = nlp(text)
    keep = set(labels) if labels is not None else None

    spans: List[Span] = []
    for ent in doc.ents:
        if keep is not None and ent.label_ not in keep:
            continue
        if ent.start_char >= ent.end_char:
            continue
        spans.append(Span(start=ent.start_char, end=ent.end_char, label=ent.label_))

    return spans
