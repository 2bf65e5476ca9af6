# ner_annotator/config.py

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List

import yaml

from ner_annotator.models import AnnotatorOptions

DEFAULT_CONFIG_PATH = "configs/annotator.yaml"
DEFAULT_MODEL = "en_core_web_sm"


@dataclass
class AnnotatorConfig:
    labels: List[str] = field(default_factory=list)
    colors: Dict[str, str] = field(default_factory=dict)
    options: AnnotatorOptions = field(default_factory=AnnotatorOptions)
    ner_model: str = DEFAULT_MODEL


def load_config(path: str = DEFAULT_CONFIG_PATH) -> AnnotatorConfig:
    """
    Read labels, colors and widget options from a YAML file.

    A missing file gives the defaults (no labels, built-in colors only).
    Color keys are upper-cased so lookups match labels case-insensitively.
    """
    if not os.path.exists(path):
        return AnnotatorConfig()

    with open(path, "r", encoding="utf-8") as f:
        cfg: Dict[str, Any] = yaml.safe_load(f) or {}

    labels = [str(lbl) for lbl in cfg.get("labels", []) or []]
    colors = {
        str(k).upper(): str(v) for k, v in (cfg.get("colors", {}) or {}).items()
    }
    ner_cfg = cfg.get("ner", {}) or {}

    return AnnotatorConfig(
        labels=labels,
        colors=colors,
        options=AnnotatorOptions.from_dict(cfg.get("options")),
        ner_model=ner_cfg.get("model", DEFAULT_MODEL),
    )
