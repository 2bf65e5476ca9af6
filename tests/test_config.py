# tests/test_config.py

from ner_annotator.config import DEFAULT_MODEL, load_config


def test_load_config(tmp_path):
    path = tmp_path / "annotator.yaml"
    path.write_text(
        "labels: [PERSON, ORG]\n"
        "colors:\n"
        "  person: '#123456'\n"
        "options:\n"
        "  disable_boundary_controls: true\n"
        "ner:\n"
        "  model: en_core_web_md\n",
        encoding="utf-8",
    )
    cfg = load_config(str(path))
    assert cfg.labels == ["PERSON", "ORG"]
    assert cfg.colors == {"PERSON": "#123456"}
    assert cfg.options.disable_boundary_controls is True
    assert cfg.ner_model == "en_core_web_md"


def test_missing_config_gives_defaults(tmp_path):
    cfg = load_config(str(tmp_path / "nope.yaml"))
    assert cfg.labels == []
    assert cfg.options.disable_boundary_controls is False
    assert cfg.ner_model == DEFAULT_MODEL


def test_empty_config_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    cfg = load_config(str(path))
    assert cfg.labels == []
    assert cfg.colors == {}
