# tests/test_render.py

from ner_annotator.compose import compose_segments
from ner_annotator.models import EditableSpan
from ner_annotator.render import DEFAULT_COLOR, color_for, merged_colors, render_html
from ner_annotator.text_model import TextModel


def test_color_lookup_ignores_case():
    colors = merged_colors({"person": "#123456"})
    assert color_for("Person", colors) == "#123456"
    assert color_for("org", colors) == "#7aecec"
    assert color_for("UNKNOWN", colors) == DEFAULT_COLOR


def test_every_plain_character_is_tagged():
    text = TextModel("a <b> c")
    segments = compose_segments(text, [EditableSpan(6, 7, "ORG", id=3)])
    out = render_html(segments, include_style=False)

    assert out.count("data-ch-idx=") == 6
    assert '<span data-ch-idx="2">&lt;</span>' in out
    assert 'data-span-id="3"' in out
    assert "background: #7aecec" in out


def test_editing_span_shows_pending_label_and_controls():
    text = TextModel("Bob")
    span = EditableSpan(0, 3, "PERSON", id=1, editing=True, pending_label="ORG")
    segments = compose_segments(text, [span])

    out = render_html(segments, include_style=False)
    assert "entity editing" in out
    assert ">ORG<" in out
    assert "extend-controls" in out

    hidden = render_html(segments, disable_boundary_controls=True, include_style=False)
    assert "extend-controls" not in hidden
