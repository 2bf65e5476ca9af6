# ner_annotator/render.py

from __future__ import annotations

import html
from typing import Dict, List, Mapping, Optional

from ner_annotator.models import Segment

# displaCy's entity palette
DEFAULT_COLORS: Dict[str, str] = {
    "ORG": "#7aecec",
    "PRODUCT": "#bfeeb7",
    "GPE": "#feca74",
    "LOC": "#ff9561",
    "PERSON": "#aa9cfc",
    "NORP": "#c887fb",
    "FAC": "#9cc9cc",
    "EVENT": "#ffeb80",
    "LAW": "#ff8197",
    "LANGUAGE": "#ff8197",
    "WORK_OF_ART": "#f0d0ff",
    "DATE": "#bfe1d9",
    "TIME": "#bfe1d9",
    "MONEY": "#e4e7d2",
    "QUANTITY": "#e4e7d2",
    "ORDINAL": "#e4e7d2",
    "CARDINAL": "#e4e7d2",
    "PERCENT": "#e4e7d2",
}
DEFAULT_COLOR = "#ddd"

STYLE = """
<style>
.entities { line-height: 2.5; direction: ltr; }
.entity { padding: 0.45em 0.6em; margin: 0 0.25em; line-height: 1;
          border-radius: 0.35em; display: inline-block; }
.entity.editing { outline: 2px dashed #333; }
.span-label { font-size: 0.6em; font-weight: bold; padding: 0 3px;
              margin-left: 0.3em; vertical-align: middle; }
.extend-controls { font-size: 0.6em; color: #666; margin: 0 2px; }
[data-ch-idx] { user-select: text; }
</style>
"""


def merged_colors(user_colors: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    colors = dict(DEFAULT_COLORS)
    for label, color in (user_colors or {}).items():
        colors[label.upper()] = color
    return colors


def color_for(label: str, colors: Mapping[str, str]) -> str:
    return colors.get(label.upper(), DEFAULT_COLOR)


def _render_plain(segment: Segment) -> str:
    return "".join(
        f'<span data-ch-idx="{i}">{html.escape(ch)}</span>'
        for i, ch in segment.characters()
    )


def _render_entity(segment: Segment, colors: Mapping[str, str], show_controls: bool) -> str:
    span = segment.span
    classes = "entity editing" if span.editing else "entity"
    label = span.pending_label if span.editing else span.label
    color = color_for(span.label, colors)

    parts = [
        f'<mark class="{classes}" data-span-id="{span.id}" style="background: {color}">'
    ]
    if show_controls and span.editing:
        parts.append('<span class="extend-controls left-extend">&larr;&rarr;</span>')
    parts.append(html.escape(segment.text))
    parts.append(f'<span class="span-label">{html.escape(label)}</span>')
    if show_controls and span.editing:
        parts.append('<span class="extend-controls right-extend">&larr;&rarr;</span>')
    parts.append("</mark>")
    return "".join(parts)


def render_html(
    segments: List[Segment],
    colors: Optional[Mapping[str, str]] = None,
    disable_boundary_controls: bool = False,
    include_style: bool = True,
) -> str:
    """
    Render display segments as HTML.

    Plain characters carry data-ch-idx so a client can report the
    selected offsets back; entities are <mark> elements tagged with their
    span id.
    """
    palette = merged_colors(colors)
    body = []
    for segment in segments:
        if segment.is_entity:
            body.append(_render_entity(segment, palette, not disable_boundary_controls))
        else:
            body.append(_render_plain(segment))

    out = f'<div class="entities">{"".join(body)}</div>'
    if include_style:
        out = STYLE + out
    return out
