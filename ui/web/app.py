import sys
import json
from pathlib import Path
from typing import Any, Dict, List

import fitz  # PyMuPDF
import streamlit as st

# Make project root importable (so ner_annotator/ and api/ work)
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from ner_annotator.boundaries import Direction
from ner_annotator.config import load_config
from ner_annotator.detect_ner import ner_spans
from ner_annotator.render import render_html
from ner_annotator.widget import Annotator


class StreamlitBridge:
    """Hands the committed spans to the page through session state."""

    def publish(self, spans: List[Dict[str, Any]]) -> None:
        st.session_state["annotated_spans"] = spans

    def request_resize(self) -> None:
        # Streamlit lays the page out again on every rerun
        st.session_state["renders"] = st.session_state.get("renders", 0) + 1


def extract_text_from_pdf_bytes(data: bytes) -> str:
    """Extract plain text from a PDF (one big string)."""
    doc = fitz.open(stream=data, filetype="pdf")
    texts = []
    for page in doc:
        texts.append(page.get_text("text"))
    doc.close()
    return "\n\n".join(texts)


st.set_page_config(
    page_title="NER Entity Annotator",
    layout="wide",
)

st.title("🏷️ NER Entity Annotator")
st.caption("Select text to add a span • arrows move boundaries by whole words")

# --------------------------------------------------------------------
# Sidebar configuration
# --------------------------------------------------------------------
st.sidebar.header("Settings")

config_path = st.sidebar.text_input(
    "Config file path",
    value="configs/annotator.yaml",
    help="YAML file with labels, colors and widget options.",
)

config_ok = True
cfg = None
try:
    cfg = load_config(config_path)
except Exception as e:
    config_ok = False
    st.sidebar.error(f"Failed to load config: {e}")

labels = st.sidebar.multiselect(
    "Allowed labels",
    options=cfg.labels if cfg else [],
    default=cfg.labels if cfg else [],
    help="The first label is used for newly selected spans.",
)

disable_controls = st.sidebar.checkbox(
    "Hide boundary arrows",
    value=cfg.options.disable_boundary_controls if cfg else False,
)

detect = st.sidebar.checkbox("Pre-fill spans with spaCy NER", value=True)

# --------------------------------------------------------------------
# Input
# --------------------------------------------------------------------
input_mode = st.radio("Input source", options=["Text box", "Text file"], index=0)

default_text = (
    "Tim Cook announced on Monday that Apple will open a new campus in Austin, "
    "Texas, investing $1 billion over three years."
)

user_text = ""
if input_mode == "Text box":
    user_text = st.text_area("Input text", value=default_text, height=150)
else:
    uploaded = st.file_uploader("Upload a .txt or .pdf file", type=["txt", "pdf"])
    if uploaded is not None:
        if Path(uploaded.name).suffix.lower() == ".pdf":
            try:
                user_text = extract_text_from_pdf_bytes(uploaded.read())
            except Exception as e:
                st.error(f"Failed to extract text from PDF: {e}")
        else:
            user_text = uploaded.read().decode("utf-8", errors="ignore")
    else:
        st.info("Upload a .txt or .pdf file to get started.")

if st.button("📥 Load text", type="primary"):
    if not config_ok:
        st.error("Cannot load text because the config failed to load. Check sidebar.")
    elif not user_text.strip():
        st.warning("Please enter or upload some text first.")
    else:
        seeds = []
        if detect:
            with st.spinner("Running NER..."):
                try:
                    seeds = ner_spans(user_text, labels=labels or None, model=cfg.ner_model)
                except OSError as e:
                    st.error(f"spaCy model '{cfg.ner_model}' is not available: {e}")
        st.session_state["selection"] = (0, 0)
        cfg.options.disable_boundary_controls = disable_controls
        st.session_state["annotator"] = Annotator(
            text=user_text,
            spans=seeds,
            labels=labels,
            colors=cfg.colors,
            options=cfg.options,
            bridge=StreamlitBridge(),
        )

widget: Annotator = st.session_state.get("annotator")
if widget is None:
    st.stop()

# --------------------------------------------------------------------
# Annotated text
# --------------------------------------------------------------------
st.subheader("Annotated text")
st.markdown(
    render_html(
        widget.segments,
        colors=widget.colors,
        disable_boundary_controls=widget.options.disable_boundary_controls,
    ),
    unsafe_allow_html=True,
)

# Character range picker stands in for a mouse selection
n_chars = len(widget.text)
if n_chars >= 1:
    st.session_state.setdefault("selection", (0, 0))
    if n_chars > 1:
        st.slider(
            "Select characters",
            min_value=0,
            max_value=n_chars - 1,
            key="selection",
        )
    else:
        # a slider needs two distinct values; the only choice is character 0
        st.caption("Single-character text: the selection is character 0.")

    def _add_selection():
        a, b = st.session_state["selection"]
        widget.select(a, b)
        st.session_state["selection"] = (0, 0)

    st.button("➕ Add span from selection", on_click=_add_selection)

# --------------------------------------------------------------------
# Per-span controls
# --------------------------------------------------------------------
st.subheader("Spans")
for span in sorted(widget.entities(), key=lambda s: s.start):
    cols = st.columns([4, 3, 1, 1, 1, 1, 1, 1])
    cols[0].markdown(f"`[{span.start}:{span.end}]` **{widget.text.slice(span.start, span.end)}**")

    if span.editing:
        key = f"label_{span.id}"
        options = labels or [span.pending_label]
        cols[1].selectbox(
            "Label",
            options=options,
            index=options.index(span.pending_label) if span.pending_label in options else 0,
            key=key,
            label_visibility="collapsed",
            on_change=lambda sid=span.id, k=key: widget.change_label(sid, st.session_state[k]),
        )
        cols[2].button("✓", key=f"approve_{span.id}", on_click=widget.approve, args=(span.id,))
    else:
        cols[1].markdown(span.label)
        cols[2].button("✎", key=f"edit_{span.id}", on_click=widget.toggle_edit, args=(span.id,))
        cols[3].button("✕", key=f"remove_{span.id}", on_click=widget.remove, args=(span.id,))

    if span.editing and not widget.options.disable_boundary_controls:
        cols[4].button("⇤", key=f"sl_{span.id}", help="Start one word left",
                       on_click=widget.adjust_start, args=(span.id, Direction.LEFT))
        cols[5].button("⇥", key=f"sr_{span.id}", help="Start one word right",
                       on_click=widget.adjust_start, args=(span.id, Direction.RIGHT))
        cols[6].button("↤", key=f"el_{span.id}", help="End one word left",
                       on_click=widget.adjust_end, args=(span.id, Direction.LEFT))
        cols[7].button("↦", key=f"er_{span.id}", help="End one word right",
                       on_click=widget.adjust_end, args=(span.id, Direction.RIGHT))

# --------------------------------------------------------------------
# Output
# --------------------------------------------------------------------
value = st.session_state.get("annotated_spans", widget.value())
st.markdown("### Committed spans")
if value:
    rows = [
        {**s, "text": widget.text.slice(s["start"], s["end"])}
        for s in value
    ]
    st.dataframe(rows, use_container_width=True)
else:
    st.info("No spans yet. Select some text to add one.")

st.download_button(
    label="⬇️ Download spans (JSON)",
    data=json.dumps({"text": widget.text.text, "spans": value}, ensure_ascii=False, indent=2),
    file_name="annotations.json",
    mime="application/json",
)
