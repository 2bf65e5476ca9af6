import os
import logging
import logging.config
from typing import Callable

import yaml
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from api.schemas import (
    AdjustRequest,
    CreateSessionRequest,
    EntitySchema,
    LabelRequest,
    SegmentSchema,
    SelectionRequest,
    SessionState,
    SpanSchema,
)
from api.sessions import Session, SessionRegistry
from ner_annotator.config import load_config
from ner_annotator.detect_ner import ner_spans
from ner_annotator.models import AnnotatorOptions
from ner_annotator.render import render_html
from ner_annotator.widget import Annotator, RecordingBridge


def setup_logging():
    cfg_path = os.path.join("configs", "logging.yaml")
    if os.path.exists(cfg_path):
        try:
            with open(cfg_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
            os.makedirs("logs", exist_ok=True)
            logging.config.dictConfig(config)
        except (OSError, ValueError, yaml.YAMLError) as e:
            print(f"[logging] Failed to load logging.yaml: {e}")
            logging.basicConfig(level=logging.INFO)
    else:
        logging.basicConfig(level=logging.INFO)


setup_logging()
logger = logging.getLogger("api")

CONFIG_PATH = os.environ.get("NER_ANNOTATOR_CONFIG", "configs/annotator.yaml")

app = FastAPI(
    title="NER Entity Annotator",
    version="0.1.0",
    description="Interactive entity span editing: select, resize, relabel, remove.",
)

# Streamlit host and a local frontend dev server
origins = [
    "http://localhost:8501",
    "http://127.0.0.1:8501",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

sessions = SessionRegistry()


def _state(session: Session) -> SessionState:
    widget = session.widget
    return SessionState(
        session_id=session.id,
        text=widget.text.text,
        spans=[SpanSchema(**s) for s in widget.value()],
        entities=[
            EntitySchema(
                id=s.id,
                start=s.start,
                end=s.end,
                label=s.label,
                editing=s.editing,
                pending_label=s.pending_label,
            )
            for s in widget.entities()
        ],
        segments=[
            SegmentSchema(
                kind=seg.kind,
                start=seg.start,
                end=seg.end,
                text=seg.text,
                span_id=seg.span.id if seg.span is not None else None,
            )
            for seg in widget.segments
        ],
        emissions=session.bridge.publish_count,
    )


def _session_or_404(session_id: str) -> Session:
    session = sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Unknown session {session_id}")
    return session


def _apply(session_id: str, action: Callable[[Annotator], object]) -> SessionState:
    session = _session_or_404(session_id)
    with session.lock:
        action(session.widget)
        return _state(session)


@app.post("/sessions", response_model=SessionState)
def create_session(req: CreateSessionRequest) -> SessionState:
    cfg = load_config(CONFIG_PATH)
    labels = req.labels if req.labels is not None else cfg.labels
    colors = {**cfg.colors, **req.colors}
    options = (
        AnnotatorOptions(disable_boundary_controls=req.options.disable_boundary_controls)
        if req.options is not None
        else cfg.options
    )

    spans = [s.model_dump() for s in req.spans]
    if not spans and req.detect:
        try:
            spans = ner_spans(req.text, labels=labels or None, model=cfg.ner_model)
        except OSError as e:
            logger.error("spaCy model %s unavailable: %s", cfg.ner_model, e)
            raise HTTPException(status_code=503, detail="NER model is not installed") from e

    bridge = RecordingBridge()
    widget = Annotator(
        text=req.text,
        spans=spans,
        labels=labels,
        colors=colors,
        options=options,
        bridge=bridge,
    )
    session = sessions.open(widget, bridge)
    logger.info("Opened session %s with %d spans", session.id, len(widget.store))
    return _state(session)


@app.get("/sessions/{session_id}", response_model=SessionState)
def get_session(session_id: str) -> SessionState:
    return _apply(session_id, lambda w: None)


@app.delete("/sessions/{session_id}", status_code=204)
def close_session(session_id: str) -> None:
    if not sessions.close(session_id):
        raise HTTPException(status_code=404, detail=f"Unknown session {session_id}")
    logger.info("Closed session %s", session_id)


@app.get("/sessions/{session_id}/html", response_class=HTMLResponse)
def session_html(session_id: str) -> str:
    session = _session_or_404(session_id)
    with session.lock:
        widget = session.widget
        return render_html(
            widget.segments,
            colors=widget.colors,
            disable_boundary_controls=widget.options.disable_boundary_controls,
        )


@app.post("/sessions/{session_id}/selection", response_model=SessionState)
def select_text(session_id: str, req: SelectionRequest) -> SessionState:
    return _apply(session_id, lambda w: w.select(req.start_index, req.end_index))


@app.post("/sessions/{session_id}/spans/{span_id}/toggle", response_model=SessionState)
def toggle_edit(session_id: str, span_id: int) -> SessionState:
    return _apply(session_id, lambda w: w.toggle_edit(span_id))


@app.post("/sessions/{session_id}/spans/{span_id}/label", response_model=SessionState)
def change_label(session_id: str, span_id: int, req: LabelRequest) -> SessionState:
    return _apply(session_id, lambda w: w.change_label(span_id, req.label))


@app.post("/sessions/{session_id}/spans/{span_id}/approve", response_model=SessionState)
def approve(session_id: str, span_id: int) -> SessionState:
    return _apply(session_id, lambda w: w.approve(span_id))


@app.post("/sessions/{session_id}/spans/{span_id}/start", response_model=SessionState)
def adjust_start(session_id: str, span_id: int, req: AdjustRequest) -> SessionState:
    return _apply(session_id, lambda w: w.adjust_start(span_id, req.direction))


@app.post("/sessions/{session_id}/spans/{span_id}/end", response_model=SessionState)
def adjust_end(session_id: str, span_id: int, req: AdjustRequest) -> SessionState:
    return _apply(session_id, lambda w: w.adjust_end(span_id, req.direction))


@app.delete("/sessions/{session_id}/spans/{span_id}", response_model=SessionState)
def remove_span(session_id: str, span_id: int) -> SessionState:
    return _apply(session_id, lambda w: w.remove(span_id))
