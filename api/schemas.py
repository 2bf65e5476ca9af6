# api/schemas.py

from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from ner_annotator.boundaries import Direction


class SpanSchema(BaseModel):
    start: int
    end: int
    label: str


class EntitySchema(SpanSchema):
    id: int
    editing: bool
    pending_label: Optional[str] = None


class SegmentSchema(BaseModel):
    kind: str
    start: int
    end: int
    text: str
    span_id: Optional[int] = None


class OptionsSchema(BaseModel):
    disable_boundary_controls: bool = False


class CreateSessionRequest(BaseModel):
    text: str
    spans: List[SpanSchema] = Field(default_factory=list)
    labels: Optional[List[str]] = None  # None: use configs/annotator.yaml
    colors: Dict[str, str] = Field(default_factory=dict)
    options: Optional[OptionsSchema] = None
    detect: bool = False  # seed from spaCy when no spans are given


class SelectionRequest(BaseModel):
    start_index: Optional[int] = None
    end_index: Optional[int] = None


class LabelRequest(BaseModel):
    label: str


class AdjustRequest(BaseModel):
    direction: Direction


class SessionState(BaseModel):
    session_id: str
    text: str
    spans: List[SpanSchema]
    entities: List[EntitySchema]
    segments: List[SegmentSchema]
    emissions: int
