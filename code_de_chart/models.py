"""Pydantic models for chart requests and results."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class DiagramType(str, Enum):
    """Canonical chart types."""
    FLOWCHART = "flowchart"
    MINDMAP = "mindmap"
    GANTT = "gantt"
    PIE = "pie"
    QUADRANT = "quadrant"
    JOURNEY = "journey"
    GIT = "git"
    STATE = "state"
    CLASS = "class"
    TIMELINE = "timeline"
    SEQUENCE = "sequence"

    @classmethod
    def from_alias(cls, tag: Optional[str]) -> "DiagramType":
        """Resolve a chart type or alias; unknown tags resolve to mindmap."""
        key = (tag or "").strip().lower()
        return CHART_TYPE_ALIASES.get(key, cls.MINDMAP)


CHART_TYPE_ALIASES: dict[str, DiagramType] = {
    "gantt": DiagramType.GANTT,
    "project": DiagramType.GANTT,
    "timeline-project": DiagramType.GANTT,
    "pie": DiagramType.PIE,
    "statistics": DiagramType.PIE,
    "distribution": DiagramType.PIE,
    "quadrant": DiagramType.QUADRANT,
    "matrix": DiagramType.QUADRANT,
    "analysis": DiagramType.QUADRANT,
    "journey": DiagramType.JOURNEY,
    "user-journey": DiagramType.JOURNEY,
    "customer-journey": DiagramType.JOURNEY,
    "git": DiagramType.GIT,
    "gitgraph": DiagramType.GIT,
    "version-control": DiagramType.GIT,
    "state": DiagramType.STATE,
    "state-diagram": DiagramType.STATE,
    "status": DiagramType.STATE,
    "class": DiagramType.CLASS,
    "class-diagram": DiagramType.CLASS,
    "entity": DiagramType.CLASS,
    "flowchart": DiagramType.FLOWCHART,
    "flow": DiagramType.FLOWCHART,
    "process": DiagramType.FLOWCHART,
    "code": DiagramType.FLOWCHART,
    "mindmap": DiagramType.MINDMAP,
    "mind": DiagramType.MINDMAP,
    "structure": DiagramType.MINDMAP,
    "topic": DiagramType.MINDMAP,
    "timeline": DiagramType.TIMELINE,
    "time": DiagramType.TIMELINE,
    "sequence": DiagramType.SEQUENCE,
    "interaction": DiagramType.SEQUENCE,
}


class InputCategory(str, Enum):
    """Categories produced by the input classifier."""
    CODE = "code"
    GANTT = "gantt"
    PIE = "pie"
    QUADRANT = "quadrant"
    JOURNEY = "journey"
    GIT = "git"
    STATE = "state"
    CLASS = "class"
    PROCESS = "process"
    TIMELINE = "timeline"
    STRUCTURE = "structure"
    INTERACTION = "interaction"
    TOPIC = "topic"


class InputKind(str, Enum):
    """Whether the input is source code or free text."""
    CODE = "code"
    TEXT = "text"


class FlowEdge(BaseModel):
    """A connection between two flowchart nodes."""
    source: str
    target: str
    label: Optional[str] = None


class FlowGraph(BaseModel):
    """Nodes and edges recovered from flowchart text."""
    nodes: dict[str, str] = Field(default_factory=dict, description="Node id -> shape content")
    edges: list[FlowEdge] = Field(default_factory=list)


class ChartRequest(BaseModel):
    """A request for a chart."""
    text: str = Field(..., description="Free text or source code")
    chart_type: Optional[str] = Field(default=None, description="Chart type or alias")
    input_kind: InputKind = InputKind.TEXT
    language: str = "javascript"


class Completion(BaseModel):
    """Outcome of a call to the generative text service."""
    success: bool
    content: str = ""
    error: Optional[str] = None
    model: Optional[str] = None


class ChartResult(BaseModel):
    """A chart document and how it was produced."""
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    chart_type: DiagramType = Field(..., alias="chartType")
    mermaid_code: str = Field(..., alias="mermaidCode")
    raw_response: Optional[str] = Field(default=None, alias="rawResponse")
    fallback: bool = False
    error: Optional[str] = None
    warning: Optional[str] = None
    input_kind: InputKind = Field(default=InputKind.TEXT, alias="inputKind")


class ChartSuggestion(BaseModel):
    """A chart type offered to the user for some input."""
    type: DiagramType
    name: str
    description: str
    recommended: bool = False
