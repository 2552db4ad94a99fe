"""Template charts used when nothing usable comes back from the model.

Each template is filled with a short excerpt of the user's input. The excerpt
never contains ( ) { } [ ], which would break Mermaid shape syntax.
"""

import re

from .models import DiagramType, InputKind

_DELIMITERS = re.compile(r"[(){}\[\]]")
_WHITESPACE = re.compile(r"\s+")


def excerpt(text: str, limit: int = 50) -> str:
    """Single-line, delimiter-free excerpt of at most `limit` characters."""
    flat = _WHITESPACE.sub(" ", text or "").strip()
    if len(flat) > limit:
        flat = flat[:limit - 3] + "..."
    cleaned = _DELIMITERS.sub("", flat).strip()
    return cleaned or "Content"


def build_mindmap_fallback(text: str, input_kind: InputKind = InputKind.TEXT) -> str:
    root = excerpt(text, limit=40)

    if input_kind == InputKind.CODE:
        return f"""mindmap
  root(({root}))
    Code Structure
      Entry Point
        Main function
      Core Modules
        Module A
        Module B
      Helper Utilities
        Utility functions
    Key Logic
      Primary Algorithm
      Business Rules
      State Management
        Variables and state
    Data Flow
      Input Sources
      Data Processing
      Output and Results
    Dependencies
      External Libraries
      Internal Components"""

    return f"""mindmap
  root(({root}))
    Core Idea
      Main Thesis
      Key Concepts
        Concept X
        Concept Y
    Supporting Points
      Argument 1
        Evidence 1a
        Evidence 1b
      Argument 2
        Evidence 2a
    Potential Questions
      Areas for clarification
      Possible objections
    Action Items
      Follow-up Research
      Next Steps
        Task 1
        Task 2"""


def _gantt(title: str) -> str:
    return f"""gantt
    title {title}
    dateFormat YYYY-MM-DD
    section Phase 1
    Planning    :done, plan, 2024-01-01, 7d
    section Phase 2
    Execution   :active, exec, after plan, 14d"""


def _pie(title: str) -> str:
    return f"""pie title {title}
    "Main Component" : 45
    "Secondary" : 30
    "Other" : 25"""


def _quadrant(title: str) -> str:
    return f"""quadrantChart
    title {title}
    x-axis Low --> High
    y-axis Low --> High
    quadrant-1 High Priority
    quadrant-2 Plan
    quadrant-3 Delegate
    quadrant-4 Drop
    Item A: [0.3, 0.8]"""


def _journey(title: str) -> str:
    return f"""journey
    title {title.replace(';', ',')}
    section Start
      Begin process    : 3: User
      Take action      : 2: User"""


def _git(title: str) -> str:
    label = title.replace('"', "'")
    return f'''gitGraph
    commit id: "Initial: {label}"
    branch feature
    checkout feature
    commit id: "Work in progress"'''


def _state(title: str) -> str:
    return f"""stateDiagram-v2
    [*] --> Start
    Start --> Processing: {title.replace(':', ' -')}
    Processing --> Complete
    Complete --> [*]"""


def _class(title: str) -> str:
    note = title.replace('"', "'")
    return f"""classDiagram
    note "{note}"
    class Main {{
        +attribute: string
        +process(): void
    }}"""


def _flowchart(title: str) -> str:
    label = title.replace('"', "'")
    return f"""flowchart TD
    A([Start: {label}])
    A --> B[Analyze Input]
    B --> C([Complete])"""


def _timeline(title: str) -> str:
    label = title.replace('"', "'")
    return f"""flowchart TD
    A([Beginning])
    A -->|Phase 1| B[Early Stage: {label}]
    B -->|Phase 2| C([Future])"""


def _sequence(title: str) -> str:
    return f"""sequenceDiagram
    User->>System: {title.replace(';', ',')}
    System-->>User: Response"""


TEMPLATES = {
    DiagramType.GANTT: _gantt,
    DiagramType.PIE: _pie,
    DiagramType.QUADRANT: _quadrant,
    DiagramType.JOURNEY: _journey,
    DiagramType.GIT: _git,
    DiagramType.STATE: _state,
    DiagramType.CLASS: _class,
    DiagramType.FLOWCHART: _flowchart,
    DiagramType.TIMELINE: _timeline,
    DiagramType.SEQUENCE: _sequence,
}


def build_fallback(text: str, chart_type: DiagramType, input_kind: InputKind = InputKind.TEXT) -> str:
    """Build a valid chart of the given type from the input alone."""
    if chart_type == DiagramType.MINDMAP:
        return build_mindmap_fallback(text, input_kind)
    return TEMPLATES[chart_type](excerpt(text))
