"""Prompts for the chart completion model.

One builder per canonical chart type. Every builder takes the ChartRequest
and returns the user prompt; SYSTEM_PROMPT is shared by all of them.
"""

from .models import ChartRequest, InputKind

SYSTEM_PROMPT = """You are an expert at turning text and source code into Mermaid diagrams.

RULES:
1. Answer with a single ```mermaid fenced block
2. Use only ASCII characters
3. Start the document with the chart keyword you are asked for
4. No explanations before or after the block"""

RETURN_ONLY = "Return ONLY the Mermaid syntax, no explanations."

FLOWCHART_SYMBOLS = """STANDARD FLOWCHART SYMBOLS (use these exactly):
- Rectangle (process): B[Process step]
- Pill (start/end): A([Start]) F([End])
- Diamond (decision): C{Question?}
- Parallelogram (input/output): D[/Input data/] E[/Output result/]

MERMAID SYNTAX REQUIREMENTS:
1. Start with: flowchart TD
2. One arrow per line
3. Node ids are a single capital letter with optional digits: A, B, C1
4. Label decision arrows: C -->|Yes| D and C -->|No| E"""


def flowchart_prompt(request: ChartRequest) -> str:
    if request.input_kind == InputKind.CODE:
        return f"""Analyze this {request.language} code and create a Mermaid flowchart of its control flow.

{FLOWCHART_SYMBOLS}

CODE TO ANALYZE:
{request.text}

EXAMPLE:
flowchart TD
    A([Start])
    A --> B[/Read input/]
    B --> C{{Is valid?}}
    C -->|Yes| D[Process]
    C -->|No| E[/Show error/]
    D --> F([End])
    E --> F

{RETURN_ONLY}"""

    return f"""Create a Mermaid flowchart for this process, workflow or procedure: "{request.text}"

{FLOWCHART_SYMBOLS}

GUIDELINES:
- Break the process into clear, actionable steps
- Identify decision points and their branches
- Show the logical flow from start to finish

{RETURN_ONLY}"""


def mindmap_prompt(request: ChartRequest) -> str:
    if request.input_kind == InputKind.CODE:
        return f"""Analyze this {request.language} code and create a Mermaid mindmap of its structure.

CODE TO ANALYZE:
{request.text}

Show main functions/classes as primary branches, methods as secondary branches
and key variables as tertiary branches.

FORMAT:
mindmap
  root((Code Structure))
    Main Function
      Variables
      Logic Steps
    Helper Functions
      Parameters
      Return Values

{RETURN_ONLY}"""

    return f"""Create a comprehensive Mermaid mindmap for: "{request.text}"

GUIDELINES:
- 3-6 main categories as primary branches
- Subtopics as secondary branches, details as tertiary branches
- Clear, concise labels; at most 4 levels

FORMAT:
mindmap
  root((Main Topic))
    Category 1
      Subtopic A
        Detail 1
      Subtopic B
    Category 2
      Subtopic C

{RETURN_ONLY}"""


def gantt_prompt(request: ChartRequest) -> str:
    return f"""Create a Mermaid Gantt chart for this project or plan: "{request.text}"

SYNTAX:
gantt
    title Project Timeline
    dateFormat YYYY-MM-DD
    section Planning
    Requirements    :done, req, 2024-01-01, 7d
    Design          :design, after req, 14d
    section Delivery
    Release         :milestone, rel, after design, 1d

GUIDELINES:
- Group tasks into sections/phases with realistic durations
- Show dependencies with "after"
- Mark milestones with the milestone keyword

{RETURN_ONLY}"""


def pie_prompt(request: ChartRequest) -> str:
    return f"""Create a Mermaid pie chart for the data or topic: "{request.text}"

SYNTAX:
pie title Chart Title
    "Label 1" : 45.5
    "Label 2" : 32.1
    "Label 3" : 22.4

GUIDELINES:
- Extract or estimate meaningful values that add up to about 100
- At most 8 slices

{RETURN_ONLY}"""


def quadrant_prompt(request: ChartRequest) -> str:
    return f"""Create a Mermaid quadrant chart for: "{request.text}"

SYNTAX:
quadrantChart
    title Analysis Matrix
    x-axis Low Effort --> High Effort
    y-axis Low Impact --> High Impact
    quadrant-1 Major projects
    quadrant-2 Quick wins
    quadrant-3 Fill-ins
    quadrant-4 Thankless tasks
    Item A: [0.3, 0.6]

GUIDELINES:
- Define meaningful axes
- Place 5-12 items with coordinates between 0 and 1

{RETURN_ONLY}"""


def journey_prompt(request: ChartRequest) -> str:
    return f"""Create a Mermaid user journey for: "{request.text}"

SYNTAX:
journey
    title User Experience Journey
    section Discovery
      Find website     : 5: User
      Browse products  : 3: User
    section Purchase
      Checkout         : 2: User

GUIDELINES:
- Split the journey into sections
- Score each step from 1 (frustrated) to 5 (delighted)

{RETURN_ONLY}"""


def git_prompt(request: ChartRequest) -> str:
    return f"""Create a Mermaid git graph for the development workflow: "{request.text}"

SYNTAX:
gitGraph
    commit id: "Initial commit"
    branch feature-login
    checkout feature-login
    commit id: "Add login form"
    checkout main
    merge feature-login
    commit id: "Release v1.1"

{RETURN_ONLY}"""


def state_prompt(request: ChartRequest) -> str:
    return f"""Create a Mermaid state diagram for: "{request.text}"

SYNTAX:
stateDiagram-v2
    [*] --> Draft
    Draft --> InReview: submit
    InReview --> Approved: approve
    InReview --> Draft: request changes
    Approved --> [*]

GUIDELINES:
- Include start [*] and end states
- Label transitions with their trigger

{RETURN_ONLY}"""


def class_prompt(request: ChartRequest) -> str:
    return f"""Create a Mermaid class diagram for: "{request.text}"

SYNTAX:
classDiagram
    class User {{
        +id: string
        +login(): boolean
    }}
    class Order {{
        +total: number
    }}
    User "1" --> "*" Order: places

GUIDELINES:
- Show the main entities with key attributes and methods
- Use + for public and - for private members

{RETURN_ONLY}"""


def timeline_prompt(request: ChartRequest) -> str:
    return f"""Create a Mermaid timeline as a flowchart for: "{request.text}"

USE FLOWCHART FORMAT:
flowchart TD
    A([Ancient Times])
    A -->|3000 BC| B[Early Development]
    B -->|1000 AD| C[Major Advancement]
    C -->|Modern Era| D([Current State])

GUIDELINES:
- Events in chronological order
- Periods or dates as arrow labels
- Node ids are a single capital letter with optional digits

{RETURN_ONLY}"""


def sequence_prompt(request: ChartRequest) -> str:
    if request.input_kind == InputKind.CODE:
        return f"""Create a Mermaid sequence diagram of the function calls in this {request.language} code:

CODE:
{request.text}

FORMAT:
sequenceDiagram
    participant A as Caller
    participant B as System
    A->>B: function call
    B-->>A: return value

{RETURN_ONLY}"""

    return f"""Create a Mermaid sequence diagram of the interactions in: "{request.text}"

FORMAT:
sequenceDiagram
    participant A as First Party
    participant B as Second Party
    A->>B: Request
    B-->>A: Response

GUIDELINES:
- Use ->> for requests and -->> for responses
- Add notes with: Note over A,B: text

{RETURN_ONLY}"""
