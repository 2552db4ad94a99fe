"""Keyword heuristics for picking a chart type from free text."""

import re

from .models import ChartSuggestion, DiagramType, InputCategory


def _words(*terms: str) -> re.Pattern:
    return re.compile(r"\b(" + "|".join(terms) + r")\b", re.IGNORECASE)


CODE_PATTERN = re.compile(
    r"\bfunction\b|\bclass\s+\w+\s*[:({]|\bdef\s+\w+|\b(public|private)\s+\w+"
    r"|^\s*import\s+\S+|\b(const|let|var)\s+\w+\s*=|</|<\?|\bprint\(",
    re.IGNORECASE | re.MULTILINE,
)

# Evaluated top to bottom; the first matching rule wins.
CATEGORY_RULES: list[tuple[re.Pattern, InputCategory]] = [
    (CODE_PATTERN, InputCategory.CODE),
    (_words("project", "schedule", "gantt", "deadlines?", "milestones?", "tasks",
            "phases", "planning", "development timeline", "roadmap"), InputCategory.GANTT),
    (_words("percentages?", "statistics", "breakdown", "distribution", "share",
            "proportions?", "pie", "portion", "survey results", "demographics"), InputCategory.PIE),
    (_words("quadrant", "matrix", "analysis", "comparison", "priority", "importance",
            "urgency", "swot", "categorize"), InputCategory.QUADRANT),
    (_words("user journey", "customer experience", "journey map", "user flow",
            "touchpoints", "experience", "path"), InputCategory.JOURNEY),
    (_words("git", "branch", "merge", "commit", "repository", "version control",
            "development workflow", "feature branch"), InputCategory.GIT),
    (_words("state", "status", "condition", "mode", "phase", "stage", "transition",
            "workflow states"), InputCategory.STATE),
    (_words("class", "object", "inheritance", "entity", "model", "database",
            "schema"), InputCategory.CLASS),
    (_words("steps?", "process", "workflow", "procedure", "how to", "tutorial", "guide",
            "algorithm", "method"), InputCategory.PROCESS),
    (_words("timeline", "history", "chronology", "sequence", "order", "events",
            "evolution", "development"), InputCategory.TIMELINE),
    (_words("organize", "structure", "categories", "topics", "outline", "plan",
            "concept", "overview"), InputCategory.STRUCTURE),
    (_words("interaction", "communication", "dialogue", "conversation", "relationship",
            "between", "protocol", "flow"), InputCategory.INTERACTION),
]


def classify(text: str) -> InputCategory:
    """Return the first category whose rule matches the text."""
    if not text:
        return InputCategory.TOPIC
    for pattern, category in CATEGORY_RULES:
        if pattern.search(text):
            return category
    return InputCategory.TOPIC


CHART_SUGGESTIONS = [
    (DiagramType.MINDMAP, "Mind Map", "Break down topics"),
    (DiagramType.FLOWCHART, "Flowchart", "Show processes"),
    (DiagramType.GANTT, "Gantt Chart", "Project timelines"),
    (DiagramType.PIE, "Pie Chart", "Statistical distributions"),
    (DiagramType.QUADRANT, "Quadrant Chart", "Priority matrix"),
    (DiagramType.JOURNEY, "User Journey", "Customer experience"),
    (DiagramType.TIMELINE, "Timeline", "Chronological events"),
    (DiagramType.STATE, "State Diagram", "Status transitions"),
    (DiagramType.CLASS, "Class Diagram", "Entity relationships"),
    (DiagramType.GIT, "Git Graph", "Version control"),
]


def suggest_chart_types(text: str) -> list[ChartSuggestion]:
    """List chart types for the text, recommended type first."""
    recommended = DiagramType.from_alias(classify(text).value)
    suggestions = [
        ChartSuggestion(type=chart_type, name=name, description=description,
                        recommended=chart_type == recommended)
        for chart_type, name, description in CHART_SUGGESTIONS
    ]
    return sorted(suggestions, key=lambda s: not s.recommended)
