"""Locate the Mermaid document inside a raw model completion.

Every extractor sanitizes the completion first, then looks for a ```mermaid
fenced block and, failing that, for a line starting with the chart keyword.
A candidate is accepted only when its first line, skipping blank lines and
%% comments, opens with the keyword; a chart of another type whose labels
happen to mention it is rejected. An empty string means nothing usable was found.
"""

import logging
import re
from typing import Callable, Optional

from .models import DiagramType
from .reconstructor import MINIMAL_FLOWCHART, reconstruct_flowchart
from .sanitizer import sanitize

logger = logging.getLogger(__name__)

MIN_DOCUMENT_LENGTH = 10

CHART_KEYWORDS: dict[DiagramType, str] = {
    DiagramType.FLOWCHART: "flowchart",
    DiagramType.MINDMAP: "mindmap",
    DiagramType.GANTT: "gantt",
    DiagramType.PIE: "pie",
    DiagramType.QUADRANT: "quadrantChart",
    DiagramType.JOURNEY: "journey",
    DiagramType.GIT: "gitGraph",
    DiagramType.STATE: "stateDiagram",
    DiagramType.CLASS: "classDiagram",
    DiagramType.TIMELINE: "flowchart",
    DiagramType.SEQUENCE: "sequenceDiagram",
}

FENCED_BLOCK = re.compile(r"```mermaid[ \t]*(.*?)\s*```", re.IGNORECASE | re.DOTALL)
LEADING_BLANK_LINES = re.compile(r"\A\s*\n")
SEQUENCE_ARROW = re.compile(r"-{1,2}>>")
FLOWCHART_HEADER = re.compile(r"^[ \t]*flowchart\s+(TD|TB|BT|LR|RL)\b", re.IGNORECASE | re.MULTILINE)

# Exact opening token of any Mermaid document; node labels such as
# "Graph theory" or "Timeline of events" do not match.
CHART_HEADER = re.compile(
    r"(?:(?:flowchart|graph)\s+(?:TD|TB|BT|LR|RL)|gantt|pie|quadrantChart|journey|gitGraph"
    r"|stateDiagram(?:-v2)?|classDiagram|sequenceDiagram|erDiagram|timeline|mindmap)(?=[\s:]|$)"
)


def fenced_block(text: str) -> Optional[str]:
    """Interior of the first ```mermaid block.

    Leading blank lines and trailing whitespace are dropped; indentation of the
    first line is kept.
    """
    match = FENCED_BLOCK.search(text)
    if not match:
        return None
    return LEADING_BLANK_LINES.sub("", match.group(1)).rstrip()


def keyword_block(text: str, keyword: str) -> Optional[str]:
    """Text from the first line starting with keyword up to the next fence or the end."""
    match = re.search(rf"^[ \t]*{re.escape(keyword)}\b", text, re.IGNORECASE | re.MULTILINE)
    if not match:
        return None
    return _until_fence(text[match.start():])


def _until_fence(text: str) -> str:
    return text.split("```", 1)[0].strip()


def header_line(document: str) -> str:
    """First line that is neither blank nor a %% comment or directive."""
    for line in document.splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith("%%"):
            return stripped
    return ""


def starts_with_keyword(document: str, keyword: str) -> bool:
    return re.match(rf"{re.escape(keyword)}\b", header_line(document), re.IGNORECASE) is not None


def opening_chart(document: str) -> Optional[str]:
    """The Mermaid header token the document opens with, if any."""
    match = CHART_HEADER.match(header_line(document))
    return match.group(0) if match else None


def _opens_other_chart(document: str, keyword: str) -> bool:
    header = opening_chart(document)
    return header is not None and not header.lower().startswith(keyword.lower())


def extract_chart(response: str, chart_type: DiagramType) -> str:
    """Extract a document for a chart type that needs no post-processing."""
    text = sanitize(response)
    if not text or not isinstance(text, str):
        return ""

    keyword = CHART_KEYWORDS[chart_type]
    candidate = fenced_block(text)
    if candidate is None:
        candidate = keyword_block(text, keyword)

    if candidate and starts_with_keyword(candidate, keyword):
        return candidate.strip()
    logger.debug("No document opening with %s in completion", keyword)
    return ""


def extract_flowchart(response: str) -> str:
    """Extract and rebuild a flowchart; falls back to MINIMAL_FLOWCHART."""
    text = sanitize(response)
    if not text or not isinstance(text, str):
        return MINIMAL_FLOWCHART

    candidate = fenced_block(text)
    if candidate is None:
        match = FLOWCHART_HEADER.search(text)
        candidate = _until_fence(text[match.start():]) if match else None

    if not candidate:
        logger.debug("No flowchart in completion, using minimal template")
        return MINIMAL_FLOWCHART
    return reconstruct_flowchart(candidate)


def clean_mindmap(code: str) -> str:
    """Drop blank lines and make sure the document opens with 'mindmap'.

    Indentation carries the tree structure, so only trailing whitespace is
    removed from each line.
    """
    lines = [line.rstrip() for line in code.replace("\r\n", "\n").replace("\r", "\n").split("\n")]
    lines = [line for line in lines if line.strip()]
    if not lines:
        return ""
    if not starts_with_keyword("\n".join(lines), "mindmap"):
        lines.insert(0, "mindmap")
    return "\n".join(lines)


def extract_mindmap(response: str) -> str:
    text = sanitize(response)
    if not text or not isinstance(text, str) or not text.strip():
        return ""

    candidate = fenced_block(text)
    if not candidate:
        candidate = keyword_block(text, "mindmap")
    if not candidate:
        logger.debug("No mindmap in completion")
        return ""
    if _opens_other_chart(candidate, "mindmap"):
        logger.debug("Completion holds a different chart type, not a mindmap")
        return ""

    cleaned = clean_mindmap(candidate)
    return cleaned if len(cleaned) >= MIN_DOCUMENT_LENGTH else ""


def extract_sequence(response: str) -> str:
    """Extract a sequence diagram, adding the header to headless fenced blocks."""
    text = sanitize(response)
    if not text or not isinstance(text, str):
        return ""

    candidate = fenced_block(text)
    headless = candidate and opening_chart(candidate) is None
    if headless and SEQUENCE_ARROW.search(candidate):
        return f"sequenceDiagram\n{candidate}"
    return extract_chart(text, DiagramType.SEQUENCE)


def _extractor_for(chart_type: DiagramType) -> Callable[[str], str]:
    def extract(response: str) -> str:
        return extract_chart(response, chart_type)
    extract.__name__ = f"extract_{chart_type.value}"
    return extract


extract_gantt = _extractor_for(DiagramType.GANTT)
extract_pie = _extractor_for(DiagramType.PIE)
extract_quadrant = _extractor_for(DiagramType.QUADRANT)
extract_journey = _extractor_for(DiagramType.JOURNEY)
extract_git = _extractor_for(DiagramType.GIT)
extract_state = _extractor_for(DiagramType.STATE)
extract_class = _extractor_for(DiagramType.CLASS)
