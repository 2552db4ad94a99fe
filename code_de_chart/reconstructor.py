"""Deterministic flowchart reconstruction: loose model text -> FlowGraph -> Mermaid.

Model output for flowcharts is the least reliable of all chart types, so the
text is never passed through. Node declarations and edges are recovered with
regular expressions and the document is re-emitted from the parsed graph.
Anything that does not match is dropped.
"""

import re

from .models import FlowEdge, FlowGraph


NODE_ID = r"[A-Z]\d*"
# ( ... ) pill, [ ... ] rectangle or [/ ... /] parallelogram, { ... } diamond
NODE_SHAPE = r"\([^)]*\)|\[[^\]]*\]|\{[^}]*\}"

NODE_PATTERN = re.compile(rf"({NODE_ID})\s*({NODE_SHAPE})")
EDGE_PATTERN = re.compile(
    rf"({NODE_ID})\s*(?:{NODE_SHAPE})?\s*-->\s*(?:\|([^|]*)\|\s*)?({NODE_ID})"
)

MINIMAL_FLOWCHART = """flowchart TD
    A([Start])
    A --> B[Process]
    B --> C{Decision?}
    C -->|Yes| D[Action]
    C -->|No| E([End])
    D --> E"""


class FlowchartReconstructor:
    """Parses flowchart-like text into a FlowGraph and renders it back."""

    def __init__(self, direction: str = "TD"):
        self.direction = direction

    def _parse_nodes(self, text: str) -> dict[str, str]:
        nodes: dict[str, str] = {}
        for match in NODE_PATTERN.finditer(text):
            nodes[match.group(1)] = match.group(2)
        return nodes

    def _parse_edges(self, text: str) -> list[FlowEdge]:
        return [
            FlowEdge(source=match.group(1), target=match.group(3), label=match.group(2))
            for match in EDGE_PATTERN.finditer(text)
        ]

    def parse(self, text: str) -> FlowGraph:
        return FlowGraph(nodes=self._parse_nodes(text), edges=self._parse_edges(text))

    def render(self, graph: FlowGraph) -> str:
        if not graph.nodes or not graph.edges:
            return MINIMAL_FLOWCHART

        lines = [f"flowchart {self.direction}"]
        for node_id, shape in graph.nodes.items():
            lines.append(f"    {node_id}{shape}")
        for edge in graph.edges:
            if edge.label:
                lines.append(f"    {edge.source} -->|{edge.label}| {edge.target}")
            else:
                lines.append(f"    {edge.source} --> {edge.target}")
        return "\n".join(lines)


def reconstruct_flowchart(text: str) -> str:
    """Rebuild a clean flowchart from loosely formatted text.

    Returns MINIMAL_FLOWCHART when no node or no edge can be recovered.
    """
    reconstructor = FlowchartReconstructor()
    return reconstructor.render(reconstructor.parse(text or ""))
