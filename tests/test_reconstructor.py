"""Tests for flowchart reconstruction."""

import pytest
from code_de_chart.models import FlowEdge
from code_de_chart.reconstructor import (
    FlowchartReconstructor,
    reconstruct_flowchart,
    MINIMAL_FLOWCHART,
)


SIMPLE_FLOW = (
    "flowchart TD\n"
    " A([Start]) --> B[Process]\n"
    " B --> C{Decide?}\n"
    " C -->|Yes| D([End])"
)


class TestParse:
    def test_nodes_with_shapes(self):
        graph = FlowchartReconstructor().parse(SIMPLE_FLOW)
        assert graph.nodes == {
            "A": "([Start])",
            "B": "[Process]",
            "C": "{Decide?}",
            "D": "([End])",
        }

    def test_edges_in_scan_order(self):
        graph = FlowchartReconstructor().parse(SIMPLE_FLOW)
        assert graph.edges == [
            FlowEdge(source="A", target="B"),
            FlowEdge(source="B", target="C"),
            FlowEdge(source="C", target="D", label="Yes"),
        ]

    def test_node_order_is_first_appearance(self):
        graph = FlowchartReconstructor().parse("B[Second] --> A[First]")
        assert list(graph.nodes) == ["B", "A"]

    def test_redeclared_node_keeps_last_shape(self):
        graph = FlowchartReconstructor().parse("A[Old] --> B[Next]\nA{New} --> B")
        assert graph.nodes["A"] == "{New}"
        assert list(graph.nodes) == ["A", "B"]

    def test_duplicate_edges_kept(self):
        graph = FlowchartReconstructor().parse("A[X] --> B[Y]\nA --> B\nA --> B")
        assert len(graph.edges) == 3

    def test_numbered_ids(self):
        graph = FlowchartReconstructor().parse("A1[One] --> A2[Two]")
        assert graph.nodes == {"A1": "[One]", "A2": "[Two]"}
        assert graph.edges == [FlowEdge(source="A1", target="A2")]

    def test_parallelogram(self):
        graph = FlowchartReconstructor().parse("A[/Read input/] --> B[Parse]")
        assert graph.nodes["A"] == "[/Read input/]"

    def test_lowercase_ids_ignored(self):
        graph = FlowchartReconstructor().parse("start[Begin] --> finish[Done]")
        assert graph.nodes == {}
        assert graph.edges == []


class TestRender:
    def test_simple_flow(self):
        assert reconstruct_flowchart(SIMPLE_FLOW) == (
            "flowchart TD\n"
            "    A([Start])\n"
            "    B[Process]\n"
            "    C{Decide?}\n"
            "    D([End])\n"
            "    A --> B\n"
            "    B --> C\n"
            "    C -->|Yes| D"
        )

    def test_undeclared_edge_targets_render(self):
        output = reconstruct_flowchart("A[Start] --> B\nB --> C")
        assert output.splitlines() == [
            "flowchart TD",
            "    A[Start]",
            "    A --> B",
            "    B --> C",
        ]

    def test_direction(self):
        reconstructor = FlowchartReconstructor(direction="LR")
        output = reconstructor.render(reconstructor.parse("A[X] --> B[Y]"))
        assert output.startswith("flowchart LR\n")

    def test_deterministic(self):
        assert reconstruct_flowchart(SIMPLE_FLOW) == reconstruct_flowchart(SIMPLE_FLOW)


class TestMinimalTemplate:
    def test_template_shape(self):
        lines = MINIMAL_FLOWCHART.splitlines()
        assert lines[0] == "flowchart TD"
        assert len(lines) == 7

    @pytest.mark.parametrize("text", [
        "",
        None,
        "I'm sorry, I can't draw that.",
        "A[Lonely node]",
        "A --> B",
    ])
    def test_nothing_recoverable(self, text):
        assert reconstruct_flowchart(text) == MINIMAL_FLOWCHART
