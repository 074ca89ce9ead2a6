"""Graph description in the DOT language for the Graphviz layout engines."""

from typing import Optional

from ..graph.models import DependencyGraph

GRAPH_NAME = "imports"

GRAPH_ATTRIBUTES = (
    'fontname="sans-serif"',
    'rankdir="LR"',
    'page="130.0,130.0"',
    'node [fontcolor="black", fontname="sans-serif", fontsize=8.0, shape=plain]',
    'edge [arrowhead="normal", arrowsize=0.5, color="gray", fontname="sans-serif", weight=0.1]',
)


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def node_id(file_id: int) -> str:
    return f"n{file_id}"


class DotDiagram:
    """Accumulates node and edge statements of a strict digraph."""

    def __init__(self, name: str = GRAPH_NAME):
        self.name = name
        self.attributes = list(GRAPH_ATTRIBUTES)
        self.nodes: list[str] = []
        self.edges: list[str] = []

    def add_node(
        self,
        id: int,
        label: str,
        url: Optional[str] = None,
        tooltip: Optional[str] = None,
    ) -> None:
        attributes = {"label": label, "URL": url, "tooltip": tooltip}
        body = ", ".join(f"{k}={_quote(v)}" for k, v in attributes.items() if v)
        self.nodes.append(f"{node_id(id)} [{body}];")

    def add_edge(self, parent_id: int, child_id: int) -> None:
        self.edges.append(f"{node_id(parent_id)} -> {node_id(child_id)};")

    def render(self) -> str:
        lines = [f"strict digraph {self.name} {{"]
        lines.extend(f"  {statement}" for statement in self.attributes)
        lines.extend(f"  {statement}" for statement in self.nodes)
        lines.extend(f"  {statement}" for statement in self.edges)
        lines.append("}")
        return "\n".join(lines) + "\n"


def build_diagram(graph: DependencyGraph, link_base: Optional[str] = None) -> DotDiagram:
    """One node per file, one edge per import with a resolved target file.

    Library and unresolved imports stay in the graph but are not drawn.
    """
    diagram = DotDiagram()
    for source in graph.files:
        url = f"{link_base}{source.rel_path}" if link_base else None
        diagram.add_node(source.id, label=source.base_name, url=url, tooltip=source.rel_path)

    for edge in graph.edges_with_resolved_target():
        diagram.add_edge(edge.importer_id, edge.target_id)
    return diagram


def export_graph(graph: DependencyGraph, link_base: Optional[str] = None) -> str:
    """DOT text for ``graph``; identical graphs give identical text."""
    return build_diagram(graph, link_base).render()
