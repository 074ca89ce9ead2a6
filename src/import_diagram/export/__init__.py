"""Graph export: DOT description and image rendering."""

from .dot import DotDiagram, build_diagram, export_graph
from .render import render_image, write_dot

__all__ = ["DotDiagram", "build_diagram", "export_graph", "render_image", "write_dot"]
