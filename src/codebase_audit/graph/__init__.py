"""Component usage analysis and dependency graph."""

from .builder import build_dependency_graph, import_trailing_path
from .models import DependencyGraph, GraphEdge, GraphNode
from .usage import analyze_usage, find_unused, is_component_used_in_file

__all__ = [
    "DependencyGraph",
    "GraphEdge",
    "GraphNode",
    "analyze_usage",
    "build_dependency_graph",
    "find_unused",
    "import_trailing_path",
    "is_component_used_in_file",
]
