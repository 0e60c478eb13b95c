"""Dependency graph construction from component import specifiers."""

from typing import Iterable, Optional

from ..logging_config import get_logger
from ..models import ComponentRecord
from .models import DependencyGraph, GraphEdge, GraphNode

logger = get_logger(__name__)

_SOURCE_SUFFIXES = (".tsx", ".ts", ".jsx", ".js", ".mjs", ".cjs")
_SPECIFIER_PREFIXES = ("./", "../", "@/", "~/", "/")


def strip_source_suffix(path: str) -> str:
    for suffix in _SOURCE_SUFFIXES:
        if path.endswith(suffix):
            return path[: -len(suffix)]
    return path

def import_trailing_path(specifier: str) -> str:
    """``../components/folder-tree.tsx`` -> ``components/folder-tree``.

    Relative and alias prefixes are dropped along with a source suffix.
    """
    spec = specifier.replace("\\", "/")
    stripped = True
    while stripped:
        stripped = False
        for prefix in _SPECIFIER_PREFIXES:
            if spec.startswith(prefix):
                spec = spec[len(prefix):]
                stripped = True
                break
    return strip_source_suffix(spec).strip("/")

def _contains_segments(haystack: str, needle: str) -> bool:
    """Substring test that only matches on whole path segments."""
    return f"/{needle}/" in f"/{haystack}/"

def resolve_import(
    specifier: str, importer: ComponentRecord, components: Iterable[ComponentRecord]
) -> Optional[ComponentRecord]:
    """First other component whose path contains the import's trailing path."""
    trailing = import_trailing_path(specifier)
    if not trailing:
        return None
    for candidate in components:
        if candidate.path == importer.path:
            continue
        candidate_path = strip_source_suffix(candidate.path)
        if _contains_segments(candidate_path, trailing):
            return candidate
    return None

def build_dependency_graph(components: list[ComponentRecord]) -> DependencyGraph:
    """
    One node per component, typed by its role, and one ``imports`` edge per
    resolved import.

    Edges only ever point at component nodes, so the graph is valid by
    construction.
    """
    nodes = [GraphNode(id=c.path, label=c.name, type=c.role) for c in components]

    edges: list[GraphEdge] = []
    for comp in components:
        for specifier in comp.imports:
            target = resolve_import(specifier, comp, components)
            if target is not None:
                edges.append(GraphEdge(source=comp.path, target=target.path))

    graph = DependencyGraph(nodes=nodes, edges=edges)
    logger.info(f"Generated graph with {len(nodes)} nodes and {len(edges)} edges")
    return graph
