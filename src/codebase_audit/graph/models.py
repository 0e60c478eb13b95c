"""Component dependency graph.

Nodes are component files (id = project-relative path). Edges are directed:
an edge from A to B means A imports B.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal

NodeType = Literal["component", "page", "hook", "util"]
NODE_TYPES = ("component", "page", "hook", "util")


@dataclass(frozen=True)
class GraphNode:
    id: str
    label: str
    type: NodeType = "component"


@dataclass(frozen=True)
class GraphEdge:
    source: str
    target: str
    type: str = "imports"


@dataclass
class DependencyGraph:
    nodes: List[GraphNode] = field(default_factory=list)
    edges: List[GraphEdge] = field(default_factory=list)

    def node_ids(self) -> set[str]:
        return {n.id for n in self.nodes}

    def dangling_edges(self) -> List[GraphEdge]:
        """Edges whose endpoints are not both nodes. Empty for a valid graph."""
        ids = self.node_ids()
        return [e for e in self.edges if e.source not in ids or e.target not in ids]

    def is_valid(self) -> bool:
        return not self.dangling_edges()

    def dependencies_of(self, node_id: str) -> List[str]:
        return [e.target for e in self.edges if e.source == node_id]

    def dependents_of(self, node_id: str) -> List[str]:
        return [e.source for e in self.edges if e.target == node_id]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [{"id": n.id, "label": n.label, "type": n.type} for n in self.nodes],
            "edges": [{"from": e.source, "to": e.target, "type": e.type} for e in self.edges],
        }
