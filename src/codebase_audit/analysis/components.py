"""Component analysis: discover, classify, resolve usage, build the inventory."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..config import ScanConfig
from ..graph import DependencyGraph, analyze_usage, build_dependency_graph
from ..graph.models import NODE_TYPES
from ..logging_config import get_logger
from ..models import ComponentRecord, SourceFile
from ..scanning import FileDiscoverer, SourceClassifier, read_sources

logger = get_logger(__name__)


@dataclass
class ComponentInventory:
    """Aggregate view over the classified components of one run."""

    total_components: int
    used_components: int
    unused_components: List[str] = field(default_factory=list)
    components_without_tests: List[str] = field(default_factory=list)
    components_without_docs: List[str] = field(default_factory=list)
    components_by_type: Dict[str, List[ComponentRecord]] = field(default_factory=dict)
    dependency_graph: DependencyGraph = field(default_factory=DependencyGraph)

    @property
    def test_coverage(self) -> float:
        """Fraction of components with a test file (1.0 when there are none)."""
        if self.total_components == 0:
            return 1.0
        return (self.total_components - len(self.components_without_tests)) / self.total_components

    @property
    def doc_coverage(self) -> float:
        """Fraction of components with a doc block (1.0 when there are none)."""
        if self.total_components == 0:
            return 1.0
        return (self.total_components - len(self.components_without_docs)) / self.total_components

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_components": self.total_components,
            "used_components": self.used_components,
            "unused_components": list(self.unused_components),
            "components_without_tests": list(self.components_without_tests),
            "components_without_docs": list(self.components_without_docs),
            "components_by_type": {
                kind: [c.path for c in comps] for kind, comps in self.components_by_type.items()
            },
            "dependency_graph": self.dependency_graph.to_dict(),
        }


def build_inventory(components: List[ComponentRecord]) -> ComponentInventory:
    """Summarise usage, test and doc coverage plus the dependency graph."""
    by_type: Dict[str, List[ComponentRecord]] = {kind: [] for kind in NODE_TYPES}
    for comp in components:
        by_type.setdefault(comp.role, []).append(comp)

    return ComponentInventory(
        total_components=len(components),
        used_components=sum(1 for c in components if c.is_used),
        unused_components=[c.path for c in components if not c.is_used],
        components_without_tests=[c.path for c in components if not c.has_tests],
        components_without_docs=[c.path for c in components if not c.has_docs],
        components_by_type=by_type,
        dependency_graph=build_dependency_graph(components),
    )


class ComponentAnalyzer:
    """Run the Discoverer -> Classifier -> usage scan pipeline over a project."""

    def __init__(self, base_path: Path, scan: Optional[ScanConfig] = None):
        self.base_path = Path(base_path).resolve()
        self.scan = scan or ScanConfig()
        self.discoverer = FileDiscoverer.from_config(self.base_path, self.scan)
        self.classifier = SourceClassifier.from_config(self.base_path, self.scan)
        self.sources: List[SourceFile] = []

    def scan_sources(self) -> List[SourceFile]:
        files = self.discoverer.discover()
        self.sources = read_sources(files, self.base_path)
        logger.info(f"Found {len(self.sources)} files to analyze")
        return self.sources

    def scan_components(self) -> List[ComponentRecord]:
        if not self.sources:
            self.scan_sources()
        return self.classifier.classify(self.sources)

    def analyze(self) -> tuple[List[ComponentRecord], ComponentInventory]:
        """
        Run a full component analysis pass.

        Each call re-reads the tree, so repeated calls on an unchanged
        project give identical results.

        Returns:
            (components, inventory)
        """
        self.sources = []
        self.scan_sources()
        components = self.scan_components()
        analyze_usage(components, self.sources)
        inventory = build_inventory(components)

        logger.info(
            f"Inventory: {inventory.total_components} components, "
            f"{len(inventory.unused_components)} unused, "
            f"{len(inventory.components_without_tests)} without tests, "
            f"{len(inventory.components_without_docs)} without docs"
        )
        # Sources are only needed for this pass.
        self.sources = []
        return components, inventory
