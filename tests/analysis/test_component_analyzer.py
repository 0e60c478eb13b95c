"""Tests for the end-to-end component analysis pass."""

from codebase_audit.analysis import ComponentAnalyzer, build_inventory
from codebase_audit.config import ScanConfig
from codebase_audit.models import ComponentRecord


class TestComponentAnalyzer:
    def test_inventory_counts(self, sample_project):
        components, inventory = ComponentAnalyzer(sample_project).analyze()
        assert len(components) == 4
        assert inventory.total_components == 4
        assert inventory.used_components == 2
        assert sorted(inventory.unused_components) == [
            "src/app/page.tsx",
            "src/components/orphan.tsx",
        ]
        assert sorted(inventory.components_without_tests) == [
            "src/app/page.tsx",
            "src/components/orphan.tsx",
        ]
        assert len(inventory.components_without_docs) == 3

    def test_usage_resolved(self, sample_project):
        components, _ = ComponentAnalyzer(sample_project).analyze()
        by_name = {c.name: c for c in components}
        assert by_name["FolderTree"].used_in == {"src/components/sidebar.tsx"}
        assert by_name["Sidebar"].used_in == {"src/app/page.tsx"}

    def test_test_files_are_not_usage_sites(self, sample_project):
        components, _ = ComponentAnalyzer(sample_project).analyze()
        for comp in components:
            assert not any(".test." in p or "__tests__" in p for p in comp.used_in)

    def test_components_by_type(self, sample_project):
        _, inventory = ComponentAnalyzer(sample_project).analyze()
        assert [c.name for c in inventory.components_by_type["page"]] == ["Page"]
        assert len(inventory.components_by_type["component"]) == 3
        assert inventory.components_by_type["hook"] == []

    def test_content_role_shared_by_inventory_and_graph(self, tmp_path):
        helper = tmp_path / "src/components/helpers/format-label.tsx"
        helper.parent.mkdir(parents=True)
        helper.write_text("import React from 'react'\n\nexport function FormatLabel() {\n  return null\n}\n")

        components, inventory = ComponentAnalyzer(tmp_path).analyze()
        assert [c.role for c in components] == ["util"]
        assert inventory.components_by_type["util"] == components
        assert inventory.components_by_type["component"] == []
        assert [n.type for n in inventory.dependency_graph.nodes] == ["util"]

    def test_repeated_runs_identical(self, sample_project):
        analyzer = ComponentAnalyzer(sample_project)
        first_components, first = analyzer.analyze()
        second_components, second = analyzer.analyze()
        assert first.to_dict() == second.to_dict()
        assert [c.to_dict() for c in first_components] == [c.to_dict() for c in second_components]

    def test_empty_project(self, tmp_path):
        components, inventory = ComponentAnalyzer(tmp_path).analyze()
        assert components == []
        assert inventory.total_components == 0
        assert inventory.test_coverage == 1.0
        assert inventory.doc_coverage == 1.0
        assert inventory.dependency_graph.nodes == []

    def test_custom_scan_paths(self, sample_project):
        scan = ScanConfig(scan_paths=["src/components"])
        components, _ = ComponentAnalyzer(sample_project, scan).analyze()
        assert {c.name for c in components} == {"FolderTree", "Sidebar", "Orphan"}


class TestInventory:
    def test_coverage_ratios(self):
        comps = [
            ComponentRecord(name="A", path="a.tsx", has_tests=True, has_docs=True),
            ComponentRecord(name="B", path="b.tsx", has_tests=True),
            ComponentRecord(name="C", path="c.tsx"),
            ComponentRecord(name="D", path="d.tsx"),
        ]
        inventory = build_inventory(comps)
        assert inventory.test_coverage == 0.5
        assert inventory.doc_coverage == 0.25

    def test_to_dict_uses_paths(self):
        inventory = build_inventory([ComponentRecord(name="A", path="src/components/a.tsx")])
        data = inventory.to_dict()
        assert data["components_by_type"]["component"] == ["src/components/a.tsx"]
        assert data["dependency_graph"] == {
            "nodes": [{"id": "src/components/a.tsx", "label": "A", "type": "component"}],
            "edges": [],
        }
