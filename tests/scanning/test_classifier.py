"""Tests for source reading and component classification."""

from pathlib import Path

from codebase_audit.config import ScanConfig
from codebase_audit.models import SourceFile
from codebase_audit.scanning import SourceClassifier, discover_files, read_sources


def _write(root: Path, name: str, content: str) -> Path:
    p = root / name
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content)
    return p


def _classify(root: Path):
    sources = read_sources(discover_files(root, ScanConfig()), root)
    return {c.name: c for c in SourceClassifier(root).classify(sources)}


class TestReadSources:
    def test_paths_relative_to_base(self, sample_project):
        sources = read_sources(discover_files(sample_project, ScanConfig()), sample_project)
        paths = [s.path for s in sources]
        assert "src/components/sidebar.tsx" in paths
        assert all(not p.startswith("/") for p in paths)

    def test_unreadable_files_skipped(self, tmp_path):
        good = _write(tmp_path, "src/a.ts", "export const a = 1")
        missing = tmp_path / "src" / "gone.ts"
        sources = read_sources([good, missing], tmp_path)
        assert [s.path for s in sources] == ["src/a.ts"]


class TestSourceClassifier:
    def test_components_found(self, sample_project):
        components = _classify(sample_project)
        assert set(components) == {"FolderTree", "Sidebar", "Orphan", "Page"}

    def test_non_components_ignored(self, sample_project):
        paths = {c.path for c in _classify(sample_project).values()}
        assert "src/lib/format.ts" not in paths
        assert "src/hooks/use-toggle.ts" not in paths

    def test_metadata(self, sample_project):
        components = _classify(sample_project)
        tree = components["FolderTree"]
        assert tree.path == "src/components/folder-tree.tsx"
        assert tree.exports == {"FolderTree"}
        assert tree.imports == ["react"]
        assert tree.has_tests
        assert tree.has_docs
        assert tree.has_description

        sidebar = components["Sidebar"]
        assert sidebar.exports == {"Sidebar"}
        assert sidebar.imports == ["react", "./folder-tree"]
        assert sidebar.has_tests  # in __tests__/
        assert not sidebar.has_docs

        orphan = components["Orphan"]
        assert not orphan.has_tests
        assert not orphan.has_docs

    def test_usage_not_resolved_by_classifier(self, sample_project):
        assert all(not c.used_in for c in _classify(sample_project).values())

    def test_roles(self, sample_project):
        components = _classify(sample_project)
        assert components["Page"].role == "page"
        assert components["Sidebar"].role == "component"

    def test_spec_file_counts_as_test(self, tmp_path):
        _write(tmp_path, "src/components/button.jsx", "import React from 'react'\nexport function Button() {}")
        _write(tmp_path, "src/components/button.spec.js", "test('x', () => {})")
        assert _classify(tmp_path)["Button"].has_tests

    def test_test_file_candidates(self, tmp_path):
        classifier = SourceClassifier(tmp_path, extensions=[".tsx"])
        candidates = [
            p.relative_to(tmp_path.resolve()).as_posix()
            for p in classifier.test_file_candidates("src/components/card.tsx")
        ]
        assert candidates == [
            "src/components/card.test.tsx",
            "src/components/card.spec.tsx",
            "src/components/__tests__/card.test.tsx",
        ]

    def test_classify_source_returns_none_for_plain_module(self, tmp_path):
        source = SourceFile(path="src/lib/x.ts", content="export const x = 1")
        assert SourceClassifier(tmp_path).classify_source(source) is None
