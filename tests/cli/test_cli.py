"""Tests for the codebase-audit command line."""

import json

import pytest
from typer.testing import CliRunner

from codebase_audit.cli import app

runner = CliRunner()


@pytest.fixture
def out_dir(tmp_path):
    return tmp_path / "reports"


def _run(*args):
    return runner.invoke(app, [str(a) for a in args])


class TestFullRun:
    def test_writes_reports_and_fails_on_low_score(self, sample_project, out_dir):
        result = _run("-C", sample_project, "--output", out_dir, "--formats", "json,html")
        # Placeholder categories alone pull the score below the acceptable threshold.
        assert result.exit_code == 1
        assert len(list(out_dir.glob("audit-report-*.json"))) == 1
        assert len(list(out_dir.glob("audit-report-*.html"))) == 1

    def test_skip(self, sample_project, out_dir):
        _run("-C", sample_project, "--output", out_dir, "--formats", "json", "--skip", "ai,security")
        data = json.loads(next(out_dir.glob("audit-report-*.json")).read_text())
        names = [c["category"] for c in data["categories"]]
        assert "ai" not in names
        assert "security" not in names
        assert "components" in names

    def test_invalid_format(self, sample_project, out_dir):
        result = _run("-C", sample_project, "--output", out_dir, "--formats", "pdf")
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_version(self):
        result = _run("--version")
        assert result.exit_code == 0
        assert "version" in result.output


class TestSingleCategory:
    def test_passing_category(self, sample_project, out_dir):
        result = _run("-C", sample_project, "--output", out_dir, "--formats", "json", "--category", "pages")
        assert result.exit_code == 0

    def test_failing_category(self, sample_project, out_dir):
        result = _run(
            "-C", sample_project, "--output", out_dir, "--formats", "json", "--category", "components"
        )
        assert result.exit_code == 1
        data = json.loads(next(out_dir.glob("audit-report-*.json")).read_text())
        assert [c["category"] for c in data["categories"]] == ["components"]

    def test_unknown_category(self, sample_project, out_dir):
        result = _run("-C", sample_project, "--output", out_dir, "--category", "nope")
        assert result.exit_code == 1
        assert "Unknown category: nope" in result.output
        assert "Valid categories" in result.output

    def test_list_categories(self, sample_project):
        result = _run("-C", sample_project, "--list-categories")
        assert result.exit_code == 0
        assert "components" in result.output
        assert "security" in result.output


class TestReportOnly:
    def test_no_previous_report(self, sample_project, out_dir):
        result = _run("-C", sample_project, "--output", out_dir, "--report-only")
        assert result.exit_code == 1
        assert "No previous audit results found" in result.output

    def test_rerenders_latest(self, sample_project, out_dir):
        _run("-C", sample_project, "--output", out_dir, "--formats", "json")
        result = _run("-C", sample_project, "--output", out_dir, "--formats", "json", "--report-only")
        assert result.exit_code == 0
        assert "Audit Summary" in result.output


class TestCompare:
    def test_json_deltas(self, sample_project, out_dir):
        _run("-C", sample_project, "--output", out_dir, "--formats", "json", "--category", "pages")
        first = next(out_dir.glob("audit-report-*.json"))
        old = json.loads(first.read_text())
        old["summary"]["overall_score"] = 10
        old["categories"][0]["score"] = 20
        old_path = out_dir / "old.json"
        old_path.write_text(json.dumps(old))

        result = _run("compare", old_path, first, "--json")
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["improved"] == ["pages"]
        assert data["regressed"] == []
        assert data["score_delta"] == 90

    def test_table_output(self, sample_project, out_dir):
        _run("-C", sample_project, "--output", out_dir, "--formats", "json", "--category", "pages")
        report = next(out_dir.glob("audit-report-*.json"))
        result = _run("compare", report, report)
        assert result.exit_code == 0
        assert "No category scores changed" in result.output

    def test_unreadable_report(self, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("{")
        result = _run("compare", bad, bad)
        assert result.exit_code == 1


class TestInventory:
    def test_json(self, sample_project):
        result = _run("-C", sample_project, "inventory", "--json")
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["inventory"]["total_components"] == 4
        assert sorted(c["name"] for c in data["components"]) == ["FolderTree", "Orphan", "Page", "Sidebar"]
        assert len(data["inventory"]["dependency_graph"]["edges"]) == 2

    def test_table(self, sample_project):
        result = _run("-C", sample_project, "inventory")
        assert result.exit_code == 0
        assert "FolderTree" in result.output

    def test_empty_project(self, tmp_path):
        result = _run("-C", tmp_path, "inventory")
        assert result.exit_code == 0
        assert "No components found" in result.output
