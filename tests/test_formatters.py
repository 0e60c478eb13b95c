"""Tests for the formatters package."""

import io
import json
from datetime import datetime, timezone

import pytest
from rich.console import Console

from codebase_audit.formatters import HtmlFormatter, JsonFormatter, RichFormatter, get_formatter
from codebase_audit.models import (
    AuditMetadata,
    AuditReport,
    AuditSummary,
    CategoryReport,
    Issue,
    Recommendation,
    TestResult,
)


def _make_report():
    return AuditReport(
        id="audit-1714566645123",
        timestamp=datetime(2024, 5, 1, 12, 30, 45, 123000, tzinfo=timezone.utc),
        version="1.0.0",
        summary=AuditSummary(
            total_tests=3, passed_tests=2, failed_tests=1, warning_count=1, overall_score=65, critical_issues=0
        ),
        categories=[
            CategoryReport(
                category="components",
                status="warning",
                score=67,
                tests=[TestResult(True, "All components are used"), TestResult(False, "Components have tests")],
                issues=[
                    Issue(
                        "medium",
                        "components",
                        "Low test coverage for components",
                        "2 components lack tests <Card> & <List>",
                        suggestion="Add unit tests",
                    )
                ],
                recommendations=["Increase component test coverage to 80%"],
            ),
        ],
        recommendations=[
            Recommendation("medium", "components", "Increase component test coverage to 80%",
                           "Increase component test coverage to 80%", "large", "medium"),
        ],
        metadata=AuditMetadata(duration_ms=1250.0, total_categories=1, warning_categories=1),
    )


class TestGetFormatter:
    def test_known_names(self):
        assert isinstance(get_formatter("json"), JsonFormatter)
        assert isinstance(get_formatter("html"), HtmlFormatter)
        assert isinstance(get_formatter("console"), RichFormatter)

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown formatter"):
            get_formatter("pdf")

    def test_extensions(self):
        assert get_formatter("json").extension == "json"
        assert get_formatter("html").extension == "html"
        assert get_formatter("console").extension is None


class TestJsonFormatter:
    def test_snake_case_and_timestamp(self):
        data = json.loads(JsonFormatter().format(_make_report()))
        assert data["timestamp"] == "2024-05-01T12:30:45.123Z"
        assert data["summary"]["overall_score"] == 65
        assert data["categories"][0]["tests"][0]["test_name"] == "All components are used"
        assert data["recommendations"][0]["effort"] == "large"


class TestHtmlFormatter:
    def test_self_contained_document(self):
        html = HtmlFormatter().format(_make_report())
        assert html.startswith("<!DOCTYPE html>")
        assert "<link" not in html
        assert "<script" not in html
        assert "65/100" in html

    def test_text_is_escaped(self):
        html = HtmlFormatter().format(_make_report())
        assert "&lt;Card&gt; &amp; &lt;List&gt;" in html
        assert "<Card>" not in html


class TestRichFormatter:
    def test_render_to_console(self):
        buffer = io.StringIO()
        RichFormatter(Console(file=buffer, width=120, color_system=None)).render(_make_report())
        out = buffer.getvalue()
        assert "Audit Summary" in out
        assert "components" in out
        assert "Low test coverage for components" in out
        assert "[medium]" in out

    def test_format_returns_text(self):
        text = RichFormatter().format(_make_report())
        assert "Audit Summary" in text
        assert "1.25s" in text
