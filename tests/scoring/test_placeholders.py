"""Tests for placeholder and error category reports."""

from codebase_audit.scoring import error_report, placeholder_report


class TestPlaceholderReport:
    def test_shape(self):
        report = placeholder_report("performance")
        assert report.category == "performance"
        assert report.status == "warning"
        assert report.score == 0
        assert report.tests == []
        assert len(report.issues) == 1
        assert report.issues[0].severity == "low"
        assert report.issues[0].title == "Category not yet implemented"
        assert report.recommendations == ["Implement performance audit tests"]


class TestErrorReport:
    def test_carries_message(self):
        report = error_report("search", RuntimeError("index missing"))
        assert report.status == "failed"
        assert report.score == 0
        assert report.tests[0].errors == ["index missing"]
        assert not report.tests[0].passed
        assert report.issues[0].severity == "critical"
        assert report.issues[0].description == "index missing"
        assert report.recommendations == ["Fix search audit execution errors"]

    def test_empty_message_uses_type_name(self):
        assert error_report("x", KeyError()).issues[0].description == "KeyError"
