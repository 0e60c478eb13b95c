"""Tests for the report data model."""

from datetime import datetime, timezone

from codebase_audit.models import (
    AuditReport,
    AuditSummary,
    CategoryReport,
    ComponentRecord,
    Issue,
    format_timestamp,
    parse_timestamp,
)


class TestTimestamps:
    def test_utc_millisecond_z(self):
        ts = datetime(2024, 5, 1, 12, 30, 45, 123456, tzinfo=timezone.utc)
        assert format_timestamp(ts) == "2024-05-01T12:30:45.123Z"

    def test_naive_treated_as_utc(self):
        assert format_timestamp(datetime(2024, 1, 1)) == "2024-01-01T00:00:00.000Z"

    def test_parse(self):
        parsed = parse_timestamp("2024-05-01T12:30:45.123Z")
        assert parsed == datetime(2024, 5, 1, 12, 30, 45, 123000, tzinfo=timezone.utc)


class TestRecords:
    def test_component_to_dict_sorted(self):
        comp = ComponentRecord(
            name="Card", path="src/card.tsx", exports={"b", "a"}, used_in={"z.tsx", "y.tsx"}
        )
        data = comp.to_dict()
        assert data["exports"] == ["a", "b"]
        assert data["used_in"] == ["y.tsx", "z.tsx"]
        assert comp.is_used
        assert not ComponentRecord(name="Lone", path="src/lone.tsx").is_used

    def test_critical_severities(self):
        assert Issue("critical", "c", "t", "d").is_critical
        assert Issue("high", "c", "t", "d").is_critical
        assert not Issue("medium", "c", "t", "d").is_critical

    def test_report_lookup_and_round_trip(self):
        report = AuditReport(
            id="audit-1",
            timestamp=datetime(2024, 5, 1, tzinfo=timezone.utc),
            version="1.0.0",
            summary=AuditSummary(overall_score=80),
            categories=[CategoryReport(category="pages", status="passed", score=100)],
        )
        assert report.category("pages").score == 100
        assert report.category("missing") is None
        assert AuditReport.from_dict(report.to_dict()).to_dict() == report.to_dict()
