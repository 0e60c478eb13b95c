"""Tests for the metric helpers."""

from codebase_audit.models import Issue, TestResult
from codebase_audit.scoring import format_duration, issue_counts, metrics, percentage, round_half_up


class TestRoundHalfUp:
    def test_halves_round_up(self):
        assert round_half_up(12.5) == 13
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1

    def test_other_values(self):
        assert round_half_up(12.49) == 12
        assert round_half_up(87.5) == 88
        assert round_half_up(100) == 100


class TestPercentage:
    def test_rounds_to_one_decimal(self):
        assert percentage(1, 3) == 33.3

    def test_half_rounds_up(self):
        assert percentage(1, 16) == 6.3

    def test_empty_total(self):
        assert percentage(5, 0) == 0.0


class TestStats:
    def test_counts_and_rates(self):
        tests = [
            TestResult(True, "a", duration=10.0),
            TestResult(True, "b", duration=20.0),
            TestResult(False, "c", duration=30.0),
        ]
        stats = metrics.test_stats(tests)
        assert stats["total"] == 3
        assert stats["passed"] == 2
        assert stats["failed"] == 1
        assert stats["pass_rate"] == 66.7
        assert stats["average_duration"] == 20.0

    def test_no_tests(self):
        assert metrics.test_stats([])["average_duration"] == 0.0


class TestIssueCounts:
    def test_every_severity_present(self):
        counts = issue_counts([Issue("low", "x", "t", "d"), Issue("low", "x", "t", "d")])
        assert counts == {"critical": 0, "high": 0, "medium": 0, "low": 2}


class TestFormatDuration:
    def test_units(self):
        assert format_duration(850) == "850ms"
        assert format_duration(2350) == "2.35s"
        assert format_duration(192000) == "3m 12s"
