"""Tests for the two category status rules."""

import pytest

from codebase_audit.config import ScoringConfig
from codebase_audit.models import Issue
from codebase_audit.scoring import derive_status, status_from_score_bands, status_from_severity

CRITICAL = Issue("critical", "x", "boom", "boom")
MINOR = Issue("low", "x", "meh", "meh")


class TestScoreBands:
    @pytest.mark.parametrize(
        "score,expected",
        [(100, "passed"), (80, "passed"), (79, "warning"), (60, "warning"), (59, "failed"), (0, "failed")],
    )
    def test_bands(self, score, expected):
        assert status_from_score_bands(score) == expected

    def test_custom_thresholds(self):
        scoring = ScoringConfig(passed_threshold=90, warning_threshold=70)
        assert status_from_score_bands(85, scoring) == "warning"


class TestSeverityRule:
    def test_critical_issue_fails_high_score(self):
        assert status_from_severity(95, [CRITICAL]) == "failed"

    def test_high_issue_counts_as_critical(self):
        assert status_from_severity(95, [Issue("high", "x", "t", "d")]) == "failed"

    def test_low_score_fails(self):
        assert status_from_severity(49, []) == "failed"

    def test_minor_issues_only(self):
        assert status_from_severity(70, [MINOR]) == "warning"
        assert status_from_severity(85, [MINOR]) == "passed"


class TestRuleDisagreement:
    def test_score_55_without_critical_issues(self):
        assert status_from_score_bands(55) == "failed"
        assert status_from_severity(55, [MINOR]) == "warning"

    def test_derive_status_dispatches(self):
        assert derive_status(55, [MINOR]) == "failed"
        assert derive_status(55, [MINOR], ScoringConfig(status_rule="severity")) == "warning"
