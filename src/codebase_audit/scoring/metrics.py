"""Small aggregate helpers shared by the scorer, the manager and the renderers."""

import math
from typing import Dict, Iterable

from ..models import SEVERITIES, Issue, TestResult


def round_half_up(value: float) -> int:
    """Nearest integer, halves rounded up (12.5 -> 13), unlike ``round``."""
    return int(math.floor(value + 0.5))


def percentage(part: float, total: float) -> float:
    """``100 * part / total`` to one decimal (halves up); 0.0 for an empty total."""
    if total <= 0:
        return 0.0
    return round_half_up(1000.0 * part / total) / 10


def test_stats(tests: Iterable[TestResult]) -> Dict[str, float]:
    """Totals, pass rate and mean duration (ms) for a batch of test results."""
    tests = list(tests)
    total = len(tests)
    passed = sum(1 for t in tests if t.passed)
    duration = sum(t.duration for t in tests)
    return {
        "total": total,
        "passed": passed,
        "failed": total - passed,
        "pass_rate": percentage(passed, total),
        "average_duration": duration / total if total else 0.0,
    }


# Keep pytest from collecting the helper above.
test_stats.__test__ = False  # type: ignore[attr-defined]


def issue_counts(issues: Iterable[Issue]) -> Dict[str, int]:
    """Issue count per severity, every severity present."""
    counts = {severity: 0 for severity in SEVERITIES}
    for issue in issues:
        counts[issue.severity] = counts.get(issue.severity, 0) + 1
    return counts


def format_duration(ms: float) -> str:
    """``850ms``, ``2.35s`` or ``3m 12s``."""
    if ms < 1000:
        return f"{ms:.0f}ms"
    seconds = ms / 1000
    if seconds < 60:
        return f"{seconds:.2f}s"
    minutes, rest = divmod(int(seconds), 60)
    return f"{minutes}m {rest}s"
