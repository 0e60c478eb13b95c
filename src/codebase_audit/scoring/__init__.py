"""Category scoring: tests, issues, score and status per category."""

from .components import category_score, score_components
from .metrics import format_duration, issue_counts, percentage, round_half_up, test_stats
from .pages import score_pages
from .placeholders import error_report, placeholder_report
from .status import derive_status, status_from_score_bands, status_from_severity

__all__ = [
    "category_score",
    "derive_status",
    "error_report",
    "format_duration",
    "issue_counts",
    "percentage",
    "placeholder_report",
    "round_half_up",
    "score_components",
    "score_pages",
    "status_from_score_bands",
    "status_from_severity",
    "test_stats",
]
