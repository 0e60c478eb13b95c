"""Category status derivation.

Two rules exist and they disagree on scores in [50, 80) when issues are
present. ``ScoringConfig.status_rule`` picks one per run and
``derive_status`` applies it to every scored category.
"""

from typing import Iterable, Optional

from ..config import ScoringConfig
from ..models import Issue, Status


def status_from_score_bands(score: int, scoring: Optional[ScoringConfig] = None) -> Status:
    """``>= passed_threshold`` passed, ``>= warning_threshold`` warning, else failed."""
    scoring = scoring or ScoringConfig()
    if score >= scoring.passed_threshold:
        return "passed"
    if score >= scoring.warning_threshold:
        return "warning"
    return "failed"


def status_from_severity(
    score: int, issues: Iterable[Issue], scoring: Optional[ScoringConfig] = None
) -> Status:
    """Any critical/high issue or ``score < failing_threshold`` fails; below passed warns."""
    scoring = scoring or ScoringConfig()
    critical = sum(1 for i in issues if i.is_critical)
    if critical > 0 or score < scoring.failing_threshold:
        return "failed"
    if score < scoring.passed_threshold:
        return "warning"
    return "passed"


def derive_status(
    score: int, issues: Iterable[Issue], scoring: Optional[ScoringConfig] = None
) -> Status:
    scoring = scoring or ScoringConfig()
    if scoring.status_rule == "severity":
        return status_from_severity(score, issues, scoring)
    return status_from_score_bands(score, scoring)
