"""Scoring for the ``components`` category."""

from typing import List, Optional

from ..analysis.components import ComponentInventory
from ..config import ScoringConfig
from ..logging_config import get_logger
from ..models import CategoryReport, Issue, TestResult
from .metrics import percentage, round_half_up
from .status import derive_status

logger = get_logger(__name__)

CATEGORY = "components"


def category_score(tests: List[TestResult]) -> int:
    """Pass rate as a whole percentage (halves round up), clamped to [0, 100]; 0 with no tests."""
    if not tests:
        return 0
    passed = sum(1 for t in tests if t.passed)
    return max(0, min(100, round_half_up(passed / len(tests) * 100)))


def score_components(
    inventory: ComponentInventory, scoring: Optional[ScoringConfig] = None
) -> CategoryReport:
    """
    Turn a component inventory into the ``components`` category report.

    Three checks: every component is used, test coverage meets its target,
    doc coverage meets its target. Each failed check adds one issue and
    one recommendation.
    """
    scoring = scoring or ScoringConfig()
    tests: List[TestResult] = []
    issues: List[Issue] = []
    recommendations: List[str] = []
    total = inventory.total_components

    unused = inventory.unused_components
    tests.append(
        TestResult(
            passed=not unused,
            test_name="All components are used",
            category=CATEGORY,
            errors=[f"Unused component: {path}" for path in unused],
        )
    )
    if unused:
        issues.append(
            Issue(
                severity="medium",
                category=CATEGORY,
                title="Unused components detected",
                description=f"Found {len(unused)} components that are not used anywhere",
                location=", ".join(unused[:5]),
                suggestion="Review and remove unused components or integrate them into the application",
            )
        )
        recommendations.append("Remove or integrate unused components")

    untested = inventory.components_without_tests
    test_coverage = inventory.test_coverage
    tests.append(
        TestResult(
            passed=test_coverage >= scoring.test_coverage_target,
            test_name="Components have tests",
            category=CATEGORY,
            warnings=[f"No tests: {path}" for path in untested],
        )
    )
    if test_coverage < scoring.test_coverage_target:
        issues.append(
            Issue(
                severity="medium",
                category=CATEGORY,
                title="Low test coverage for components",
                description=(
                    f"{len(untested)} components lack tests "
                    f"({percentage(total - len(untested), total):.1f}% coverage)"
                ),
                suggestion="Add unit tests for components to improve reliability",
            )
        )
        recommendations.append(
            f"Increase component test coverage to {scoring.test_coverage_target:.0%}"
        )

    undocumented = inventory.components_without_docs
    doc_coverage = inventory.doc_coverage
    tests.append(
        TestResult(
            passed=doc_coverage >= scoring.doc_coverage_target,
            test_name="Components have documentation",
            category=CATEGORY,
            warnings=[f"No docs: {path}" for path in undocumented],
        )
    )
    if doc_coverage < scoring.doc_coverage_target:
        issues.append(
            Issue(
                severity="low",
                category=CATEGORY,
                title="Low documentation coverage",
                description=(
                    f"{len(undocumented)} components lack documentation "
                    f"({percentage(total - len(undocumented), total):.1f}% coverage)"
                ),
                suggestion="Add JSDoc comments to components for better maintainability",
            )
        )
        recommendations.append("Improve component documentation coverage")

    if total == 0:
        # Coverage checks pass vacuously; make the empty scan visible.
        issues.append(
            Issue(
                severity="low",
                category=CATEGORY,
                title="No components discovered",
                description="The scan found no files that look like components",
                suggestion="Check scan_paths, extensions and framework_modules in the scan config",
            )
        )

    score = category_score(tests)
    status = derive_status(score, issues, scoring)
    logger.debug(f"components: score={score} status={status} issues={len(issues)}")
    return CategoryReport(
        category=CATEGORY,
        status=status,
        score=score,
        tests=tests,
        issues=issues,
        recommendations=recommendations,
    )
