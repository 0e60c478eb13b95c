"""Scoring for the ``pages`` category."""

from typing import Optional

from ..analysis.pages import PageValidationResult
from ..config import ScoringConfig
from ..models import CategoryReport, TestResult
from .components import category_score
from .status import derive_status

CATEGORY = "pages"


def score_pages(
    result: PageValidationResult, scoring: Optional[ScoringConfig] = None
) -> CategoryReport:
    tests = [
        TestResult(
            passed=not result.missing_pages,
            test_name="Page Existence Check",
            category=CATEGORY,
            errors=[f"Missing page: {route}" for route in result.missing_pages],
        ),
        TestResult(
            passed=not result.inaccessible_pages,
            test_name="Page Accessibility Check",
            category=CATEGORY,
            errors=[f"Inaccessible page: {route}" for route in result.inaccessible_pages],
        ),
    ]

    recommendations = []
    if result.missing_pages:
        recommendations.append(f"Create the {len(result.missing_pages)} missing route pages")
    if result.inaccessible_pages:
        recommendations.append("Add a default export to every route page")

    score = category_score(tests)
    return CategoryReport(
        category=CATEGORY,
        status=derive_status(score, result.issues, scoring),
        score=score,
        tests=tests,
        issues=list(result.issues),
        recommendations=recommendations,
    )
