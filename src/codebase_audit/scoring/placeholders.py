"""Reports for categories without checks and for categories that crashed."""

from ..models import CategoryReport, Issue, TestResult


def placeholder_report(category: str) -> CategoryReport:
    """Well-formed stand-in for a category that has no checks yet."""
    return CategoryReport(
        category=category,
        status="warning",
        score=0,
        tests=[],
        issues=[
            Issue(
                severity="low",
                category=category,
                title="Category not yet implemented",
                description=f"Audit tests for {category} are pending implementation",
                suggestion=f"Implement {category} audit tests to verify functionality",
            )
        ],
        recommendations=[f"Implement {category} audit tests"],
    )


def error_report(category: str, error: BaseException) -> CategoryReport:
    """Failed report carrying the error that aborted ``category``."""
    message = str(error) or type(error).__name__
    return CategoryReport(
        category=category,
        status="failed",
        score=0,
        tests=[
            TestResult(
                passed=False,
                test_name="Category Audit",
                category=category,
                errors=[message],
            )
        ],
        issues=[
            Issue(
                severity="critical",
                category=category,
                title="Audit execution failed",
                description=message,
                suggestion="Check audit configuration and system requirements",
            )
        ],
        recommendations=[f"Fix {category} audit execution errors"],
    )
