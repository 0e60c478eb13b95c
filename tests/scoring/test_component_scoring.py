"""Tests for the components and pages category scores."""

from codebase_audit.analysis import PageValidationResult, build_inventory
from codebase_audit.config import ScoringConfig
from codebase_audit.models import ComponentRecord, Issue, TestResult
from codebase_audit.scoring import category_score, score_components, score_pages


def _record(name, used=False, tests=False, docs=False):
    return ComponentRecord(
        name=name,
        path=f"src/components/{name.lower()}.tsx",
        exports={name},
        used_in={"src/app/page.tsx"} if used else set(),
        has_tests=tests,
        has_docs=docs,
    )


class TestScoreComponents:
    def test_nothing_passes(self):
        report = score_components(build_inventory([_record("Lonely")]))
        assert report.score == 0
        assert report.status == "failed"
        assert len(report.tests) == 3
        assert not any(t.passed for t in report.tests)
        assert [i.severity for i in report.issues] == ["medium", "medium", "low"]
        assert len(report.recommendations) == 3

    def test_everything_passes(self):
        report = score_components(build_inventory([_record("Card", used=True, tests=True, docs=True)]))
        assert report.score == 100
        assert report.status == "passed"
        assert report.issues == []
        assert report.recommendations == []

    def test_test_names_and_messages(self):
        report = score_components(build_inventory([_record("Lonely")]))
        assert [t.test_name for t in report.tests] == [
            "All components are used",
            "Components have tests",
            "Components have documentation",
        ]
        assert report.issues[0].title == "Unused components detected"
        assert report.issues[0].description == "Found 1 components that are not used anywhere"
        assert report.issues[1].description == "1 components lack tests (0.0% coverage)"
        assert "Increase component test coverage to 80%" in report.recommendations

    def test_coverage_targets_configurable(self):
        comps = [_record(f"C{i}", used=True, tests=i < 3, docs=True) for i in range(4)]
        inventory = build_inventory(comps)

        strict = score_components(inventory)
        assert not strict.tests[1].passed  # 75% < 80%

        lenient = score_components(inventory, ScoringConfig(test_coverage_target=0.7))
        assert lenient.tests[1].passed
        assert lenient.score == 100

    def test_partial_score_rounds(self):
        # used + documented, untested: 2 of 3 checks pass
        report = score_components(build_inventory([_record("Card", used=True, docs=True)]))
        assert report.score == 67
        assert report.status == "warning"

    def test_no_components(self):
        report = score_components(build_inventory([]))
        assert report.score == 100
        assert report.status == "passed"
        assert [i.title for i in report.issues] == ["No components discovered"]
        assert report.issues[0].severity == "low"

    def test_severity_rule(self):
        scoring = ScoringConfig(status_rule="severity")
        report = score_components(build_inventory([_record("Card", used=True, docs=True)]), scoring)
        assert report.status == "warning"


class TestCategoryScore:
    def test_bounds(self):
        assert category_score([]) == 0
        assert category_score([TestResult(True, "a")]) == 100
        assert category_score([TestResult(False, "a")]) == 0
        assert 0 <= category_score([TestResult(True, "a"), TestResult(False, "b")]) <= 100
        assert category_score([TestResult(True, "a")] + [TestResult(False, "b")] * 7) == 13


class TestScorePages:
    def test_missing_page_fails(self):
        result = PageValidationResult(
            total_pages=1,
            existing_pages=0,
            missing_pages=["/"],
            issues=[Issue("high", "pages", "Missing page: /", "not found")],
        )
        report = score_pages(result)
        assert report.category == "pages"
        assert report.score == 50
        assert report.status == "failed"
        assert report.recommendations == ["Create the 1 missing route pages"]

    def test_all_pages_ok(self):
        report = score_pages(PageValidationResult(total_pages=2, existing_pages=2))
        assert report.score == 100
        assert report.status == "passed"
        assert report.issues == []
