"""
Audit orchestration.

Runs registered category handlers one after another, converts a crashing
handler into a failed category report, and aggregates everything into a
single ``AuditReport`` with a summary and prioritised recommendations.
"""

import platform
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Literal, Optional

from .. import __version__
from ..config import AuditConfig
from ..exceptions import CategoryExecutionError, UnknownCategoryError
from ..formatters import RichFormatter
from ..logging_config import get_logger
from ..models import (
    CRITICAL_SEVERITIES,
    PRIORITY_RANK,
    SEVERITIES,
    WARNING_SEVERITIES,
    AuditMetadata,
    AuditReport,
    AuditSummary,
    CategoryReport,
    Issue,
    Recommendation,
    ReportComparison,
)
from ..scoring import error_report, round_half_up
from .registry import CategoryRegistry, default_registry
from .store import ReportStore

logger = get_logger(__name__)

CategoryState = Literal["pending", "running", "completed", "errored"]

_PRIORITY_BY_STATUS = {"failed": "high", "warning": "medium", "passed": "low"}


class AuditManager:
    """
    Run audit categories and build the aggregated report.

    Args:
        config: Audit configuration (defaults when omitted)
        registry: Category handlers; ``default_registry(config)`` when omitted
        store: Report persistence; a store over ``config.output_path`` when omitted
    """

    def __init__(
        self,
        config: Optional[AuditConfig] = None,
        registry: Optional[CategoryRegistry] = None,
        store: Optional[ReportStore] = None,
    ):
        self.config = config or AuditConfig()
        self.registry = registry if registry is not None else default_registry(self.config)
        self.store = store or ReportStore(self.config.output_path)
        self.results: List[CategoryReport] = []
        self.states: Dict[str, CategoryState] = {}
        self._start_time: Optional[datetime] = None
        self._start_clock: Optional[float] = None

    # ── Running ────────────────────────────────────────────────────

    def registered_categories(self) -> List[str]:
        return self.registry.categories()

    def selected_categories(self, skip: Iterable[str] = ()) -> List[str]:
        """Registered categories after the configured allow-list and skip lists."""
        skipped = set(skip) | set(self.config.skip_categories)
        for name in skipped:
            if name not in self.registry:
                logger.warning(f"Ignoring unknown category in skip list: {name}")

        if self.config.run_categories:
            for name in self.config.run_categories:
                if name not in self.registry:
                    raise UnknownCategoryError(name, self.registry.categories())
            selected = list(self.config.run_categories)
        else:
            selected = self.registry.categories()

        return [name for name in selected if name not in skipped]

    def run_full_audit(self, skip: Iterable[str] = (), persist: bool = True) -> AuditReport:
        """Run every selected category in order and return the generated report."""
        self.clear_results()
        self._mark_start()
        categories = self.selected_categories(skip)
        self.states = {name: "pending" for name in categories}

        logger.info(f"Starting audit of {len(categories)} categories")
        for name in categories:
            self.run_category_audit(name)

        return self.generate_report(persist=persist)

    def run_category_audit(self, category: str) -> CategoryReport:
        """
        Run one category.

        A handler that raises, or returns something that is not a valid
        ``CategoryReport``, produces a failed report instead of aborting.

        Raises:
            UnknownCategoryError: If no handler is registered for ``category``
        """
        handler = self.registry.get(category)
        if self._start_time is None:
            self._mark_start()

        self.states[category] = "running"
        logger.info(f"Auditing {category}...")
        try:
            report = handler()
            self._check_report(category, report)
        except Exception as e:
            logger.exception(f"Category {category} failed")
            report = error_report(category, e)
            self.states[category] = "errored"
        else:
            self.states[category] = "completed"
            logger.info(f"{category}: {report.status} ({report.score}/100)")

        # One entry per category, even when a category is re-run.
        self.results = [r for r in self.results if r.category != category]
        self.results.append(report)
        return report

    @staticmethod
    def _check_report(category: str, report: object) -> None:
        if not isinstance(report, CategoryReport):
            raise CategoryExecutionError(
                category, f"handler returned {type(report).__name__}, expected CategoryReport"
            )
        if not 0 <= report.score <= 100:
            raise CategoryExecutionError(category, f"score {report.score} is outside 0-100")
        if report.status not in ("passed", "warning", "failed"):
            raise CategoryExecutionError(category, f"unknown status {report.status!r}")
        for issue in report.issues:
            if not isinstance(issue, Issue) or issue.severity not in SEVERITIES:
                raise CategoryExecutionError(category, f"invalid issue {issue!r}")
            if not isinstance(issue.title, str) or not isinstance(issue.description, str):
                raise CategoryExecutionError(category, f"issue without title or description: {issue!r}")

    def get_results(self) -> List[CategoryReport]:
        return list(self.results)

    def clear_results(self) -> None:
        self.results = []
        self.states = {}
        self._start_time = None
        self._start_clock = None

    def _mark_start(self) -> None:
        self._start_time = datetime.now(timezone.utc)
        self._start_clock = time.perf_counter()

    # ── Aggregation ────────────────────────────────────────────────

    def calculate_summary(self) -> AuditSummary:
        """
        Totals across all results plus the overall score.

        With tests: ``max(0, pass% - critical_penalty*critical - warning_penalty*warnings)``.
        Without tests: the rounded mean of category scores, 0 when nothing ran.
        """
        scoring = self.config.scoring
        total = sum(len(r.tests) for r in self.results)
        passed = sum(r.passed_tests for r in self.results)
        warnings = sum(
            1 for r in self.results for i in r.issues if i.severity in WARNING_SEVERITIES
        )
        critical = sum(
            1 for r in self.results for i in r.issues if i.severity in CRITICAL_SEVERITIES
        )

        if total > 0:
            test_score = round_half_up(passed / total * 100)
            overall = test_score - scoring.critical_penalty * critical - scoring.warning_penalty * warnings
        elif self.results:
            overall = round_half_up(sum(r.score for r in self.results) / len(self.results))
        else:
            overall = 0

        return AuditSummary(
            total_tests=total,
            passed_tests=passed,
            failed_tests=total - passed,
            warning_count=warnings,
            overall_score=max(0, min(100, overall)),
            critical_issues=critical,
        )

    def _effort(self, report: CategoryReport) -> str:
        if report.category in self.config.scoring.complex_categories or report.score < 50:
            return "large"
        if report.score < 80:
            return "medium"
        return "small"

    def generate_recommendations(self) -> List[Recommendation]:
        """One recommendation per category recommendation string, most urgent first."""
        recommendations: List[Recommendation] = []
        for report in self.results:
            priority = _PRIORITY_BY_STATUS.get(report.status, "medium")
            effort = self._effort(report)
            for text in report.recommendations:
                recommendations.append(
                    Recommendation(
                        priority=priority,
                        category=report.category,
                        title=text,
                        description=text,
                        effort=effort,
                        impact=priority,
                    )
                )

        # Stable sort keeps category order within a priority band.
        recommendations.sort(key=lambda r: (PRIORITY_RANK[r.priority], PRIORITY_RANK[r.impact]))
        return recommendations

    def build_report(self) -> AuditReport:
        """Assemble the report for the current results without side effects."""
        start = self._start_time or datetime.now(timezone.utc)
        duration_ms = (
            (time.perf_counter() - self._start_clock) * 1000 if self._start_clock is not None else 0.0
        )
        results = list(self.results)

        metadata = AuditMetadata(
            duration_ms=round(duration_ms, 1),
            environment=self.config.environment,
            python_version=platform.python_version(),
            platform=sys.platform,
            base_path=str(self.config.base_dir),
            total_categories=len(results),
            passed_categories=sum(1 for r in results if r.status == "passed"),
            failed_categories=sum(1 for r in results if r.status == "failed"),
            warning_categories=sum(1 for r in results if r.status == "warning"),
        )
        return AuditReport(
            id=f"audit-{int(start.timestamp() * 1000)}",
            timestamp=start,
            version=__version__,
            summary=self.calculate_summary(),
            categories=results,
            recommendations=self.generate_recommendations(),
            metadata=metadata,
        )

    def generate_report(self, persist: bool = True) -> AuditReport:
        """
        Build the report, log a summary and, when ``persist`` is set, write
        it in every configured format and render it to the console.

        Raises:
            ReportPersistenceError: If a format fails and
                ``always_generate_report`` is disabled
        """
        report = self.build_report()
        self._log_summary(report)

        if persist:
            self.store.save(report, self.config.formats)
            if self.store.failures and not self.config.always_generate_report:
                raise self.store.failures[0]
            self._display(report)

        return report

    def _display(self, report: AuditReport) -> None:
        if "console" in self.config.formats:
            RichFormatter().render(report)

    def _log_summary(self, report: AuditReport) -> None:
        s = report.summary
        m = report.metadata
        logger.info(
            f"Audit complete in {m.duration_ms / 1000:.2f}s: score {s.overall_score}/100, "
            f"tests {s.passed_tests}/{s.total_tests} passed, "
            f"{s.critical_issues} critical issues, {s.warning_count} warnings"
        )
        logger.info(
            f"Categories: {m.passed_categories} passed, {m.warning_categories} warning, "
            f"{m.failed_categories} failed; {len(report.recommendations)} recommendations"
        )

    def is_acceptable(self, report: AuditReport) -> bool:
        """Whether a full run should exit successfully."""
        return (
            report.summary.overall_score >= self.config.scoring.acceptable_score
            and report.summary.critical_issues == 0
        )

    # ── Persisted reports ──────────────────────────────────────────

    def get_latest_report(self) -> Optional[AuditReport]:
        return self.store.latest()

    def generate_report_only(self) -> AuditReport:
        """
        Re-render the most recent persisted report without scanning.

        Raises:
            ReportNotFoundError: If no report has been persisted yet
        """
        report = self.store.require_latest()
        logger.info(f"Loaded report {report.id} from {report.timestamp.isoformat()}")
        self._display(report)
        return report

    def load_reports(self, paths: Iterable[Path]) -> List[AuditReport]:
        """Load persisted reports, skipping any that cannot be read."""
        reports = []
        for path in paths:
            try:
                reports.append(self.store.load(Path(path)))
            except (OSError, ValueError, KeyError) as e:
                logger.warning(f"Skipping unreadable report {path}: {e}")
        return reports

    @staticmethod
    def compare_reports(old: AuditReport, new: AuditReport) -> ReportComparison:
        """Deltas are ``new - old``; only categories present in both are classified."""
        old_scores = {c.category: c.score for c in old.categories}
        improved: List[str] = []
        regressed: List[str] = []
        for cat in new.categories:
            before = old_scores.get(cat.category)
            if before is None:
                continue
            if cat.score > before:
                improved.append(cat.category)
            elif cat.score < before:
                regressed.append(cat.category)

        return ReportComparison(
            score_delta=new.summary.overall_score - old.summary.overall_score,
            tests_delta=new.summary.passed_tests - old.summary.passed_tests,
            issues_delta=new.summary.critical_issues - old.summary.critical_issues,
            improved=improved,
            regressed=regressed,
        )
