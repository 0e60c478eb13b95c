"""Data models for audit results.

Record levels:
  SourceFile        raw text of one scanned file (never persisted)
  ComponentRecord   classified component, mutated while usage is resolved
  TestResult/Issue  findings attached to a category
  CategoryReport    one scored facet of the audit
  AuditReport       the aggregated, persisted result of a run
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional

Severity = Literal["critical", "high", "medium", "low"]
Status = Literal["passed", "warning", "failed"]
Priority = Literal["high", "medium", "low"]
Effort = Literal["small", "medium", "large"]

SEVERITIES = ("critical", "high", "medium", "low")
CRITICAL_SEVERITIES = frozenset({"critical", "high"})
WARNING_SEVERITIES = frozenset({"medium", "low"})

# Lower rank sorts first.
PRIORITY_RANK = {"high": 0, "medium": 1, "low": 2}


# ── Scanning ───────────────────────────────────────────────────────


@dataclass
class SourceFile:
    """Raw text of a scanned file; ``path`` is relative to the project root."""

    path: str
    content: str


@dataclass
class ComponentRecord:
    """A file classified as a UI component.

    ``used_in`` is filled by the usage scan and never contains ``path``.
    """

    name: str
    path: str
    exports: set[str] = field(default_factory=set)
    imports: list[str] = field(default_factory=list)
    used_in: set[str] = field(default_factory=set)
    has_tests: bool = False
    has_docs: bool = False
    has_description: bool = False
    role: str = "component"

    @property
    def is_used(self) -> bool:
        return bool(self.used_in)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "path": self.path,
            "exports": sorted(self.exports),
            "imports": list(self.imports),
            "used_in": sorted(self.used_in),
            "has_tests": self.has_tests,
            "has_docs": self.has_docs,
            "has_description": self.has_description,
            "role": self.role,
        }


# ── Category results ───────────────────────────────────────────────


@dataclass
class TestResult:
    """Outcome of one assertion-like check."""

    __test__ = False  # not a pytest class

    passed: bool
    test_name: str
    category: str = ""
    duration: float = 0.0  # milliseconds
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "passed": self.passed,
            "test_name": self.test_name,
            "category": self.category,
            "duration": self.duration,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TestResult":
        return cls(
            passed=bool(data["passed"]),
            test_name=data["test_name"],
            category=data.get("category", ""),
            duration=float(data.get("duration", 0.0)),
            errors=list(data.get("errors") or []),
            warnings=list(data.get("warnings") or []),
        )


@dataclass
class Issue:
    """A severity-tagged finding."""

    severity: Severity
    category: str
    title: str
    description: str
    location: Optional[str] = None
    suggestion: Optional[str] = None

    @property
    def is_critical(self) -> bool:
        return self.severity in CRITICAL_SEVERITIES

    def to_dict(self) -> Dict[str, Any]:
        return {
            "severity": self.severity,
            "category": self.category,
            "title": self.title,
            "description": self.description,
            "location": self.location,
            "suggestion": self.suggestion,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Issue":
        return cls(
            severity=data["severity"],
            category=data["category"],
            title=data["title"],
            description=data["description"],
            location=data.get("location"),
            suggestion=data.get("suggestion"),
        )


@dataclass
class CategoryReport:
    """Score, status and findings for one audit category."""

    category: str
    status: Status
    score: int
    tests: List[TestResult] = field(default_factory=list)
    issues: List[Issue] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)

    @property
    def passed_tests(self) -> int:
        return sum(1 for t in self.tests if t.passed)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category,
            "status": self.status,
            "score": self.score,
            "tests": [t.to_dict() for t in self.tests],
            "issues": [i.to_dict() for i in self.issues],
            "recommendations": list(self.recommendations),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CategoryReport":
        return cls(
            category=data["category"],
            status=data["status"],
            score=int(data["score"]),
            tests=[TestResult.from_dict(t) for t in data.get("tests", [])],
            issues=[Issue.from_dict(i) for i in data.get("issues", [])],
            recommendations=list(data.get("recommendations", [])),
        )


@dataclass
class Recommendation:
    """A prioritised suggestion derived from a category's recommendations."""

    priority: Priority
    category: str
    title: str
    description: str
    effort: Effort
    impact: Priority

    def to_dict(self) -> Dict[str, Any]:
        return {
            "priority": self.priority,
            "category": self.category,
            "title": self.title,
            "description": self.description,
            "effort": self.effort,
            "impact": self.impact,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Recommendation":
        return cls(**{k: data[k] for k in ("priority", "category", "title", "description", "effort", "impact")})


# ── Aggregated report ──────────────────────────────────────────────


@dataclass
class AuditSummary:
    total_tests: int = 0
    passed_tests: int = 0
    failed_tests: int = 0
    warning_count: int = 0
    overall_score: int = 0
    critical_issues: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_tests": self.total_tests,
            "passed_tests": self.passed_tests,
            "failed_tests": self.failed_tests,
            "warning_count": self.warning_count,
            "overall_score": self.overall_score,
            "critical_issues": self.critical_issues,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AuditSummary":
        return cls(**{k: int(data.get(k, 0)) for k in cls.__dataclass_fields__})


@dataclass
class AuditMetadata:
    duration_ms: float = 0.0
    environment: str = "development"
    python_version: Optional[str] = None
    platform: Optional[str] = None
    base_path: Optional[str] = None
    total_categories: int = 0
    passed_categories: int = 0
    failed_categories: int = 0
    warning_categories: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.__dataclass_fields__}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AuditMetadata":
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})


@dataclass
class AuditReport:
    """The aggregated result of one audit run. Not mutated after creation."""

    id: str
    timestamp: datetime
    version: str
    summary: AuditSummary
    categories: List[CategoryReport] = field(default_factory=list)
    recommendations: List[Recommendation] = field(default_factory=list)
    metadata: AuditMetadata = field(default_factory=AuditMetadata)

    def category(self, name: str) -> Optional[CategoryReport]:
        for report in self.categories:
            if report.category == name:
                return report
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": format_timestamp(self.timestamp),
            "version": self.version,
            "summary": self.summary.to_dict(),
            "categories": [c.to_dict() for c in self.categories],
            "recommendations": [r.to_dict() for r in self.recommendations],
            "metadata": self.metadata.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AuditReport":
        return cls(
            id=data["id"],
            timestamp=parse_timestamp(data["timestamp"]),
            version=data.get("version", ""),
            summary=AuditSummary.from_dict(data.get("summary", {})),
            categories=[CategoryReport.from_dict(c) for c in data.get("categories", [])],
            recommendations=[Recommendation.from_dict(r) for r in data.get("recommendations", [])],
            metadata=AuditMetadata.from_dict(data.get("metadata", {})),
        )


@dataclass
class ReportComparison:
    """Differences between two audit runs (new minus old)."""

    score_delta: int
    tests_delta: int
    issues_delta: int
    improved: List[str] = field(default_factory=list)
    regressed: List[str] = field(default_factory=list)


def format_timestamp(ts: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a ``Z`` suffix."""
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    ts = ts.astimezone(timezone.utc)
    return ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)
