"""Report exceptions: persistence and lookup of audit artifacts."""

from pathlib import Path

from .base import CodebaseAuditError


class ReportError(CodebaseAuditError):
    """Base class for report-related errors."""

    pass


class ReportPersistenceError(ReportError):
    """Raised when a report cannot be written in a given format."""

    def __init__(self, fmt: str, path: Path, reason: str):
        super().__init__(
            f"Failed to write {fmt} report: {path}",
            details={"format": fmt, "path": str(path), "reason": reason},
        )
        self.fmt = fmt
        self.path = path
        self.reason = reason


class ReportNotFoundError(ReportError):
    """Raised when no previously persisted report can be found."""

    def __init__(self, output_dir: Path):
        super().__init__(
            "No previous audit results found",
            details={"output_dir": str(output_dir)},
        )
        self.output_dir = output_dir
