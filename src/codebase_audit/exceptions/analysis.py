"""Analysis-related exceptions: file access and category execution."""

from pathlib import Path

from .base import CodebaseAuditError


class AnalysisError(CodebaseAuditError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a file or directory cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class CategoryExecutionError(AnalysisError):
    """Raised by a category handler that cannot complete its checks."""

    def __init__(self, category: str, reason: str):
        super().__init__(
            f"Audit of category '{category}' failed: {reason}",
            details={"category": category},
        )
        self.category = category
        self.reason = reason
