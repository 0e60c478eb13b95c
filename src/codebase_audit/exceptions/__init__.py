"""Exception hierarchy for Codebase Audit."""

from .analysis import AnalysisError, CategoryExecutionError, FileAccessError
from .base import CodebaseAuditError
from .config import ConfigurationError, InvalidConfigError, UnknownCategoryError
from .report import ReportError, ReportNotFoundError, ReportPersistenceError

__all__ = [
    "CodebaseAuditError",
    "AnalysisError",
    "FileAccessError",
    "CategoryExecutionError",
    "ConfigurationError",
    "InvalidConfigError",
    "UnknownCategoryError",
    "ReportError",
    "ReportPersistenceError",
    "ReportNotFoundError",
]
