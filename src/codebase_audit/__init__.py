"""
Codebase Audit - static audit engine for React-style front-end projects.

Scans a project's sources, classifies components, maps where each one is
used and rolls the findings of every audit category into one scored,
prioritised report. Pattern matching only: the audited code is never
parsed into a syntax tree or executed.
"""

__version__ = "1.0.0"

from .audit import AuditManager, CategoryRegistry, ReportStore, default_registry
from .config import AuditConfig, load_config
from .models import AuditReport, CategoryReport, ComponentRecord, Issue, Recommendation, TestResult

__all__ = [
    "AuditManager",  # Main entry point
    "AuditConfig",
    "load_config",
    "CategoryRegistry",
    "default_registry",
    "ReportStore",
    "AuditReport",
    "CategoryReport",
    "ComponentRecord",
    "Issue",
    "Recommendation",
    "TestResult",
]
