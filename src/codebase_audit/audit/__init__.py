"""Audit orchestration, category registry and report persistence."""

from .manager import AuditManager
from .registry import AUDIT_CATEGORIES, CategoryRegistry, default_registry
from .store import ReportStore, report_filename, timestamp_slug

__all__ = [
    "AUDIT_CATEGORIES",
    "AuditManager",
    "CategoryRegistry",
    "ReportStore",
    "default_registry",
    "report_filename",
    "timestamp_slug",
]
