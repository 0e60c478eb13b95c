"""Base formatter interface for audit report rendering."""

from abc import ABC, abstractmethod

from ..models import AuditReport


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    #: File extension for persisted artifacts; ``None`` for console-only output.
    extension: "str | None" = None

    @abstractmethod
    def render(self, report: AuditReport) -> None:
        """Render the report to the terminal."""

    @abstractmethod
    def format(self, report: AuditReport) -> str:
        """Return formatted string representation of the report."""
