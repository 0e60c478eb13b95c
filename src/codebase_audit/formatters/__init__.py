"""Output formatters for audit reports."""

from .base import BaseFormatter
from .html_formatter import HtmlFormatter
from .json_formatter import JsonFormatter
from .rich_formatter import RichFormatter


def get_formatter(name: str) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "json", "html", "console"

    Returns:
        Formatter instance

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "json": JsonFormatter,
        "html": HtmlFormatter,
        "console": RichFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}")
    return cls()


__all__ = [
    "BaseFormatter",
    "HtmlFormatter",
    "JsonFormatter",
    "RichFormatter",
    "get_formatter",
]
