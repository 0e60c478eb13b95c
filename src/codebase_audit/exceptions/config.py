"""Configuration exceptions: invalid settings and unknown categories."""

from typing import Any, Iterable

from .base import CodebaseAuditError


class ConfigurationError(CodebaseAuditError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class UnknownCategoryError(ConfigurationError):
    """Raised when an audit is requested for a category with no handler."""

    def __init__(self, category: str, known: Iterable[str] = ()):
        known = list(known)
        super().__init__(
            f"No handler registered for category: {category}",
            details={"category": category, "known": ", ".join(known)},
        )
        self.category = category
        self.known = known
