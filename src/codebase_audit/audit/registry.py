"""Category registry: the single source of truth for what an audit run covers.

Adding a real category requires:
1. Write a zero-argument handler returning a ``CategoryReport``.
2. Register it in ``default_registry`` (replacing its placeholder).
The manager, summary and renderers pick it up automatically.
"""

from collections.abc import Callable, Iterator
from functools import partial
from typing import Optional

from ..analysis import ComponentAnalyzer, PageValidator
from ..config import AuditConfig
from ..exceptions import UnknownCategoryError
from ..models import CategoryReport
from ..scoring import placeholder_report, score_components, score_pages

CategoryHandler = Callable[[], CategoryReport]

AUDIT_CATEGORIES: tuple[str, ...] = (
    "core-features",
    "organization",
    "search",
    "collaboration",
    "offline",
    "ai",
    "mobile",
    "export",
    "media",
    "settings",
    "templates",
    "versions",
    "performance",
    "accessibility",
    "database",
    "errors",
    "components",
    "pages",
    "i18n",
    "security",
)


class CategoryRegistry:
    """Ordered ``category -> handler`` mapping. Iteration follows registration order."""

    def __init__(self) -> None:
        self._handlers: dict[str, CategoryHandler] = {}

    def register(self, category: str, handler: CategoryHandler) -> None:
        """Register ``handler``; re-registering keeps the original position."""
        self._handlers[category] = handler

    def unregister(self, category: str) -> None:
        self._handlers.pop(category, None)

    def get(self, category: str) -> CategoryHandler:
        try:
            return self._handlers[category]
        except KeyError:
            raise UnknownCategoryError(category, self.categories()) from None

    def categories(self) -> list[str]:
        return list(self._handlers)

    def __contains__(self, category: object) -> bool:
        return category in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._handlers))


# ── Built-in handlers ──────────────────────────────────────────────


def audit_components(config: AuditConfig) -> CategoryReport:
    _, inventory = ComponentAnalyzer(config.base_dir, config.scan).analyze()
    return score_components(inventory, config.scoring)


def audit_pages(config: AuditConfig) -> CategoryReport:
    result = PageValidator(config.base_dir, config.pages).validate_pages()
    return score_pages(result, config.scoring)


def default_registry(config: Optional[AuditConfig] = None) -> CategoryRegistry:
    """Every known category: real handlers for components and pages, placeholders elsewhere."""
    config = config or AuditConfig()
    registry = CategoryRegistry()
    for category in AUDIT_CATEGORIES:
        registry.register(category, partial(placeholder_report, category))
    registry.register("components", partial(audit_components, config))
    registry.register("pages", partial(audit_pages, config))
    return registry
