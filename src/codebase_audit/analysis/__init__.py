"""Category analyses over a scanned project."""

from .components import ComponentAnalyzer, ComponentInventory, build_inventory
from .pages import PageInfo, PageValidationResult, PageValidator, page_exports

__all__ = [
    "ComponentAnalyzer",
    "ComponentInventory",
    "PageInfo",
    "PageValidationResult",
    "PageValidator",
    "build_inventory",
    "page_exports",
]
