"""Usage analysis: find the files that reference each component.

Every component is tested against every scanned file, so cost grows with
components x files. That is fine for a single project and is the known
scaling limit for monorepo-sized trees.
"""

import re
from typing import Iterable

from ..logging_config import get_logger
from ..models import ComponentRecord, SourceFile

logger = get_logger(__name__)


def import_pattern(name: str) -> "re.Pattern[str]":
    """``import { ..Name.. } from`` or ``import Name from``."""
    n = re.escape(name)
    return re.compile(rf"import\s+(?:\{{[^}}]*\b{n}\b[^}}]*\}}|{n})\s+from")


def markup_pattern(name: str) -> "re.Pattern[str]":
    """``<Name`` followed by whitespace, ``/`` or ``>``."""
    return re.compile(rf"<{re.escape(name)}[\s/>]")


class UsageMatcher:
    """Precompiled reference patterns for one component's export names."""

    def __init__(self, component: ComponentRecord):
        self.component = component
        self._patterns = [
            (import_pattern(name), markup_pattern(name)) for name in sorted(component.exports)
        ]

    def is_used_in(self, source: SourceFile) -> bool:
        # A component never counts as used by its own file.
        if source.path == self.component.path:
            return False
        content = source.content
        for imp, tag in self._patterns:
            if imp.search(content) or tag.search(content):
                return True
        return False


def is_component_used_in_file(component: ComponentRecord, source: SourceFile) -> bool:
    return UsageMatcher(component).is_used_in(source)


def analyze_usage(
    components: list[ComponentRecord], sources: Iterable[SourceFile]
) -> list[ComponentRecord]:
    """
    Populate ``used_in`` on every component, in place.

    Args:
        components: Classified components
        sources: Every scanned file, not only components

    Returns:
        The same component list
    """
    matchers = [UsageMatcher(c) for c in components if c.exports]

    for source in sources:
        for matcher in matchers:
            if matcher.is_used_in(source):
                matcher.component.used_in.add(source.path)

    used = sum(1 for c in components if c.is_used)
    logger.info(f"{used} components are used, {len(components) - used} appear unused")
    return components


def find_unused(components: Iterable[ComponentRecord]) -> list[str]:
    return [c.path for c in components if not c.is_used]
