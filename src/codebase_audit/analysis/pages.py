"""Page validation: expected routes resolve to page files with a default export."""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..config import PageConfig
from ..exceptions import FileAccessError
from ..file_ops import safe_read_file
from ..logging_config import get_logger
from ..models import Issue

logger = get_logger(__name__)

_DEFAULT_EXPORT_RE = re.compile(r"export\s+default\b")
_NAMED_EXPORT_RE = re.compile(r"export\s+(?:async\s+)?(?:const|function|class)\s+(\w+)")

# Files the router picks up from the same directory as a page.
_SIBLINGS = ("layout", "loading", "error")


@dataclass
class PageInfo:
    route: str
    file_path: str
    exists: bool = False
    is_accessible: bool = False
    has_layout: bool = False
    has_loading: bool = False
    has_error: bool = False
    exports: List[str] = field(default_factory=list)


@dataclass
class PageValidationResult:
    total_pages: int
    existing_pages: int
    missing_pages: List[str] = field(default_factory=list)
    inaccessible_pages: List[str] = field(default_factory=list)
    pages: List[PageInfo] = field(default_factory=list)
    issues: List[Issue] = field(default_factory=list)


def page_exports(content: str) -> List[str]:
    """``default`` when there is a default export, then named exports in order."""
    exports = ["default"] if _DEFAULT_EXPORT_RE.search(content) else []
    exports.extend(m.group(1) for m in _NAMED_EXPORT_RE.finditer(content))
    return exports


class PageValidator:
    """Checks each expected route of a file-system router."""

    def __init__(self, base_path: Path, pages: Optional[PageConfig] = None):
        self.base_path = Path(base_path).resolve()
        self.config = pages or PageConfig()
        self.app_dir = self.base_path / self.config.app_dir

    def page_path(self, route: str) -> Path:
        """``/`` -> ``<app_dir>/page.tsx``, ``/a/b`` -> ``<app_dir>/a/b/page.tsx``."""
        parts = [p for p in route.strip("/").split("/") if p]
        return self.app_dir.joinpath(*parts, self.config.page_filename)

    def _display_path(self, path: Path) -> str:
        try:
            return path.relative_to(self.base_path).as_posix()
        except ValueError:
            return path.as_posix()

    def validate_page(self, route: str) -> PageInfo:
        path = self.page_path(route)
        info = PageInfo(route=route, file_path=self._display_path(path))
        if not path.is_file():
            return info

        info.exists = True
        try:
            content = safe_read_file(path)
        except FileAccessError as e:
            logger.warning(f"Skipping unreadable page {path}: {e.reason}")
            return info

        info.exports = page_exports(content)
        info.is_accessible = "default" in info.exports

        suffix = Path(self.config.page_filename).suffix
        found = {name: (path.parent / f"{name}{suffix}").is_file() for name in _SIBLINGS}
        info.has_layout = found["layout"]
        info.has_loading = found["loading"]
        info.has_error = found["error"]
        return info

    def validate_pages(self) -> PageValidationResult:
        pages: List[PageInfo] = []
        missing: List[str] = []
        inaccessible: List[str] = []
        issues: List[Issue] = []

        for route in self.config.expected_routes:
            info = self.validate_page(route)
            pages.append(info)

            if not info.exists:
                missing.append(route)
                issues.append(
                    Issue(
                        severity="high",
                        category="pages",
                        title=f"Missing page: {route}",
                        description=f"Expected page file not found for route {route}",
                        location=info.file_path,
                        suggestion=f"Create {self.config.page_filename} at {info.file_path}",
                    )
                )
            elif not info.is_accessible:
                inaccessible.append(route)
                issues.append(
                    Issue(
                        severity="medium",
                        category="pages",
                        title=f"Inaccessible page: {route}",
                        description=f"Page {route} has no default export",
                        location=info.file_path,
                        suggestion="Ensure page is properly exported and has no blocking errors",
                    )
                )
            else:
                logger.debug(f"Page {route} ok ({info.file_path})")

        logger.info(
            f"Validated {len(pages)} routes: {len(missing)} missing, {len(inaccessible)} inaccessible"
        )
        return PageValidationResult(
            total_pages=len(pages),
            existing_pages=sum(1 for p in pages if p.exists),
            missing_pages=missing,
            inaccessible_pages=inaccessible,
            pages=pages,
            issues=issues,
        )
