"""File discovery: walk scan roots and apply extension / exclusion filters."""

import os
import re
from pathlib import Path
from typing import Iterable

from ..config import ScanConfig
from ..logging_config import get_logger

logger = get_logger(__name__)


def glob_to_regex(pattern: str) -> "re.Pattern[str]":
    """Compile a glob into a regex matched against whole POSIX paths.

    ``**`` spans any number of segments (a leading ``**/`` also matches none),
    ``*`` stays inside one segment and ``?`` is a single non-separator char.
    """
    parts: list[str] = []
    i = 0
    while i < len(pattern):
        if pattern.startswith("**/", i):
            parts.append("(?:.*/)?")
            i += 3
        elif pattern.startswith("**", i):
            parts.append(".*")
            i += 2
        elif pattern[i] == "*":
            parts.append("[^/]*")
            i += 1
        elif pattern[i] == "?":
            parts.append("[^/]")
            i += 1
        else:
            parts.append(re.escape(pattern[i]))
            i += 1
    return re.compile("".join(parts))


class ExclusionMatcher:
    """Match relative POSIX paths against a set of exclusion globs.

    Patterns without a ``/`` also match a bare file or directory name at any
    depth, so ``*.min.js`` behaves like ``**/*.min.js``.
    """

    def __init__(self, patterns: Iterable[str]):
        self.patterns = list(patterns)
        self._compiled = [(p, glob_to_regex(p)) for p in self.patterns]

    def matches(self, rel_path: str, is_dir: bool = False) -> bool:
        rel_path = rel_path.replace("\\", "/").strip("/")
        candidates = [rel_path]
        if is_dir:
            # Lets "dir/**" prune the directory itself.
            candidates.append(rel_path + "/")
        basename = rel_path.rsplit("/", 1)[-1]

        for pattern, regex in self._compiled:
            if any(regex.fullmatch(c) for c in candidates):
                return True
            if "/" not in pattern and regex.fullmatch(basename):
                return True
        return False


class FileDiscoverer:
    """Collect candidate source files under a project's scan roots."""

    def __init__(
        self,
        base_path: Path,
        scan_paths: Iterable[str],
        extensions: Iterable[str],
        exclude_patterns: Iterable[str] = (),
    ):
        self.base_path = Path(base_path).resolve()
        self.scan_paths = list(scan_paths)
        self.extensions = set(extensions)
        self.exclusions = ExclusionMatcher(exclude_patterns)
        self.directories_skipped = 0

    @classmethod
    def from_config(cls, base_path: Path, scan: ScanConfig) -> "FileDiscoverer":
        return cls(base_path, scan.scan_paths, scan.extensions, scan.exclude_patterns)

    def discover(self) -> list[Path]:
        """
        Walk every scan root and return matching files.

        Missing roots are skipped without complaint; unreadable directories
        are logged and skipped.

        Returns:
            Sorted, de-duplicated absolute file paths
        """
        found: set[Path] = set()
        self.directories_skipped = 0

        for scan_path in self.scan_paths:
            root = (self.base_path / scan_path).resolve()
            if not root.is_dir():
                logger.debug(f"Scan root not found, skipping: {root}")
                continue
            found.update(self._walk(root))

        files = sorted(found)
        logger.info(
            f"Discovered {len(files)} files under {len(self.scan_paths)} roots "
            f"({self.directories_skipped} directories unreadable)"
        )
        return files

    def is_excluded(self, path: Path, is_dir: bool = False) -> bool:
        return self.exclusions.matches(self.relative(path), is_dir=is_dir)

    def relative(self, path: Path) -> str:
        """Project-relative POSIX form of ``path``."""
        try:
            return Path(path).resolve().relative_to(self.base_path).as_posix()
        except ValueError:
            return Path(path).as_posix()

    def _walk(self, root: Path) -> list[Path]:
        files: list[Path] = []

        for dirpath, dirnames, filenames in os.walk(root, onerror=self._on_walk_error):
            current = Path(dirpath)

            # Prune excluded directories in place so os.walk never enters them.
            dirnames[:] = sorted(
                d for d in dirnames if not self.is_excluded(current / d, is_dir=True)
            )

            for name in sorted(filenames):
                filepath = current / name
                if filepath.suffix not in self.extensions:
                    continue
                if self.is_excluded(filepath):
                    logger.debug(f"Skipped (pattern): {filepath}")
                    continue
                files.append(filepath)

        return files

    def _on_walk_error(self, error: OSError) -> None:
        self.directories_skipped += 1
        logger.warning(f"Could not read directory {error.filename}: {error.strerror}")


def discover_files(base_path: Path, scan: ScanConfig) -> list[Path]:
    """Convenience wrapper around ``FileDiscoverer`` for a ScanConfig."""
    return FileDiscoverer.from_config(base_path, scan).discover()
