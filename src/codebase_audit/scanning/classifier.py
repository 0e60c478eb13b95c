"""Source classification: turn discovered files into ComponentRecords."""

from pathlib import Path, PurePosixPath
from typing import Iterable, Optional

from ..config import ScanConfig
from ..exceptions import FileAccessError
from ..file_ops import file_exists, safe_read_file
from ..logging_config import get_logger
from ..models import ComponentRecord, SourceFile
from . import heuristics

logger = get_logger(__name__)


def read_sources(paths: Iterable[Path], base_path: Path) -> list[SourceFile]:
    """
    Read every file once for a scan pass.

    Unreadable files are logged and left out; they never abort the scan.

    Args:
        paths: Absolute file paths from the discoverer
        base_path: Project root used to derive relative paths

    Returns:
        SourceFile records in input order
    """
    base_path = Path(base_path).resolve()
    sources: list[SourceFile] = []
    for path in paths:
        try:
            content = safe_read_file(path)
        except FileAccessError as e:
            logger.warning(f"Could not read {path}: {e.reason}")
            continue
        sources.append(SourceFile(path=_relative(path, base_path), content=content))
    return sources


def _relative(path: Path, base_path: Path) -> str:
    try:
        return Path(path).resolve().relative_to(base_path).as_posix()
    except ValueError:
        return Path(path).as_posix()


class SourceClassifier:
    """Decide which sources are components and extract their metadata."""

    def __init__(
        self,
        base_path: Path,
        extensions: Iterable[str] = (".ts", ".tsx", ".js", ".jsx"),
        framework_modules: Iterable[str] = ("react",),
    ):
        self.base_path = Path(base_path).resolve()
        self.extensions = list(extensions)
        self.framework_modules = tuple(framework_modules)

    @classmethod
    def from_config(cls, base_path: Path, scan: ScanConfig) -> "SourceClassifier":
        return cls(base_path, scan.extensions, scan.framework_modules)

    def classify(self, sources: Iterable[SourceFile]) -> list[ComponentRecord]:
        components = []
        for source in sources:
            record = self.classify_source(source)
            if record is not None:
                components.append(record)
        logger.info(f"Classified {len(components)} components")
        return components

    def classify_source(self, source: SourceFile) -> Optional[ComponentRecord]:
        """Return a ComponentRecord, or None if the source is not a component."""
        content = source.content
        if not heuristics.is_component_source(content, self.framework_modules):
            return None

        return ComponentRecord(
            name=heuristics.derive_component_name(source.path),
            path=source.path,
            exports=heuristics.extract_exports(content),
            imports=heuristics.extract_imports(content),
            has_tests=self.has_test_file(source.path),
            has_docs=heuristics.has_block_doc(content),
            has_description=heuristics.has_description_tag(content),
            role=self.role_of(source),
        )

    def role_of(self, source: SourceFile) -> str:
        role = heuristics.classify_path_role(source.path)
        if role != "component":
            return role
        if heuristics.looks_like_hook(source.content, source.path):
            return "hook"
        if heuristics.looks_like_utility(source.content, source.path):
            return "util"
        return role

    def test_file_candidates(self, rel_path: str) -> list[Path]:
        """Sibling and ``__tests__`` locations a test for ``rel_path`` may live at."""
        posix = PurePosixPath(rel_path)
        directory = self.base_path / posix.parent
        stem = posix.name.rsplit(".", 1)[0]

        candidates = []
        for ext in self.extensions:
            candidates.append(directory / f"{stem}.test{ext}")
            candidates.append(directory / f"{stem}.spec{ext}")
            candidates.append(directory / "__tests__" / f"{stem}.test{ext}")
        return candidates

    def has_test_file(self, rel_path: str) -> bool:
        return any(file_exists(p) for p in self.test_file_candidates(rel_path))
