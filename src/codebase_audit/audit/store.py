"""Persistence of audit reports as timestamped artifacts."""

import json
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from ..exceptions import FileAccessError, ReportNotFoundError, ReportPersistenceError
from ..file_ops import safe_write_file
from ..formatters import get_formatter
from ..logging_config import get_logger
from ..models import AuditReport, format_timestamp

logger = get_logger(__name__)

REPORT_PREFIX = "audit-report-"


def timestamp_slug(ts: datetime) -> str:
    """``2024-05-01T12:30:45.123Z`` -> ``2024-05-01T12-30-45-123Z``."""
    return format_timestamp(ts).replace(":", "-").replace(".", "-")


def report_filename(report: AuditReport, ext: str) -> str:
    return f"{REPORT_PREFIX}{timestamp_slug(report.timestamp)}.{ext}"


class ReportStore:
    """Reads and writes report artifacts under one output directory."""

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)
        self.failures: List[ReportPersistenceError] = []

    def save(self, report: AuditReport, formats: Iterable[str]) -> Dict[str, Path]:
        """
        Write one artifact per file-backed format.

        A format that fails to render or write is logged and recorded in
        ``failures``; the remaining formats are still written. Console-only
        formats are ignored here.

        Returns:
            Mapping of format -> written path
        """
        self.failures = []
        written: Dict[str, Path] = {}

        for fmt in formats:
            formatter = get_formatter(fmt)
            if formatter.extension is None:
                continue

            path = self.output_dir / report_filename(report, formatter.extension)
            try:
                safe_write_file(path, formatter.format(report))
            except FileAccessError as e:
                self._record_failure(fmt, path, e.reason)
                continue
            except Exception as e:
                logger.debug("Formatter traceback", exc_info=True)
                self._record_failure(fmt, path, f"{type(e).__name__}: {e}")
                continue

            logger.info(f"Saved {fmt} report: {path}")
            written[fmt] = path

        return written

    def _record_failure(self, fmt: str, path: Path, reason: str) -> None:
        logger.error(f"Failed to save {fmt} report: {reason}")
        self.failures.append(ReportPersistenceError(fmt, path, reason))

    def report_paths(self) -> List[Path]:
        """JSON artifacts, oldest first (timestamped names sort chronologically)."""
        if not self.output_dir.is_dir():
            return []
        return sorted(self.output_dir.glob(f"{REPORT_PREFIX}*.json"), key=lambda p: p.name)

    def latest_path(self) -> Optional[Path]:
        paths = self.report_paths()
        return paths[-1] if paths else None

    def load(self, path: Path) -> AuditReport:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return AuditReport.from_dict(data)

    def latest(self) -> Optional[AuditReport]:
        """Most recent persisted report, or ``None`` when there is none or it is unreadable."""
        path = self.latest_path()
        if path is None:
            return None
        try:
            return self.load(path)
        except (OSError, ValueError, KeyError) as e:
            logger.warning(f"Could not load latest report {path}: {e}")
            return None

    def require_latest(self) -> AuditReport:
        report = self.latest()
        if report is None:
            raise ReportNotFoundError(self.output_dir)
        return report
