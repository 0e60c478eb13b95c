"""JSON formatter for audit reports."""

import json

from ..models import AuditReport
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the report as JSON (snake_case keys, ISO timestamp)."""

    extension = "json"

    def render(self, report: AuditReport) -> None:
        print(self.format(report))

    def format(self, report: AuditReport) -> str:
        return json.dumps(report.to_dict(), indent=2)
