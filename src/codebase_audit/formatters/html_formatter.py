"""Self-contained HTML page for an audit report.

No external assets: styles are inline so the file can be opened from any
local path. Every piece of report text is HTML-escaped.
"""

from html import escape

from ..models import AuditReport, CategoryReport, Recommendation, format_timestamp
from ..scoring.metrics import format_duration
from .base import BaseFormatter

_STATUS_CLASS = {"passed": "ok", "warning": "warn", "failed": "bad"}


def _score_class(score: int) -> str:
    if score >= 80:
        return "ok"
    if score >= 60:
        return "warn"
    return "bad"


def _category_section(cat: CategoryReport) -> str:
    tests = "".join(
        f'<li class="{"ok" if t.passed else "bad"}">'
        f'{"&#10003;" if t.passed else "&#10007;"} {escape(t.test_name)}</li>'
        for t in cat.tests
    )
    issues = "".join(
        f'<li><span class="sev sev-{escape(i.severity)}">{escape(i.severity)}</span> '
        f"<strong>{escape(i.title)}</strong>: {escape(i.description)}"
        + (f'<div class="hint">&rarr; {escape(i.suggestion)}</div>' if i.suggestion else "")
        + "</li>"
        for i in cat.issues
    )
    return f"""
<section class="category">
  <h3>{escape(cat.category)}
    <span class="badge {_STATUS_CLASS.get(cat.status, "warn")}">{escape(cat.status)}</span>
    <span class="score {_score_class(cat.score)}">{cat.score}/100</span>
  </h3>
  {f"<ul class='tests'>{tests}</ul>" if tests else ""}
  {f"<ul class='issues'>{issues}</ul>" if issues else ""}
</section>"""


def _recommendation_row(rec: Recommendation) -> str:
    return (
        f"<tr><td>{escape(rec.priority)}</td><td>{escape(rec.category)}</td>"
        f"<td>{escape(rec.title)}</td><td>{escape(rec.effort)}</td>"
        f"<td>{escape(rec.impact)}</td></tr>"
    )


class HtmlFormatter(BaseFormatter):
    """Render the report as a standalone HTML document."""

    extension = "html"

    def render(self, report: AuditReport) -> None:
        print(self.format(report))

    def format(self, report: AuditReport) -> str:
        summary = report.summary
        meta = report.metadata
        categories = "".join(_category_section(c) for c in report.categories)
        rows = "".join(_recommendation_row(r) for r in report.recommendations)
        recommendations = (
            "<table><thead><tr><th>Priority</th><th>Category</th><th>Recommendation</th>"
            f"<th>Effort</th><th>Impact</th></tr></thead><tbody>{rows}</tbody></table>"
            if rows
            else "<p>No recommendations.</p>"
        )

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Audit Report {escape(report.id)}</title>
<style>
  body {{ font-family: -apple-system, "Segoe UI", sans-serif; margin: 2rem; color: #222; }}
  .cards {{ display: flex; gap: 1rem; flex-wrap: wrap; }}
  .card {{ border: 1px solid #ddd; border-radius: 6px; padding: 0.8rem 1.2rem; min-width: 8rem; }}
  .card .value {{ font-size: 1.6rem; font-weight: bold; }}
  .ok {{ color: #1a7f37; }} .warn {{ color: #9a6700; }} .bad {{ color: #cf222e; }}
  .badge {{ font-size: 0.75rem; border: 1px solid currentColor; border-radius: 4px; padding: 0 0.4rem; }}
  .score {{ float: right; }}
  .category {{ border-top: 1px solid #eee; padding: 0.5rem 0; }}
  .sev {{ font-size: 0.75rem; text-transform: uppercase; padding: 0 0.3rem; border-radius: 3px; background: #eee; }}
  .sev-critical, .sev-high {{ background: #ffebe9; color: #cf222e; }}
  .sev-medium {{ background: #fff8c5; color: #9a6700; }}
  .hint {{ color: #666; font-size: 0.9rem; }}
  table {{ border-collapse: collapse; width: 100%; }}
  th, td {{ text-align: left; padding: 0.3rem 0.6rem; border-bottom: 1px solid #eee; }}
</style>
</head>
<body>
<h1>Codebase Audit Report</h1>
<p>{escape(format_timestamp(report.timestamp))} &middot; {escape(meta.environment)}
 &middot; {escape(format_duration(meta.duration_ms))} &middot; v{escape(report.version)}</p>

<div class="cards">
  <div class="card"><div>Overall score</div>
    <div class="value {_score_class(summary.overall_score)}">{summary.overall_score}/100</div></div>
  <div class="card"><div>Tests passed</div>
    <div class="value">{summary.passed_tests}/{summary.total_tests}</div></div>
  <div class="card"><div>Critical issues</div>
    <div class="value bad">{summary.critical_issues}</div></div>
  <div class="card"><div>Warnings</div>
    <div class="value warn">{summary.warning_count}</div></div>
  <div class="card"><div>Categories</div>
    <div class="value">{meta.passed_categories}/{meta.total_categories} passed</div></div>
</div>

<h2>Categories</h2>
{categories}

<h2>Recommendations</h2>
{recommendations}
</body>
</html>
"""
