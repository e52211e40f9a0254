"""Markdown report generation."""

from typing import List

from circumvention.report.results import ResultSet

REPORT_TITLE = "# Circumvention report"


def _table(title: str, headers: List[str], rows: List[List[str]]) -> List[str]:
    lines = [
        f"#### {title}",
        "",
        "| " + " | ".join(headers) + " |",
        "| " + " | ".join("---" for _ in headers) + " |",
    ]
    for row in rows:
        lines.append("| " + " | ".join(row) + " |")
    lines.append("")
    return lines


def render_markdown(results: ResultSet) -> str:
    """Render a result set as a Markdown report.

    Systems appear in the order they were first recorded. A table is only
    emitted for a non-empty result category.
    """
    lines = [REPORT_TITLE, ""]

    for name, system in results.items():
        lines.append(f"### {name}")
        lines.append("")

        if system.positives:
            lines.extend(_table(
                "Positive matches",
                ["Page", "URL"],
                [[m.page_url, m.matched_url] for m in system.positives],
            ))

        if system.negatives:
            lines.extend(_table(
                "Negative matches",
                ["Page", "Reason"],
                [[o.page_url, o.reason.value] for o in system.negatives],
            ))

    return "\n".join(lines) + "\n"
