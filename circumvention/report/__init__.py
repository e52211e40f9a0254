"""Monitor results and the reports built from them."""

from circumvention.report.markdown import render_markdown
from circumvention.report.results import (
    NegativeOutcome,
    PositiveMatch,
    ResultCounts,
    ResultSet,
    SystemResults,
)
from circumvention.report.rules import build_rule, synthesize_rules

__all__ = [
    "NegativeOutcome",
    "PositiveMatch",
    "ResultCounts",
    "ResultSet",
    "SystemResults",
    "render_markdown",
    "build_rule",
    "synthesize_rules",
]
