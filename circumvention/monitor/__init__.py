"""Monitor orchestration and the crawler input contract."""

from circumvention.monitor.engine import (
    Monitor,
    PageOutcome,
    evaluate_visit,
    run_monitor,
)
from circumvention.monitor.events import PageVisit, ResponseEvent
from circumvention.monitor.source import PageCapture, PageSource, RecordedPageSource

__all__ = [
    "Monitor",
    "PageOutcome",
    "evaluate_visit",
    "run_monitor",
    "PageVisit",
    "ResponseEvent",
    "PageCapture",
    "PageSource",
    "RecordedPageSource",
]
