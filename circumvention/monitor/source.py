"""Page sources feeding the monitor with observed responses."""

from pathlib import Path
from typing import Dict, List, Protocol, Union

import yaml
from pydantic import BaseModel, Field

from circumvention.exceptions import PageUnavailable
from circumvention.monitor.events import PageVisit


class PageSource(Protocol):
    """Loads a page and reports every network response it triggered.

    Raises PageUnavailable when the page itself cannot be loaded.
    """

    async def visit(self, page_url: str) -> PageVisit:
        ...


class PageCapture(BaseModel):
    """On-disk format of recorded page visits."""

    pages: List[PageVisit] = Field(default_factory=list)


class RecordedPageSource:
    """Replays page visits recorded by a crawler."""

    def __init__(self, visits: List[PageVisit]):
        self._visits: Dict[str, PageVisit] = {}
        for visit in visits:
            self._visits[visit.page_url] = visit

    async def visit(self, page_url: str) -> PageVisit:
        visit = self._visits.get(page_url)
        if visit is None:
            raise PageUnavailable(page_url, "no recorded visit")
        if visit.error:
            raise PageUnavailable(page_url, visit.error)
        return visit

    def __len__(self) -> int:
        return len(self._visits)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "RecordedPageSource":
        """Load recorded visits from a YAML (or JSON) capture file."""
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls(PageCapture(**data).pages)
