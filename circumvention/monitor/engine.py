"""Monitor engine: runs every system's criteria over the pages it is watched on."""

import asyncio
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from circumvention.config import MonitorConfig, NegativeReason, SystemConfig
from circumvention.core.matchers import Matcher, create_matchers, find_match
from circumvention.exceptions import PageUnavailable
from circumvention.monitor.events import PageVisit
from circumvention.monitor.source import PageSource
from circumvention.report.results import ResultSet
from circumvention.utils import logger, sanitize_url


@dataclass
class PageOutcome:
    """What was found on one page, before it is recorded."""

    page_url: str
    matches: List[Tuple[str, Matcher]] = field(default_factory=list)
    unavailable: bool = False

    @property
    def negative_reason(self) -> Optional[NegativeReason]:
        if self.unavailable:
            return NegativeReason.WEBSITE_DOWN
        if not self.matches:
            return NegativeReason.NOT_FOUND
        return None


def evaluate_visit(matchers: List[Matcher], visit: PageVisit) -> List[Tuple[str, Matcher]]:
    """Evaluate every response of a page visit.

    Returns:
        (matched_url, matcher) pairs, one per matching response. Only the
        first matching matcher counts for a response.
    """
    found = []
    for event in visit.responses:
        logger.debug(
            f"{sanitize_url(event.url)} {event.resource_type} content found: {event.body is not None}"
        )
        matcher = find_match(
            matchers,
            event.url,
            visit.source_of(event),
            event.resource_type,
            event.body,
        )
        if matcher is not None:
            found.append((event.url, matcher))
    return found


class Monitor:
    """Runs the configured systems against a page source.

    Pages of one system may be visited concurrently, up to ``parallel`` at a
    time. Results are written only by the task driving the run, after the
    visits complete, in configured page order.
    """

    def __init__(
        self,
        config: MonitorConfig,
        source: PageSource,
        parallel: int = 1,
    ):
        self.config = config
        self.source = source
        self._semaphore = asyncio.Semaphore(max(1, parallel))

    async def check_page(self, matchers: List[Matcher], page_url: str) -> PageOutcome:
        async with self._semaphore:
            logger.info(f"Checking {sanitize_url(page_url)}")
            try:
                visit = await self.source.visit(page_url)
            except PageUnavailable as e:
                logger.warning(f"{sanitize_url(page_url)} is not available: {e.reason}")
                return PageOutcome(page_url=page_url, unavailable=True)

        return PageOutcome(page_url=page_url, matches=evaluate_visit(matchers, visit))

    async def check_system(self, system: SystemConfig, results: ResultSet) -> int:
        """Check all pages of a system and record the outcomes.

        Returns:
            Number of positive matches recorded for the system
        """
        logger.info(f"Evaluating {system.name}")
        results.touch(system.name)
        matchers = create_matchers(system)

        outcomes = await asyncio.gather(
            *(self.check_page(matchers, page_url) for page_url in system.pages)
        )

        match_count = 0
        for outcome in outcomes:
            for url, matcher in outcome.matches:
                results.record_positive(system.name, outcome.page_url, url, matcher.criteria)
                match_count += 1

            reason = outcome.negative_reason
            if reason is not None:
                results.record_negative(system.name, outcome.page_url, reason)

        logger.info(f"Finished evaluating {system.name}. Matches: {match_count}")
        return match_count

    async def run(self) -> ResultSet:
        results = ResultSet()
        for system in self.config.systems:
            await self.check_system(system, results)
        return results


async def run_monitor(
    config: MonitorConfig,
    source: PageSource,
    parallel: int = 1,
) -> ResultSet:
    """Convenience function to run the monitor over every configured system."""
    monitor = Monitor(config, source, parallel=parallel)
    return await monitor.run()
