"""Accumulated monitor results."""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple, Union

from circumvention.config import CriteriaConfig, NegativeReason
from circumvention.exceptions import InvalidReason


@dataclass(frozen=True)
class PositiveMatch:
    """A response that matched one of a system's criteria."""

    system_name: str
    page_url: str
    matched_url: str
    criteria: Optional[CriteriaConfig] = None


@dataclass(frozen=True)
class NegativeOutcome:
    """A page on which a system was not detected."""

    system_name: str
    page_url: str
    reason: NegativeReason


@dataclass
class ResultCounts:
    positive: int = 0
    negative: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {"positive": self.positive, "negative": self.negative}


@dataclass
class SystemResults:
    positives: List[PositiveMatch] = field(default_factory=list)
    negatives: List[NegativeOutcome] = field(default_factory=list)


class ResultSet:
    """Append-only log of positive and negative results, keyed by system name.

    Systems keep the order in which they were first written. Entries are
    never deduplicated; every recorded occurrence is kept. A result set is
    not locked: only one writer may mutate it at a time.
    """

    def __init__(self) -> None:
        self._systems: Dict[str, SystemResults] = {}

    def _get_or_create(self, system_name: str) -> SystemResults:
        results = self._systems.get(system_name)
        if results is None:
            results = SystemResults()
            self._systems[system_name] = results
        return results

    def record_positive(
        self,
        system_name: str,
        page_url: str,
        url: str,
        criteria: Optional[CriteriaConfig] = None,
    ) -> PositiveMatch:
        match = PositiveMatch(system_name, page_url, url, criteria)
        self._get_or_create(system_name).positives.append(match)
        return match

    def record_negative(
        self,
        system_name: str,
        page_url: str,
        reason: Union[NegativeReason, str],
    ) -> NegativeOutcome:
        """Record a negative result.

        Raises:
            InvalidReason: if reason is not a NegativeReason value
        """
        try:
            reason = NegativeReason(reason)
        except ValueError:
            raise InvalidReason(f"{reason} is not a valid reason") from None

        outcome = NegativeOutcome(system_name, page_url, reason)
        self._get_or_create(system_name).negatives.append(outcome)
        return outcome

    def touch(self, system_name: str) -> None:
        """Register a system without recording any result for it."""
        self._get_or_create(system_name)

    @property
    def system_names(self) -> List[str]:
        return list(self._systems)

    def items(self) -> Iterator[Tuple[str, SystemResults]]:
        return iter(self._systems.items())

    def positives(self, system_name: str) -> List[PositiveMatch]:
        results = self._systems.get(system_name)
        return list(results.positives) if results else []

    def negatives(self, system_name: str) -> List[NegativeOutcome]:
        results = self._systems.get(system_name)
        return list(results.negatives) if results else []

    def counts_for(self, system_name: str) -> ResultCounts:
        results = self._systems.get(system_name)
        if results is None:
            return ResultCounts()
        return ResultCounts(len(results.positives), len(results.negatives))

    def total_counts(self) -> ResultCounts:
        total = ResultCounts()
        for results in self._systems.values():
            total.positive += len(results.positives)
            total.negative += len(results.negatives)
        return total

    def __len__(self) -> int:
        return len(self._systems)

    def __contains__(self, system_name: object) -> bool:
        return system_name in self._systems
