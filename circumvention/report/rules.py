"""Blocking rule generation from positive matches.

Rules use the ad-blocking filter list syntax (``||host^$modifier,modifier``)
and are grouped per system, then per page the match was found on. Comment
lines start with ``! ``.
"""

from typing import Dict, List, Optional, Set
from urllib.parse import urlparse

from circumvention.config import CriteriaConfig, RuleProperties, RuleScope
from circumvention.core.domains import get_hostname, is_third_party, registrable_domain
from circumvention.exceptions import InvalidInput
from circumvention.report.results import PositiveMatch, ResultSet

SEPARATOR = "! ------------------------------"
THIRD_PARTY_MODIFIER = "third-party"


def build_rule(url: str, page_url: str, criteria: Optional[CriteriaConfig] = None) -> str:
    """Build the blocking rule for a URL found on a page.

    Raises:
        InvalidInput: if the URL has no host
    """
    props = criteria.get_rule_properties() if criteria is not None else RuleProperties()

    modifiers = props.modifiers
    if modifiers is None:
        modifiers = [THIRD_PARTY_MODIFIER] if is_third_party(url, page_url) else []

    parsed = urlparse(url)
    hostname = parsed.hostname
    if not hostname:
        raise InvalidInput(f"Cannot build a rule for a URL without host: {url}")
    if ":" in hostname:
        hostname = f"[{hostname}]"

    if props.scope == RuleScope.REGISTERED_DOMAIN:
        domain = registrable_domain(url)
        if not domain or ":" in domain:
            domain = hostname
        pattern = f"||{domain}^"
    elif props.scope == RuleScope.DOMAIN_AND_PATH:
        pattern = f"||{hostname}{parsed.path or '/'}"
    else:
        pattern = f"||{hostname}^"

    if modifiers:
        pattern += "$" + ",".join(modifiers)

    return pattern


def _group_by_page(matches: List[PositiveMatch]) -> Dict[str, List[PositiveMatch]]:
    pages: Dict[str, List[PositiveMatch]] = {}
    for match in matches:
        pages.setdefault(match.page_url, []).append(match)
    return pages


def synthesize_rules(results: ResultSet) -> List[str]:
    """Generate deduplicated blocking rules for every system with positive matches.

    A rule is emitted once per run, under the first page it was found on;
    pages that add no new rule get no ``Found on`` comment. Matches on URLs
    without a host (``data:``, ``blob:``) cannot be blocked by host and are
    skipped.
    """
    lines: List[str] = []
    seen: Set[str] = set()

    for name, system in results.items():
        if not system.positives:
            continue

        lines.append(SEPARATOR)
        lines.append(f"! System: {name}")
        lines.append(SEPARATOR)

        for page_url, matches in _group_by_page(system.positives).items():
            page_rules = []
            for match in matches:
                if get_hostname(match.matched_url) is None:
                    continue
                rule = build_rule(match.matched_url, page_url, match.criteria)
                if rule in seen:
                    continue
                seen.add(rule)
                page_rules.append(rule)

            if page_rules:
                lines.append(f"! Found on: {page_url}")
                lines.extend(page_rules)

    return lines
