"""Core matching components.

- Pattern: plain, wildcard and regex pattern compilation
- Domains: registrable domain extraction and third-party checks
- Matchers: criteria evaluation over observed responses
"""

from circumvention.core.domains import (
    get_hostname,
    is_third_party,
    registrable_domain,
)
from circumvention.core.matchers import (
    Matcher,
    create_matchers,
    find_match,
)
from circumvention.core.pattern import Pattern, PatternKind

__all__ = [
    "Pattern",
    "PatternKind",
    "get_hostname",
    "is_third_party",
    "registrable_domain",
    "Matcher",
    "create_matchers",
    "find_match",
]
