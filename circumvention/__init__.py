"""Circumvention monitor.

Detects ad-blocker circumvention scripts embedded in web pages by matching
observed network responses against configurable criteria, and builds
Markdown reports and filter-list blocking rules from the matches.
"""

__version__ = "0.1.0"

from circumvention.config import (
    CriteriaConfig,
    MonitorConfig,
    NegativeReason,
    ResourceType,
    RuleProperties,
    RuleScope,
    SystemConfig,
)

from circumvention.exceptions import (
    CircumventionError,
    InvalidInput,
    InvalidPattern,
    InvalidReason,
    PageUnavailable,
)

from circumvention.core import (
    Matcher,
    Pattern,
    create_matchers,
    is_third_party,
    registrable_domain,
)

from circumvention.report import (
    NegativeOutcome,
    PositiveMatch,
    ResultSet,
    build_rule,
    render_markdown,
    synthesize_rules,
)

from circumvention.monitor import (
    Monitor,
    PageVisit,
    RecordedPageSource,
    ResponseEvent,
    run_monitor,
)

__all__ = [
    # Version
    "__version__",
    # Config
    "CriteriaConfig",
    "MonitorConfig",
    "NegativeReason",
    "ResourceType",
    "RuleProperties",
    "RuleScope",
    "SystemConfig",
    # Errors
    "CircumventionError",
    "InvalidInput",
    "InvalidPattern",
    "InvalidReason",
    "PageUnavailable",
    # Matching
    "Matcher",
    "Pattern",
    "create_matchers",
    "is_third_party",
    "registrable_domain",
    # Results
    "NegativeOutcome",
    "PositiveMatch",
    "ResultSet",
    "build_rule",
    "render_markdown",
    "synthesize_rules",
    # Monitor
    "Monitor",
    "PageVisit",
    "RecordedPageSource",
    "ResponseEvent",
    "run_monitor",
]
