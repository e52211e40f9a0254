"""Configuration models for the circumvention monitor.

This package re-exports all commonly used classes for convenient importing.
"""

from circumvention.config.common import (
    NegativeReason,
    ResourceType,
    RuleScope,
    TEXT_RESOURCE_TYPES,
)

from circumvention.config.criteria import (
    CriteriaConfig,
    MonitorConfig,
    RuleProperties,
    SystemConfig,
)

__all__ = [
    # Enums
    "NegativeReason",
    "ResourceType",
    "RuleScope",
    "TEXT_RESOURCE_TYPES",
    # Criteria
    "CriteriaConfig",
    "MonitorConfig",
    "RuleProperties",
    "SystemConfig",
]
