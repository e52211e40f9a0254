"""Monitored systems and their detection criteria."""

from pathlib import Path
from typing import List, Optional, Union

import yaml
from pydantic import BaseModel, Field, StrictBool

from circumvention.config.common import ResourceType, RuleScope


class RuleProperties(BaseModel):
    """Shape of the blocking rules generated from a criteria's matches.

    ``modifiers`` left as ``None`` means "derive them": ``third-party`` is
    added when the matched URL is third-party to the page. An explicit empty
    list means no modifiers at all.
    """

    scope: RuleScope = RuleScope.DOMAIN
    modifiers: Optional[List[str]] = None


class CriteriaConfig(BaseModel):
    """What marks a network response as a detection. Every field is optional."""

    url_pattern: Optional[str] = Field(default=None, alias="urlPattern")
    content_pattern: Optional[str] = Field(default=None, alias="contentPattern")
    content_type: Optional[ResourceType] = Field(default=None, alias="contentType")
    third_party: Optional[StrictBool] = Field(default=None, alias="thirdParty")
    rule_properties: Optional[RuleProperties] = Field(default=None, alias="ruleProperties")

    model_config = {"populate_by_name": True, "frozen": True}

    def get_rule_properties(self) -> RuleProperties:
        return self.rule_properties or RuleProperties()


class SystemConfig(BaseModel):
    """A circumvention system and the pages it is monitored on."""

    name: str
    criteria: List[CriteriaConfig] = Field(default_factory=list)
    pages: List[str] = Field(default_factory=list)


class MonitorConfig(BaseModel):
    """Top-level monitor configuration."""

    systems: List[SystemConfig] = Field(default_factory=list, alias="observe")

    model_config = {"populate_by_name": True}

    def get_system(self, name: str) -> Optional[SystemConfig]:
        for system in self.systems:
            if system.name == name:
                return system
        return None

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "MonitorConfig":
        """Load configuration from a YAML (or JSON) file."""
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)
