"""Response matchers for circumvention script detection."""

from typing import List, Optional

from circumvention.config import CriteriaConfig, ResourceType, SystemConfig
from circumvention.core.domains import is_third_party
from circumvention.core.pattern import Pattern


class Matcher:
    """Matches observed network responses against one criteria.

    Every configured check must pass; unconfigured checks are skipped, so a
    matcher built from an empty criteria matches everything.
    """

    def __init__(self, criteria: CriteriaConfig):
        self.criteria = criteria

        self.url_pattern: Optional[Pattern] = None
        if criteria.url_pattern is not None:
            self.url_pattern = Pattern(criteria.url_pattern)

        self.content_pattern: Optional[Pattern] = None
        if criteria.content_pattern is not None:
            self.content_pattern = Pattern(criteria.content_pattern)

        self.content_type: Optional[ResourceType] = criteria.content_type
        self.third_party: Optional[bool] = criteria.third_party

    def evaluate(
        self,
        url: str,
        source_page_url: Optional[str],
        resource_type: str,
        content: Optional[str],
    ) -> bool:
        """Test a response against this matcher.

        Args:
            url: Response URL
            source_page_url: URL of the page that loaded the response
            resource_type: Resource type reported by the browser
            content: Response body, None when it is not available

        Returns:
            True if every configured check passes
        """
        if self.url_pattern is not None and not self.url_pattern.test(url):
            return False

        if self.content_type is not None and self.content_type.value != resource_type:
            return False

        if self.content_pattern is not None:
            if content is None:
                return False
            if not self.content_pattern.test(content):
                return False

        if self.third_party is not None:
            if self.third_party != is_third_party(url, source_page_url):
                return False

        return True

    test = evaluate

    def __repr__(self) -> str:
        parts = []
        if self.url_pattern is not None:
            parts.append(f"url={self.url_pattern.source!r}")
        if self.content_pattern is not None:
            parts.append(f"content={self.content_pattern.source!r}")
        if self.content_type is not None:
            parts.append(f"type={self.content_type.value}")
        if self.third_party is not None:
            parts.append(f"third_party={self.third_party}")
        return f"Matcher({', '.join(parts)})"


def create_matchers(system: SystemConfig) -> List[Matcher]:
    """Create one matcher per criteria of a monitored system."""
    return [Matcher(criteria) for criteria in system.criteria]


def find_match(
    matchers: List[Matcher],
    url: str,
    source_page_url: Optional[str],
    resource_type: str,
    content: Optional[str],
) -> Optional[Matcher]:
    """Return the first matcher that matches the response, if any."""
    for matcher in matchers:
        if matcher.evaluate(url, source_page_url, resource_type, content):
            return matcher
    return None
