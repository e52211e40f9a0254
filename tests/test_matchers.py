"""
Tests for criteria matchers.
"""

import pytest

from circumvention.config import CriteriaConfig, SystemConfig
from circumvention.core import Matcher, create_matchers, find_match
from circumvention.exceptions import InvalidPattern


def _matcher(**kwargs) -> Matcher:
    return Matcher(CriteriaConfig(**kwargs))


class TestMatcher:

    def test_simple_criteria(self):
        matcher = _matcher(
            urlPattern="://example.org",
            contentPattern="alert",
            contentType="script",
            thirdParty=True,
        )
        assert matcher.evaluate(
            "http://example.org/", "http://example.net", "script", 'alert("hello");'
        ) is True

    def test_third_party_mismatch(self):
        matcher = _matcher(
            urlPattern="://example.org",
            contentPattern="alert",
            contentType="script",
            thirdParty=False,
        )
        assert matcher.evaluate(
            "http://example.org/", "http://example.net", "script", 'alert("hello");'
        ) is False

    def test_empty_criteria_matches_everything(self):
        matcher = _matcher()
        assert matcher.evaluate("https://a.com/x.png", None, "image", None)

    def test_url_pattern_fails(self):
        matcher = _matcher(urlPattern="adsystem")
        assert not matcher.evaluate("https://example.org/", None, "script", "")

    def test_content_type_exact(self):
        matcher = _matcher(contentType="script")
        assert matcher.evaluate("https://a.com/", None, "script", None)
        assert not matcher.evaluate("https://a.com/", None, "stylesheet", None)
        assert not matcher.evaluate("https://a.com/", None, "Script", None)

    def test_missing_body_fails_content_pattern(self):
        matcher = _matcher(contentPattern="*")
        assert not matcher.evaluate("https://a.com/", "https://a.com/", "script", None)

    def test_empty_body_still_tested(self):
        matcher = _matcher(contentPattern="*")
        assert matcher.evaluate("https://a.com/", "https://a.com/", "script", "")

    def test_url_only_matches_without_body(self):
        matcher = _matcher(urlPattern="*.js")
        assert matcher.evaluate("https://a.com/x.js", "https://a.com/", "script", None)

    def test_end_to_end_scenario(self):
        matcher = _matcher(
            urlPattern="/.*\\.js/",
            contentPattern="*test*",
            contentType="script",
            thirdParty=False,
        )
        assert matcher.evaluate(
            "http://localhost/script.js", "http://localhost/", "script", "/*test*/"
        ) is True

    def test_unknown_source_is_third_party(self):
        matcher = _matcher(thirdParty=True)
        assert matcher.evaluate("https://example.org/", None, "script", None)

    def test_keeps_criteria(self):
        criteria = CriteriaConfig(urlPattern="ads")
        assert Matcher(criteria).criteria is criteria

    def test_empty_pattern_aborts(self):
        with pytest.raises(InvalidPattern):
            _matcher(urlPattern="")

    def test_repr(self):
        assert "url='ads'" in repr(_matcher(urlPattern="ads"))


class TestCreateMatchers:

    def test_one_per_criteria(self):
        system = SystemConfig(
            name="test",
            criteria=[CriteriaConfig(urlPattern="a"), CriteriaConfig(urlPattern="b")],
        )
        matchers = create_matchers(system)
        assert [str(m.url_pattern) for m in matchers] == ["a", "b"]

    def test_find_match_returns_first(self):
        system = SystemConfig(
            name="test",
            criteria=[CriteriaConfig(urlPattern="ads"), CriteriaConfig(contentType="script")],
        )
        matchers = create_matchers(system)
        found = find_match(matchers, "https://ads.com/a.js", None, "script", None)
        assert found is matchers[0]

    def test_find_match_none(self):
        matchers = create_matchers(SystemConfig(name="t", criteria=[CriteriaConfig(urlPattern="x")]))
        assert find_match(matchers, "https://a.com/", None, "script", None) is None
