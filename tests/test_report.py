"""
Tests for the Markdown report.
"""

from circumvention.config import NegativeReason
from circumvention.report import ResultSet, render_markdown


class TestRenderMarkdown:

    def test_full_report(self):
        results = ResultSet()
        results.record_positive("test", "https://example.org", "https://example.com/script.js")
        results.record_negative("test", "https://example.org", NegativeReason.WEBSITE_DOWN)

        expected = (
            "# Circumvention report\n"
            "\n"
            "### test\n"
            "\n"
            "#### Positive matches\n"
            "\n"
            "| Page | URL |\n"
            "| --- | --- |\n"
            "| https://example.org | https://example.com/script.js |\n"
            "\n"
            "#### Negative matches\n"
            "\n"
            "| Page | Reason |\n"
            "| --- | --- |\n"
            "| https://example.org | WebsiteDown |\n"
            "\n"
        )
        assert render_markdown(results) == expected

    def test_empty_result_set(self):
        assert render_markdown(ResultSet()) == "# Circumvention report\n\n"

    def test_system_without_results_has_heading_only(self):
        results = ResultSet()
        results.touch("idle")
        assert render_markdown(results) == "# Circumvention report\n\n### idle\n\n"

    def test_negatives_only(self):
        results = ResultSet()
        results.record_negative("sys", "https://example.net", NegativeReason.NOT_FOUND)
        text = render_markdown(results)
        assert "Positive matches" not in text
        assert "| https://example.net | NotFound |" in text

    def test_rows_in_recorded_order(self):
        results = ResultSet()
        results.record_positive("sys", "https://b.org", "https://ads.com/2.js")
        results.record_positive("sys", "https://a.org", "https://ads.com/1.js")
        text = render_markdown(results)
        assert text.index("https://b.org") < text.index("https://a.org")

    def test_render_is_repeatable(self):
        results = ResultSet()
        results.record_positive("sys", "https://example.org", "https://ads.com/a.js")
        assert render_markdown(results) == render_markdown(results)
