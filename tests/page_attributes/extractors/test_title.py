"""Tests for title resolution and site name stripping."""
import pytest
from bs4 import BeautifulSoup

from page_attributes.extractors.title import (
    SEPARATORS,
    extract_heading_title,
    extract_html_title,
    extract_og_title,
    extract_site_name,
    resolve_title,
    strip_site_name_and_separators_from,
)


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


TITLE = "CoffeeScript: A New Language With A Pure Ruby Compiler"
SITE_NAME = "RubyInside"


class TestStripSiteNameAndSeparators:
    """Tests for strip_site_name_and_separators_from()."""

    @pytest.mark.parametrize("separator", ["–", "-", ":", "›", "»", "|", "::", "."])
    def test_leading_site_name_is_removed(self, separator: str):
        # Given: a title prefixed with the site name
        raw = f"{SITE_NAME} {separator} {TITLE}"

        # When: stripping
        stripped = strip_site_name_and_separators_from(raw)

        # Then: only the article title remains
        assert stripped == TITLE

    @pytest.mark.parametrize("separator", SEPARATORS)
    def test_trailing_site_name_is_removed(self, separator: str):
        # Given: a title suffixed with the site name
        raw = f"{TITLE} {separator} {SITE_NAME}"

        # When/Then: the site name is dropped
        assert strip_site_name_and_separators_from(raw) == TITLE

    def test_title_without_separator_is_unchanged(self):
        # Given: a colon that is not surrounded by whitespace
        # When/Then: nothing is stripped
        assert strip_site_name_and_separators_from(TITLE) == TITLE

    def test_hyphenated_words_are_not_separators(self):
        assert strip_site_name_and_separators_from("Spider-Man returns") == "Spider-Man returns"

    def test_known_site_name_wins_over_length(self):
        # Given: a site name longer than the article title
        raw = "Short Post | The Extremely Long Name Of Some Weblog"

        # When: the site name is known
        stripped = strip_site_name_and_separators_from(
            raw, site_name="the extremely long name of some weblog"
        )

        # Then: the matching segment is dropped regardless of length
        assert stripped == "Short Post"

    def test_only_one_end_segment_is_dropped(self):
        # Given: several separators
        raw = "Ruby Inside | Part 1 - An Introduction To The Language"

        # When: stripping
        stripped = strip_site_name_and_separators_from(raw)

        # Then: middle separators are kept
        assert stripped == "Part 1 - An Introduction To The Language"

    def test_whitespace_is_collapsed(self):
        assert strip_site_name_and_separators_from("  Site   |   Some  Title ") == "Some Title"


class TestTitleSources:
    """Tests for the individual title candidates."""

    def test_og_title_and_html_title_are_independent(self):
        # Given: og:title and <title> with the same content, <title> with a site name
        html = """
        <html><head>
            <title>RubyInside | Hello World Again</title>
            <meta property="og:title" content="Hello World Again">
        </head><body></body></html>
        """
        soup = _soup(html)

        # When/Then: each accessor returns its own raw value
        assert extract_og_title(soup) == "Hello World Again"
        assert extract_html_title(soup) == "RubyInside | Hello World Again"

    def test_missing_sources_return_none(self):
        soup = _soup("<html><body><p>No titles here</p></body></html>")

        assert extract_og_title(soup) is None
        assert extract_html_title(soup) is None
        assert extract_heading_title(soup) is None
        assert extract_site_name(soup) is None

    def test_blank_og_title_is_ignored(self):
        soup = _soup('<html><head><meta property="og:title" content="   "></head></html>')

        assert extract_og_title(soup) is None


class TestResolveTitle:
    """Tests for resolve_title() priority chain."""

    def test_og_title_has_priority(self):
        soup = _soup("""
            <html><head>
                <meta property="og:title" content="From Open Graph">
                <title>From Title Tag</title>
            </head><body><h1>From Heading</h1></body></html>
        """)

        assert resolve_title(soup) == "From Open Graph"

    def test_html_title_is_cleaned(self):
        soup = _soup("""
            <html><head>
                <title>Ruby Inside » Why Ruby Blocks Are Useful</title>
                <meta property="og:site_name" content="Ruby Inside">
            </head><body><h1>Heading</h1></body></html>
        """)

        assert resolve_title(soup) == "Why Ruby Blocks Are Useful"

    def test_falls_back_to_first_h1(self):
        soup = _soup("<html><body><h1>Hello</h1><h1>Second</h1></body></html>")

        assert resolve_title(soup) == "Hello"

    def test_no_source_returns_none(self):
        soup = _soup("<html><body><p>Nothing</p></body></html>")

        assert resolve_title(soup) is None
