"""Tests for the document loader."""
import io
from pathlib import Path
from unittest.mock import patch

import pytest
import requests
from bs4 import BeautifulSoup

from page_attributes.loader import is_url, load_markup


class TestIsUrl:
    """Tests for is_url()."""

    @pytest.mark.parametrize("handle", ["http://example.com", "HTTPS://example.com/a", "  https://x.io "])
    def test_http_schemes_are_urls(self, handle: str):
        assert is_url(handle)

    @pytest.mark.parametrize("handle", ["<html></html>", "ftp://example.com", "httpfoo", b"http://x", None])
    def test_other_handles_are_not_urls(self, handle):
        assert not is_url(handle)


class TestLoadMarkup:
    """Tests for load_markup() handle kinds."""

    def test_literal_markup(self):
        # Given: a literal HTML string
        # When: loading it
        loaded = load_markup("<html><body><h1>Hello</h1></body></html>", user_agent="UA")

        # Then: it is parsed and there is no base URL
        assert isinstance(loaded.soup, BeautifulSoup)
        assert loaded.soup.h1.get_text() == "Hello"
        assert loaded.url is None

    def test_literal_markup_with_explicit_url(self):
        loaded = load_markup("<p>x</p>", user_agent="UA", url="http://example.com/page")

        assert loaded.url == "http://example.com/page"

    def test_text_stream(self):
        loaded = load_markup(io.StringIO("<title>From stream</title>"), user_agent="UA")

        assert loaded.soup.title.get_text() == "From stream"

    def test_byte_stream(self, rubyinside_path: Path):
        with open(rubyinside_path, "rb") as f:
            loaded = load_markup(f, user_agent="UA")

        assert loaded.soup.find("h1").get_text() == "CoffeeScript: A New Language With A Pure Ruby Compiler"

    def test_path(self, rubyinside_path: Path):
        loaded = load_markup(rubyinside_path, user_agent="UA")

        assert loaded.soup.find("meta", property="og:site_name")["content"] == "RubyInside"

    def test_malformed_markup_is_tolerated(self):
        loaded = load_markup("<div><p>Unclosed <b>tags", user_agent="UA")

        assert loaded.soup.find("b").get_text() == "tags"

    def test_unsupported_handle_raises_type_error(self):
        with pytest.raises(TypeError) as exc_info:
            load_markup(42, user_agent="UA")

        assert "Unsupported markup handle type: int" in str(exc_info.value)


class TestLoadMarkupFromUrl:
    """Tests for load_markup() with URL handles (requests is mocked)."""

    def test_fetches_with_user_agent(self, mock_response):
        # Given: a URL handle
        url = "https://example.com/post"

        with patch("page_attributes.loader.requests.get") as mock_get:
            mock_get.return_value = mock_response("<title>Fetched</title>")

            # When: loading it
            loaded = load_markup(url, user_agent="Browser Bob", timeout=5)

        # Then: the page is fetched with the given User-Agent and becomes the base URL
        mock_get.assert_called_once_with(url, headers={"User-Agent": "Browser Bob"}, timeout=5)
        assert loaded.soup.title.get_text() == "Fetched"
        assert loaded.url == url

    def test_explicit_url_overrides_fetched_url(self, mock_response):
        with patch("page_attributes.loader.requests.get") as mock_get:
            mock_get.return_value = mock_response("<p>x</p>")

            loaded = load_markup(
                "https://example.com/amp/post", user_agent="UA", url="https://example.com/post"
            )

        assert loaded.url == "https://example.com/post"

    def test_http_error_propagates(self, mock_response):
        # Given: a server answering 404
        response = mock_response("Not found")
        response.raise_for_status.side_effect = requests.HTTPError("404 Client Error")

        with patch("page_attributes.loader.requests.get", return_value=response):
            # When/Then: the error reaches the caller unchanged
            with pytest.raises(requests.HTTPError, match="404"):
                load_markup("https://example.com/missing", user_agent="UA")

    def test_connection_error_propagates(self):
        with patch(
            "page_attributes.loader.requests.get",
            side_effect=requests.ConnectionError("DNS failure"),
        ):
            with pytest.raises(requests.ConnectionError):
                load_markup("https://nowhere.invalid/", user_agent="UA")
