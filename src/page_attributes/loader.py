"""Document loader: turns a markup handle into a parsed tree and base URL."""
import os
import re
from dataclasses import dataclass
from typing import Any

import requests
from bs4 import BeautifulSoup
from loguru import logger


_URL_PATTERN = re.compile(r"^https?://", re.IGNORECASE)


@dataclass(frozen=True)
class LoadedMarkup:
    """Parsed tree plus the URL used to resolve relative references."""

    soup: BeautifulSoup
    url: str | None


def is_url(handle: Any) -> bool:
    """Return True when handle is a string with an http or https scheme."""
    return isinstance(handle, str) and bool(_URL_PATTERN.match(handle.strip()))


def parse_html(markup: str | bytes) -> BeautifulSoup:
    """
    Parse markup with lxml through BeautifulSoup.

    lxml recovers from malformed markup and wraps fragments in html/body,
    so any string produces a navigable tree.
    """
    return BeautifulSoup(markup, "lxml")


def load_markup(
    handle: Any,
    user_agent: str,
    url: str | None = None,
    timeout: float = 30.0,
) -> LoadedMarkup:
    """
    Read a markup handle and parse it.

    Handle kinds:
    - http/https URL string: fetched with the given User-Agent
    - object with read(): read fully (bytes or text)
    - os.PathLike: file bytes
    - any other str or bytes: literal markup

    Args:
        handle: URL, stream, path or literal markup
        user_agent: User-Agent header sent for URL handles
        url: Explicit base URL, overrides the fetched URL
        timeout: Request timeout in seconds for URL handles

    Returns:
        LoadedMarkup with the parsed tree and resolved base URL

    Raises:
        requests.HTTPError: If the server answers with 4xx/5xx
        requests.RequestException: For other network errors
        OSError: If a stream or file cannot be read
        TypeError: If handle is none of the supported kinds
    """
    if is_url(handle):
        fetched_url = handle.strip()
        markup = _fetch_html(fetched_url, user_agent, timeout)
        base_url = url or fetched_url
    elif hasattr(handle, "read"):
        logger.debug("Reading markup from stream")
        markup = handle.read()
        base_url = url
    elif isinstance(handle, os.PathLike):
        logger.debug(f"Reading markup from file: {handle}")
        with open(handle, "rb") as f:
            markup = f.read()
        base_url = url
    elif isinstance(handle, (str, bytes)):
        markup = handle
        base_url = url
    else:
        raise TypeError(
            f"Unsupported markup handle type: {type(handle).__name__}. "
            "Expected a URL, stream, path or markup string"
        )

    return LoadedMarkup(soup=parse_html(markup), url=base_url)


def _fetch_html(url: str, user_agent: str, timeout: float) -> bytes:
    """
    Fetch raw HTML bytes from URL.

    Bytes are returned instead of response.text so the parser can honour
    the document's own charset declaration.

    Raises:
        requests.HTTPError: If HTTP request fails (4xx, 5xx)
        requests.RequestException: For other network errors
    """
    logger.info(f"Fetching document: {url}")

    try:
        response = requests.get(url, headers={"User-Agent": user_agent}, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.warning(f"Failed to fetch {url}: {e}")
        raise

    return response.content
