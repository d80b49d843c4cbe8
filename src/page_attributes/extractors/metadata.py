"""Author, description, feed and favicon extraction."""
import json
import re

from bs4 import BeautifulSoup
from bs4.element import Tag

from page_attributes.extractors.media import resolve_url
from page_attributes.extractors.title import meta_content, normalize_whitespace


FEED_TYPES = (
    "application/rss+xml",
    "application/atom+xml",
    "application/feed+json",
    "application/rdf+xml",
)

_BYLINE_PREFIX = re.compile(r"^\s*by[:\s]+", re.IGNORECASE)


def _clean_author_name(author: str) -> str | None:
    """Remove a "By" byline prefix and collapse whitespace."""
    cleaned = normalize_whitespace(_BYLINE_PREFIX.sub("", author))
    return cleaned or None


def _json_ld_objects(soup: BeautifulSoup) -> list[dict]:
    """Parse every JSON-LD block, flattening lists and @graph containers."""
    objects = []

    for script in soup.find_all("script", type="application/ld+json"):
        try:
            data = json.loads(script.string or "")
        except (json.JSONDecodeError, TypeError):
            # Malformed JSON or missing content - continue to next script tag
            continue

        items = data if isinstance(data, list) else [data]
        for item in items:
            if not isinstance(item, dict):
                continue
            objects.append(item)
            graph = item.get("@graph")
            if isinstance(graph, list):
                objects.extend(node for node in graph if isinstance(node, dict))

    return objects


def _json_ld_author(soup: BeautifulSoup) -> str | None:
    for obj in _json_ld_objects(soup):
        author = obj.get("author")
        if isinstance(author, list) and author:
            author = author[0]
        if isinstance(author, dict):
            author = author.get("name")
        if isinstance(author, str) and author.strip():
            return author
    return None


def extract_author(soup: BeautifulSoup) -> str | None:
    """
    Extract the author name with a priority fallback chain.

    Priority:
    1. meta[name=author] / meta[property="article:author"]
    2. JSON-LD author.name
    3. rel=author link, .author or .byline element text

    Returns:
        Author name, or None if not found
    """
    author = meta_content(
        soup, 'meta[name="author"], meta[property="article:author"]'
    )
    if author and not author.startswith(("http://", "https://")):
        return _clean_author_name(author)

    author = _json_ld_author(soup)
    if author:
        return _clean_author_name(author)

    for selector in ('[rel="author"]', ".author", ".byline"):
        tag = soup.select_one(selector)
        if isinstance(tag, Tag):
            text = tag.get_text(" ", strip=True)
            if text:
                return _clean_author_name(text)

    return None


def extract_description(soup: BeautifulSoup) -> str | None:
    """Return meta description, falling back to og:description."""
    return meta_content(soup, 'meta[name="description"]') or meta_content(
        soup, 'meta[property="og:description"]'
    )


def extract_feeds(soup: BeautifulSoup, base_url: str | None = None) -> list[str]:
    """Return every RSS/Atom/JSON feed linked from the document, resolved."""
    feeds = []

    for link in soup.find_all("link", href=True):
        rel = link.get("rel") or []
        link_type = (link.get("type") or "").lower()
        if "alternate" in [r.lower() for r in rel] and link_type in FEED_TYPES:
            url = resolve_url(link["href"].strip(), base_url)
            if url not in feeds:
                feeds.append(url)

    return feeds


def extract_feed(soup: BeautifulSoup, base_url: str | None = None) -> str | None:
    """Return the first linked feed."""
    feeds = extract_feeds(soup, base_url)
    return feeds[0] if feeds else None


def extract_favicon(soup: BeautifulSoup, base_url: str | None = None) -> str | None:
    """Return the icon link (rel="icon" or "shortcut icon"), resolved."""
    for link in soup.find_all("link", href=True):
        rel = [r.lower() for r in link.get("rel") or []]
        if "icon" in rel:
            return resolve_url(link["href"].strip(), base_url)
    return None
