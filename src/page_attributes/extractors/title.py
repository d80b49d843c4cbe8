"""Title resolution: og:title, <title> and <h1> with site name stripping."""
import re

from bs4 import BeautifulSoup


# Glyphs that join a site name to an article title. They only count as
# separators when surrounded by whitespace, so "CoffeeScript: A New Language"
# and "Spider-Man" are left alone. "::" must precede ":" in the alternation.
SEPARATORS = ["::", "–", "—", "-", ":", "›", "»", "|", "·", "."]

_SEPARATOR_PATTERN = re.compile(
    r"\s+(?:" + "|".join(re.escape(s) for s in SEPARATORS) + r")\s+"
)


def normalize_whitespace(text: str) -> str:
    return " ".join(text.split())


def meta_content(soup: BeautifulSoup, selector: str) -> str | None:
    """Return the first non-empty content attribute among meta tags matching selector."""
    for tag in soup.select(selector):
        content = tag.get("content")
        if isinstance(content, str) and content.strip():
            return normalize_whitespace(content)
    return None


def extract_og_title(soup: BeautifulSoup) -> str | None:
    """Return the og:title meta content, whitespace-trimmed but otherwise as published."""
    return meta_content(soup, 'meta[property="og:title"], meta[name="og:title"]')


def extract_site_name(soup: BeautifulSoup) -> str | None:
    """Return the og:site_name meta content."""
    return meta_content(
        soup, 'meta[property="og:site_name"], meta[name="og:site_name"]'
    )


def extract_html_title(soup: BeautifulSoup) -> str | None:
    """Return the <title> element text without site name stripping."""
    title_tag = soup.find("title")
    if title_tag is None:
        return None

    text = normalize_whitespace(title_tag.get_text())
    return text or None


def extract_heading_title(soup: BeautifulSoup) -> str | None:
    """Return the text of the first <h1>."""
    h1_tag = soup.find("h1")
    if h1_tag is None:
        return None

    text = normalize_whitespace(h1_tag.get_text(" "))
    return text or None


def strip_site_name_and_separators_from(title: str, site_name: str | None = None) -> str:
    """
    Remove a leading or trailing site name joined to the title by a separator.

    Only one end segment is ever dropped:
    1. The end segment equal to site_name (case-insensitive), when known
    2. Otherwise the shorter of the leading and trailing segments
       (on a tie the trailing segment is dropped)

    Middle segments keep their original separators, so
    "Site | Part 1 - Intro" becomes "Part 1 - Intro".

    Args:
        title: Raw title text
        site_name: Site name, e.g. from og:site_name

    Returns:
        Title without the site name, or the trimmed input if no separator is found
    """
    title = normalize_whitespace(title)
    matches = list(_SEPARATOR_PATTERN.finditer(title))
    if not matches:
        return title

    first, last = matches[0], matches[-1]
    head, rest = title[:first.start()], title[first.end():]
    front, tail = title[:last.start()], title[last.end():]

    if site_name:
        known = normalize_whitespace(site_name).casefold()
        if head.casefold() == known:
            return rest
        if tail.casefold() == known:
            return front

    if len(head) < len(tail):
        return rest
    return front


def resolve_title(soup: BeautifulSoup) -> str | None:
    """
    Resolve the best human-readable title.

    Priority:
    1. og:title meta tag (published without a site name by convention)
    2. <title> text, with the site name and separator stripped
    3. first <h1> text

    Returns:
        Title string, or None when the document has no title source
    """
    og_title = extract_og_title(soup)
    if og_title:
        return og_title

    html_title = extract_html_title(soup)
    if html_title:
        return strip_site_name_and_separators_from(html_title, extract_site_name(soup))

    return extract_heading_title(soup)
