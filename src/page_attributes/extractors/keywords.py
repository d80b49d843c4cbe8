"""Keyword frequency analysis over a document's visible text."""
import re
from collections import Counter
from collections.abc import Iterable, Iterator

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from page_attributes.extractors.stopwords import STOPWORDS_EN
from page_attributes.models import Keyword


# Subtrees whose text is never rendered
INVISIBLE_TAGS = ["script", "style", "noscript", "template"]

# Elements that break a line when rendered. Text on either side of one of
# these is a separate word; text split by any other tag is not.
BLOCK_TAGS = frozenset({
    "address", "article", "aside", "blockquote", "body", "br", "caption",
    "dd", "div", "dl", "dt", "fieldset", "figcaption", "figure", "footer",
    "form", "h1", "h2", "h3", "h4", "h5", "h6", "head", "header", "hr",
    "html", "li", "main", "nav", "ol", "option", "p", "pre", "section",
    "table", "tbody", "td", "tfoot", "th", "thead", "title", "tr", "ul",
})

DEFAULT_MIN_LENGTH = 3

# A word starts with a letter or digit in any script
_TOKEN_PATTERN = re.compile(r"[^\W_][\w'+#\-]*")


def _collect_text(node: Tag, parts: list[str]) -> None:
    for child in node.children:
        if isinstance(child, Tag):
            if child.name in INVISIBLE_TAGS:
                continue
            block = child.name in BLOCK_TAGS
            if block:
                parts.append(" ")
            _collect_text(child, parts)
            if block:
                parts.append(" ")
        elif isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
            parts.append(str(child))


def visible_text(soup: BeautifulSoup) -> str:
    """
    Collect the text a reader would see, without mutating the tree.

    Text is taken from <body> when present, otherwise from the whole
    document. Comments, doctypes and script/style/noscript/template
    contents are skipped. Text split only by inline markup, as in
    <b>Java</b>script, is joined back into one word.
    """
    parts: list[str] = []
    _collect_text(soup.body or soup, parts)
    return " ".join("".join(parts).split())


def tokenize(
    text: str,
    min_length: int = DEFAULT_MIN_LENGTH,
    stopwords: Iterable[str] | None = None,
) -> Iterator[str]:
    """
    Yield normalized terms from text.

    Terms are casefolded and may use letters of any script; possessive 's
    and surrounding quote/hyphen characters are removed. Numbers, stop words
    and terms shorter than min_length are discarded.
    """
    stopwords = STOPWORDS_EN if stopwords is None else frozenset(stopwords)
    text = text.casefold().replace("’", "'")

    for match in _TOKEN_PATTERN.finditer(text):
        term = match.group().strip("'-")
        if term.endswith("'s"):
            term = term[:-2]

        if len(term) < min_length:
            continue
        if term.isdigit():
            continue
        if term in stopwords:
            continue

        yield term


def count_keywords(
    text: str,
    min_length: int = DEFAULT_MIN_LENGTH,
    stopwords: Iterable[str] | None = None,
) -> list[Keyword]:
    """
    Count occurrences of every surviving term in text.

    No ranking or truncation is applied. Keywords are listed in order of
    first occurrence, so the same text always gives the same list.

    Args:
        text: Plain text to analyse
        min_length: Minimum term length kept
        stopwords: Terms to discard (defaults to STOPWORDS_EN)

    Returns:
        One Keyword per distinct term
    """
    counts = Counter(tokenize(text, min_length, stopwords))
    return [Keyword(term=term, frequency=frequency) for term, frequency in counts.items()]


def extract_keywords(soup: BeautifulSoup, min_length: int = DEFAULT_MIN_LENGTH) -> list[Keyword]:
    """Count keywords in the document's visible text."""
    return count_keywords(visible_text(soup), min_length)
