"""Document: lazily computed, memoized attributes over one loaded page."""
from collections.abc import Callable, Iterable
from typing import Any

from bs4 import BeautifulSoup
from loguru import logger

from .extractors import keywords, media, metadata, title
from .loader import load_markup
from .models import DocumentOptions, Keyword
from .user_agents import resolve_user_agent


# Attribute name -> computation over a loaded Document. Results are cached
# per Document under the same name and dropped on every load().
ATTRIBUTE_METHODS: dict[str, Callable[["Document"], Any]] = {
    "title": lambda d: title.resolve_title(d.doc),
    "html_title": lambda d: title.extract_html_title(d.doc),
    "og_title": lambda d: title.extract_og_title(d.doc),
    "site_name": lambda d: title.extract_site_name(d.doc),
    "author": lambda d: metadata.extract_author(d.doc),
    "description": lambda d: metadata.extract_description(d.doc),
    "keywords": lambda d: keywords.extract_keywords(d.doc, d.options.keyword_min_length),
    "images": lambda d: media.extract_images(
        d.doc,
        d.url,
        image_extractor=d.options.image_extractor,
        all_images=d.options.all_images,
        min_width=d.options.min_image_width,
        min_height=d.options.min_image_height,
    ),
    "videos": lambda d: media.extract_videos(d.doc),
    "feed": lambda d: metadata.extract_feed(d.doc, d.url),
    "feeds": lambda d: metadata.extract_feeds(d.doc, d.url),
    "favicon": lambda d: metadata.extract_favicon(d.doc, d.url),
}


class Document:
    """
    A single HTML document and the attributes derived from it.

    Implements both InternalAttributeProvider and ExternalAttributeProvider.
    The markup is read and parsed once per load(); each attribute is computed
    on first access and memoized until the next load().

    Example:
        doc = Document("https://example.com/post", user_agent="Linux Firefox")
        print(doc.title)
        print(sorted(doc.keywords, key=lambda k: -k.frequency)[:5])

        doc = Document("<html><body><h1>Hello</h1></body></html>")
        doc.title  # "Hello"
    """

    def __init__(
        self,
        handle: Any,
        options: DocumentOptions | dict[str, Any] | None = None,
        **overrides: Any,
    ):
        """
        Args:
            handle: URL string, readable stream, path, or literal markup
            options: DocumentOptions or a mapping of option names to values
            **overrides: Individual options, applied on top of options

        Raises:
            pydantic.ValidationError: If an option is unknown or invalid
            requests.RequestException: If fetching a URL handle fails
        """
        self._options = _build_options(options, overrides)
        self._doc: BeautifulSoup | None = None
        self._url: str | None = None
        self._cache: dict[str, Any] = {}
        self.load(handle, self._options.url)

    def __repr__(self) -> str:
        return f"Document(url={self._url!r})"

    def load(self, handle: Any, url: str | None = None) -> None:
        """
        Load new markup, replacing the current tree and base URL.

        The base URL is the explicit url if given, otherwise the handle
        itself when it is an http(s) URL, otherwise None. A base URL given
        to an earlier load or to the url option is not carried over: callers
        reloading markup with relative links must pass url again, or
        relative images, feeds and favicons come back unresolved. Previously
        memoized attributes are discarded.

        Raises:
            requests.HTTPError: If the server answers with 4xx/5xx
            requests.RequestException: For other network errors
        """
        loaded = load_markup(
            handle,
            user_agent=self.user_agent,
            url=url,
            timeout=self._options.timeout,
        )

        # Swap tree, URL and cache together
        self._doc, self._url, self._cache = loaded.soup, loaded.url, {}
        logger.debug(f"Loaded document (url={loaded.url})")

    @property
    def doc(self) -> BeautifulSoup:
        return self._doc

    @property
    def url(self) -> str | None:
        return self._url

    @property
    def options(self) -> DocumentOptions:
        return self._options

    @property
    def user_agent(self) -> str:
        """User-Agent header value sent when loading URL handles."""
        return resolve_user_agent(self._options.user_agent, self._options.user_agent_alias)

    @property
    def html(self) -> str:
        """An HTML serialization of the parsed document."""
        return str(self._doc)

    def attribute(self, name: str) -> Any:
        """
        Return a derived attribute by name, computing it on first access.

        Raises:
            KeyError: If name is not in ATTRIBUTE_METHODS
        """
        if name not in self._cache:
            try:
                compute = ATTRIBUTE_METHODS[name]
            except KeyError:
                raise KeyError(
                    f"Unknown attribute: {name}. Available: {', '.join(ATTRIBUTE_METHODS)}"
                ) from None
            self._cache[name] = compute(self)
        return self._cache[name]

    def attributes(self) -> dict[str, Any]:
        """Return every derived attribute keyed by name."""
        return {name: self.attribute(name) for name in ATTRIBUTE_METHODS}

    @property
    def title(self) -> str | None:
        return self.attribute("title")

    @property
    def html_title(self) -> str | None:
        return self.attribute("html_title")

    @property
    def og_title(self) -> str | None:
        return self.attribute("og_title")

    @property
    def site_name(self) -> str | None:
        return self.attribute("site_name")

    @property
    def author(self) -> str | None:
        return self.attribute("author")

    @property
    def description(self) -> str | None:
        return self.attribute("description")

    @property
    def keywords(self) -> list[Keyword]:
        return self.attribute("keywords")

    @property
    def images(self) -> list[str]:
        return self.attribute("images")

    @property
    def videos(self) -> list[dict[str, str]]:
        return self.attribute("videos")

    @property
    def feed(self) -> str | None:
        return self.attribute("feed")

    @property
    def feeds(self) -> list[str]:
        return self.attribute("feeds")

    @property
    def favicon(self) -> str | None:
        return self.attribute("favicon")

    def strip_site_name_and_separators_from(self, text: str) -> str:
        """Strip a site name from text, preferring this page's og:site_name."""
        return title.strip_site_name_and_separators_from(text, self.site_name)

    def match(self, selectors: str | Iterable[str], all_matches: bool = False) -> str | list[str] | None:
        """
        Return element text for the first CSS selector that matches.

        Args:
            selectors: One selector or several, tried in order
            all_matches: Return the text of every match of every selector

        Returns:
            First non-empty text (or None), or a list of texts with all_matches
        """
        if isinstance(selectors, str):
            selectors = [selectors]

        texts = []
        for selector in selectors:
            for tag in self._doc.select(selector):
                text = title.normalize_whitespace(tag.get_text(" "))
                if not text:
                    continue
                if not all_matches:
                    return text
                texts.append(text)

        return texts if all_matches else None


def _build_options(
    options: DocumentOptions | dict[str, Any] | None,
    overrides: dict[str, Any],
) -> DocumentOptions:
    if isinstance(options, DocumentOptions):
        data = options.model_dump(exclude_unset=True)
    else:
        data = dict(options or {})
    data.update(overrides)
    return DocumentOptions(**data)
