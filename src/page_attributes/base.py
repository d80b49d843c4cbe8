"""Protocols for the two attribute families a Document exposes."""
from typing import Protocol, runtime_checkable

from .models import Keyword


@runtime_checkable
class InternalAttributeProvider(Protocol):
    """
    Attributes derived from the document's own text and head metadata.

    Any object exposing these read-only properties satisfies the protocol,
    no inheritance needed. Missing data is reported as None or an empty
    list, never as an exception.

    Example:
        def summarize(page: InternalAttributeProvider) -> str:
            return f"{page.title} by {page.author or 'unknown'}"
    """

    @property
    def title(self) -> str | None:
        """Best title: og:title, cleaned <title>, or first <h1>."""
        ...

    @property
    def html_title(self) -> str | None:
        """Raw <title> text."""
        ...

    @property
    def og_title(self) -> str | None:
        """Raw og:title meta content."""
        ...

    @property
    def site_name(self) -> str | None:
        ...

    @property
    def author(self) -> str | None:
        ...

    @property
    def description(self) -> str | None:
        ...

    @property
    def keywords(self) -> list[Keyword]:
        """Term frequencies over the visible text, in first-occurrence order."""
        ...

    @property
    def html(self) -> str:
        """Serialized markup of the parsed document."""
        ...


@runtime_checkable
class ExternalAttributeProvider(Protocol):
    """
    Attributes that reference resources outside the document: media
    embeds and linked feeds or icons.
    """

    @property
    def images(self) -> list[str]:
        ...

    @property
    def videos(self) -> list[dict[str, str]]:
        ...

    @property
    def feed(self) -> str | None:
        ...

    @property
    def feeds(self) -> list[str]:
        ...

    @property
    def favicon(self) -> str | None:
        ...
