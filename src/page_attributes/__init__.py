"""Derive titles, keywords, media and metadata from a single HTML document."""
__version__ = "0.3.0"

from .base import ExternalAttributeProvider, InternalAttributeProvider
from .extractors.title import strip_site_name_and_separators_from
from .models import DocumentOptions, Keyword
from .service import ATTRIBUTE_METHODS, Document
from .user_agents import AGENT_ALIASES, DEFAULT_USER_AGENT, resolve_user_agent

__all__ = [
    "AGENT_ALIASES",
    "ATTRIBUTE_METHODS",
    "DEFAULT_USER_AGENT",
    "Document",
    "DocumentOptions",
    "ExternalAttributeProvider",
    "InternalAttributeProvider",
    "Keyword",
    "resolve_user_agent",
    "strip_site_name_and_separators_from",
]
