"""Option and result models for document attribute extraction."""
from pydantic import BaseModel, ConfigDict, Field, field_validator

from page_attributes.config import settings


class DocumentOptions(BaseModel):
    """
    Recognized options for a Document.

    user_agent accepts either an alias name from AGENT_ALIASES or a literal
    User-Agent string. When neither user_agent nor a known user_agent_alias
    is given, the default desktop browser string is sent.

    Unknown option names are rejected so that typos surface at construction
    time instead of being silently ignored.
    """

    user_agent: str | None = Field(default_factory=settings.default_user_agent)
    user_agent_alias: str | None = None
    image_extractor: bool = False
    all_images: bool = False
    min_image_width: int = Field(default=100, ge=0)
    min_image_height: int = Field(default=100, ge=0)
    url: str | None = None
    timeout: float = Field(default_factory=settings.default_timeout, gt=0)
    keyword_min_length: int = Field(default=3, ge=1)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("user_agent", "user_agent_alias", "url")
    @classmethod
    def validate_optional_string(cls, v: str | None) -> str | None:
        """Normalize blank strings to None."""
        if v is None:
            return None

        stripped = v.strip()
        if not stripped:
            return None

        return stripped


class Keyword(BaseModel):
    """A term found in the document's visible text and how often it occurs."""

    term: str
    frequency: int = Field(ge=1)

    model_config = ConfigDict(frozen=True)

    @field_validator("term")
    @classmethod
    def validate_term(cls, v: str) -> str:
        """Validate that term is not empty and is lowercase."""
        if not v or not v.strip():
            raise ValueError("Keyword term cannot be empty")
        return v.strip().lower()
