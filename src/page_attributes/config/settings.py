"""Environment-driven defaults for document options.

Values are read from the process environment, after loading a .env file
if one is present. Explicit DocumentOptions arguments always win.
"""
import os

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

DEFAULT_TIMEOUT = 30.0


def default_user_agent() -> str | None:
    """Return PAGE_ATTRIBUTES_USER_AGENT, or None when unset or blank."""
    value = os.getenv("PAGE_ATTRIBUTES_USER_AGENT", "").strip()
    return value or None


def default_timeout() -> float:
    """Return PAGE_ATTRIBUTES_TIMEOUT in seconds, falling back to 30."""
    value = os.getenv("PAGE_ATTRIBUTES_TIMEOUT")
    if not value:
        return DEFAULT_TIMEOUT
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Ignoring invalid PAGE_ATTRIBUTES_TIMEOUT={value!r}")
        return DEFAULT_TIMEOUT
