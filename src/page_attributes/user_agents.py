"""User-Agent alias table and resolution rules."""
import platform
from types import MappingProxyType

from loguru import logger

from page_attributes import __version__


_PYTHON_VERSION = f"{platform.python_implementation()}/{platform.python_version()}"

# Supported aliases for user_agent= and user_agent_alias=. Browser versions
# are listed for reference only, they are not part of the alias name.
#
# * Linux Firefox (43.0 on Ubuntu Linux)
# * Mac Safari (9.0 on OS X 10.11.2), the default
# * Windows IE 10 (Windows 8 64bit)
# * iPhone / iPad (iOS 9.1)
# * Android (5.1.1)
AGENT_ALIASES = MappingProxyType({
    "page-attributes": (
        f"page-attributes/{__version__} {_PYTHON_VERSION} "
        "(+https://pypi.org/project/page-attributes/)"
    ),
    "Linux Firefox": "Mozilla/5.0 (X11; Ubuntu; Linux x86_64; rv:43.0) Gecko/20100101 Firefox/43.0",
    "Linux Konqueror": "Mozilla/5.0 (compatible; Konqueror/3; Linux)",
    "Linux Mozilla": "Mozilla/5.0 (X11; U; Linux i686; en-US; rv:1.4) Gecko/20030624",
    "Mac Firefox": "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.11; rv:43.0) Gecko/20100101 Firefox/43.0",
    "Mac Mozilla": "Mozilla/5.0 (Macintosh; U; PPC Mac OS X Mach-O; en-US; rv:1.4a) Gecko/20030401",
    "Mac Safari 4": (
        "Mozilla/5.0 (Macintosh; U; Intel Mac OS X 10_6_2; de-at) AppleWebKit/531.21.8 "
        "(KHTML, like Gecko) Version/4.0.4 Safari/531.21.10"
    ),
    "Mac Safari": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_11_2) AppleWebKit/601.3.9 "
        "(KHTML, like Gecko) Version/9.0.2 Safari/601.3.9"
    ),
    "Windows Chrome": (
        "Mozilla/5.0 (Windows NT 6.1; WOW64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/43.0.2357.125 Safari/537.36"
    ),
    "Windows IE 6": "Mozilla/4.0 (compatible; MSIE 6.0; Windows NT 5.1)",
    "Windows IE 7": (
        "Mozilla/4.0 (compatible; MSIE 7.0; Windows NT 5.1; .NET CLR 1.1.4322; .NET CLR 2.0.50727)"
    ),
    "Windows IE 8": (
        "Mozilla/5.0 (compatible; MSIE 8.0; Windows NT 5.1; Trident/4.0; "
        ".NET CLR 1.1.4322; .NET CLR 2.0.50727)"
    ),
    "Windows IE 9": "Mozilla/5.0 (compatible; MSIE 9.0; Windows NT 6.1; Trident/5.0)",
    "Windows IE 10": "Mozilla/5.0 (compatible; MSIE 10.0; Windows NT 6.2; WOW64; Trident/6.0)",
    "Windows IE 11": "Mozilla/5.0 (Windows NT 6.3; WOW64; Trident/7.0; rv:11.0) like Gecko",
    "Windows Edge": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/46.0.2486.0 Safari/537.36 Edge/13.10586"
    ),
    "Windows Mozilla": (
        "Mozilla/5.0 (Windows; U; Windows NT 5.0; en-US; rv:1.4b) Gecko/20030516 Mozilla Firebird/0.6"
    ),
    "Windows Firefox": "Mozilla/5.0 (Windows NT 6.3; WOW64; rv:43.0) Gecko/20100101 Firefox/43.0",
    "iPhone": (
        "Mozilla/5.0 (iPhone; CPU iPhone OS 9_1 like Mac OS X) AppleWebKit/601.1.46 "
        "(KHTML, like Gecko) Version/9.0 Mobile/13B5110e Safari/601.1"
    ),
    "iPad": (
        "Mozilla/5.0 (iPad; CPU OS 9_1 like Mac OS X) AppleWebKit/601.1.46 "
        "(KHTML, like Gecko) Version/9.0 Mobile/13B143 Safari/601.1"
    ),
    "Android": (
        "Mozilla/5.0 (Linux; Android 5.1.1; Nexus 7 Build/LMY47V) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/47.0.2526.76 Safari/537.36"
    ),
})

DEFAULT_USER_AGENT = AGENT_ALIASES["Mac Safari"]


def resolve_user_agent(
    user_agent: str | None = None,
    user_agent_alias: str | None = None,
) -> str:
    """
    Resolve the User-Agent header value for a fetch.

    Resolution order:
    1. user_agent names a known alias -> the alias string
    2. user_agent is set -> used literally
    3. user_agent_alias names a known alias -> the alias string
    4. DEFAULT_USER_AGENT

    Unknown names never raise. An unknown user_agent is sent as-is, an
    unknown user_agent_alias falls back to the default.

    Args:
        user_agent: Alias name or literal User-Agent string
        user_agent_alias: Alias name

    Returns:
        User-Agent header value
    """
    if user_agent:
        return AGENT_ALIASES.get(user_agent, user_agent)

    if user_agent_alias:
        if user_agent_alias in AGENT_ALIASES:
            return AGENT_ALIASES[user_agent_alias]
        logger.warning(
            f"Unknown user agent alias '{user_agent_alias}', using default user agent"
        )

    return DEFAULT_USER_AGENT
