"""Image and video reference extraction."""
import re
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.element import Tag
from loguru import logger


VIDEO_HOST_PATTERN = re.compile(
    r"(?:youtube(?:-nocookie)?\.com|youtu\.be|vimeo\.com|dailymotion\.com|dai\.ly"
    r"|blip\.tv|wistia\.(?:com|net)|brightcove\.(?:com|net)|ted\.com|twitch\.tv)",
    re.IGNORECASE,
)

VIDEO_MIME_TYPES = ("application/x-shockwave-flash", "video/")

VIDEO_TAGS = ["embed", "object", "iframe", "video"]

# "120" or "120px"; percentages and other units cannot be verified
_PIXEL_DIMENSION = re.compile(r"^\s*(\d+)\s*(?:px)?\s*$", re.IGNORECASE)


def resolve_url(src: str, base_url: str | None) -> str:
    """Resolve src against base_url, returning src unchanged without a base."""
    if not base_url or src.startswith("data:"):
        return src
    return urljoin(base_url, src)


def _parse_dimension(value) -> int | None:
    if not isinstance(value, str):
        return None
    match = _PIXEL_DIMENSION.match(value)
    return int(match.group(1)) if match else None


def _pick_from_srcset(srcset: str) -> str | None:
    """Return the first URL listed in a srcset attribute."""
    for part in srcset.split(","):
        part = part.strip()
        if part:
            return part.split()[0]
    return None


def _image_source(img: Tag) -> str | None:
    # Priority: src -> data-src (lazy loading) -> srcset
    for attr in ("src", "data-src"):
        value = img.get(attr)
        if isinstance(value, str) and value.strip():
            return value.strip()

    srcset = img.get("srcset")
    if isinstance(srcset, str):
        return _pick_from_srcset(srcset)
    return None


def _meets_minimum_size(img: Tag, min_width: int, min_height: int) -> bool:
    width = _parse_dimension(img.get("width"))
    height = _parse_dimension(img.get("height"))
    if width is None or height is None:
        return False
    return width >= min_width and height >= min_height


def extract_images(
    soup: BeautifulSoup,
    base_url: str | None = None,
    *,
    image_extractor: bool = False,
    all_images: bool = False,
    min_width: int = 100,
    min_height: int = 100,
) -> list[str]:
    """
    Collect image URLs in document order, one entry per <img>.

    Collection is off unless image_extractor or all_images is set. With
    all_images every <img> is returned; otherwise only images whose declared
    width and height meet the minimums. Images without pixel dimensions are
    excluded from the filtered set since their size cannot be verified.

    Args:
        soup: Parsed document
        base_url: URL relative sources are resolved against
        image_extractor: Enable image collection
        all_images: Collect every image, skipping the size filter
        min_width: Minimum declared width in pixels
        min_height: Minimum declared height in pixels

    Returns:
        Image URLs, one per kept <img>, repeats included
    """
    if not (image_extractor or all_images):
        return []

    images: list[str] = []

    for img in soup.find_all("img"):
        src = _image_source(img)
        if not src:
            continue
        if not all_images and not _meets_minimum_size(img, min_width, min_height):
            continue

        images.append(resolve_url(src, base_url))

    logger.debug(f"Extracted {len(images)} images (all_images={all_images})")
    return images


def _video_source(element: Tag) -> str | None:
    src = element.get("src")
    if isinstance(src, str) and src.strip():
        return src.strip()

    if element.name == "object":
        data = element.get("data")
        if isinstance(data, str) and data.strip():
            return data.strip()
        for param in element.find_all("param"):
            name = param.get("name")
            value = param.get("value")
            if isinstance(name, str) and name.lower() in ("movie", "src") and isinstance(value, str):
                return value.strip()

    if element.name == "video":
        source = element.find("source", src=True)
        if source is not None:
            return source["src"].strip()

    return None


def _is_video(element: Tag, src: str) -> bool:
    if element.name == "video":
        return True
    if VIDEO_HOST_PATTERN.search(src):
        return True

    mime_type = element.get("type")
    return (
        element.name in ("embed", "object")
        and isinstance(mime_type, str)
        and mime_type.lower().startswith(VIDEO_MIME_TYPES)
    )


def extract_videos(soup: BeautifulSoup) -> list[dict[str, str]]:
    """
    Collect embedded video references in document order.

    Candidates are <embed>, <iframe>, <video> and <object> elements; an
    <object> wrapping an <embed> is reported once, through its <embed>.
    Each reference holds every attribute of the element plus a "src" key
    with the source exactly as written. Identical embeds are all reported.
    """
    videos = []

    for element in soup.find_all(VIDEO_TAGS):
        if element.name == "object" and element.find("embed") is not None:
            continue

        src = _video_source(element)
        if not src or not _is_video(element, src):
            continue

        reference = {
            name: " ".join(value) if isinstance(value, list) else value
            for name, value in element.attrs.items()
        }
        reference["src"] = src
        videos.append(reference)

    logger.debug(f"Extracted {len(videos)} videos")
    return videos
