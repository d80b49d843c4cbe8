"""Shared fixtures for page attribute tests."""
from pathlib import Path
from unittest.mock import Mock

import pytest


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep option defaults independent of the developer's environment."""
    monkeypatch.delenv("PAGE_ATTRIBUTES_USER_AGENT", raising=False)
    monkeypatch.delenv("PAGE_ATTRIBUTES_TIMEOUT", raising=False)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to HTML fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def rubyinside_path(fixtures_dir: Path) -> Path:
    """Path to a basic real world blog post with og:title and feed links."""
    return fixtures_dir / "rubyinside.html"


@pytest.fixture
def rubyinside_html(rubyinside_path: Path) -> str:
    return rubyinside_path.read_text(encoding="utf-8")


@pytest.fixture
def relative_imgs_html(fixtures_dir: Path) -> str:
    """Blog post whose images use relative and absolute sources of varying size."""
    return (fixtures_dir / "relative_imgs.html").read_text(encoding="utf-8")


@pytest.fixture
def videos_html(fixtures_dir: Path) -> str:
    """Blog post embedding one YouTube object and one non-video iframe."""
    return (fixtures_dir / "videos.html").read_text(encoding="utf-8")


@pytest.fixture
def mock_response():
    """Build a requests.Response stand-in carrying the given HTML."""

    def _build(html: str) -> Mock:
        response = Mock()
        response.content = html.encode("utf-8")
        response.raise_for_status = Mock()
        return response

    return _build
