"""Shared pytest fixtures."""

import pytest
from bs4 import BeautifulSoup

from research_export.config import Settings
from research_export.converter import CitationRegistry, MarkdownRenderer

RESEARCH_PAGE = """<html>
<head><link rel="canonical" href="https://chatgpt.com/c/abc"></head>
<body>
<nav>Menu</nav>
<div class="deep-research-result">
<h1>Solar: Power</h1>
<p>Panels are efficient<span data-state="closed"><a href="https://energy.gov/solar?utm=1">energy.gov</a></span>.</p>
<ul><li>Cheap <a href="https://energy.gov/solar#costs">source</a></li><li>Clean</li></ul>
</div>
</body>
</html>
"""

RESEARCH_MARKDOWN = (
    "# Solar: Power\n\n"
    "Panels are efficient([1](https://energy.gov/solar?utm=1)).\n\n"
    "- Cheap ([1](https://energy.gov/solar#costs))\n"
    "- Clean"
)

PLAIN_PAGE = "<html><body><p>Nothing to see</p></body></html>"


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(preferences_path=tmp_path / "prefs.json")


@pytest.fixture
def render(test_settings):
    """Render an HTML fragment with a fresh registry, returning (markdown, registry)."""

    def _render(html: str, settings: Settings | None = None):
        registry = CitationRegistry()
        renderer = MarkdownRenderer(registry, settings or test_settings)
        soup = BeautifulSoup(html, "html.parser")
        return renderer.render(soup), registry

    return _render


@pytest.fixture
def research_page() -> str:
    return RESEARCH_PAGE


@pytest.fixture
def research_markdown() -> str:
    return RESEARCH_MARKDOWN


@pytest.fixture
def plain_page() -> str:
    return PLAIN_PAGE
