"""HTML to Markdown converter"""

import logging
from dataclasses import dataclass, field

from bs4 import BeautifulSoup
from bs4.element import PageElement

from research_export.config import Settings, settings as default_settings
from research_export.converter.citations import Citation, CitationRegistry
from research_export.converter.renderer import MarkdownRenderer, clean_markdown

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Markdown document plus the sources it cites"""

    markdown: str
    citations: list[Citation] = field(default_factory=list)


def convert(root: PageElement, settings: Settings | None = None) -> ConversionResult:
    """Convert a parsed HTML tree to Markdown with numbered citations"""
    registry = CitationRegistry()
    renderer = MarkdownRenderer(registry, settings)

    markdown = clean_markdown(renderer.render(root))

    logger.debug(f"Converted {len(markdown)} chars with {len(registry)} citations")
    return ConversionResult(markdown=markdown, citations=registry.citations())


class HTMLConverter:
    """Convert HTML content to Markdown"""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or default_settings

    def parse(self, html: str) -> BeautifulSoup:
        return BeautifulSoup(html, self.settings.html_parser)

    def convert(self, root: PageElement) -> ConversionResult:
        return convert(root, self.settings)

    def to_markdown(self, html: str) -> str:
        """Convert an HTML string to Markdown"""
        if not html:
            return ""

        return self.convert(self.parse(html)).markdown
