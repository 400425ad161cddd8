"""Assemble exportable Markdown documents from saved research pages"""

import logging
from datetime import date
from pathlib import Path

from bs4 import BeautifulSoup

from research_export.config import Settings, settings as default_settings
from research_export.converter import ConversionResult, HTMLConverter
from research_export.errors import ResearchContentNotFound
from research_export.export.page import (
    build_frontmatter,
    extract_title,
    find_research_container,
    find_source_url,
)
from research_export.export.sinks import ClipboardSink, FileSink

logger = logging.getLogger(__name__)


class DocumentAssembler:
    """Turn a research page into a Markdown document and deliver it"""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or default_settings
        self.converter = HTMLConverter(self.settings)

    def has_research_content(self, html: str) -> bool:
        soup = self.converter.parse(html)
        return find_research_container(soup, self.settings.container_selector) is not None

    def convert_page(self, soup: BeautifulSoup) -> tuple[ConversionResult, str]:
        """Convert the research container of a parsed page

        Returns:
            The conversion result and the document title

        Raises:
            ResearchContentNotFound: if the page has no research container
        """
        container = find_research_container(soup, self.settings.container_selector)

        if container is None:
            logger.warning("No deep research content found on this page")
            raise ResearchContentNotFound(self.settings.container_selector)

        result = self.converter.convert(container)
        title = extract_title(container, self.settings.default_title)
        return result, title

    def assemble(
        self,
        html: str,
        source_url: str | None = None,
        include_frontmatter: bool | None = None,
        fallback_url: str = "",
        on: date | None = None,
    ) -> str:
        """Build the final Markdown for a page

        Args:
            html: Saved page markup
            source_url: URL for the front matter; read from the page if omitted
            fallback_url: Used when neither source_url nor the page gives a URL
            include_frontmatter: Overrides the configured setting when given
            on: Export date for the front matter (default: today)
        """
        soup = self.converter.parse(html)
        result, title = self.convert_page(soup)
        markdown = result.markdown

        if include_frontmatter is None:
            include_frontmatter = self.settings.include_frontmatter

        if include_frontmatter:
            url = source_url or find_source_url(soup) or fallback_url
            markdown = build_frontmatter(title, url, on) + markdown

        logger.info(f"Assembled '{title}' with {len(result.citations)} citations")
        return markdown

    def export_to_file(
        self,
        html: str,
        path: Path | str | None = None,
        **kwargs,
    ) -> Path:
        """Assemble a page and write it to a Markdown file"""
        markdown = self.assemble(html, **kwargs)
        return FileSink(path or self.settings.export_filename).write(markdown)

    def copy_to_clipboard(
        self,
        html: str,
        sink: ClipboardSink | None = None,
        **kwargs,
    ) -> str:
        """Assemble a page and copy it to the clipboard"""
        markdown = self.assemble(html, **kwargs)
        return (sink or ClipboardSink()).write(markdown)
