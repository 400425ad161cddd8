"""Watch a directory for saved research pages and export them once"""

import logging
import os
from pathlib import Path
from typing import Callable

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from research_export.errors import ResearchExportError
from research_export.export.assembler import DocumentAssembler

logger = logging.getLogger(__name__)

PAGE_SUFFIXES = {".html", ".htm"}


class ResearchPageWatcher(FileSystemEventHandler):
    """
    Export saved pages as soon as they contain research content.

    A page is exported to ``<output_dir>/<page stem>.md``. Pages whose export
    already exists are skipped, so each page is exported at most once no
    matter how many events the save produces.
    """

    def __init__(
        self,
        assembler: DocumentAssembler,
        output_dir: Path,
        on_export: Callable[[Path, Path], None] | None = None,
        include_frontmatter: bool | None = None,
    ):
        """
        Args:
            assembler: Builds the Markdown for each page
            output_dir: Directory receiving the Markdown files
            on_export: Callback(page_path, export_path) after each export
            include_frontmatter: Overrides the configured setting when given
        """
        super().__init__()
        self.assembler = assembler
        self.output_dir = Path(output_dir)
        self.on_export = on_export
        self.include_frontmatter = include_frontmatter

    def export_path_for(self, page: Path) -> Path:
        return self.output_dir / f"{page.stem}.md"

    def handle(self, path: str | bytes) -> Path | None:
        """Export a page if it is new research content; return the export path"""
        page = Path(os.fsdecode(path))
        if page.suffix.lower() not in PAGE_SUFFIXES:
            return None

        target = self.export_path_for(page)
        if target.exists():
            logger.debug(f"Already exported {page.name}, skipping")
            return None

        try:
            html = page.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.warning(f"Could not read {page}: {e}")
            return None

        if not self.assembler.has_research_content(html):
            logger.debug(f"No research content in {page.name} yet")
            return None

        try:
            self.assembler.export_to_file(
                html,
                target,
                fallback_url=page.resolve().as_uri(),
                include_frontmatter=self.include_frontmatter,
            )
        except (ResearchExportError, OSError) as e:
            logger.error(f"Error exporting {page.name}: {e}")
            return None

        if self.on_export:
            self.on_export(page, target)
        return target

    def on_created(self, event: FileSystemEvent):
        if not event.is_directory:
            self.handle(event.src_path)

    def on_modified(self, event: FileSystemEvent):
        if not event.is_directory:
            self.handle(event.src_path)

    def on_moved(self, event: FileSystemEvent):
        if not event.is_directory:
            self.handle(event.dest_path)


def start_watching(directory: Path, handler: ResearchPageWatcher) -> Observer:
    """
    Start watching a directory for research pages.

    Returns:
        Observer instance (call .stop() to stop watching)
    """
    observer = Observer()
    observer.schedule(handler, str(directory), recursive=False)
    observer.start()
    logger.info(f"Watching {directory} for research pages")
    return observer
