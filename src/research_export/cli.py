"""Command line interface for exporting deep research pages"""

import argparse
import logging
import sys
import time
from pathlib import Path

from research_export.config import settings
from research_export.errors import ResearchExportError
from research_export.export.assembler import DocumentAssembler
from research_export.export.watcher import ResearchPageWatcher, start_watching
from research_export.preferences import Preferences

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Setup logging configuration"""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="research-export",
        description="Export ChatGPT deep research pages to Markdown with numbered citations",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    frontmatter_flag = argparse.ArgumentParser(add_help=False)
    frontmatter_flag.add_argument(
        "--frontmatter",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Prepend a title/url/date header (default: saved preference)",
    )

    export = subparsers.add_parser(
        "export", parents=[frontmatter_flag], help="Write a saved page to a Markdown file"
    )
    export.add_argument("input", type=Path, help="Saved HTML page")
    export.add_argument(
        "--output",
        "-o",
        type=Path,
        help=f"Markdown file to write (default: {settings.export_filename})",
    )
    export.add_argument("--url", help="Source URL recorded in the front matter")

    copy = subparsers.add_parser(
        "copy", parents=[frontmatter_flag], help="Copy a saved page to the clipboard as Markdown"
    )
    copy.add_argument("input", type=Path, help="Saved HTML page")
    copy.add_argument("--url", help="Source URL recorded in the front matter")

    watch = subparsers.add_parser(
        "watch",
        parents=[frontmatter_flag],
        help="Export pages saved into a directory as research content appears",
    )
    watch.add_argument("directory", type=Path, help="Directory to watch")
    watch.add_argument(
        "--output-dir",
        "-o",
        type=Path,
        help="Directory for Markdown files (default: the watched directory)",
    )

    frontmatter = subparsers.add_parser("frontmatter", help="Show or change the front matter preference")
    frontmatter.add_argument(
        "action",
        choices=["on", "off", "toggle", "status"],
        nargs="?",
        default="status",
    )

    return parser


def resolve_frontmatter(flag: bool | None, prefs: Preferences) -> bool:
    """CLI flag wins over the saved preference"""
    return prefs.include_frontmatter if flag is None else flag


def run_export(args, assembler: DocumentAssembler, prefs: Preferences):
    html = args.input.read_text(encoding="utf-8", errors="replace")
    path = assembler.export_to_file(
        html,
        args.output,
        source_url=args.url,
        fallback_url=args.input.resolve().as_uri(),
        include_frontmatter=resolve_frontmatter(args.frontmatter, prefs),
    )
    print(f"Deep research content exported to {path}")


def run_copy(args, assembler: DocumentAssembler, prefs: Preferences):
    html = args.input.read_text(encoding="utf-8", errors="replace")
    assembler.copy_to_clipboard(
        html,
        source_url=args.url,
        fallback_url=args.input.resolve().as_uri(),
        include_frontmatter=resolve_frontmatter(args.frontmatter, prefs),
    )
    print("Deep research content copied to clipboard!")


def run_watch(args, assembler: DocumentAssembler, prefs: Preferences):
    handler = ResearchPageWatcher(
        assembler,
        output_dir=args.output_dir or args.directory,
        on_export=lambda page, target: print(f"Exported {page.name} -> {target}"),
        include_frontmatter=resolve_frontmatter(args.frontmatter, prefs),
    )

    # Pages saved before the watch started
    for page in sorted(args.directory.iterdir()):
        if page.is_file():
            handler.handle(str(page))

    observer = start_watching(args.directory, handler)
    interrupted = False
    try:
        while observer.is_alive():
            time.sleep(1)
    except KeyboardInterrupt:
        interrupted = True
        logger.info("Shutting down...")
    finally:
        observer.stop()
        observer.join()

    if not interrupted:
        logger.error(f"Watcher for {args.directory} stopped unexpectedly")
        sys.exit(1)


def run_frontmatter(args, prefs: Preferences):
    if args.action == "toggle":
        prefs.toggle_frontmatter()
    elif args.action in ("on", "off"):
        prefs.include_frontmatter = args.action == "on"
        prefs.save()
    print(f"Frontmatter {'enabled' if prefs.include_frontmatter else 'disabled'}")


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    prefs = Preferences.load(settings.preferences_path, settings.include_frontmatter)

    if args.command == "frontmatter":
        run_frontmatter(args, prefs)
        return

    assembler = DocumentAssembler(settings)
    try:
        if args.command == "export":
            run_export(args, assembler, prefs)
        elif args.command == "copy":
            run_copy(args, assembler, prefs)
        elif args.command == "watch":
            run_watch(args, assembler, prefs)
    except ResearchExportError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
