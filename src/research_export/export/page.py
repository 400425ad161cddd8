"""Locating research content in a saved page and building its header"""

import re
from datetime import date

from bs4 import BeautifulSoup, Tag


def find_research_container(soup: BeautifulSoup, selector: str) -> Tag | None:
    """Return the first element matching the container selector"""
    return soup.select_one(selector)


def extract_title(container: Tag, default: str) -> str:
    """Text of the first <h1> inside the container, or the default"""
    h1 = container.find("h1")
    if h1 is None:
        return default
    return h1.get_text().strip()


def sanitize_title(title: str) -> str:
    """Make a title safe for a double-quoted YAML scalar"""
    title = title.replace(":", "-")
    title = title.replace("\\", "\\\\")
    title = title.replace('"', '\\"')
    return re.sub(r"\s+", " ", title).strip()


def build_frontmatter(title: str, url: str, on: date | None = None) -> str:
    """Front matter block with title, source URL and export date"""
    on = on or date.today()
    return (
        "---\n"
        f'title: "{sanitize_title(title)}"\n'
        f"url: {url}\n"
        f"date: {on.isoformat()}\n"
        "---\n"
        "\n"
    )


def find_source_url(soup: BeautifulSoup) -> str | None:
    """URL the page was saved from, if the page records it"""
    canonical = soup.find("link", rel="canonical", href=True)
    if canonical is not None:
        return canonical["href"]

    og_url = soup.find("meta", property="og:url", content=True)
    if og_url is not None:
        return og_url["content"]

    return None
