"""Recursive HTML tree to Markdown renderer"""

import logging
import re
from typing import Callable

from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from research_export.config import Settings, settings as default_settings
from research_export.converter.citations import CitationRegistry

logger = logging.getLogger(__name__)

HEADING_TAGS = {f"h{level}": level for level in range(1, 7)}


def clean_markdown(md: str) -> str:
    """Cap blank lines at one and trim the document"""
    # Newline runs with whitespace-only lines between them
    md = re.sub(r"\n\s*\n\s*\n", "\n\n", md)
    md = md.strip()
    return re.sub(r"\n{3,}", "\n\n", md)


class MarkdownRenderer:
    """Render a BeautifulSoup node to Markdown, numbering links as citations.

    Each element's children are rendered first and concatenated; the result
    is then passed to the rule registered for the element's tag name. Tags
    without a rule pass their children's Markdown through unchanged.
    """

    def __init__(
        self,
        registry: CitationRegistry | None = None,
        settings: Settings | None = None,
    ):
        self.registry = registry if registry is not None else CitationRegistry()
        self.settings = settings or default_settings

        self.rules: dict[str, Callable[[Tag, str], str]] = {
            "p": self._paragraph,
            "strong": self._strong,
            "b": self._strong,
            "em": self._emphasis,
            "i": self._emphasis,
            "ul": self._list,
            "ol": self._list,
            "li": self._list_item,
            "blockquote": self._blockquote,
            "code": self._inline_code,
            "pre": self._code_block,
            "br": self._line_break,
            "a": self._link,
        }
        for tag_name in HEADING_TAGS:
            self.rules[tag_name] = self._heading

    def render(self, node: PageElement) -> str:
        """Render a node and its descendants.

        Walks the tree with an explicit stack so nesting depth is not bounded
        by the interpreter's recursion limit.
        """
        if not isinstance(node, Tag):
            return self._render_leaf(node)

        # (element, remaining children, rendered child fragments)
        stack = [(node, iter(node.children), [])]
        while stack:
            element, children, fragments = stack[-1]
            child = next(children, None)

            if child is None:
                stack.pop()
                fragment = self._format(element, "".join(fragments))
                if not stack:
                    return fragment
                stack[-1][2].append(fragment)
            elif isinstance(child, Tag):
                stack.append((child, iter(child.children), []))
            else:
                fragments.append(self._render_leaf(child))

        return ""

    def _render_leaf(self, node: PageElement) -> str:
        if isinstance(node, PreformattedString):
            # Comments, CDATA, doctypes, processing instructions
            return ""
        if isinstance(node, NavigableString):
            return str(node)
        return ""

    def _format(self, node: Tag, content: str) -> str:
        """Apply the element's rule to its rendered children"""
        if self.is_citation_marker(node):
            return self._citation_marker(node, content)

        rule = self.rules.get(node.name)
        if rule is None:
            return content
        return rule(node, content)

    def is_citation_marker(self, node: Tag) -> bool:
        return (
            node.name == self.settings.citation_marker_tag
            and node.get(self.settings.citation_marker_attr)
            == self.settings.citation_marker_value
        )

    def _cite(self, href: str) -> str:
        number = self.registry.resolve(href)
        return f"([{number}]({href}))"

    def _heading(self, node: Tag, content: str) -> str:
        level = HEADING_TAGS[node.name]
        return f"{'#' * level} {content.strip()}\n\n"

    def _paragraph(self, node: Tag, content: str) -> str:
        return f"{content.strip()}\n\n"

    def _strong(self, node: Tag, content: str) -> str:
        return f"**{content}**"

    def _emphasis(self, node: Tag, content: str) -> str:
        return f"*{content}*"

    def _list(self, node: Tag, content: str) -> str:
        return f"{content}\n"

    def _list_item(self, node: Tag, content: str) -> str:
        marker = "- "
        if self.settings.number_ordered_lists:
            marker = self._ordered_marker(node) or marker
        return f"{marker}{content.strip()}\n"

    def _ordered_marker(self, node: Tag) -> str | None:
        """'N. ' for an item of an <ol>, None otherwise"""
        parent = node.parent
        if parent is None or parent.name != "ol":
            return None

        try:
            start = int(parent.get("start", 1))
        except (TypeError, ValueError):
            start = 1

        position = 0
        for sibling in parent.find_all("li", recursive=False):
            if sibling is node:
                break
            position += 1
        return f"{start + position}. "

    def _blockquote(self, node: Tag, content: str) -> str:
        return f"> {content.strip()}\n\n"

    def _inline_code(self, node: Tag, content: str) -> str:
        return f"`{content}`"

    def _code_block(self, node: Tag, content: str) -> str:
        return f"```\n{content}\n```\n\n"

    def _line_break(self, node: Tag, content: str) -> str:
        return "\n"

    def _link(self, node: Tag, content: str) -> str:
        href = node.get("href")
        if not href:
            return content

        # Emitted by the enclosing citation marker instead
        if node.find_parent(self.is_citation_marker) is not None:
            return ""

        return self._cite(href)

    def _citation_marker(self, node: Tag, content: str) -> str:
        link = node.find("a", href=True)
        if link is None:
            logger.debug("Citation marker without a link, dropping it")
            return ""
        return self._cite(link["href"])
