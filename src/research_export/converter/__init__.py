from .citations import Citation, CitationRegistry, link_key
from .markdown import ConversionResult, HTMLConverter, convert
from .renderer import MarkdownRenderer, clean_markdown

__all__ = [
    "Citation",
    "CitationRegistry",
    "link_key",
    "ConversionResult",
    "HTMLConverter",
    "convert",
    "MarkdownRenderer",
    "clean_markdown",
]
