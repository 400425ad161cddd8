"""Export ChatGPT deep research results to Markdown with numbered citations"""

from .converter import ConversionResult, HTMLConverter, convert

__all__ = ["ConversionResult", "HTMLConverter", "convert"]
