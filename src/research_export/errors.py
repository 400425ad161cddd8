"""Exceptions raised by the export pipeline"""


class ResearchExportError(Exception):
    """Base class for export errors"""


class ResearchContentNotFound(ResearchExportError):
    """The page holds no research result container"""

    def __init__(self, selector: str):
        self.selector = selector
        super().__init__(f"No deep research content found (selector: {selector!r})")


class ClipboardError(ResearchExportError):
    """Every clipboard mechanism failed"""

    def __init__(self, attempts: list[str]):
        self.attempts = attempts
        detail = "; ".join(attempts) if attempts else "no clipboard command available"
        super().__init__(f"Could not copy to clipboard: {detail}")
