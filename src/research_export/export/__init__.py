from .assembler import DocumentAssembler
from .sinks import ClipboardSink, FileSink
from .watcher import ResearchPageWatcher, start_watching

__all__ = [
    "DocumentAssembler",
    "ClipboardSink",
    "FileSink",
    "ResearchPageWatcher",
    "start_watching",
]
