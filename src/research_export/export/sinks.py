"""Output sinks for exported Markdown"""

import logging
import shutil
import subprocess
from pathlib import Path

from research_export.errors import ClipboardError

logger = logging.getLogger(__name__)

# Tried in order; missing executables are skipped
CLIPBOARD_COMMANDS: list[list[str]] = [
    ["pbcopy"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
    ["clip"],
]


class FileSink:
    """Write Markdown to a file"""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def write(self, text: str) -> Path:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(text, encoding="utf-8")
        logger.info(f"Exported research to {self.path}")
        return self.path


class ClipboardSink:
    """Copy Markdown to the system clipboard via the first working command"""

    def __init__(self, commands: list[list[str]] | None = None, timeout: float = 5.0):
        self.commands = commands if commands is not None else CLIPBOARD_COMMANDS
        self.timeout = timeout

    def write(self, text: str) -> str:
        """Copy text and return the name of the command that succeeded

        Raises:
            ClipboardError: if no command could copy the text
        """
        attempts = []

        for command in self.commands:
            executable = shutil.which(command[0])
            if executable is None:
                continue

            try:
                subprocess.run(
                    [executable, *command[1:]],
                    input=text.encode("utf-8"),
                    check=True,
                    capture_output=True,
                    timeout=self.timeout,
                )
            except (subprocess.SubprocessError, OSError) as e:
                logger.warning(f"Clipboard command {command[0]} failed: {e}")
                attempts.append(f"{command[0]}: {e}")
                continue

            logger.info(f"Copied research to clipboard with {command[0]}")
            return command[0]

        raise ClipboardError(attempts)
