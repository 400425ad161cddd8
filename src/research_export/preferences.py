"""Persisted user preferences"""

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class Preferences:
    """User-facing toggles that survive between runs"""

    path: Path
    include_frontmatter: bool = False

    @classmethod
    def load(cls, path: Path, include_frontmatter: bool = False) -> "Preferences":
        """Load preferences, falling back to defaults if the file is unusable"""
        path = Path(path)
        prefs = cls(path=path, include_frontmatter=include_frontmatter)
        if not path.exists():
            return prefs

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Ignoring unreadable preferences file {path}: {e}")
            return prefs

        if isinstance(data, dict) and isinstance(data.get("include_frontmatter"), bool):
            prefs.include_frontmatter = data["include_frontmatter"]
        return prefs

    def save(self):
        data = asdict(self)
        data.pop("path")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    def toggle_frontmatter(self) -> bool:
        """Flip the front matter setting and persist it"""
        self.include_frontmatter = not self.include_frontmatter
        self.save()
        logger.info(f"Frontmatter {'enabled' if self.include_frontmatter else 'disabled'}")
        return self.include_frontmatter
