"""Configuration management using pydantic-settings"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="RESEARCH_EXPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Page
    container_selector: str = ".deep-research-result"
    html_parser: str = "html.parser"
    default_title: str = "ChatGPT Research"

    # Citation markers: <span data-state="closed"><a href=...></a></span>
    citation_marker_tag: str = "span"
    citation_marker_attr: str = "data-state"
    citation_marker_value: str = "closed"

    # Rendering
    number_ordered_lists: bool = False

    # Export
    export_filename: str = "chatgpt-research-export.md"
    include_frontmatter: bool = False
    preferences_path: Path = Path.home() / ".research_export.json"


settings = Settings()
