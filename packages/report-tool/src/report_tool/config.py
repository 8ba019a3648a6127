from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from tree_renderer.components.markup import DEFAULT_FIGURE_WIDTH


class Settings(BaseSettings):
    """Report generation settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FIGTREE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Output files
    report_filename: str = "report.tex"
    index_filename: str = "main.tex"
    section_filename: str = "section.tex"

    # Rendering
    figure_width: str = DEFAULT_FIGURE_WIDTH
    template_path: Path | None = None

    # Scanning
    strict_extensions: bool = False

    # Logging
    log_level: str = "WARNING"
