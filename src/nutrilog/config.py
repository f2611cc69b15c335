"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("NUTRILOG_ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_file: Path = Path("nutrition_data.json")
    export_dir: Path = Path("exports")
    autosave: bool = True
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="NUTRILOG_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def resolve_export_path(export_dir: Path, filename: str | None) -> Path:
    """Return a CSV path inside the export directory for a bare filename."""
    cleaned = (filename or "").strip()
    if not cleaned:
        cleaned = "nutrition_export.csv"
    name = Path(cleaned).name
    if not name.lower().endswith(".csv"):
        name = f"{name}.csv"
    return export_dir / name
