"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseModel):
    """Storage configuration."""

    # JSON file the address book is loaded from at startup and saved to
    address_book_file_path: Path = Path("data") / "addressbook.json"


class HistorySettings(BaseModel):
    """Undo/redo history configuration."""

    # Maximum number of undo snapshots kept in memory
    # None keeps every snapshot for the lifetime of the process
    max_depth: int | None = Field(default=None, ge=0)


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None

    # Print spans and logs to the console
    console: bool = True


class Settings(BaseSettings):
    """Application settings.

    Set environment variables (or a .env file) to override, using ``__`` for
    nested values:

        ENVIRONMENT=production
        STORAGE__ADDRESS_BOOK_FILE_PATH=/var/lib/rolodex/addressbook.json
        HISTORY__MAX_DEPTH=50
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["test", "development", "production"] = "development"
    debug: bool = False

    # Nested settings
    storage: StorageSettings = StorageSettings()
    history: HistorySettings = HistorySettings()
    observability: ObservabilitySettings = ObservabilitySettings()
