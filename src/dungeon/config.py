"""Configuration for Dungeon Mini."""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Config:
    """Application configuration."""

    database_url: str = "sqlite:///./dungeon.db"
    save_slot: str = "default"
    log_level: str = "WARNING"
    log_file: Path | None = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        log_file = os.getenv("DUNGEON_LOG_FILE")

        return cls(
            database_url=os.getenv("DUNGEON_DATABASE_URL", cls.database_url),
            save_slot=os.getenv("DUNGEON_SAVE_SLOT", cls.save_slot),
            log_level=os.getenv("DUNGEON_LOG_LEVEL", cls.log_level),
            log_file=Path(log_file) if log_file else None,
            json_logs=os.getenv("DUNGEON_JSON_LOGS", "").lower()
            in ("true", "1", "yes"),
        )
