"""Dungeon Mini: a small text dungeon crawl played on the console."""

import sys

from .cli import run_session
from .config import Config
from .engine.commands import create_registry
from .engine.state import new_game_state
from .logging import configure_logging, get_logger
from .storage import GameStore, register_storage_commands

__all__ = ["main", "Config", "GameStore", "create_registry", "run_session"]


def main() -> None:
    """Entry point for the dungeon console game."""
    config = Config.from_env()

    configure_logging(
        log_level=config.log_level,
        log_file=config.log_file,
        json_logs=config.json_logs,
    )

    logger = get_logger(__name__)
    logger.info(
        "application_starting",
        database_url=config.database_url,
        log_level=config.log_level,
    )

    store = GameStore.from_url(config.database_url)
    registry = create_registry()
    register_storage_commands(registry, store, config.save_slot)

    run_session(registry, new_game_state(), sys.stdin)
