"""Shared test fixtures for Dungeon Mini."""

from pathlib import Path

import pytest
from sqlmodel import create_engine

from dungeon.engine.commands import CommandRegistry, create_registry
from dungeon.engine.state import GameState, new_game_state
from dungeon.storage import GameStore, register_storage_commands


@pytest.fixture
def state() -> GameState:
    return new_game_state()


@pytest.fixture
def registry() -> CommandRegistry:
    return create_registry()


@pytest.fixture
def db_engine(tmp_path: Path):
    return create_engine(f"sqlite:///{tmp_path}/test.db")


@pytest.fixture
def store(db_engine) -> GameStore:
    return GameStore(db_engine)


@pytest.fixture
def full_registry(registry: CommandRegistry, store: GameStore) -> CommandRegistry:
    register_storage_commands(registry, store)
    return registry


@pytest.fixture
def in_forest(state: GameState) -> GameState:
    state.current_room = "Forest"
    return state
