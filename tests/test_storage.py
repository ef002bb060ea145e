"""Tests for saved games and scores."""

import pytest

from dungeon.engine.commands import CommandRegistry
from dungeon.engine.errors import NotFound
from dungeon.engine.state import GameState, new_game_state
from dungeon.storage import GameStore


def test_save_load_roundtrip(store: GameStore, in_forest: GameState):
    in_forest.player.hp = 13
    in_forest.player.inventory.append(in_forest.room.items.pop())
    in_forest.score = 21

    store.save(in_forest)
    restored = store.load()

    assert restored.current_room == "Forest"
    assert restored.player.hp == 13
    assert restored.player.attack == 5
    assert [item.name for item in restored.player.inventory] == ["Small Potion"]
    assert restored.rooms["Forest"].items == []
    assert restored.score == 21


def test_save_overwrites_slot(store: GameStore, state: GameState):
    store.save(state)
    state.current_room = "Cave"
    store.save(state)
    assert store.load().current_room == "Cave"


def test_slots_are_separate(store: GameStore, state: GameState):
    store.save(state, "first")
    state.current_room = "Cave"
    store.save(state, "second")
    assert store.load("first").current_room == "Square"
    assert store.load("second").current_room == "Cave"


def test_load_missing_slot(store: GameStore):
    with pytest.raises(NotFound):
        store.load("nothing-here")


def test_list_scores(store: GameStore):
    for score in (5, 30, 12):
        state = new_game_state()
        state.score = score
        store.save(state)
    records = store.list_scores()
    assert [record.score for record in records] == [30, 12, 5]
    assert store.list_scores(limit=1)[0].score == 30


def test_one_score_per_session(store: GameStore, state: GameState):
    """Saving again updates the session's leaderboard entry."""
    state.score = 4
    store.save(state)
    state.score = 9
    store.save(state, "backup")
    other = new_game_state()
    other.score = 6
    store.save(other)

    assert [record.score for record in store.list_scores()] == [9, 6]


def test_loaded_session_keeps_its_score_entry(store: GameStore, state: GameState):
    state.score = 3
    store.save(state)
    restored = store.load()
    restored.score = 8
    store.save(restored)

    assert restored.session_id == state.session_id
    assert [record.score for record in store.list_scores()] == [8]


def test_list_scores_empty(store: GameStore):
    assert store.list_scores() == []


def test_save_and_load_commands(full_registry: CommandRegistry, state: GameState):
    full_registry.dispatch(state, "move north")
    assert full_registry.dispatch(state, "save") == "Game saved."
    saved_score = state.score
    full_registry.dispatch(state, "move east")
    player = state.player

    result = full_registry.dispatch(state, "load")

    assert result == "Game loaded. You are in Forest."
    assert state.current_room == "Forest"
    assert state.player is not player
    assert state.score == saved_score + 1


def test_load_command_without_save(full_registry: CommandRegistry, state: GameState):
    result = full_registry.dispatch(state, "load")
    assert result == "Error: No saved game in slot 'default'."
    assert state.score == 0


def test_scores_command(full_registry: CommandRegistry, state: GameState):
    assert full_registry.dispatch(state, "scores") == "No scores yet."
    full_registry.dispatch(state, "look")
    full_registry.dispatch(state, "save")
    assert full_registry.dispatch(state, "scores") == "Top scores:\n  1. Hero - 2"
