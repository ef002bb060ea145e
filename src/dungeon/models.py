"""Database models for Dungeon Mini."""

import datetime as dt

from sqlmodel import Field, SQLModel


class SavedGame(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    slot: str = Field(unique=True, index=True)
    state_blob: bytes  # zlib-compressed pickle of GameState
    player_name: str
    score: int = 0
    turns: int = 0
    saved_at: dt.datetime = Field(
        default_factory=lambda: dt.datetime.now(dt.UTC)
    )


class ScoreRecord(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    session_id: str = Field(unique=True, index=True)
    player_name: str
    score: int = Field(index=True)
    recorded_at: dt.datetime = Field(
        default_factory=lambda: dt.datetime.now(dt.UTC)
    )
