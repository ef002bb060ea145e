"""Persistence layer: saved games and the score table."""

import datetime as dt
import pickle
import zlib
from functools import partial

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, col, create_engine, select

from .engine.commands import CommandRegistry
from .engine.errors import NotFound
from .engine.state import GameState
from .logging import get_logger
from .models import SavedGame, ScoreRecord

logger = get_logger(__name__)

DEFAULT_SLOT = "default"
SCORE_LIMIT = 10


class GameStore:
    """Saves, restores, and ranks game sessions in a SQL database."""

    def __init__(self, engine: Engine):
        self.engine = engine
        SQLModel.metadata.create_all(engine)

    @classmethod
    def from_url(cls, database_url: str) -> "GameStore":
        return cls(create_engine(database_url))

    def save(self, state: GameState, slot: str = DEFAULT_SLOT) -> None:
        """Store the whole state under a slot and update the session's score."""
        now = dt.datetime.now(dt.UTC)
        blob = zlib.compress(pickle.dumps(state))

        with Session(self.engine) as db_session:
            statement = select(SavedGame).where(SavedGame.slot == slot)
            saved_game = db_session.exec(statement).first()

            if saved_game is None:
                saved_game = SavedGame(
                    slot=slot,
                    state_blob=blob,
                    player_name=state.player.name,
                    score=state.score,
                    turns=state.turns,
                    saved_at=now,
                )
                db_session.add(saved_game)
            else:
                saved_game.state_blob = blob
                saved_game.player_name = state.player.name
                saved_game.score = state.score
                saved_game.turns = state.turns
                saved_game.saved_at = now

            statement = select(ScoreRecord).where(
                ScoreRecord.session_id == state.session_id
            )
            record = db_session.exec(statement).first()

            if record is None:
                record = ScoreRecord(
                    session_id=state.session_id,
                    player_name=state.player.name,
                    score=state.score,
                    recorded_at=now,
                )
                db_session.add(record)
            else:
                record.player_name = state.player.name
                record.score = state.score
                record.recorded_at = now

            db_session.commit()

        logger.info("game_saved", slot=slot, score=state.score, turns=state.turns)

    def load(self, slot: str = DEFAULT_SLOT) -> GameState:
        """Restore the state stored under a slot."""
        with Session(self.engine) as db_session:
            statement = select(SavedGame).where(SavedGame.slot == slot)
            saved_game = db_session.exec(statement).first()
            if saved_game is None:
                raise NotFound(f"No saved game in slot {slot!r}.")
            state = pickle.loads(zlib.decompress(saved_game.state_blob))

        logger.info("game_loaded", slot=slot, score=state.score, turns=state.turns)
        return state

    def list_scores(self, limit: int = SCORE_LIMIT) -> list[ScoreRecord]:
        """One row per session, best scores first; ties go to the most recent."""
        with Session(self.engine) as db_session:
            statement = (
                select(ScoreRecord)
                .order_by(
                    col(ScoreRecord.score).desc(),
                    col(ScoreRecord.recorded_at).desc(),
                )
                .limit(limit)
            )
            return list(db_session.exec(statement).all())


def _cmd_save(store: GameStore, slot: str, state: GameState, args: list[str]) -> str:
    """Handle SAVE command."""
    store.save(state, slot)
    return "Game saved."


def _cmd_load(store: GameStore, slot: str, state: GameState, args: list[str]) -> str:
    """Handle LOAD command."""
    state.restore(store.load(slot))
    return f"Game loaded. You are in {state.current_room}."


def _cmd_scores(store: GameStore, slot: str, state: GameState, args: list[str]) -> str:
    """Handle SCORES command."""
    records = store.list_scores()
    if not records:
        return "No scores yet."
    lines = ["Top scores:"]
    for rank, record in enumerate(records, start=1):
        lines.append(f"  {rank}. {record.player_name} - {record.score}")
    return "\n".join(lines)


def register_storage_commands(
    registry: CommandRegistry, store: GameStore, slot: str = DEFAULT_SLOT
) -> None:
    """Add save, load, and scores to a registry."""
    registry.register("save", partial(_cmd_save, store, slot), "save the game")
    registry.register("load", partial(_cmd_load, store, slot), "load the saved game")
    registry.register("scores", partial(_cmd_scores, store, slot), "show the best scores")
