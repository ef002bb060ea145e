"""Mutable per-session game state.

Everything here is plain dataclasses, so a GameState can be pickled
whole for persistence.
"""

from dataclasses import dataclass, field
from uuid import uuid4

from .loader import START_ROOM, load_world, new_player
from .world import Player, Room

# Reasons a session can end
END_EXIT = "exit"
END_DEATH = "death"


@dataclass
class GameState:
    """The single context passed to every command."""

    player: Player
    rooms: dict[str, Room] = field(default_factory=dict)
    current_room: str = ""
    score: int = 0
    turns: int = 0
    session_id: str = field(default_factory=lambda: uuid4().hex)

    is_finished: bool = False
    end_reason: str | None = None

    @property
    def room(self) -> Room:
        """The room the player is standing in."""
        return self.rooms[self.current_room]

    def add_score(self, points: int) -> None:
        self.score += points

    def finish(self, reason: str) -> None:
        self.is_finished = True
        self.end_reason = reason

    def restore(self, other: "GameState") -> None:
        """Replace this session's contents with a loaded one, in place."""
        self.player = other.player
        self.rooms = other.rooms
        self.current_room = other.current_room
        self.score = other.score
        self.turns = other.turns
        self.session_id = other.session_id
        self.is_finished = other.is_finished
        self.end_reason = other.end_reason


def new_game_state() -> GameState:
    """Create a fresh session in the starting room."""
    return GameState(
        player=new_player(),
        rooms=load_world(),
        current_room=START_ROOM,
    )
