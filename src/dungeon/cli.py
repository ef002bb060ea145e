"""Console read loop."""

import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from .engine.commands import CommandRegistry, describe_room
from .engine.state import GameState
from .logging import get_logger

logger = get_logger(__name__)

BANNER = "Dungeon Mini. Type 'help' for commands."
PROMPT = "> "


def _prompted(lines: Iterable[str], out: TextIO, prompt: str) -> Iterator[str]:
    """Yield input lines, writing the prompt before each read."""
    iterator = iter(lines)
    while True:
        if prompt:
            print(prompt, end="", file=out, flush=True)
        try:
            yield next(iterator)
        except StopIteration:
            return


def run_session(
    registry: CommandRegistry,
    state: GameState,
    lines: Iterable[str],
    out: TextIO = sys.stdout,
    prompt: str = PROMPT,
) -> GameState:
    """Feed lines to the dispatcher until the game ends or input runs out."""
    logger.info("session_started", room=state.current_room)
    print(BANNER, file=out)
    print(describe_room(state), file=out)

    try:
        for line in _prompted(lines, out, prompt):
            response = registry.dispatch(state, line)
            if response:
                print(response, file=out)
            if state.is_finished:
                break
    except KeyboardInterrupt:
        print(file=out)

    logger.info(
        "session_ended",
        reason=state.end_reason or "end_of_input",
        score=state.score,
        turns=state.turns,
    )
    return state
