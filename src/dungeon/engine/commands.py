"""Command registry, dispatch, and the built-in actions.

CommandRegistry.dispatch(state, raw_line) -> str is the main entry point.
It tokenizes the line, looks up the verb, and runs the registered action.
Actions mutate state in place and return descriptive text; failures are
raised as CommandError subclasses and turned into a one-line message
here, so a bad command never ends the session.
"""

import gc
import tracemalloc
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial

from ..logging import get_logger
from .combat import fight
from .errors import CommandError, InvalidArgument, NotFound, UnknownCommand
from .items import apply_item
from .state import END_DEATH, END_EXIT, GameState

logger = get_logger(__name__)

Action = Callable[[GameState, list[str]], str]

# Points awarded for every command that completes without error
COMMAND_REWARD = 1

MEGABYTE = 1024 * 1024
DEFAULT_ALLOC_COUNT = 10
MAX_ALLOC_COUNT = 1024
ALLOC_USAGE = f"Usage: alloc [count], count from 0 to {MAX_ALLOC_COUNT}"


@dataclass
class Command:
    """A registered verb."""

    name: str
    action: Action
    description: str = ""


class CommandRegistry:
    """Maps lowercase verbs to actions and runs them against a GameState."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register(self, name: str, action: Action, description: str = "") -> None:
        """Register an action under a verb, replacing any previous one."""
        name = name.lower()
        self._commands[name] = Command(name, action, description)

    def names(self) -> list[str]:
        return list(self._commands)

    def commands(self) -> list[Command]:
        return list(self._commands.values())

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._commands

    def dispatch(self, state: GameState, raw_line: str) -> str:
        """Run one line of input and return the response text."""
        line = raw_line.strip()
        if not line:
            return ""
        if state.is_finished:
            return "The game is over."

        verb, *args = line.split()
        verb = verb.lower()

        try:
            command = self._commands.get(verb)
            if command is None:
                raise UnknownCommand(verb)
            result = command.action(state, args)
        except CommandError as exc:
            logger.info(
                "command_failed",
                verb=verb,
                error=type(exc).__name__,
                message=str(exc),
            )
            return f"Error: {exc}"
        except Exception as exc:
            logger.exception("command_crashed", verb=verb)
            return f"Unexpected error: {type(exc).__name__}: {exc}"

        state.turns += 1
        state.add_score(COMMAND_REWARD)
        if state.player.is_dead and not state.is_finished:
            state.finish(END_DEATH)
            logger.info("player_died", verb=verb, hp=state.player.hp)
            result += "\nYou have died... Game over."
        logger.debug(
            "command_dispatched",
            verb=verb,
            args=args,
            score=state.score,
            turns=state.turns,
        )
        return result


def describe_room(state: GameState) -> str:
    """Name, description, items, monster, and exits of the current room."""
    room = state.room
    lines = [f"{room.name}: {room.description}"]
    if room.items:
        lines.append("Items: " + ", ".join(item.name for item in room.items))
    if room.monster is not None:
        monster = room.monster
        lines.append(
            f"There is a monster here: {monster.name} "
            f"(level {monster.level}, HP {monster.hp})"
        )
    if room.exits:
        lines.append("Exits: " + ", ".join(room.exits))
    return "\n".join(lines)


def _joined_name(args: list[str], usage: str) -> str:
    if not args:
        raise InvalidArgument(f"Name an item (for example: {usage})")
    return " ".join(args)


def _cmd_help(registry: CommandRegistry, state: GameState, args: list[str]) -> str:
    """Handle HELP command."""
    lines = ["Commands:"]
    for command in registry.commands():
        if command.description:
            lines.append(f"  {command.name} - {command.description}")
        else:
            lines.append(f"  {command.name}")
    return "\n".join(lines)


def _cmd_look(state: GameState, args: list[str]) -> str:
    """Handle LOOK command."""
    return describe_room(state)


def _cmd_move(state: GameState, args: list[str]) -> str:
    """Handle MOVE command."""
    if len(args) != 1:
        raise InvalidArgument("Give one direction (for example: move north)")
    direction = args[0].lower()
    destination = state.room.exits.get(direction)
    if destination is None:
        raise InvalidArgument(f"There is no way {direction}.")
    state.current_room = destination
    return f"You move to {destination}.\n" + describe_room(state)


def _cmd_take(state: GameState, args: list[str]) -> str:
    """Handle TAKE command."""
    name = _joined_name(args, "take Small Potion")
    room = state.room
    item = room.find_item(name)
    if item is None:
        raise NotFound(f"There is no {name} here.")
    room.items.remove(item)
    state.player.inventory.append(item)
    return f"You take the {item.name}."


def _cmd_inventory(state: GameState, args: list[str]) -> str:
    """Handle INVENTORY command."""
    player = state.player
    if not player.inventory:
        return "Inventory is empty."

    groups: dict[str, list[str]] = {}
    for item in player.inventory:
        label = item.name
        if item is player.equipped:
            label += " (equipped)"
        groups.setdefault(item.kind, []).append(label)

    lines = []
    for kind in sorted(groups):
        lines.append(f"{kind}:")
        for label in sorted(groups[kind], key=str.casefold):
            lines.append(f"  - {label}")
    return "\n".join(lines)


def _cmd_use(state: GameState, args: list[str]) -> str:
    """Handle USE command."""
    name = _joined_name(args, "use Small Potion")
    item = state.player.find_item(name)
    if item is None:
        raise NotFound(f"You don't have {name}.")
    return apply_item(state, item)


def _cmd_fight(state: GameState, args: list[str]) -> str:
    """Handle FIGHT command."""
    return fight(state)


def _cmd_status(state: GameState, args: list[str]) -> str:
    """Handle STATUS command."""
    player = state.player
    weapon = player.equipped.name if player.equipped else "nothing"
    return (
        f"{player.name}: HP {player.hp}/{player.max_hp}, "
        f"attack {player.effective_attack} (wielding {weapon}). "
        f"Score {state.score}, turns {state.turns}."
    )


def _cmd_exit(state: GameState, args: list[str]) -> str:
    """Handle EXIT command."""
    state.finish(END_EXIT)
    return "Goodbye!"


def _cmd_gc_stats(state: GameState, args: list[str]) -> str:
    """Report garbage collector counters and traced memory."""
    gen0, gen1, gen2 = gc.get_count()
    report = f"GC counts: gen0={gen0} gen1={gen1} gen2={gen2}, objects={len(gc.get_objects())}"
    if tracemalloc.is_tracing():
        current, peak = tracemalloc.get_traced_memory()
        report += f"\nMemory: current={current} peak={peak}"
    return report


def _cmd_alloc(state: GameState, args: list[str]) -> str:
    """Allocate throwaway megabyte buffers to exercise the allocator."""
    count = DEFAULT_ALLOC_COUNT
    if args:
        try:
            count = int(args[0])
        except ValueError:
            raise InvalidArgument(ALLOC_USAGE) from None
        if not 0 <= count <= MAX_ALLOC_COUNT:
            raise InvalidArgument(ALLOC_USAGE)
    trash = [bytearray(MEGABYTE) for _ in range(count)]
    return f"Allocated {len(trash)} MB of memory."


def create_registry() -> CommandRegistry:
    """Build a registry holding every built-in command."""
    registry = CommandRegistry()
    registry.register("help", partial(_cmd_help, registry), "list commands")
    registry.register("gc-stats", _cmd_gc_stats, "show memory statistics")
    registry.register("look", _cmd_look, "describe the current room")
    registry.register("move", _cmd_move, "move <direction>")
    registry.register("take", _cmd_take, "take <item>")
    registry.register("inventory", _cmd_inventory, "list carried items")
    registry.register("use", _cmd_use, "use <item>")
    registry.register("fight", _cmd_fight, "attack the monster here")
    registry.register("status", _cmd_status, "show hit points, attack and score")
    registry.register("exit", _cmd_exit, "leave the game")
    registry.register("alloc", _cmd_alloc, "alloc [count] - allocate memory")
    return registry
