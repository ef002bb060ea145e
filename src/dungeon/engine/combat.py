"""Combat resolution.

Each call to fight() resolves exactly one exchange: the player strikes,
and if the monster survives it strikes back. Several fights are usually
needed to finish a monster.
"""

from ..logging import get_logger
from .errors import InvalidState
from .state import END_DEATH, GameState
from .world import Weapon

logger = get_logger(__name__)

TROPHY_PREFIX = "Fang of the "
TROPHY_BONUS = 1
KILL_BONUS = 10


def fight(state: GameState) -> str:
    """Resolve one exchange against the monster in the current room."""
    room = state.room
    monster = room.monster
    player = state.player
    if monster is None:
        raise InvalidState("There is no monster here.")

    damage = player.effective_attack
    monster.hp -= damage
    lines = [f"You hit the {monster.name} for {damage}. Monster HP: {monster.hp}"]

    if monster.is_defeated:
        room.monster = None
        trophy = Weapon(TROPHY_PREFIX + monster.name, TROPHY_BONUS)
        room.items.append(trophy)
        state.add_score(KILL_BONUS)
        logger.info("monster_defeated", monster=monster.name, room=room.name)
        lines.append(f"The {monster.name} is defeated!")
        lines.append(f"It dropped: {trophy.name}")
        return "\n".join(lines)

    player.hp -= monster.level
    lines.append(f"The {monster.name} strikes back for {monster.level}. Your HP: {player.hp}")

    if player.is_dead:
        state.finish(END_DEATH)
        logger.info("player_died", monster=monster.name, room=room.name)
        lines.append("You have died... Game over.")

    return "\n".join(lines)
