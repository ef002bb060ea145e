"""Item effects.

apply_item(state, item) is the single dispatch point for using an item.
Potions heal up to the player's maximum and are consumed. Weapons are
equipped: they stay in the inventory and add their bonus to the
player's attack until another weapon replaces them.
"""

from ..logging import get_logger
from .errors import InvalidState
from .state import GameState
from .world import Item, Potion, Weapon

logger = get_logger(__name__)


def _drink_potion(state: GameState, potion: Potion) -> str:
    player = state.player
    before = player.hp
    player.hp = min(player.hp + potion.heal, player.max_hp)
    player.inventory.remove(potion)
    logger.debug("potion_used", item=potion.name, hp_before=before, hp=player.hp)
    return (
        f"You drink the {potion.name} and recover {player.hp - before} HP. "
        f"HP: {player.hp}/{player.max_hp}"
    )


def _equip_weapon(state: GameState, weapon: Weapon) -> str:
    player = state.player
    if player.equipped is weapon:
        raise InvalidState(f"{weapon.name} is already equipped.")
    player.equipped = weapon
    logger.debug("weapon_equipped", item=weapon.name, attack=player.effective_attack)
    return f"You equip the {weapon.name}. Attack: {player.effective_attack}"


def apply_item(state: GameState, item: Item) -> str:
    """Use an item from the player's inventory."""
    if isinstance(item, Potion):
        return _drink_potion(state, item)
    if isinstance(item, Weapon):
        return _equip_weapon(state, item)
    raise TypeError(f"Unsupported item: {item!r}")
