"""Builds the fixed, hand-authored dungeon."""

from .world import Monster, Player, Potion, Room

START_ROOM = "Square"

HERO_NAME = "Hero"
HERO_HP = 20
HERO_ATTACK = 5


def new_player() -> Player:
    return Player(name=HERO_NAME, hp=HERO_HP, attack=HERO_ATTACK)


def load_world() -> dict[str, Room]:
    """Create the rooms, their exits, and their starting contents."""
    square = Room("Square", "A cobbled square with a fountain.")
    forest = Room("Forest", "Leaves rustle and birds chatter overhead.")
    cave = Room("Cave", "Dark and damp.")

    square.connect("north", forest)
    forest.connect("south", square)
    forest.connect("east", cave)
    cave.connect("west", forest)

    forest.items.append(Potion("Small Potion", 5))
    forest.monster = Monster("Wolf", level=1, hp=8)

    return {room.name: room for room in (square, forest, cave)}
