"""Mutable data structures for the dungeon world.

Rooms form an arena keyed by name; exits hold neighbor names rather than
Room references so the whole graph pickles cleanly.
"""

from dataclasses import dataclass, field


@dataclass
class Potion:
    """A consumable that restores hit points."""

    name: str
    heal: int

    kind = "Potion"

    def __post_init__(self) -> None:
        _check_item(self.name, self.heal)


@dataclass
class Weapon:
    """An equippable item that adds to the player's attack."""

    name: str
    bonus: int

    kind = "Weapon"

    def __post_init__(self) -> None:
        _check_item(self.name, self.bonus)


Item = Potion | Weapon


def _check_item(name: str, value: int) -> None:
    if not name:
        raise ValueError("item name must not be empty")
    if value < 0:
        raise ValueError(f"item value must be non-negative, got {value}")


@dataclass
class Monster:
    """A hostile occupant of a room. Its level is its damage per turn."""

    name: str
    level: int
    hp: int

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("monster name must not be empty")
        if self.hp <= 0:
            raise ValueError(f"monster hp must start positive, got {self.hp}")
        if self.level < 0:
            raise ValueError(f"monster level must be non-negative, got {self.level}")

    @property
    def is_defeated(self) -> bool:
        return self.hp <= 0


@dataclass
class Room:
    """A location in the dungeon."""

    name: str
    description: str = ""
    exits: dict[str, str] = field(default_factory=dict)  # direction -> room name
    items: list[Item] = field(default_factory=list)
    monster: Monster | None = None

    def connect(self, direction: str, other: "Room") -> None:
        """Add a one-way exit to another room."""
        self.exits[direction.lower()] = other.name

    def find_item(self, name: str) -> Item | None:
        return find_by_name(self.items, name)


@dataclass
class Player:
    """The hero. Base attack stays fixed; weapons add to it while equipped."""

    name: str
    hp: int
    attack: int
    max_hp: int = 0
    inventory: list[Item] = field(default_factory=list)
    equipped: Weapon | None = None

    def __post_init__(self) -> None:
        if not self.max_hp:
            self.max_hp = self.hp

    @property
    def effective_attack(self) -> int:
        if self.equipped is None:
            return self.attack
        return self.attack + self.equipped.bonus

    @property
    def is_dead(self) -> bool:
        return self.hp <= 0

    def find_item(self, name: str) -> Item | None:
        return find_by_name(self.inventory, name)


def find_by_name(items: list[Item], name: str) -> Item | None:
    """Return the first item whose name matches, ignoring case."""
    wanted = name.casefold()
    for item in items:
        if item.name.casefold() == wanted:
            return item
    return None
