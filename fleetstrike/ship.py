"""Ships and the standard fleet."""

from __future__ import annotations

from collections.abc import Iterable

from .core import BROWN, DARKGRAY, DARKGREEN, DARKPURPLE, MAROON, Color, ShipType


class Ship:
    """A ship of a given size that records where it sits and how often it was hit."""

    def __init__(self, size: int, ship_type: ShipType, color: Color) -> None:
        self.size = size
        self.type = ship_type
        self.color = color
        self.coordinates: list[tuple[int, int]] = []
        self.hits = 0
        self.vertical = False
        self.ability_uses = 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size}, hits={self.hits})"

    def place(self, coordinates: Iterable[tuple[int, int]], vertical: bool) -> None:
        """Record the cells the ship occupies and its orientation."""
        self.coordinates = [tuple(c) for c in coordinates]
        self.vertical = vertical

    def occupies(self, x: int, y: int) -> bool:
        return (x, y) in self.coordinates

    def register_hit(self, x: int, y: int) -> bool:
        """Count a hit if (x, y) belongs to this ship; return whether it did."""
        if self.occupies(x, y):
            self.hits += 1
            return True
        return False

    def use_ability(self) -> None:
        if self.ability_uses > 0:
            self.ability_uses -= 1

    def is_sunk(self) -> bool:
        return self.hits >= self.size


class Carrier(Ship):
    def __init__(self) -> None:
        super().__init__(5, ShipType.CARRIER, DARKGREEN)


class Battleship(Ship):
    def __init__(self) -> None:
        super().__init__(4, ShipType.BATTLESHIP, DARKPURPLE)


class Cruiser(Ship):
    def __init__(self) -> None:
        super().__init__(3, ShipType.CRUISER, BROWN)


class Submarine(Ship):
    def __init__(self) -> None:
        super().__init__(3, ShipType.SUBMARINE, DARKGRAY)


class Destroyer(Ship):
    def __init__(self) -> None:
        super().__init__(2, ShipType.DESTROYER, MAROON)


_SHIP_CLASSES: dict[ShipType, type[Ship]] = {
    ShipType.CARRIER: Carrier,
    ShipType.BATTLESHIP: Battleship,
    ShipType.CRUISER: Cruiser,
    ShipType.SUBMARINE: Submarine,
    ShipType.DESTROYER: Destroyer,
}


def make_ship(ship_type: ShipType) -> Ship:
    """Build a fresh, unplaced ship of the given type."""
    return _SHIP_CLASSES.get(ship_type, Destroyer)()


def standard_fleet() -> list[Ship]:
    """The five ships of a fleet, in placement order."""
    return [Carrier(), Battleship(), Cruiser(), Submarine(), Destroyer()]