import pytest

from fleetstrike.core import ShipType
from fleetstrike.ship import (
    Battleship,
    Carrier,
    Cruiser,
    Destroyer,
    Ship,
    Submarine,
    make_ship,
    standard_fleet,
)


@pytest.mark.parametrize(
    "cls,size,ship_type",
    [
        (Carrier, 5, ShipType.CARRIER),
        (Battleship, 4, ShipType.BATTLESHIP),
        (Cruiser, 3, ShipType.CRUISER),
        (Submarine, 3, ShipType.SUBMARINE),
        (Destroyer, 2, ShipType.DESTROYER),
    ],
)
def test_ship_sizes(cls, size, ship_type):
    ship = cls()
    assert ship.size == size
    assert ship.type is ship_type
    assert ship.hits == 0
    assert ship.ability_uses == 1


def test_place_and_occupies():
    ship = Destroyer()
    ship.place([(2, 3), (2, 4)], True)
    assert ship.vertical is True
    assert ship.occupies(2, 4)
    assert not ship.occupies(3, 4)


def test_register_hit_and_sink():
    ship = Destroyer()
    ship.place([(0, 0), (1, 0)], False)
    assert ship.register_hit(5, 5) is False
    assert not ship.is_sunk()
    assert ship.register_hit(0, 0) is True
    assert not ship.is_sunk()
    assert ship.register_hit(1, 0) is True
    assert ship.is_sunk()


def test_use_ability_stops_at_zero():
    ship = Cruiser()
    ship.use_ability()
    ship.use_ability()
    assert ship.ability_uses == 0


@pytest.mark.parametrize("ship_type", list(ShipType))
def test_make_ship_type(ship_type):
    ship = make_ship(ship_type)
    assert ship.type is ship_type
    assert ship.coordinates == []


def test_make_ship_returns_fresh_instances():
    assert make_ship(ShipType.CARRIER) is not make_ship(ShipType.CARRIER) or False
    a = make_ship(ShipType.CARRIER)
    a.hits = 3
    assert make_ship(ShipType.CARRIER).hits == 0


def test_standard_fleet_order_and_sizes():
    fleet = standard_fleet()
    assert [s.type for s in fleet] == [
        ShipType.CARRIER,
        ShipType.BATTLESHIP,
        ShipType.CRUISER,
        ShipType.SUBMARINE,
        ShipType.DESTROYER,
    ]
    assert sorted(s.size for s in fleet) == [2, 3, 3, 4, 5]


def test_generic_ship():
    ship = Ship(1, ShipType.DESTROYER, (1, 2, 3, 255))
    ship.place([(9, 9)], False)
    ship.register_hit(9, 9)
    assert ship.is_sunk()