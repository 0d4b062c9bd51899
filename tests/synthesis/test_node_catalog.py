from __future__ import annotations

import pytest

from astrosynth.synthesis import NODE_FACTORIES, NodeType
from astrosynth.synthesis.nodes import (
    create_archetype_nodes,
    create_house_nodes,
    create_number_nodes,
    create_planet_nodes,
    planet_nature,
)


@pytest.mark.parametrize(
    "node_type,count",
    [
        (NodeType.NUMBER, 10),
        (NodeType.PLANET, 9),
        (NodeType.ELEMENT, 5),
        (NodeType.GEOMETRY, 5),
        (NodeType.ZODIAC_SIGN, 12),
        (NodeType.HOUSE, 12),
        (NodeType.ARCHETYPE, 22),
        (NodeType.MODALITY, 3),
    ],
)
def test_factory_sizes_and_types(node_type: NodeType, count: int) -> None:
    nodes = NODE_FACTORIES[node_type]()
    assert len(nodes) == count
    assert all(node.key.type is node_type for node in nodes)
    assert len({node.id for node in nodes}) == count


def test_factories_cover_every_node_type() -> None:
    assert set(NODE_FACTORIES) == set(NodeType)


def test_factories_are_pure() -> None:
    for factory in NODE_FACTORIES.values():
        assert factory() == factory()


def test_zero_has_no_planet() -> None:
    zero = create_number_nodes()[0]
    assert zero.id == "0"
    assert zero.planet_id is None
    assert zero.element_id == "ether"
    assert zero.confidence == "high"
    assert "potential" in zero.traits


def test_planet_digits_and_nature() -> None:
    planets = {node.id: node for node in create_planet_nodes()}
    assert planets["sun"].digit == 1
    assert planets["uranus"].digit == 4
    assert planets["neptune"].digit == 7
    assert planets["uranus"].day_of_week is None
    assert planets["jupiter"].nature == "benefic"
    assert planets["mars"].nature == "malefic"
    assert planets["mercury"].nature == "variable"


@pytest.mark.parametrize(
    "planet,nature",
    [("venus", "benefic"), ("saturn", "malefic"), ("moon", "variable"), ("pluto", "variable")],
)
def test_planet_nature(planet: str, nature: str) -> None:
    assert planet_nature(planet) == nature


def test_house_names_and_natural_signs() -> None:
    houses = create_house_nodes()
    assert [house.name for house in houses[:3]] == ["1st House", "2nd House", "3rd House"]
    assert houses[10].name == "11th House"
    assert houses[11].name == "12th House"
    assert houses[0].natural_sign_id == "aries"
    assert houses[0].element_id == "fire"
    assert houses[11].natural_sign_id == "pisces"
    assert houses[11].element_id == "water"


def test_archetype_nodes_carry_single_attribution() -> None:
    for node in create_archetype_nodes():
        present = [v for v in (node.element_id, node.planet_id, node.zodiac_id) if v]
        assert len(present) == 1
    by_id = {node.id: node for node in create_archetype_nodes()}
    assert by_id["the-fool"].element_id == "air"
    assert by_id["the-magician"].planet_id == "mercury"
    assert by_id["the-emperor"].zodiac_id == "aries"
