"""Node factories materialising each domain of the correspondence graph.

Every ``create_*_nodes`` function is a pure function of the static tables in
:mod:`astrosynth.tables` and returns the same list on every call.
"""

from __future__ import annotations

from typing import Callable, Mapping, Sequence

from ..tables.archetypes import get_all_archetypes
from ..tables.planetary import (
    DIGIT_PLANETARY_META,
    ELEMENT_META,
    ELEMENTS,
    GEOMETRY_META,
    PLANET_META,
    PLANETS,
    PLATONIC_SOLIDS,
    ZERO_META,
)
from ..tables.zodiac import (
    HOUSE_META,
    MODALITIES,
    MODALITY_META,
    ZODIAC_META,
    ZODIAC_SIGNS,
    ordinal_suffix,
)
from .types import (
    ArchetypeNode,
    ElementNode,
    GeometryNode,
    HouseNode,
    ModalityNode,
    NodeType,
    NumberNode,
    PlanetNode,
    SynthesisNode,
    ZodiacSignNode,
)

__all__ = [
    "NODE_FACTORIES",
    "create_archetype_nodes",
    "create_element_nodes",
    "create_geometry_nodes",
    "create_house_nodes",
    "create_modality_nodes",
    "create_number_nodes",
    "create_planet_nodes",
    "create_zodiac_nodes",
    "planet_nature",
]

_BENEFICS = frozenset({"jupiter", "venus"})
_MALEFICS = frozenset({"saturn", "mars"})


def planet_nature(planet: str) -> str:
    """Classify ``planet`` as benefic, malefic or variable."""

    if planet in _BENEFICS:
        return "benefic"
    if planet in _MALEFICS:
        return "malefic"
    return "variable"


def _digit_for_planet(planet: str) -> int:
    for digit in range(1, 10):
        meta = DIGIT_PLANETARY_META.get(digit)
        if meta is not None and meta.planet == planet:
            return digit
    return 0


def create_number_nodes() -> list[NumberNode]:
    nodes = [
        NumberNode(
            id="0",
            name="Zero",
            digit=0,
            planet_id=None,
            element_id=ZERO_META.element,
            traits=ZERO_META.traits,
            confidence="high",
        )
    ]
    for digit in range(1, 10):
        meta = DIGIT_PLANETARY_META[digit]
        nodes.append(
            NumberNode(
                id=str(digit),
                name=str(digit),
                digit=digit,
                planet_id=meta.planet,
                element_id=meta.element,
                traits=meta.traits,
                confidence=meta.confidence,
            )
        )
    return nodes


def create_planet_nodes() -> list[PlanetNode]:
    nodes: list[PlanetNode] = []
    for planet in PLANETS:
        meta = PLANET_META[planet]
        nodes.append(
            PlanetNode(
                id=planet,
                name=meta.name,
                symbol=meta.symbol,
                element_id=meta.element,
                digit=_digit_for_planet(planet),
                archetype=meta.archetype,
                nature=planet_nature(planet),
                day_of_week=meta.day_of_week,
            )
        )
    return nodes


def create_element_nodes() -> list[ElementNode]:
    return [
        ElementNode(
            id=element,
            name=ELEMENT_META[element].name,
            quality=ELEMENT_META[element].quality,
            direction=ELEMENT_META[element].direction,
            geometry_id=ELEMENT_META[element].geometry,
        )
        for element in ELEMENTS
    ]


def create_geometry_nodes() -> list[GeometryNode]:
    return [
        GeometryNode(
            id=solid,
            name=GEOMETRY_META[solid].name,
            faces=GEOMETRY_META[solid].faces,
            element_id=GEOMETRY_META[solid].element,
            description=GEOMETRY_META[solid].description,
        )
        for solid in PLATONIC_SOLIDS
    ]


def create_zodiac_nodes() -> list[ZodiacSignNode]:
    return [
        ZodiacSignNode(
            id=sign,
            name=ZODIAC_META[sign].name,
            symbol=ZODIAC_META[sign].symbol,
            element_id=ZODIAC_META[sign].element,
            modality=ZODIAC_META[sign].modality,
            ruling_planet_id=ZODIAC_META[sign].ruler,
        )
        for sign in ZODIAC_SIGNS
    ]


def create_house_nodes() -> list[HouseNode]:
    """Twelve houses, each tied to the sign that rules it naturally."""

    nodes: list[HouseNode] = []
    for index, house in enumerate(HOUSE_META):
        sign = ZODIAC_SIGNS[index]
        nodes.append(
            HouseNode(
                id=str(house.number),
                name=f"{house.number}{ordinal_suffix(house.number)} House",
                number=house.number,
                life_area=house.life_area,
                keywords=house.keywords,
                natural_sign_id=sign,
                element_id=ZODIAC_META[sign].element,
            )
        )
    return nodes


def create_archetype_nodes() -> list[ArchetypeNode]:
    return [
        ArchetypeNode(
            id=card.slug,
            name=card.name,
            number=card.number,
            hebrew_letter=card.hebrew_letter,
            hebrew_letter_meaning=card.hebrew_letter_meaning,
            primary_attribution=card.primary_attribution,
            attribution_type=card.attribution_type,
            confidence=card.confidence,
            keywords=card.keywords,
            jungian_archetype=card.jungian_archetype,
            element_id=card.element,
            planet_id=card.planet,
            zodiac_id=card.zodiac,
        )
        for card in get_all_archetypes()
    ]


def create_modality_nodes() -> list[ModalityNode]:
    return [
        ModalityNode(
            id=modality,
            name=modality.capitalize(),
            quality=MODALITY_META[modality].quality,
            keywords=MODALITY_META[modality].keywords,
        )
        for modality in MODALITIES
    ]


NODE_FACTORIES: Mapping[NodeType, Callable[[], Sequence[SynthesisNode]]] = {
    NodeType.GEOMETRY: create_geometry_nodes,
    NodeType.ELEMENT: create_element_nodes,
    NodeType.PLANET: create_planet_nodes,
    NodeType.NUMBER: create_number_nodes,
    NodeType.ZODIAC_SIGN: create_zodiac_nodes,
    NodeType.HOUSE: create_house_nodes,
    NodeType.ARCHETYPE: create_archetype_nodes,
    NodeType.MODALITY: create_modality_nodes,
}
