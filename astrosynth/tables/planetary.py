"""Digit, planet, element and Platonic solid correspondence tables.

The digit rows follow the points where the Vedic, Chaldean and Lo Shu
numerology systems agree (Sun=1, Moon=2, Jupiter=3, Mercury=5, Venus=6,
Saturn=8, Mars=9).  Digits 4 and 7 carry the shadow planets of the Vedic
scheme (Rahu and Ketu) rendered through their modern Western stand-ins,
Uranus and Neptune, which is why their confidence is only ``moderate``.

Agrippa's planetary magic squares use a different assignment (by square
size, Saturn 3x3 through Moon 9x9) and are kept in a separate table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping

__all__ = [
    "Planet",
    "Element",
    "PlatonicSolid",
    "ConfidenceLevel",
    "PLANETS",
    "ELEMENTS",
    "PLATONIC_SOLIDS",
    "DigitPlanetaryMeta",
    "ZeroMeta",
    "PlanetMeta",
    "ElementMeta",
    "GeometryMeta",
    "MagicSquare",
    "AngelNumberNote",
    "DIGIT_PLANETARY_META",
    "ZERO_META",
    "PLANET_META",
    "ELEMENT_META",
    "GEOMETRY_META",
    "AGRIPPA_MAGIC_SQUARES",
    "AGRIPPA_ANGEL_NUMBER_CONNECTIONS",
    "get_digit_planetary_meta",
    "get_planet_meta",
    "get_planet_symbol",
    "get_planet_element",
]

Planet = Literal[
    "sun",
    "moon",
    "mercury",
    "venus",
    "mars",
    "jupiter",
    "saturn",
    "uranus",
    "neptune",
]
Element = Literal["fire", "water", "air", "earth", "ether"]
PlatonicSolid = Literal["tetrahedron", "cube", "octahedron", "icosahedron", "dodecahedron"]
ConfidenceLevel = Literal["very-high", "high", "moderate"]

PLANETS: tuple[str, ...] = (
    "sun",
    "moon",
    "mercury",
    "venus",
    "mars",
    "jupiter",
    "saturn",
    "uranus",
    "neptune",
)
ELEMENTS: tuple[str, ...] = ("fire", "water", "air", "earth", "ether")
PLATONIC_SOLIDS: tuple[str, ...] = (
    "tetrahedron",
    "cube",
    "octahedron",
    "icosahedron",
    "dodecahedron",
)


@dataclass(frozen=True)
class DigitPlanetaryMeta:
    """Planetary association for a base digit (1-9)."""

    digit: int
    planet: str
    symbol: str
    element: str
    confidence: str
    traits: tuple[str, ...]
    traditions: tuple[str, ...]
    geometry: str | None = None
    day_of_week: str | None = None

    def to_payload(self) -> dict[str, object]:
        return {
            "digit": self.digit,
            "planet": self.planet,
            "symbol": self.symbol,
            "element": self.element,
            "confidence": self.confidence,
            "traits": list(self.traits),
            "traditions": list(self.traditions),
            "geometry": self.geometry,
            "day_of_week": self.day_of_week,
        }


@dataclass(frozen=True)
class ZeroMeta:
    """Zero sits outside the digit table: pure potential, no ruling planet."""

    digit: int
    symbol: str
    element: str
    traits: tuple[str, ...]
    description: str


@dataclass(frozen=True)
class PlanetMeta:
    name: str
    symbol: str
    element: str
    color: str
    archetype: str
    day_of_week: str | None = None
    metal: str | None = None
    chakra: str | None = None


@dataclass(frozen=True)
class ElementMeta:
    name: str
    geometry: str
    quality: str
    direction: str


@dataclass(frozen=True)
class GeometryMeta:
    name: str
    faces: int
    element: str
    planets: tuple[str, ...]
    description: str


@dataclass(frozen=True)
class MagicSquare:
    """One of Agrippa's planetary kameas."""

    size: int
    cells: int
    magic_constant: int
    total_sum: int


@dataclass(frozen=True)
class AngelNumberNote:
    planet: str
    note: str


DIGIT_PLANETARY_META: Mapping[int, DigitPlanetaryMeta] = {
    1: DigitPlanetaryMeta(
        digit=1,
        planet="sun",
        symbol="☉",
        element="fire",
        geometry="tetrahedron",
        confidence="very-high",
        day_of_week="Sunday",
        traits=("leadership", "initiative", "individuality", "creativity", "will"),
        traditions=("Vedic", "Chaldean", "Lo Shu", "Western"),
    ),
    2: DigitPlanetaryMeta(
        digit=2,
        planet="moon",
        symbol="☽",
        element="water",
        geometry="icosahedron",
        confidence="very-high",
        day_of_week="Monday",
        traits=("intuition", "emotion", "receptivity", "cycles", "reflection"),
        traditions=("Vedic", "Chaldean", "Lo Shu", "Kabbalah"),
    ),
    3: DigitPlanetaryMeta(
        digit=3,
        planet="jupiter",
        symbol="♃",
        element="ether",
        geometry="dodecahedron",
        confidence="high",
        day_of_week="Thursday",
        traits=("expansion", "wisdom", "optimism", "growth", "abundance"),
        traditions=("Vedic", "Chaldean", "Lo Shu"),
    ),
    4: DigitPlanetaryMeta(
        digit=4,
        planet="uranus",
        symbol="⛢",
        element="earth",
        geometry="cube",
        confidence="moderate",
        traits=("disruption", "innovation", "karma", "structure", "rebellion"),
        traditions=("Vedic (Rahu)", "Modern Western (Uranus)"),
    ),
    5: DigitPlanetaryMeta(
        digit=5,
        planet="mercury",
        symbol="☿",
        element="air",
        geometry="octahedron",
        confidence="high",
        day_of_week="Wednesday",
        traits=("communication", "adaptability", "intellect", "change", "travel"),
        traditions=("Vedic", "Chaldean", "Lo Shu center"),
    ),
    6: DigitPlanetaryMeta(
        digit=6,
        planet="venus",
        symbol="♀",
        element="earth",
        confidence="high",
        day_of_week="Friday",
        traits=("love", "beauty", "harmony", "nurturing", "balance"),
        traditions=("Vedic", "Chaldean", "Lo Shu"),
    ),
    7: DigitPlanetaryMeta(
        digit=7,
        planet="neptune",
        symbol="♆",
        element="water",
        confidence="moderate",
        traits=("spirituality", "mysticism", "transcendence", "intuition", "detachment"),
        traditions=("Vedic (Ketu)", "Modern Western (Neptune)"),
    ),
    8: DigitPlanetaryMeta(
        digit=8,
        planet="saturn",
        symbol="♄",
        element="earth",
        geometry="cube",
        confidence="very-high",
        day_of_week="Saturday",
        traits=("discipline", "karma", "time", "structure", "mastery"),
        traditions=("Vedic", "Chaldean", "Lo Shu", "Kabbalah"),
    ),
    9: DigitPlanetaryMeta(
        digit=9,
        planet="mars",
        symbol="♂",
        element="fire",
        geometry="tetrahedron",
        confidence="very-high",
        day_of_week="Tuesday",
        traits=("action", "courage", "energy", "completion", "will"),
        traditions=("Vedic", "Chaldean", "Lo Shu", "Kabbalah"),
    ),
}

ZERO_META = ZeroMeta(
    digit=0,
    symbol="○",
    element="ether",
    traits=("potential", "void", "infinity", "source", "wholeness"),
    description="The void before creation, infinite potential, the source from which all emerges.",
)

PLANET_META: Mapping[str, PlanetMeta] = {
    "sun": PlanetMeta(
        name="Sun",
        symbol="☉",
        element="fire",
        day_of_week="Sunday",
        color="gold",
        metal="gold",
        chakra="Solar Plexus",
        archetype="The King/Leader",
    ),
    "moon": PlanetMeta(
        name="Moon",
        symbol="☽",
        element="water",
        day_of_week="Monday",
        color="silver",
        metal="silver",
        chakra="Sacral",
        archetype="The Mother/Intuitive",
    ),
    "mercury": PlanetMeta(
        name="Mercury",
        symbol="☿",
        element="air",
        day_of_week="Wednesday",
        color="purple",
        metal="mercury",
        chakra="Throat",
        archetype="The Messenger/Trickster",
    ),
    "venus": PlanetMeta(
        name="Venus",
        symbol="♀",
        element="earth",
        day_of_week="Friday",
        color="green",
        metal="copper",
        chakra="Heart",
        archetype="The Lover/Artist",
    ),
    "mars": PlanetMeta(
        name="Mars",
        symbol="♂",
        element="fire",
        day_of_week="Tuesday",
        color="red",
        metal="iron",
        chakra="Root",
        archetype="The Warrior/Champion",
    ),
    "jupiter": PlanetMeta(
        name="Jupiter",
        symbol="♃",
        element="ether",
        day_of_week="Thursday",
        color="royal blue",
        metal="tin",
        chakra="Third Eye",
        archetype="The Sage/Benefactor",
    ),
    "saturn": PlanetMeta(
        name="Saturn",
        symbol="♄",
        element="earth",
        day_of_week="Saturday",
        color="black",
        metal="lead",
        chakra="Root",
        archetype="The Elder/Teacher",
    ),
    "uranus": PlanetMeta(
        name="Uranus",
        symbol="⛢",
        element="air",
        color="electric blue",
        archetype="The Revolutionary/Awakener",
    ),
    "neptune": PlanetMeta(
        name="Neptune",
        symbol="♆",
        element="water",
        color="sea green",
        archetype="The Mystic/Dreamer",
    ),
}

ELEMENT_META: Mapping[str, ElementMeta] = {
    "fire": ElementMeta(
        name="Fire",
        geometry="tetrahedron",
        quality="Transformation, will, action",
        direction="South",
    ),
    "water": ElementMeta(
        name="Water",
        geometry="icosahedron",
        quality="Emotion, intuition, flow",
        direction="West",
    ),
    "air": ElementMeta(
        name="Air",
        geometry="octahedron",
        quality="Intellect, communication, movement",
        direction="East",
    ),
    "earth": ElementMeta(
        name="Earth",
        geometry="cube",
        quality="Stability, manifestation, grounding",
        direction="North",
    ),
    "ether": ElementMeta(
        name="Ether (Spirit)",
        geometry="dodecahedron",
        quality="Transcendence, unity, cosmos",
        direction="Center",
    ),
}

GEOMETRY_META: Mapping[str, GeometryMeta] = {
    "tetrahedron": GeometryMeta(
        name="Tetrahedron",
        faces=4,
        element="fire",
        planets=("sun", "mars"),
        description="The simplest Platonic solid. Represents transformation and the spark of creation.",
    ),
    "cube": GeometryMeta(
        name="Cube (Hexahedron)",
        faces=6,
        element="earth",
        planets=("saturn",),
        description="The most stable solid. Represents structure, foundation, and material manifestation.",
    ),
    "octahedron": GeometryMeta(
        name="Octahedron",
        faces=8,
        element="air",
        planets=("mercury",),
        description="The dual of the cube. Represents intellect, communication, and mental agility.",
    ),
    "icosahedron": GeometryMeta(
        name="Icosahedron",
        faces=20,
        element="water",
        planets=("moon", "neptune"),
        description="The most complex regular solid. Represents emotion, intuition, and the unconscious.",
    ),
    "dodecahedron": GeometryMeta(
        name="Dodecahedron",
        faces=12,
        element="ether",
        planets=("jupiter", "venus"),
        description="The cosmic solid. Represents the universe, spirit, and divine proportion.",
    ),
}

# Modern planets have no classical kamea.
AGRIPPA_MAGIC_SQUARES: Mapping[str, MagicSquare] = {
    "saturn": MagicSquare(size=3, cells=9, magic_constant=15, total_sum=45),
    "jupiter": MagicSquare(size=4, cells=16, magic_constant=34, total_sum=136),
    "mars": MagicSquare(size=5, cells=25, magic_constant=65, total_sum=325),
    "sun": MagicSquare(size=6, cells=36, magic_constant=111, total_sum=666),
    "venus": MagicSquare(size=7, cells=49, magic_constant=175, total_sum=1225),
    "mercury": MagicSquare(size=8, cells=64, magic_constant=260, total_sum=2080),
    "moon": MagicSquare(size=9, cells=81, magic_constant=369, total_sum=3321),
}

AGRIPPA_ANGEL_NUMBER_CONNECTIONS: Mapping[str, AngelNumberNote] = {
    "111": AngelNumberNote(
        planet="sun",
        note="111 is the magic constant of the Sun's 6×6 magic square. This makes 111 intrinsically solar.",
    ),
    "666": AngelNumberNote(
        planet="sun",
        note=(
            "666 is the total sum of the Sun's 6×6 magic square (all numbers 1-36). "
            "Despite cultural associations, this is a profoundly solar number representing "
            "material-spiritual integration."
        ),
    ),
    "369": AngelNumberNote(
        planet="moon",
        note=(
            "369 is the magic constant of the Moon's 9×9 magic square. "
            "Tesla's famous '369' obsession connects to lunar energy."
        ),
    ),
    "45": AngelNumberNote(
        planet="saturn",
        note=(
            "45 is the total sum of Saturn's 3×3 magic square (Lo Shu). "
            "Represents completion of Saturnian lessons."
        ),
    ),
}


def get_digit_planetary_meta(digit: int) -> DigitPlanetaryMeta | None:
    """Return the planetary row for ``digit`` or ``None`` outside 1-9."""

    return DIGIT_PLANETARY_META.get(digit)


def get_planet_meta(planet: str) -> PlanetMeta | None:
    return PLANET_META.get(planet)


def get_planet_symbol(planet: str) -> str | None:
    meta = PLANET_META.get(planet)
    return meta.symbol if meta else None


def get_planet_element(planet: str) -> str | None:
    meta = PLANET_META.get(planet)
    return meta.element if meta else None
