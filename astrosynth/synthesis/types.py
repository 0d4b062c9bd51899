"""Node, edge and result records for the correspondence graph."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Literal, NamedTuple, Optional, Tuple, Union

from pydantic import BaseModel

__all__ = [
    "NodeType",
    "EdgeType",
    "NodeKey",
    "format_node_key",
    "parse_node_key",
    "coerce_node_key",
    "NumberNode",
    "PlanetNode",
    "ElementNode",
    "GeometryNode",
    "ZodiacSignNode",
    "HouseNode",
    "ArchetypeNode",
    "ModalityNode",
    "SynthesisNode",
    "SynthesisEdge",
    "PathRecord",
    "QueryResult",
    "ChartProfile",
    "ElementAlignment",
    "PatternMeta",
    "PersonalConnections",
    "PatternSynthesisResult",
]


class NodeType(str, Enum):
    NUMBER = "number"
    PLANET = "planet"
    ELEMENT = "element"
    GEOMETRY = "geometry"
    ZODIAC_SIGN = "zodiac_sign"
    HOUSE = "house"
    ARCHETYPE = "archetype"
    MODALITY = "modality"


class EdgeType(str, Enum):
    RESONATES_WITH = "resonates_with"
    EXPRESSES_ELEMENT = "expresses_element"
    MANIFESTS_AS = "manifests_as"
    RULES = "rules"
    EXALTS_IN = "exalts_in"
    DETRIMENT_IN = "detriment_in"
    FALLS_IN = "falls_in"
    BELONGS_TO_ELEMENT = "belongs_to_element"
    NATURALLY_RULES = "naturally_rules"
    HAS_MODALITY = "has_modality"
    ARCHETYPE_CORRESPONDS_TO_PLANET = "archetype_corresponds_to_planet"
    ARCHETYPE_CORRESPONDS_TO_ZODIAC = "archetype_corresponds_to_zodiac"
    ARCHETYPE_EXPRESSES_ELEMENT = "archetype_expresses_element"


class NodeKey(NamedTuple):
    """Composite ``(type, id)`` key identifying a node across domains."""

    type: NodeType
    id: str

    def __str__(self) -> str:
        return format_node_key(self)


def format_node_key(key: NodeKey) -> str:
    """Render ``key`` as ``"type:id"`` (for example ``"planet:sun"``)."""

    return f"{key.type.value}:{key.id}"


def parse_node_key(text: str) -> NodeKey:
    """Inverse of :func:`format_node_key`; ids may themselves contain ``:``."""

    type_name, _, node_id = text.partition(":")
    return NodeKey(NodeType(type_name), node_id)


def coerce_node_key(value: object) -> NodeKey | None:
    """Best-effort conversion of ``value`` into a :class:`NodeKey`.

    Accepts a ``NodeKey``, a ``(type, id)`` pair or a ``"type:id"`` string.
    Returns ``None`` for anything that does not name a known node type.
    """

    if isinstance(value, NodeKey):
        return value
    if isinstance(value, str):
        type_name, sep, node_id = value.partition(":")
        if not sep:
            return None
        value = (type_name, node_id)
    if isinstance(value, tuple) and len(value) == 2:
        type_name, node_id = value
        try:
            node_type = NodeType(type_name)
        except ValueError:
            return None
        return NodeKey(node_type, str(node_id))
    return None


class _Keyed:
    node_type: ClassVar[NodeType]
    id: str

    @property
    def key(self) -> NodeKey:
        return NodeKey(self.node_type, self.id)


@dataclass(frozen=True)
class NumberNode(_Keyed):
    node_type: ClassVar[NodeType] = NodeType.NUMBER

    id: str
    name: str
    digit: int
    planet_id: Optional[str]
    element_id: str
    traits: Tuple[str, ...]
    confidence: str


@dataclass(frozen=True)
class PlanetNode(_Keyed):
    node_type: ClassVar[NodeType] = NodeType.PLANET

    id: str
    name: str
    symbol: str
    element_id: str
    digit: int
    archetype: str
    nature: Literal["benefic", "malefic", "variable"]
    day_of_week: Optional[str] = None


@dataclass(frozen=True)
class ElementNode(_Keyed):
    node_type: ClassVar[NodeType] = NodeType.ELEMENT

    id: str
    name: str
    quality: str
    direction: str
    geometry_id: str


@dataclass(frozen=True)
class GeometryNode(_Keyed):
    node_type: ClassVar[NodeType] = NodeType.GEOMETRY

    id: str
    name: str
    faces: int
    element_id: str
    description: str


@dataclass(frozen=True)
class ZodiacSignNode(_Keyed):
    node_type: ClassVar[NodeType] = NodeType.ZODIAC_SIGN

    id: str
    name: str
    symbol: str
    element_id: str
    modality: str
    ruling_planet_id: str


@dataclass(frozen=True)
class HouseNode(_Keyed):
    node_type: ClassVar[NodeType] = NodeType.HOUSE

    id: str
    name: str
    number: int
    life_area: str
    keywords: Tuple[str, ...]
    natural_sign_id: str
    element_id: str


@dataclass(frozen=True)
class ArchetypeNode(_Keyed):
    node_type: ClassVar[NodeType] = NodeType.ARCHETYPE

    id: str
    name: str
    number: int
    hebrew_letter: str
    hebrew_letter_meaning: str
    primary_attribution: str
    attribution_type: str
    confidence: str
    keywords: Tuple[str, ...]
    jungian_archetype: str
    element_id: Optional[str] = None
    planet_id: Optional[str] = None
    zodiac_id: Optional[str] = None


@dataclass(frozen=True)
class ModalityNode(_Keyed):
    node_type: ClassVar[NodeType] = NodeType.MODALITY

    id: str
    name: str
    quality: str
    keywords: Tuple[str, ...]


SynthesisNode = Union[
    NumberNode,
    PlanetNode,
    ElementNode,
    GeometryNode,
    ZodiacSignNode,
    HouseNode,
    ArchetypeNode,
    ModalityNode,
]


@dataclass(frozen=True)
class SynthesisEdge:
    """Typed, weighted relationship between two nodes."""

    id: str
    type: EdgeType
    source: NodeKey
    target: NodeKey
    bidirectional: bool
    weight: int
    confidence: Optional[str] = None
    traditions: Tuple[str, ...] = ()
    context: Optional[str] = None


@dataclass(frozen=True)
class PathRecord:
    """A discovered node with the edges walked to reach it."""

    node: SynthesisNode
    path: Tuple[SynthesisEdge, ...]
    total_weight: int


@dataclass(frozen=True)
class QueryResult:
    nodes: Tuple[SynthesisNode, ...] = ()
    edges: Tuple[SynthesisEdge, ...] = ()
    paths: Tuple[PathRecord, ...] = ()

    def path_to(self, key: NodeKey) -> PathRecord | None:
        for record in self.paths:
            if record.node.key == key:
                return record
        return None


ZodiacSignName = Literal[
    "aries",
    "taurus",
    "gemini",
    "cancer",
    "leo",
    "virgo",
    "libra",
    "scorpio",
    "sagittarius",
    "capricorn",
    "aquarius",
    "pisces",
]
ElementAlignment = Literal["harmonious", "complementary", "challenging"]


class ChartProfile(BaseModel):
    """Optional personal chart placements used to personalise a synthesis."""

    sun_sign: Optional[ZodiacSignName] = None
    moon_sign: Optional[ZodiacSignName] = None
    rising_sign: Optional[ZodiacSignName] = None
    dominant_element: Optional[Literal["fire", "water", "air", "earth", "ether"]] = None


@dataclass(frozen=True)
class PatternMeta:
    pattern: str
    dominant_digit: int
    primary_planet: str
    primary_symbol: str
    primary_element: str
    geometry: Optional[str]
    elements: Tuple[str, ...]
    planets: Tuple[str, ...]
    archetypes: Tuple[str, ...]
    agrippa_note: Optional[str] = None
    energy_description: str = ""


@dataclass(frozen=True)
class PersonalConnections:
    related_signs: Tuple[str, ...]
    element_alignment: ElementAlignment


@dataclass(frozen=True)
class PatternSynthesisResult:
    pattern_meta: PatternMeta
    query: QueryResult
    narrative: str
    personal_connections: Optional[PersonalConnections] = None

    @property
    def nodes(self) -> Tuple[SynthesisNode, ...]:
        return self.query.nodes

    @property
    def edges(self) -> Tuple[SynthesisEdge, ...]:
        return self.query.edges

    @property
    def paths(self) -> Tuple[PathRecord, ...]:
        return self.query.paths
