"""Edge generator families for the correspondence graph."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from ..types import EdgeType, SynthesisEdge
from .archetypes import create_archetype_edges
from .elements import create_element_geometry_edges
from .numbers import create_number_element_edges, create_number_planet_edges
from .planets import (
    DIGNITY_WEIGHTS,
    create_detriment_edges,
    create_exaltation_edges,
    create_fall_edges,
    create_rulership_edges,
)
from .signs import (
    create_sign_element_edges,
    create_sign_house_edges,
    create_sign_modality_edges,
)

__all__ = [
    "DIGNITY_WEIGHTS",
    "EDGE_FAMILIES",
    "EdgeFamily",
    "create_all_edges",
    "create_archetype_edges",
    "create_detriment_edges",
    "create_element_geometry_edges",
    "create_exaltation_edges",
    "create_fall_edges",
    "create_number_element_edges",
    "create_number_planet_edges",
    "create_rulership_edges",
    "create_sign_element_edges",
    "create_sign_house_edges",
    "create_sign_modality_edges",
]


@dataclass(frozen=True)
class EdgeFamily:
    """A generator together with the edge types it is responsible for."""

    name: str
    generate: Callable[[], Sequence[SynthesisEdge]]
    edge_types: frozenset[EdgeType]


EDGE_FAMILIES: tuple[EdgeFamily, ...] = (
    EdgeFamily("number-planet", create_number_planet_edges, frozenset({EdgeType.RESONATES_WITH})),
    EdgeFamily("number-element", create_number_element_edges, frozenset({EdgeType.EXPRESSES_ELEMENT})),
    EdgeFamily("element-geometry", create_element_geometry_edges, frozenset({EdgeType.MANIFESTS_AS})),
    EdgeFamily("rulership", create_rulership_edges, frozenset({EdgeType.RULES})),
    EdgeFamily("exaltation", create_exaltation_edges, frozenset({EdgeType.EXALTS_IN})),
    EdgeFamily("detriment", create_detriment_edges, frozenset({EdgeType.DETRIMENT_IN})),
    EdgeFamily("fall", create_fall_edges, frozenset({EdgeType.FALLS_IN})),
    EdgeFamily("sign-element", create_sign_element_edges, frozenset({EdgeType.BELONGS_TO_ELEMENT})),
    EdgeFamily("sign-house", create_sign_house_edges, frozenset({EdgeType.NATURALLY_RULES})),
    EdgeFamily("sign-modality", create_sign_modality_edges, frozenset({EdgeType.HAS_MODALITY})),
    EdgeFamily(
        "archetype",
        create_archetype_edges,
        frozenset(
            {
                EdgeType.ARCHETYPE_CORRESPONDS_TO_PLANET,
                EdgeType.ARCHETYPE_CORRESPONDS_TO_ZODIAC,
                EdgeType.ARCHETYPE_EXPRESSES_ELEMENT,
            }
        ),
    ),
)


def create_all_edges() -> list[SynthesisEdge]:
    """Concatenate every family's output in registration order."""

    edges: list[SynthesisEdge] = []
    for family in EDGE_FAMILIES:
        edges.extend(family.generate())
    return edges
