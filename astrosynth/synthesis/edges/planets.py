"""Planetary dignity edges (rulership, exaltation, detriment, fall).

All four families are directional: they are followed from the planet to the
sign only.
"""

from __future__ import annotations

from ...tables.zodiac import DETRIMENTS, EXALTATIONS, FALLS, RULERSHIPS
from ..types import EdgeType, NodeKey, NodeType, SynthesisEdge

__all__ = [
    "DIGNITY_WEIGHTS",
    "create_rulership_edges",
    "create_exaltation_edges",
    "create_detriment_edges",
    "create_fall_edges",
]

DIGNITY_WEIGHTS = {
    EdgeType.RULES: 10,
    EdgeType.EXALTS_IN: 8,
    EdgeType.DETRIMENT_IN: 6,
    EdgeType.FALLS_IN: 6,
}


def _dignity_edge(planet: str, sign: str, edge_type: EdgeType, slug: str, context: str) -> SynthesisEdge:
    return SynthesisEdge(
        id=f"planet-{planet}-{slug}-{sign}",
        type=edge_type,
        source=NodeKey(NodeType.PLANET, planet),
        target=NodeKey(NodeType.ZODIAC_SIGN, sign),
        bidirectional=False,
        weight=DIGNITY_WEIGHTS[edge_type],
        context=context,
    )


def create_rulership_edges() -> list[SynthesisEdge]:
    return [
        _dignity_edge(planet, sign, EdgeType.RULES, "rules", f"{planet} rules {sign}")
        for planet, signs in RULERSHIPS.items()
        for sign in signs
    ]


def create_exaltation_edges() -> list[SynthesisEdge]:
    return [
        _dignity_edge(planet, sign, EdgeType.EXALTS_IN, "exalts-in", f"{planet} is exalted in {sign}")
        for planet, sign in EXALTATIONS.items()
    ]


def create_detriment_edges() -> list[SynthesisEdge]:
    return [
        _dignity_edge(
            planet,
            sign,
            EdgeType.DETRIMENT_IN,
            "detriment-in",
            f"{planet} is in detriment in {sign}",
        )
        for planet, signs in DETRIMENTS.items()
        for sign in signs
    ]


def create_fall_edges() -> list[SynthesisEdge]:
    return [
        _dignity_edge(planet, sign, EdgeType.FALLS_IN, "falls-in", f"{planet} falls in {sign}")
        for planet, sign in FALLS.items()
    ]
