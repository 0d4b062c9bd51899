"""Edges linking digits to their planets and elements."""

from __future__ import annotations

from ...tables.planetary import DIGIT_PLANETARY_META, ZERO_META
from ..types import EdgeType, NodeKey, NodeType, SynthesisEdge
from ._weights import confidence_weight

__all__ = ["create_number_planet_edges", "create_number_element_edges"]

ZERO_ETHER_WEIGHT = 8
NUMBER_ELEMENT_WEIGHT = 9


def create_number_planet_edges() -> list[SynthesisEdge]:
    edges: list[SynthesisEdge] = []
    for digit, meta in DIGIT_PLANETARY_META.items():
        edges.append(
            SynthesisEdge(
                id=f"number-{digit}-resonates-with-{meta.planet}",
                type=EdgeType.RESONATES_WITH,
                source=NodeKey(NodeType.NUMBER, str(digit)),
                target=NodeKey(NodeType.PLANET, meta.planet),
                bidirectional=True,
                weight=confidence_weight(meta.confidence),
                confidence=meta.confidence,
                traditions=meta.traditions,
                context=f"{digit} resonates with {meta.planet} energy",
            )
        )
    return edges


def create_number_element_edges() -> list[SynthesisEdge]:
    edges: list[SynthesisEdge] = []
    for digit, meta in DIGIT_PLANETARY_META.items():
        edges.append(
            SynthesisEdge(
                id=f"number-{digit}-expresses-{meta.element}",
                type=EdgeType.EXPRESSES_ELEMENT,
                source=NodeKey(NodeType.NUMBER, str(digit)),
                target=NodeKey(NodeType.ELEMENT, meta.element),
                bidirectional=True,
                weight=NUMBER_ELEMENT_WEIGHT,
                context=f"{digit} expresses {meta.element} element",
            )
        )
    edges.append(
        SynthesisEdge(
            id=f"number-0-expresses-{ZERO_META.element}",
            type=EdgeType.EXPRESSES_ELEMENT,
            source=NodeKey(NodeType.NUMBER, "0"),
            target=NodeKey(NodeType.ELEMENT, ZERO_META.element),
            bidirectional=True,
            weight=ZERO_ETHER_WEIGHT,
            context="Zero represents pure potential, the void, ether",
        )
    )
    return edges
