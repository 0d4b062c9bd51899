"""Edges from Major Arcana archetypes to their attributed planet, sign or element."""

from __future__ import annotations

from ...tables.archetypes import get_all_archetypes
from ..types import EdgeType, NodeKey, NodeType, SynthesisEdge
from ._weights import confidence_weight

__all__ = ["create_archetype_edges"]


def create_archetype_edges() -> list[SynthesisEdge]:
    edges: list[SynthesisEdge] = []
    for card in get_all_archetypes():
        source = NodeKey(NodeType.ARCHETYPE, card.slug)
        weight = confidence_weight(card.confidence)
        if card.planet:
            edges.append(
                SynthesisEdge(
                    id=f"archetype-{card.slug}-corresponds-to-{card.planet}",
                    type=EdgeType.ARCHETYPE_CORRESPONDS_TO_PLANET,
                    source=source,
                    target=NodeKey(NodeType.PLANET, card.planet),
                    bidirectional=True,
                    weight=weight,
                    confidence=card.confidence,
                    context=f"{card.name} corresponds to {card.planet}",
                )
            )
        if card.zodiac:
            edges.append(
                SynthesisEdge(
                    id=f"archetype-{card.slug}-corresponds-to-{card.zodiac}",
                    type=EdgeType.ARCHETYPE_CORRESPONDS_TO_ZODIAC,
                    source=source,
                    target=NodeKey(NodeType.ZODIAC_SIGN, card.zodiac),
                    bidirectional=True,
                    weight=weight,
                    confidence=card.confidence,
                    context=f"{card.name} corresponds to {card.zodiac}",
                )
            )
        if card.element:
            edges.append(
                SynthesisEdge(
                    id=f"archetype-{card.slug}-expresses-{card.element}",
                    type=EdgeType.ARCHETYPE_EXPRESSES_ELEMENT,
                    source=source,
                    target=NodeKey(NodeType.ELEMENT, card.element),
                    bidirectional=True,
                    weight=weight,
                    confidence=card.confidence,
                    context=f"{card.name} expresses {card.element} element",
                )
            )
    return edges
