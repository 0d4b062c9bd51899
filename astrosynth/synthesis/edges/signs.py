"""Edges from zodiac signs to their element, modality and natural house."""

from __future__ import annotations

from ...tables.zodiac import ZODIAC_META, ZODIAC_SIGNS, ordinal_suffix
from ..types import EdgeType, NodeKey, NodeType, SynthesisEdge

__all__ = [
    "create_sign_element_edges",
    "create_sign_modality_edges",
    "create_sign_house_edges",
]


def create_sign_element_edges() -> list[SynthesisEdge]:
    return [
        SynthesisEdge(
            id=f"sign-{sign}-belongs-to-{meta.element}",
            type=EdgeType.BELONGS_TO_ELEMENT,
            source=NodeKey(NodeType.ZODIAC_SIGN, sign),
            target=NodeKey(NodeType.ELEMENT, meta.element),
            bidirectional=True,
            weight=10,
            context=f"{sign} is a {meta.element} sign",
        )
        for sign, meta in ZODIAC_META.items()
    ]


def create_sign_modality_edges() -> list[SynthesisEdge]:
    return [
        SynthesisEdge(
            id=f"sign-{sign}-has-modality-{meta.modality}",
            type=EdgeType.HAS_MODALITY,
            source=NodeKey(NodeType.ZODIAC_SIGN, sign),
            target=NodeKey(NodeType.MODALITY, meta.modality),
            bidirectional=True,
            weight=9,
            context=f"{sign} is a {meta.modality} sign",
        )
        for sign, meta in ZODIAC_META.items()
    ]


def create_sign_house_edges() -> list[SynthesisEdge]:
    edges: list[SynthesisEdge] = []
    for index, sign in enumerate(ZODIAC_SIGNS):
        house = index + 1
        edges.append(
            SynthesisEdge(
                id=f"sign-{sign}-naturally-rules-house-{house}",
                type=EdgeType.NATURALLY_RULES,
                source=NodeKey(NodeType.ZODIAC_SIGN, sign),
                target=NodeKey(NodeType.HOUSE, str(house)),
                bidirectional=True,
                weight=8,
                context=f"{sign} naturally rules the {house}{ordinal_suffix(house)} house",
            )
        )
    return edges
