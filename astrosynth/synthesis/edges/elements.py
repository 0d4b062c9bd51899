"""Element to Platonic solid edges."""

from __future__ import annotations

from ...tables.planetary import ELEMENT_META
from ..types import EdgeType, NodeKey, NodeType, SynthesisEdge

__all__ = ["create_element_geometry_edges"]


def create_element_geometry_edges() -> list[SynthesisEdge]:
    return [
        SynthesisEdge(
            id=f"element-{element}-manifests-as-{meta.geometry}",
            type=EdgeType.MANIFESTS_AS,
            source=NodeKey(NodeType.ELEMENT, element),
            target=NodeKey(NodeType.GEOMETRY, meta.geometry),
            bidirectional=True,
            weight=10,
            context=f"{element} manifests as the {meta.geometry}",
        )
        for element, meta in ELEMENT_META.items()
    ]
