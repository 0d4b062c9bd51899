"""Correspondence knowledge graph linking numbers, planets, elements and archetypes.

Typical use::

    from astrosynth.synthesis import get_graph, get_pattern_synthesis

    graph = get_graph()
    result = get_pattern_synthesis(graph, "444", {"sun_sign": "capricorn"})
    result.pattern_meta.primary_planet  # "uranus"
"""

from __future__ import annotations

from .builder import build_graph, get_graph, reset_graph
from .edges import EDGE_FAMILIES, EdgeFamily
from .graph import CorrespondenceGraph, query, resolve_other_endpoint
from .nodes import NODE_FACTORIES
from .patterns import get_dominant_digit, get_pattern_planetary_meta, get_unique_digits
from .prompt import (
    build_synthesis_context,
    build_synthesis_narrative,
    estimate_tokens,
    is_within_token_budget,
)
from .queries import (
    archetypes_for_sign,
    classify_element_alignment,
    find_connection,
    get_pattern_synthesis,
    numbers_for_element,
)
from .types import (
    ChartProfile,
    EdgeType,
    NodeKey,
    NodeType,
    PathRecord,
    PatternMeta,
    PatternSynthesisResult,
    PersonalConnections,
    QueryResult,
    SynthesisEdge,
    SynthesisNode,
    format_node_key,
    parse_node_key,
)

__all__ = [
    "ChartProfile",
    "CorrespondenceGraph",
    "EDGE_FAMILIES",
    "EdgeFamily",
    "EdgeType",
    "NODE_FACTORIES",
    "NodeKey",
    "NodeType",
    "PathRecord",
    "PatternMeta",
    "PatternSynthesisResult",
    "PersonalConnections",
    "QueryResult",
    "SynthesisEdge",
    "SynthesisNode",
    "archetypes_for_sign",
    "build_graph",
    "build_synthesis_context",
    "build_synthesis_narrative",
    "classify_element_alignment",
    "estimate_tokens",
    "find_connection",
    "format_node_key",
    "get_dominant_digit",
    "get_graph",
    "get_pattern_planetary_meta",
    "get_pattern_synthesis",
    "get_unique_digits",
    "is_within_token_budget",
    "numbers_for_element",
    "parse_node_key",
    "query",
    "reset_graph",
    "resolve_other_endpoint",
]
