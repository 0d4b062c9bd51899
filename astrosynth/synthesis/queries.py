"""Higher-level queries over the correspondence graph."""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Union

from ..config import get_settings
from ..tables.archetypes import archetypes_for_planet
from .graph import CorrespondenceGraph, query, resolve_other_endpoint
from .patterns import (
    PatternPlanetaryMeta,
    get_dominant_digit,
    get_pattern_planetary_meta,
    get_unique_digits,
)
from .types import (
    ChartProfile,
    EdgeType,
    NodeKey,
    NodeType,
    PatternMeta,
    PatternSynthesisResult,
    PersonalConnections,
    SynthesisNode,
    coerce_node_key,
)

LOG = logging.getLogger(__name__)

__all__ = [
    "classify_element_alignment",
    "get_pattern_synthesis",
    "generate_narrative",
    "find_connection",
    "archetypes_for_sign",
    "numbers_for_element",
]

_OPPOSING_ELEMENTS = frozenset(
    {
        ("fire", "water"),
        ("water", "fire"),
        ("air", "earth"),
        ("earth", "air"),
    }
)


def classify_element_alignment(pattern_element: str, chart_element: Optional[str]) -> str:
    """Compare the pattern's element with the chart's dominant element."""

    if chart_element == pattern_element:
        return "harmonious"
    if (pattern_element, chart_element) in _OPPOSING_ELEMENTS:
        return "challenging"
    return "complementary"


def _personal_connections(
    meta: PatternPlanetaryMeta, profile: ChartProfile
) -> PersonalConnections:
    related = tuple(
        sign
        for sign in (profile.sun_sign, profile.moon_sign, profile.rising_sign)
        if sign
    )
    return PersonalConnections(
        related_signs=related,
        element_alignment=classify_element_alignment(
            meta.primary_element, profile.dominant_element
        ),
    )


def generate_narrative(
    meta: PatternPlanetaryMeta,
    archetypes: tuple[str, ...],
    personal: Optional[PersonalConnections] = None,
) -> str:
    lines = [
        "## Pattern Synthesis",
        f"- Primary Planet: {meta.primary_planet} ({meta.primary_symbol})",
        f"- Primary Element: {meta.primary_element}",
    ]
    if meta.geometry:
        lines.append(f"- Sacred Geometry: {meta.geometry}")
    if archetypes:
        lines.append(f"- Related Archetypes: {', '.join(archetypes)}")
    if meta.agrippa_note:
        lines.append(f"- Agrippa Connection: {meta.agrippa_note}")

    lines.append("")
    lines.append(meta.energy_description)

    if personal is not None:
        lines.append("")
        lines.append("## Personal Resonance")
        alignment = personal.element_alignment
        if alignment == "harmonious":
            lines.append(
                f"- This pattern's {meta.primary_element} energy harmonizes with your chart."
            )
        elif alignment == "complementary":
            lines.append("- This pattern offers balancing energy for your chart.")
        else:
            lines.append(
                f"- This pattern presents growth opportunities through its {meta.primary_element} energy."
            )
        if personal.related_signs:
            lines.append(
                f"- Related to your placements in: {', '.join(personal.related_signs)}"
            )
    return "\n".join(lines)


def get_pattern_synthesis(
    graph: CorrespondenceGraph,
    pattern: str,
    profile: Union[ChartProfile, Mapping[str, object], None] = None,
) -> PatternSynthesisResult:
    """Synthesize planetary, elemental and archetypal correspondences for ``pattern``.

    ``profile`` may be a :class:`ChartProfile` or a mapping that validates as
    one; invalid mappings raise :class:`pydantic.ValidationError`.
    """

    if profile is not None and not isinstance(profile, ChartProfile):
        profile = ChartProfile.model_validate(profile)

    meta = get_pattern_planetary_meta(pattern)
    archetypes: list[str] = []
    for planet in meta.planets:
        archetypes.extend(archetypes_for_planet(planet))

    cfg = get_settings().synthesis
    seeds = [NodeKey(NodeType.NUMBER, str(digit)) for digit in get_unique_digits(pattern)]
    result = query(
        graph,
        seeds,
        max_depth=cfg.query_depth,
        target_types=cfg.target_types,
        caller="pattern_synthesis",
    )

    personal = _personal_connections(meta, profile) if profile is not None else None
    narrative = generate_narrative(meta, tuple(archetypes), personal)
    LOG.debug("Synthesized pattern %r: %d nodes", pattern, len(result.nodes))

    return PatternSynthesisResult(
        pattern_meta=PatternMeta(
            pattern=pattern,
            dominant_digit=get_dominant_digit(pattern),
            primary_planet=meta.primary_planet,
            primary_symbol=meta.primary_symbol,
            primary_element=meta.primary_element,
            geometry=meta.geometry,
            elements=meta.elements,
            planets=meta.planets,
            archetypes=tuple(archetypes),
            agrippa_note=meta.agrippa_note,
            energy_description=meta.energy_description,
        ),
        query=result,
        narrative=narrative,
        personal_connections=personal,
    )


def find_connection(graph: CorrespondenceGraph, start: object, end: object) -> list[SynthesisNode]:
    """Nodes along the first path found from ``start`` to ``end`` (start first).

    Returns an empty list when either key is unknown or ``end`` is not within
    three hops.
    """

    origin = coerce_node_key(start)
    goal = coerce_node_key(end)
    if origin is None or goal is None:
        return []
    result = query(
        graph,
        [origin],
        max_depth=3,
        target_types=[goal.type],
        caller="find_connection",
    )
    record = result.path_to(goal)
    if record is None:
        return []
    chain = [origin]
    current = origin
    for edge in record.path:
        current = resolve_other_endpoint(edge, current)
        chain.append(current)
    return [graph.get_node(key.type, key.id) for key in chain]


def archetypes_for_sign(graph: CorrespondenceGraph, sign: str) -> list[SynthesisNode]:
    result = query(
        graph,
        [NodeKey(NodeType.ZODIAC_SIGN, sign)],
        max_depth=2,
        target_types=[NodeType.ARCHETYPE],
        caller="archetypes_for_sign",
    )
    return [node for node in result.nodes if node.key.type is NodeType.ARCHETYPE]


def numbers_for_element(graph: CorrespondenceGraph, element: str) -> list[SynthesisNode]:
    result = query(
        graph,
        [NodeKey(NodeType.ELEMENT, element)],
        max_depth=1,
        edge_types=[EdgeType.EXPRESSES_ELEMENT],
        target_types=[NodeType.NUMBER],
        caller="numbers_for_element",
    )
    return [node for node in result.nodes if node.key.type is NodeType.NUMBER]
