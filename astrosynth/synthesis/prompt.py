"""Compact prompt context assembled from a pattern synthesis result."""

from __future__ import annotations

import math
from typing import Optional

from ..config import NarrativeCfg, get_settings
from ..tables.archetypes import archetype_display_name
from .types import PatternSynthesisResult

__all__ = [
    "build_synthesis_context",
    "build_synthesis_narrative",
    "estimate_tokens",
    "is_within_token_budget",
]


def build_synthesis_context(
    result: PatternSynthesisResult, cfg: Optional[NarrativeCfg] = None
) -> str:
    """Return a short context block suitable for embedding in an LLM prompt."""

    cfg = cfg or get_settings().narrative
    meta = result.pattern_meta
    lines = [
        f"Synthesis context for {meta.pattern}:",
        f"- {meta.primary_planet} energy ({meta.primary_element})",
    ]
    if meta.geometry:
        lines.append(f"- Sacred geometry: {meta.geometry}")
    if meta.archetypes and cfg.context_archetype_limit:
        names = [
            archetype_display_name(slug)
            for slug in meta.archetypes[: cfg.context_archetype_limit]
        ]
        lines.append(f"- Archetypes: {', '.join(names)}")

    personal = result.personal_connections
    if personal is not None:
        if personal.element_alignment == "harmonious":
            lines.append("- Chart alignment: harmonious (same element)")
        elif personal.element_alignment == "challenging":
            lines.append("- Chart alignment: growth opportunity (opposing element)")
        if personal.related_signs and cfg.placement_limit:
            placements = personal.related_signs[: cfg.placement_limit]
            lines.append(f"- User placements: {', '.join(placements)}")
    return "\n".join(lines)


def build_synthesis_narrative(result: PatternSynthesisResult) -> str:
    return result.narrative


def estimate_tokens(text: str, cfg: Optional[NarrativeCfg] = None) -> int:
    """Rough token count: one token per ``chars_per_token`` characters, rounded up."""

    cfg = cfg or get_settings().narrative
    return math.ceil(len(text) / cfg.chars_per_token)


def is_within_token_budget(text: str, cfg: Optional[NarrativeCfg] = None) -> bool:
    cfg = cfg or get_settings().narrative
    return estimate_tokens(text, cfg) <= cfg.token_budget
