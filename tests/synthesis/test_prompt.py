from __future__ import annotations

import pytest

from astrosynth.config import NarrativeCfg
from astrosynth.synthesis import (
    ChartProfile,
    CorrespondenceGraph,
    build_synthesis_context,
    build_synthesis_narrative,
    estimate_tokens,
    get_pattern_synthesis,
    is_within_token_budget,
)


def test_context_without_profile(graph: CorrespondenceGraph) -> None:
    result = get_pattern_synthesis(graph, "111")
    assert build_synthesis_context(result) == "\n".join(
        [
            "Synthesis context for 111:",
            "- sun energy (fire)",
            "- Sacred geometry: tetrahedron",
            "- Archetypes: The Sun",
        ]
    )


def test_context_limits_archetypes_and_placements(graph: CorrespondenceGraph) -> None:
    profile = ChartProfile(
        sun_sign="leo", moon_sign="cancer", rising_sign="aries", dominant_element="fire"
    )
    result = get_pattern_synthesis(graph, "1234", profile)
    context = build_synthesis_context(result)
    assert "- Archetypes: The Sun, The High Priestess" in context
    assert "Wheel Of Fortune" not in context
    assert "- Chart alignment: harmonious (same element)" in context
    assert context.endswith("- User placements: leo, cancer, aries")

    tight = build_synthesis_context(
        result, NarrativeCfg(context_archetype_limit=1, placement_limit=1)
    )
    assert "- Archetypes: The Sun\n" in tight
    assert tight.endswith("- User placements: leo")


def test_context_alignment_lines(graph: CorrespondenceGraph) -> None:
    challenging = get_pattern_synthesis(graph, "111", ChartProfile(dominant_element="water"))
    assert "- Chart alignment: growth opportunity (opposing element)" in build_synthesis_context(
        challenging
    )
    complementary = get_pattern_synthesis(graph, "111", ChartProfile(dominant_element="air"))
    assert "Chart alignment" not in build_synthesis_context(complementary)


def test_narrative_accessor_returns_result_narrative(graph: CorrespondenceGraph) -> None:
    result = get_pattern_synthesis(graph, "369")
    assert build_synthesis_narrative(result) == result.narrative
    assert "369 is the magic constant of the Moon's 9×9 magic square." in result.narrative


@pytest.mark.parametrize(
    "text,tokens",
    [("", 0), ("abcd", 1), ("abcde", 2), ("x" * 1200, 300)],
)
def test_estimate_tokens(text: str, tokens: int) -> None:
    assert estimate_tokens(text) == tokens


def test_token_budget_boundary() -> None:
    assert is_within_token_budget("x" * 1200)
    assert not is_within_token_budget("x" * 1201)
    assert is_within_token_budget("x" * 40, NarrativeCfg(token_budget=10))
    assert not is_within_token_budget("x" * 41, NarrativeCfg(token_budget=10))


def test_generated_context_fits_budget(graph: CorrespondenceGraph) -> None:
    profile = ChartProfile(sun_sign="scorpio", moon_sign="pisces", rising_sign="cancer")
    for pattern in ("111", "1234", "9876543210", "0000"):
        context = build_synthesis_context(get_pattern_synthesis(graph, pattern, profile))
        assert is_within_token_budget(context)
