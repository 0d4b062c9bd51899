from __future__ import annotations

import pytest

from astrosynth.synthesis import EDGE_FAMILIES, EdgeType, NodeKey, NodeType
from astrosynth.synthesis.edges import (
    create_all_edges,
    create_archetype_edges,
    create_detriment_edges,
    create_element_geometry_edges,
    create_exaltation_edges,
    create_fall_edges,
    create_number_element_edges,
    create_number_planet_edges,
    create_rulership_edges,
    create_sign_element_edges,
    create_sign_house_edges,
    create_sign_modality_edges,
)


@pytest.mark.parametrize(
    "generate,count,bidirectional,weights",
    [
        (create_number_planet_edges, 9, True, {7, 9, 10}),
        (create_number_element_edges, 10, True, {8, 9}),
        (create_element_geometry_edges, 5, True, {10}),
        (create_rulership_edges, 12, False, {10}),
        (create_exaltation_edges, 7, False, {8}),
        (create_detriment_edges, 12, False, {6}),
        (create_fall_edges, 7, False, {6}),
        (create_sign_element_edges, 12, True, {10}),
        (create_sign_modality_edges, 12, True, {9}),
        (create_sign_house_edges, 12, True, {8}),
        (create_archetype_edges, 22, True, {9, 10}),
    ],
)
def test_edge_family_shape(generate, count: int, bidirectional: bool, weights: set[int]) -> None:
    edges = generate()
    assert len(edges) == count
    assert {edge.bidirectional for edge in edges} == {bidirectional}
    assert {edge.weight for edge in edges} == weights


def test_families_cover_edge_vocabulary() -> None:
    covered = set()
    for family in EDGE_FAMILIES:
        produced = {edge.type for edge in family.generate()}
        assert produced == set(family.edge_types), family.name
        covered |= produced
    assert covered == set(EdgeType)


def test_edge_ids_are_unique() -> None:
    ids = [edge.id for edge in create_all_edges()]
    assert len(ids) == len(set(ids)) == 120


@pytest.mark.parametrize(
    "edge_id,weight",
    [
        ("number-1-resonates-with-sun", 10),
        ("number-3-resonates-with-jupiter", 9),
        ("number-4-resonates-with-uranus", 7),
        ("number-0-expresses-ether", 8),
        ("number-5-expresses-air", 9),
        ("element-earth-manifests-as-cube", 10),
        ("planet-mercury-rules-virgo", 10),
        ("planet-venus-exalts-in-pisces", 8),
        ("planet-jupiter-detriment-in-gemini", 6),
        ("planet-saturn-falls-in-aries", 6),
        ("sign-scorpio-belongs-to-water", 10),
        ("sign-leo-has-modality-fixed", 9),
        ("sign-pisces-naturally-rules-house-12", 8),
        ("archetype-the-sun-corresponds-to-sun", 10),
        ("archetype-death-corresponds-to-scorpio", 10),
        ("archetype-the-fool-expresses-air", 9),
    ],
)
def test_known_edges(edge_id: str, weight: int) -> None:
    edges = {edge.id: edge for edge in create_all_edges()}
    assert edges[edge_id].weight == weight


def test_number_planet_edges_carry_provenance() -> None:
    edge = {e.id: e for e in create_number_planet_edges()}["number-8-resonates-with-saturn"]
    assert edge.confidence == "very-high"
    assert "Kabbalah" in edge.traditions
    assert edge.source == NodeKey(NodeType.NUMBER, "8")
    assert edge.target == NodeKey(NodeType.PLANET, "saturn")


def test_modern_rulership_includes_pluto() -> None:
    rulers = {(e.source.id, e.target.id) for e in create_rulership_edges()}
    assert ("pluto", "scorpio") in rulers
    assert ("uranus", "aquarius") in rulers
    assert ("neptune", "pisces") in rulers
