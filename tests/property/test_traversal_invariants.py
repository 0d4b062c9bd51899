"""Property-based checks for breadth-first traversal and pattern synthesis."""

from __future__ import annotations

import pytest

from astrosynth.synthesis import (
    EdgeType,
    NodeType,
    build_graph,
    get_pattern_synthesis,
    query,
)

hypothesis = pytest.importorskip("hypothesis")
given = hypothesis.given
settings = hypothesis.settings
st = hypothesis.strategies

GRAPH = build_graph()
ALL_KEYS = sorted((node.key for node in GRAPH.iter_nodes()), key=str)
SEEDS = st.lists(st.sampled_from(ALL_KEYS), max_size=4)
DEPTHS = st.integers(min_value=0, max_value=3)
WEIGHTS = st.integers(min_value=0, max_value=11)
TYPE_FILTERS = st.none() | st.sets(st.sampled_from(list(NodeType)), min_size=1)
EDGE_FILTERS = st.none() | st.sets(st.sampled_from(list(EdgeType)), min_size=1)


def _unique(seeds):
    seen = []
    for key in seeds:
        if key not in seen:
            seen.append(key)
    return seen


@settings(deadline=None, max_examples=75)
@given(seeds=SEEDS, depth=DEPTHS, min_weight=WEIGHTS, targets=TYPE_FILTERS, edges=EDGE_FILTERS)
def test_traversal_invariants(seeds, depth, min_weight, targets, edges) -> None:
    result = query(
        GRAPH,
        seeds,
        max_depth=depth,
        min_weight=min_weight,
        target_types=targets,
        edge_types=edges,
    )
    keys = [node.key for node in result.nodes]
    unique_seeds = _unique(seeds)

    assert keys[: len(unique_seeds)] == unique_seeds
    assert len(keys) == len(set(keys))
    assert len(result.paths) == len(result.nodes)
    assert len(result.edges) == len(result.nodes) - len(unique_seeds)

    for record in result.paths:
        assert len(record.path) <= depth
        if not record.path:
            assert record.total_weight == 10
            continue
        assert record.total_weight == sum(edge.weight for edge in record.path)
        for edge in record.path:
            assert edge.weight >= min_weight
            if edges is not None:
                assert edge.type in edges
        if targets is not None:
            assert record.node.key.type in targets

    assert query(
        GRAPH,
        seeds,
        max_depth=depth,
        min_weight=min_weight,
        target_types=targets,
        edge_types=edges,
    ) == result


@settings(deadline=None, max_examples=75)
@given(seeds=SEEDS, depth=DEPTHS)
def test_path_chains_are_walkable(seeds, depth) -> None:
    result = query(GRAPH, seeds, max_depth=depth)
    seed_set = set(seeds)
    for record in result.paths:
        if not record.path:
            continue
        first = record.path[0]
        assert first.source in seed_set or (first.bidirectional and first.target in seed_set)
        assert record.node.key in (record.path[-1].source, record.path[-1].target)


@settings(deadline=None, max_examples=100)
@given(pattern=st.text(max_size=12))
def test_pattern_synthesis_never_raises(pattern: str) -> None:
    result = get_pattern_synthesis(GRAPH, pattern)
    assert result.narrative.startswith("## Pattern Synthesis")
    assert result.pattern_meta.primary_planet
    assert 0 <= result.pattern_meta.dominant_digit <= 9
