from __future__ import annotations

import pytest

from astrosynth.exceptions import CatalogCoverageError, GraphFrozenError
from astrosynth.synthesis import (
    EDGE_FAMILIES,
    NODE_FACTORIES,
    CorrespondenceGraph,
    NodeKey,
    NodeType,
    build_graph,
    get_graph,
    query,
    reset_graph,
)
from astrosynth.synthesis.nodes import create_planet_nodes


def test_built_graph_counts(graph: CorrespondenceGraph) -> None:
    assert graph.node_count == 78
    assert graph.edge_count == 120
    assert graph.frozen


def test_built_graph_rejects_mutation(graph: CorrespondenceGraph) -> None:
    with pytest.raises(GraphFrozenError):
        graph.add_node(create_planet_nodes()[0])


def test_singleton_is_idempotent_and_resettable() -> None:
    reset_graph()
    first = get_graph()
    assert get_graph() is first
    reset_graph()
    second = get_graph()
    assert second is not first
    assert second.node_count == first.node_count


def test_build_graph_returns_independent_instances() -> None:
    assert build_graph() is not build_graph()


def test_missing_node_factory_is_reported() -> None:
    factories = {k: v for k, v in NODE_FACTORIES.items() if k is not NodeType.MODALITY}
    with pytest.raises(CatalogCoverageError) as excinfo:
        build_graph(node_factories=factories)
    assert excinfo.value.kind == "node"
    assert excinfo.value.missing == frozenset({"modality"})


def test_missing_edge_family_is_reported() -> None:
    families = tuple(family for family in EDGE_FAMILIES if family.name != "fall")
    with pytest.raises(CatalogCoverageError, match="falls_in"):
        build_graph(edge_families=families)


def test_bidirectional_symmetry(graph: CorrespondenceGraph) -> None:
    for edge in graph.iter_edges():
        if edge.source not in graph or edge.target not in graph:
            continue
        from_source = graph.edges_from(edge.source.type, edge.source.id)
        from_target = graph.edges_from(edge.target.type, edge.target.id)
        assert edge in from_source
        assert (edge in from_target) is edge.bidirectional


@pytest.mark.parametrize(
    "start,goal",
    [
        (NodeKey(NodeType.NUMBER, "1"), NodeKey(NodeType.PLANET, "sun")),
        (NodeKey(NodeType.PLANET, "sun"), NodeKey(NodeType.NUMBER, "1")),
        (NodeKey(NodeType.ELEMENT, "fire"), NodeKey(NodeType.GEOMETRY, "tetrahedron")),
        (NodeKey(NodeType.GEOMETRY, "tetrahedron"), NodeKey(NodeType.ELEMENT, "fire")),
    ],
)
def test_bidirectional_edges_are_walkable_both_ways(
    graph: CorrespondenceGraph, start: NodeKey, goal: NodeKey
) -> None:
    result = query(graph, [start], max_depth=1, target_types=[goal.type])
    record = result.path_to(goal)
    assert record is not None
    assert len(record.path) == 1
    assert {record.path[0].source, record.path[0].target} == {start, goal}


def test_sign_neighbours_follow_family_order(graph: CorrespondenceGraph) -> None:
    result = query(graph, [NodeKey(NodeType.ZODIAC_SIGN, "aries")], max_depth=1)
    assert [node.key for node in result.nodes] == [
        NodeKey(NodeType.ZODIAC_SIGN, "aries"),
        NodeKey(NodeType.ELEMENT, "fire"),
        NodeKey(NodeType.HOUSE, "1"),
        NodeKey(NodeType.MODALITY, "cardinal"),
        NodeKey(NodeType.ARCHETYPE, "the-emperor"),
    ]


def test_pluto_rulership_is_unreachable(graph: CorrespondenceGraph) -> None:
    assert graph.get_node("planet", "pluto") is None
    assert [e.id for e in graph.edges_to("zodiac_sign", "scorpio") if e.source.id == "pluto"] == [
        "planet-pluto-rules-scorpio"
    ]
    result = query(graph, [NodeKey(NodeType.ZODIAC_SIGN, "scorpio")], max_depth=3)
    assert all(node.id != "pluto" for node in result.nodes)
