"""Assemble the node and edge catalogs into a published correspondence graph."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Callable, Mapping, Sequence

from ..exceptions import CatalogCoverageError
from ..observability import GRAPH_BUILDS
from .edges import EDGE_FAMILIES, EdgeFamily
from .graph import CorrespondenceGraph
from .nodes import NODE_FACTORIES
from .types import EdgeType, NodeType, SynthesisNode

LOG = logging.getLogger(__name__)

__all__ = ["build_graph", "get_graph", "reset_graph"]


def _check_coverage(
    node_factories: Mapping[NodeType, Callable[[], Sequence[SynthesisNode]]],
    edge_families: Sequence[EdgeFamily],
) -> None:
    missing_nodes = frozenset(t.value for t in NodeType) - frozenset(
        NodeType(t).value for t in node_factories
    )
    if missing_nodes:
        raise CatalogCoverageError("node", missing_nodes)
    covered: set[EdgeType] = set()
    for family in edge_families:
        covered.update(family.edge_types)
    missing_edges = frozenset(t.value for t in EdgeType) - frozenset(t.value for t in covered)
    if missing_edges:
        raise CatalogCoverageError("edge", missing_edges)


def build_graph(
    *,
    node_factories: Mapping[NodeType, Callable[[], Sequence[SynthesisNode]]] | None = None,
    edge_families: Sequence[EdgeFamily] | None = None,
) -> CorrespondenceGraph:
    """Return a new, frozen graph populated from the catalogs.

    All nodes are added before any edge. Raises
    :class:`~astrosynth.exceptions.CatalogCoverageError` when the catalogs do
    not cover every node type and edge type.
    """

    factories = NODE_FACTORIES if node_factories is None else node_factories
    families = EDGE_FAMILIES if edge_families is None else edge_families
    _check_coverage(factories, families)

    graph = CorrespondenceGraph()
    for node_type, factory in factories.items():
        created = factory()
        LOG.debug("Adding %d %s nodes", len(created), NodeType(node_type).value)
        for node in created:
            graph.add_node(node)

    dangling = 0
    for family in families:
        generated = family.generate()
        LOG.debug("Adding %d edges from the %s family", len(generated), family.name)
        for edge in generated:
            if edge.source not in graph or edge.target not in graph:
                dangling += 1
            graph.add_edge(edge)

    graph.freeze()
    GRAPH_BUILDS.inc()
    LOG.info(
        "Built correspondence graph with %d nodes and %d edges (%d with an absent endpoint)",
        graph.node_count,
        graph.edge_count,
        dangling,
    )
    return graph


@lru_cache(maxsize=1)
def get_graph() -> CorrespondenceGraph:
    """Return the process-wide graph, building it on first use."""

    return build_graph()


def reset_graph() -> None:
    """Discard the cached graph so the next :func:`get_graph` call rebuilds it."""

    get_graph.cache_clear()
