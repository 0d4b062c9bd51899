"""In-memory correspondence graph store and breadth-first traversal."""

from __future__ import annotations

import logging
from collections import deque
from enum import Enum
from typing import Iterable, Iterator, Optional

from ..config import get_settings
from ..exceptions import GraphFrozenError
from ..observability import GRAPH_QUERIES, QUERY_DURATION
from .types import (
    EdgeType,
    NodeKey,
    NodeType,
    PathRecord,
    QueryResult,
    SynthesisEdge,
    SynthesisNode,
    coerce_node_key,
)

LOG = logging.getLogger(__name__)

__all__ = [
    "CorrespondenceGraph",
    "resolve_other_endpoint",
    "query",
]


class CorrespondenceGraph:
    """Node table, edge table and forward/reverse adjacency keyed by :class:`NodeKey`.

    Forward adjacency lists the edges a node may be traversed *from*; a
    bidirectional edge therefore appears in the forward list of both of its
    endpoints, while a directional edge only appears under its source.
    """

    def __init__(self) -> None:
        self._nodes: dict[NodeKey, SynthesisNode] = {}
        self._edges: dict[str, SynthesisEdge] = {}
        self._forward: dict[NodeKey, list[str]] = {}
        self._reverse: dict[NodeKey, list[str]] = {}
        self._frozen = False

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        self._frozen = True

    def _check_mutable(self) -> None:
        if self._frozen:
            raise GraphFrozenError("correspondence graph is frozen")

    def add_node(self, node: SynthesisNode) -> None:
        self._check_mutable()
        key = node.key
        self._nodes[key] = node
        self._forward.setdefault(key, [])
        self._reverse.setdefault(key, [])

    def add_edge(self, edge: SynthesisEdge) -> None:
        self._check_mutable()
        self._edges[edge.id] = edge
        self._forward.setdefault(edge.source, []).append(edge.id)
        self._reverse.setdefault(edge.target, []).append(edge.id)
        if edge.bidirectional:
            self._forward.setdefault(edge.target, []).append(edge.id)
            self._reverse.setdefault(edge.source, []).append(edge.id)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def get_node(self, node_type: NodeType | str, node_id: str) -> Optional[SynthesisNode]:
        key = coerce_node_key((node_type, node_id))
        if key is None:
            return None
        return self._nodes.get(key)

    def get_edge(self, edge_id: str) -> Optional[SynthesisEdge]:
        return self._edges.get(edge_id)

    def _edges_for(self, index: dict[NodeKey, list[str]], key: NodeKey) -> list[SynthesisEdge]:
        return [self._edges[edge_id] for edge_id in index.get(key, ()) if edge_id in self._edges]

    def edges_from(self, node_type: NodeType | str, node_id: str) -> list[SynthesisEdge]:
        """Edges that may be traversed starting at the node."""

        key = coerce_node_key((node_type, node_id))
        if key is None:
            return []
        return self._edges_for(self._forward, key)

    def edges_to(self, node_type: NodeType | str, node_id: str) -> list[SynthesisEdge]:
        key = coerce_node_key((node_type, node_id))
        if key is None:
            return []
        return self._edges_for(self._reverse, key)

    def connected_nodes(self, node_type: NodeType | str, node_id: str) -> list[SynthesisNode]:
        """Single-hop neighbours reachable over forward edges."""

        key = coerce_node_key((node_type, node_id))
        if key is None:
            return []
        connected: list[SynthesisNode] = []
        for edge in self._edges_for(self._forward, key):
            other = resolve_other_endpoint(edge, key)
            if other is None:
                continue
            node = self._nodes.get(other)
            if node is not None:
                connected.append(node)
        return connected

    def nodes_by_type(self, node_type: NodeType | str) -> list[SynthesisNode]:
        wanted = NodeType(node_type)
        return [node for key, node in self._nodes.items() if key.type is wanted]

    def iter_nodes(self) -> Iterator[SynthesisNode]:
        return iter(self._nodes.values())

    def iter_edges(self) -> Iterator[SynthesisEdge]:
        return iter(self._edges.values())

    def __contains__(self, key: object) -> bool:
        return key in self._nodes

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "mutable"
        return f"CorrespondenceGraph(nodes={self.node_count}, edges={self.edge_count}, {state})"


def resolve_other_endpoint(edge: SynthesisEdge, current: NodeKey) -> Optional[NodeKey]:
    """Return the endpoint of ``edge`` opposite ``current``.

    Directional edges only resolve when ``current`` is their source; ``None``
    is returned otherwise, and also when ``current`` is not on the edge.
    """

    if edge.source == current:
        return edge.target
    if edge.target == current and edge.bidirectional:
        return edge.source
    return None


def _coerce_types(
    values: Iterable[Enum | str] | None, enum_cls: type[Enum]
) -> set[Enum] | None:
    if values is None:
        return None
    allowed: set[Enum] = set()
    for value in values:
        try:
            allowed.add(enum_cls(value))
        except ValueError:
            LOG.debug("Ignoring unknown %s filter value %r", enum_cls.__name__, value)
    return allowed


def query(
    graph: CorrespondenceGraph,
    seeds: Iterable[object],
    *,
    max_depth: int | None = None,
    min_weight: int | None = None,
    edge_types: Iterable[EdgeType | str] | None = None,
    target_types: Iterable[NodeType | str] | None = None,
    caller: str = "query",
) -> QueryResult:
    """Breadth-first traversal from ``seeds``.

    Seeds may be :class:`NodeKey` values, ``(type, id)`` pairs or
    ``"type:id"`` strings; unknown or repeated seeds are skipped. Each seed is
    reported with an empty path at the configured seed weight. Neighbours are
    discovered in hop order, so the first path found to a node wins even if a
    heavier path exists.
    """

    cfg = get_settings().graph
    depth_limit = cfg.max_depth if max_depth is None else max_depth
    weight_floor = cfg.min_weight if min_weight is None else min_weight
    allowed_edges = _coerce_types(edge_types, EdgeType)
    allowed_targets = _coerce_types(target_types, NodeType)

    GRAPH_QUERIES.labels(caller=caller).inc()
    with QUERY_DURATION.labels(caller=caller).time():
        visited: set[NodeKey] = set()
        nodes: list[SynthesisNode] = []
        edges: list[SynthesisEdge] = []
        paths: list[PathRecord] = []
        pending: deque[tuple[NodeKey, int, tuple[SynthesisEdge, ...]]] = deque()

        for seed in seeds:
            key = coerce_node_key(seed)
            if key is None or key in visited:
                continue
            node = graph.get_node(key.type, key.id)
            if node is None:
                continue
            visited.add(key)
            nodes.append(node)
            paths.append(PathRecord(node=node, path=(), total_weight=cfg.seed_weight))
            pending.append((key, 0, ()))

        while pending:
            current, depth, trail = pending.popleft()
            if depth >= depth_limit:
                continue
            for edge in graph.edges_from(current.type, current.id):
                if allowed_edges is not None and edge.type not in allowed_edges:
                    continue
                if edge.weight < weight_floor:
                    continue
                other = resolve_other_endpoint(edge, current)
                if other is None:
                    continue
                if allowed_targets is not None and other.type not in allowed_targets:
                    continue
                if other in visited:
                    continue
                visited.add(other)
                node = graph.get_node(other.type, other.id)
                if node is None:
                    continue
                walked = trail + (edge,)
                nodes.append(node)
                edges.append(edge)
                paths.append(
                    PathRecord(
                        node=node,
                        path=walked,
                        total_weight=sum(step.weight for step in walked),
                    )
                )
                pending.append((other, depth + 1, walked))

    LOG.debug(
        "query caller=%s seeds=%d depth=%d discovered=%d",
        caller,
        len(paths) - len(edges),
        depth_limit,
        len(nodes),
    )
    return QueryResult(nodes=tuple(nodes), edges=tuple(edges), paths=tuple(paths))
