"""Prometheus metric definitions for correspondence graph operations."""

from __future__ import annotations

from collections.abc import Iterable

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram

__all__ = [
    "GRAPH_BUILDS",
    "GRAPH_QUERIES",
    "QUERY_DURATION",
    "ensure_metrics_registered",
]


GRAPH_BUILDS = Counter(
    "astrosynth_graph_builds_total",
    "Total correspondence graph builds performed.",
    registry=None,
)


GRAPH_QUERIES = Counter(
    "astrosynth_graph_queries_total",
    "Total traversal queries issued against the correspondence graph.",
    ("caller",),
    registry=None,
)


QUERY_DURATION = Histogram(
    "astrosynth_query_duration_seconds",
    "Duration of breadth-first correspondence graph traversals.",
    ("caller",),
    registry=None,
)


def _iter_metrics() -> Iterable[Counter | Histogram]:
    yield GRAPH_BUILDS
    yield GRAPH_QUERIES
    yield QUERY_DURATION


def ensure_metrics_registered(
    registry: CollectorRegistry | None = None,
) -> None:
    """Register graph metrics with ``registry`` if not already present."""

    target = registry or REGISTRY
    for metric in _iter_metrics():
        try:
            target.register(metric)
        except ValueError:
            # Prometheus raises when the metric name already exists.
            continue
