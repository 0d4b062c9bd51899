"""Runtime observability primitives for astrosynth."""

from __future__ import annotations

from .metrics import (
    GRAPH_BUILDS,
    GRAPH_QUERIES,
    QUERY_DURATION,
    ensure_metrics_registered,
)

__all__ = [
    "GRAPH_BUILDS",
    "GRAPH_QUERIES",
    "QUERY_DURATION",
    "ensure_metrics_registered",
]
