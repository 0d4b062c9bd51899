"""Exception hierarchy for the correspondence graph."""

from __future__ import annotations

__all__ = [
    "SynthesisError",
    "GraphFrozenError",
    "CatalogCoverageError",
]


class SynthesisError(RuntimeError):
    """Base exception for correspondence graph failures."""


class GraphFrozenError(SynthesisError):
    """Raised when a node or edge is added to a published graph."""


class CatalogCoverageError(SynthesisError):
    """Raised when the node or edge catalogs miss part of the type vocabulary."""

    def __init__(self, kind: str, missing: frozenset[str]) -> None:
        self.kind = kind
        self.missing = missing
        listed = ", ".join(sorted(missing))
        super().__init__(f"{kind} catalog does not cover: {listed}")
