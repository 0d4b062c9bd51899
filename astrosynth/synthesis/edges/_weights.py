from __future__ import annotations

_CONFIDENCE_WEIGHTS = {"very-high": 10, "high": 9}
_FALLBACK_WEIGHT = 7


def confidence_weight(confidence: str | None) -> int:
    """Map a confidence tier onto an edge weight (very-high 10, high 9, else 7)."""

    return _CONFIDENCE_WEIGHTS.get(confidence or "", _FALLBACK_WEIGHT)
