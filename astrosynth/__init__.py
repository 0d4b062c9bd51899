"""astrosynth package bootstrap and curated public API surface."""

from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError, version as _get_version
from typing import Any

try:
    __version__ = _get_version("astrosynth")
except PackageNotFoundError:  # pragma: no cover - metadata may be unavailable in source checkouts
    __version__ = "0.0.0"


def get_version() -> str:
    """Return the resolved astrosynth package version."""

    return __version__


__all__ = [
    "__version__",
    "get_version",
    "config",
    "synthesis",
    "tables",
    "get_graph",
    "build_graph",
    "reset_graph",
    "query",
    "get_pattern_synthesis",
    "build_synthesis_context",
    "is_within_token_budget",
]

_PUBLIC_MODULES: dict[str, str] = {
    "config": "config",
    "synthesis": "synthesis",
    "tables": "tables",
}

_SYNTHESIS_EXPORTS: tuple[str, ...] = (
    "get_graph",
    "build_graph",
    "reset_graph",
    "query",
    "get_pattern_synthesis",
    "build_synthesis_context",
    "is_within_token_budget",
)


def __getattr__(name: str) -> Any:
    module_name = _PUBLIC_MODULES.get(name)
    if module_name is not None:
        module = import_module(f".{module_name}", __name__)
        globals()[name] = module
        return module
    if name in _SYNTHESIS_EXPORTS:
        module = import_module(".synthesis", __name__)
        value = getattr(module, name)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(set(globals()) | set(__all__))
