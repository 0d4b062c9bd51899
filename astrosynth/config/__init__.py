"""Configuration helpers exposed at :mod:`astrosynth.config`."""

from __future__ import annotations

from .settings import (
    CONFIG_FILENAME,
    DEFAULT_PATTERN_TARGET_TYPES,
    GraphCfg,
    NarrativeCfg,
    Settings,
    SynthesisCfg,
    config_path,
    default_settings,
    get_config_home,
    get_settings,
    load_settings,
    save_settings,
)

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_PATTERN_TARGET_TYPES",
    "Settings",
    "GraphCfg",
    "SynthesisCfg",
    "NarrativeCfg",
    "config_path",
    "default_settings",
    "get_config_home",
    "get_settings",
    "load_settings",
    "save_settings",
]
