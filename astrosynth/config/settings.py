"""Configuration models and helpers for astrosynth settings."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

LOG = logging.getLogger(__name__)

CONFIG_FILENAME = "config.yaml"
CURRENT_SETTINGS_SCHEMA_VERSION = 1

DEFAULT_PATTERN_TARGET_TYPES: tuple[str, ...] = (
    "planet",
    "element",
    "geometry",
    "zodiac_sign",
    "archetype",
)

# -------------------- Settings Schema --------------------


class GraphCfg(BaseModel):
    """Traversal defaults applied when a query omits them."""

    max_depth: int = 2
    min_weight: int = 5
    seed_weight: int = 10

    @field_validator("max_depth", mode="before")
    @classmethod
    def _cap_max_depth(cls, value: int) -> int:
        return max(0, min(6, int(value)))

    @field_validator("min_weight", "seed_weight", mode="before")
    @classmethod
    def _cap_weight(cls, value: int) -> int:
        return max(0, min(10, int(value)))


class SynthesisCfg(BaseModel):
    """Pattern synthesis traversal settings."""

    query_depth: int = 2
    target_types: List[str] = Field(
        default_factory=lambda: list(DEFAULT_PATTERN_TARGET_TYPES)
    )

    @field_validator("query_depth", mode="before")
    @classmethod
    def _cap_query_depth(cls, value: int) -> int:
        return max(0, min(6, int(value)))


class NarrativeCfg(BaseModel):
    """Prompt context limits and token budget."""

    token_budget: int = 300
    chars_per_token: int = 4
    context_archetype_limit: int = 2
    placement_limit: int = 3

    @field_validator("token_budget", mode="before")
    @classmethod
    def _cap_token_budget(cls, value: int) -> int:
        return max(1, int(value))

    @field_validator("chars_per_token", mode="before")
    @classmethod
    def _cap_chars_per_token(cls, value: int) -> int:
        return max(1, min(16, int(value)))

    @field_validator("context_archetype_limit", "placement_limit", mode="before")
    @classmethod
    def _cap_limits(cls, value: int) -> int:
        return max(0, min(12, int(value)))


class Settings(BaseModel):
    """Top-level astrosynth configuration."""

    schema_version: int = CURRENT_SETTINGS_SCHEMA_VERSION
    graph: GraphCfg = Field(default_factory=GraphCfg)
    synthesis: SynthesisCfg = Field(default_factory=SynthesisCfg)
    narrative: NarrativeCfg = Field(default_factory=NarrativeCfg)


# -------------------- Persistence --------------------


def get_config_home() -> Path:
    """Return the directory where settings should be stored."""

    return Path(os.environ.get("ASTROSYNTH_HOME", str(Path.home() / ".astrosynth")))


def config_path() -> Path:
    """Return the full path to the configuration file, creating directories as needed."""

    home = get_config_home()
    home.mkdir(parents=True, exist_ok=True)
    return home / CONFIG_FILENAME


def default_settings() -> Settings:
    """Instantiate a Settings object populated with defaults."""

    return Settings()


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """Persist the given settings to disk as YAML."""

    target_path = Path(path) if path else config_path()
    target_path.parent.mkdir(parents=True, exist_ok=True)
    data = settings.model_dump()
    with target_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(data, handle, sort_keys=False, allow_unicode=True)
    return target_path


def _read_settings_file(source_path: Path) -> Settings:
    with source_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, dict):
        LOG.warning("Ignoring malformed settings file %s", source_path)
        raw = {}
    return Settings(**raw)


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from disk, creating defaults if missing."""

    source_path = Path(path) if path else config_path()
    if not source_path.exists():
        settings = default_settings()
        save_settings(settings, source_path)
        return settings
    return _read_settings_file(source_path)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return process-wide settings without touching the filesystem on a miss.

    Defaults are used unless ``$ASTROSYNTH_HOME/config.yaml`` already exists.
    Call ``get_settings.cache_clear()`` after changing the environment.
    """

    source_path = get_config_home() / CONFIG_FILENAME
    if not source_path.exists():
        return default_settings()
    LOG.debug("Loading astrosynth settings from %s", source_path)
    return _read_settings_file(source_path)


__all__ = [
    "CONFIG_FILENAME",
    "CURRENT_SETTINGS_SCHEMA_VERSION",
    "DEFAULT_PATTERN_TARGET_TYPES",
    "GraphCfg",
    "NarrativeCfg",
    "Settings",
    "SynthesisCfg",
    "config_path",
    "default_settings",
    "get_config_home",
    "get_settings",
    "load_settings",
    "save_settings",
]
