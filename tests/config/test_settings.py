from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from astrosynth.config import (
    CONFIG_FILENAME,
    GraphCfg,
    NarrativeCfg,
    Settings,
    SynthesisCfg,
    default_settings,
    get_settings,
    load_settings,
    save_settings,
)
from astrosynth.synthesis import NodeKey, NodeType, build_graph, query


@pytest.fixture()
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "home"
    monkeypatch.setenv("ASTROSYNTH_HOME", str(home))
    get_settings.cache_clear()
    yield home
    get_settings.cache_clear()


def test_defaults() -> None:
    settings = default_settings()
    assert settings.graph.max_depth == 2
    assert settings.graph.min_weight == 5
    assert settings.graph.seed_weight == 10
    assert settings.synthesis.query_depth == 2
    assert settings.synthesis.target_types == [
        "planet",
        "element",
        "geometry",
        "zodiac_sign",
        "archetype",
    ]
    assert settings.narrative.token_budget == 300
    assert settings.narrative.chars_per_token == 4


def test_validators_cap_values() -> None:
    assert GraphCfg(max_depth=99).max_depth == 6
    assert GraphCfg(min_weight=-3).min_weight == 0
    assert GraphCfg(seed_weight=50).seed_weight == 10
    assert SynthesisCfg(query_depth=-1).query_depth == 0
    assert NarrativeCfg(chars_per_token=0).chars_per_token == 1
    assert NarrativeCfg(token_budget=0).token_budget == 1
    assert NarrativeCfg(placement_limit=40).placement_limit == 12


def test_save_and_load_round_trip(tmp_path: Path) -> None:
    target = tmp_path / "custom.yaml"
    settings = Settings(graph=GraphCfg(max_depth=3), narrative=NarrativeCfg(token_budget=120))
    assert save_settings(settings, target) == target
    loaded = load_settings(target)
    assert loaded == settings
    assert yaml.safe_load(target.read_text(encoding="utf-8"))["graph"]["max_depth"] == 3


def test_load_settings_writes_defaults_when_missing(config_home: Path) -> None:
    settings = load_settings()
    assert settings == default_settings()
    assert (config_home / CONFIG_FILENAME).exists()


def test_malformed_file_falls_back_to_defaults(tmp_path: Path) -> None:
    target = tmp_path / "broken.yaml"
    target.write_text("- just\n- a list\n", encoding="utf-8")
    assert load_settings(target) == default_settings()


def test_get_settings_does_not_touch_filesystem(config_home: Path) -> None:
    assert get_settings() == default_settings()
    assert not config_home.exists()


def test_get_settings_reads_config_home(config_home: Path) -> None:
    save_settings(Settings(graph=GraphCfg(max_depth=1)), config_home / CONFIG_FILENAME)
    get_settings.cache_clear()
    assert get_settings().graph.max_depth == 1

    result = query(build_graph(), [NodeKey(NodeType.NUMBER, "1")])
    assert all(len(record.path) <= 1 for record in result.paths)
    assert {node.id for node in result.nodes} == {"1", "sun", "fire"}
