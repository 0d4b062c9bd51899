"""Pytest configuration for astrosynth."""

from __future__ import annotations

import pytest

from astrosynth.config import get_settings
from astrosynth.synthesis import CorrespondenceGraph, build_graph


@pytest.fixture(scope="session", autouse=True)
def _isolated_config_home(tmp_path_factory: pytest.TempPathFactory):
    """Point ``ASTROSYNTH_HOME`` at an empty directory so user config never leaks in."""

    patcher = pytest.MonkeyPatch()
    patcher.setenv("ASTROSYNTH_HOME", str(tmp_path_factory.mktemp("astrosynth-home")))
    get_settings.cache_clear()
    yield
    patcher.undo()
    get_settings.cache_clear()


@pytest.fixture(scope="session")
def graph() -> CorrespondenceGraph:
    return build_graph()
