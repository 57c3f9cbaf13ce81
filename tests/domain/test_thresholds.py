from __future__ import annotations

import pytest

from lib_log_bridge.domain.levels import LogLevel
from lib_log_bridge.domain.thresholds import LevelThresholds


@pytest.fixture
def thresholds() -> LevelThresholds:
    return LevelThresholds(root=LogLevel.ERROR, overrides={"Test": LogLevel.DEBUG, "app.db": LogLevel.WARNING})


def test_exact_name_wins(thresholds: LevelThresholds) -> None:
    assert thresholds.level_for("Test") is LogLevel.DEBUG


def test_children_inherit_from_the_closest_ancestor(thresholds: LevelThresholds) -> None:
    assert thresholds.level_for("app.db.pool") is LogLevel.WARNING
    assert thresholds.level_for("Test.CallerClass") is LogLevel.DEBUG


def test_unconfigured_names_use_the_root(thresholds: LevelThresholds) -> None:
    assert thresholds.level_for("app") is LogLevel.ERROR
    assert thresholds.level_for("") is LogLevel.ERROR
    assert thresholds.level_for("global") is LogLevel.ERROR


def test_with_override_returns_a_new_configuration(thresholds: LevelThresholds) -> None:
    updated = thresholds.with_override("app", LogLevel.TRACE)

    assert updated.level_for("app.web") is LogLevel.TRACE
    assert thresholds.level_for("app.web") is LogLevel.ERROR


def test_overrides_are_read_only(thresholds: LevelThresholds) -> None:
    with pytest.raises(TypeError):
        thresholds.overrides["x"] = LogLevel.INFO  # type: ignore[index]
