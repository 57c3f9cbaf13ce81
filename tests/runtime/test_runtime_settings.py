from __future__ import annotations

import pytest

from lib_log_bridge.domain import CustomLevelPolicy, LogLevel
from lib_log_bridge.runtime._settings import build_runtime_settings, env_bool, parse_pairs


def test_keyword_arguments_are_used_without_environment() -> None:
    settings = build_runtime_settings(
        root_level="warning",
        levels={"Test": "debug"},
        custom_level_policy="nearest",
        console=False,
        console_format="{message}",
    )

    assert settings.root_level is LogLevel.WARNING
    assert dict(settings.levels) == {"Test": LogLevel.DEBUG}
    assert settings.custom_level_policy is CustomLevelPolicy.NEAREST
    assert settings.custom_level_default is LogLevel.INFO
    assert settings.console.enabled is False
    assert settings.console.template == "{message}"


def test_environment_wins_over_keyword_arguments(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_ROOT_LEVEL", "error")
    monkeypatch.setenv("LOG_LEVELS", "Test=trace,app.db=warn")
    monkeypatch.setenv("LOG_CUSTOM_LEVEL_POLICY", "default")
    monkeypatch.setenv("LOG_CUSTOM_LEVEL_DEFAULT", "warning")
    monkeypatch.setenv("LOG_CONSOLE", "0")
    monkeypatch.setenv("LOG_NO_COLOR", "yes")
    monkeypatch.setenv("LOG_CONSOLE_STYLES", "info=green")
    monkeypatch.setenv("LOG_CONSOLE_FORMAT", "{LEVEL} {message}")

    settings = build_runtime_settings(
        root_level="debug",
        levels={"Test": "info", "other": "config"},
        custom_level_policy=CustomLevelPolicy.NEAREST,
        console=True,
        console_styles={"INFO": "cyan", "warn": "yellow"},
        console_format="{message}",
    )

    assert settings.root_level is LogLevel.ERROR
    assert dict(settings.levels) == {"Test": LogLevel.TRACE, "other": LogLevel.CONFIG, "app.db": LogLevel.WARNING}
    assert settings.custom_level_policy is CustomLevelPolicy.DEFAULT
    assert settings.custom_level_default is LogLevel.WARNING
    assert settings.console.enabled is False
    assert settings.console.no_color is True
    assert dict(settings.console.styles) == {"INFO": "green", "WARNING": "yellow"}
    assert settings.console.template == "{LEVEL} {message}"


def test_blank_environment_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_ROOT_LEVEL", "")
    monkeypatch.setenv("LOG_CONSOLE", "  ")

    settings = build_runtime_settings(root_level="config", console=True)

    assert settings.root_level is LogLevel.CONFIG
    assert settings.console.enabled is True


@pytest.mark.parametrize(
    ("variable", "value", "error_match"),
    [
        ("LOG_ROOT_LEVEL", "loud", "Unknown log level"),
        ("LOG_LEVELS", "Test=chatty", "Unknown log level"),
        ("LOG_CUSTOM_LEVEL_POLICY", "closest", "Unknown custom level policy"),
        ("LOG_CUSTOM_LEVEL_DEFAULT", "off", "must be an emitting level"),
        ("LOG_CONSOLE_STYLES", "shouting=red", "Unknown log level"),
    ],
)
def test_invalid_environment_values(
    monkeypatch: pytest.MonkeyPatch, variable: str, value: str, error_match: str
) -> None:
    monkeypatch.setenv(variable, value)

    with pytest.raises(ValueError, match=error_match):
        build_runtime_settings()


def test_parse_pairs_skips_malformed_chunks() -> None:
    assert parse_pairs("a=1,,b,=2,c=") == {"a": "1"}


@pytest.mark.parametrize(("raw", "expected"), [("1", True), ("TRUE", True), ("on", True), ("no", False), ("nah", False)])
def test_env_bool(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("LOG_TEST_FLAG", raw)

    assert env_bool("LOG_TEST_FLAG", default=not expected) is expected
