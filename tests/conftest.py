"""Shared fixtures for the bridge test-suite."""

from __future__ import annotations

from datetime import datetime, timezone
from io import StringIO
from typing import Iterator

import pytest
from rich.console import Console

from lib_log_bridge.adapters import ConfiguredBackend, ListAppender
from lib_log_bridge.bridge import LoggerRegistry
from lib_log_bridge.domain import LevelThresholds, LogLevel
from lib_log_bridge.runtime import build_registry
from lib_log_bridge.runtime._state import clear_runtime

FIXED_NOW = datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc)

_LOG_ENV_VARS = (
    "LOG_ROOT_LEVEL",
    "LOG_LEVELS",
    "LOG_CUSTOM_LEVEL_POLICY",
    "LOG_CUSTOM_LEVEL_DEFAULT",
    "LOG_CONSOLE",
    "LOG_CONSOLE_FORMAT",
    "LOG_CONSOLE_STYLES",
    "LOG_FORCE_COLOR",
    "LOG_NO_COLOR",
    "LOG_USE_DOTENV",
)


class FixedClock:
    def now(self) -> datetime:
        return FIXED_NOW


class CountingIds:
    def __init__(self) -> None:
        self.count = 0

    def __call__(self) -> str:
        self.count += 1
        return f"event-{self.count}"


@pytest.fixture(autouse=True)
def _isolate_log_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep LOG_* variables of the developer shell out of the tests and reset the runtime."""

    for name in _LOG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    clear_runtime()
    yield
    clear_runtime()


@pytest.fixture
def list_appender() -> ListAppender:
    return ListAppender(template="{caller}")


@pytest.fixture
def backend(list_appender: ListAppender) -> ConfiguredBackend:
    """Backend mirroring the reference configuration: root ERROR, ``Test`` at DEBUG."""

    thresholds = LevelThresholds(root=LogLevel.ERROR, overrides={"Test": LogLevel.DEBUG})
    return ConfiguredBackend(thresholds=thresholds, appenders=[list_appender])


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def ids() -> CountingIds:
    return CountingIds()


@pytest.fixture
def registry(backend: ConfiguredBackend, clock: FixedClock, ids: CountingIds) -> LoggerRegistry:
    return build_registry(backend, clock=clock, id_provider=ids)


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=200, color_system=None)
