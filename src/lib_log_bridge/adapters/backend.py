"""Configured backend implementing :class:`BackendPort`.

Purpose
-------
Own the level configuration and output fan-out that the legacy facade is not
allowed to touch: per-name thresholds decide what is emitted, appenders decide
where it goes.

Contents
--------
* :class:`ConfiguredBackend` – thresholds plus an appender list.

System Role
-----------
Concrete collaborator composed by :func:`lib_log_bridge.init`; tests build it
directly around a :class:`~lib_log_bridge.adapters.memory.ListAppender`.
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import Iterable

from lib_log_bridge.application.ports.appender import AppenderPort
from lib_log_bridge.application.ports.backend import AppendResult, BackendPort
from lib_log_bridge.domain.events import LogEvent
from lib_log_bridge.domain.levels import LogLevel
from lib_log_bridge.domain.thresholds import LevelThresholds

logger = logging.getLogger(__name__)


class ConfiguredBackend(BackendPort):
    """Filter records by configured level and fan them out to appenders."""

    def __init__(
        self,
        *,
        thresholds: LevelThresholds | None = None,
        appenders: Iterable[AppenderPort] = (),
    ) -> None:
        self._thresholds = thresholds if thresholds is not None else LevelThresholds()
        self._appenders: tuple[AppenderPort, ...] = tuple(appenders)
        self._lock = RLock()

    @property
    def thresholds(self) -> LevelThresholds:
        return self._thresholds

    @property
    def appenders(self) -> tuple[AppenderPort, ...]:
        return self._appenders

    def add_appender(self, appender: AppenderPort) -> None:
        """Attach ``appender`` for subsequent records."""

        with self._lock:
            self._appenders = self._appenders + (appender,)

    def level_for(self, logger_name: str) -> LogLevel:
        return self._thresholds.level_for(logger_name)

    def is_enabled_for(self, logger_name: str, level: LogLevel) -> bool:
        """Return ``True`` when ``level`` passes the threshold of ``logger_name``.

        Records at :attr:`LogLevel.OFF` are never emitted and an ``OFF``
        threshold silences the logger entirely.
        """

        if level is LogLevel.OFF:
            return False
        threshold = self.level_for(logger_name)
        if threshold is LogLevel.OFF:
            return False
        return level.is_at_least(threshold)

    def append(self, event: LogEvent) -> AppendResult:
        """Deliver ``event`` to every appender, isolating appender failures."""

        failed: list[str] = []
        for appender in self._appenders:
            try:
                appender.append(event)
            except Exception:
                name = type(appender).__name__
                logger.exception("Appender %s failed for event %s", name, event.event_id)
                failed.append(name)
        if failed:
            return {"ok": False, "reason": "adapter_error", "event_id": event.event_id, "failed": failed}
        return {"ok": True, "event_id": event.event_id}


__all__ = ["ConfiguredBackend"]
