"""Name-keyed cache of legacy logger handles.

Purpose
-------
Hand out exactly one :class:`ApiLogger` per name, also under concurrent first
access, without relying on a hidden module-level singleton: the registry is an
explicit object that the runtime composes and tests can build on their own.
"""

from __future__ import annotations

from threading import Lock
from typing import Iterator

from lib_log_bridge.application.ports import BackendPort, CallerResolverPort
from lib_log_bridge.application.use_cases import EmitCallable
from lib_log_bridge.domain.translation import LevelTranslator

from .logger import GLOBAL_LOGGER_NAME, ApiLogger


class LoggerRegistry:
    """Create :class:`ApiLogger` handles on first request and cache them by name."""

    def __init__(
        self,
        *,
        backend: BackendPort,
        emit: EmitCallable,
        translator: LevelTranslator,
        caller_resolver: CallerResolverPort,
    ) -> None:
        self._backend = backend
        self._emit = emit
        self._translator = translator
        self._caller_resolver = caller_resolver
        self._loggers: dict[str, ApiLogger] = {}
        self._lock = Lock()

    @property
    def translator(self) -> LevelTranslator:
        return self._translator

    @property
    def backend(self) -> BackendPort:
        return self._backend

    def get_logger(self, name: str) -> ApiLogger:
        """Return the handle for ``name``, creating it on first access.

        Raises
        ------
        TypeError
            When ``name`` is not a string.
        """

        if not isinstance(name, str):
            raise TypeError(f"logger name must be a string, got {type(name).__name__}")
        existing = self._loggers.get(name)
        if existing is not None:
            return existing
        with self._lock:
            existing = self._loggers.get(name)
            if existing is None:
                existing = ApiLogger(
                    name,
                    backend=self._backend,
                    emit=self._emit,
                    translator=self._translator,
                    caller_resolver=self._caller_resolver,
                )
                self._loggers[name] = existing
            return existing

    def get_global_logger(self) -> ApiLogger:
        return self.get_logger(GLOBAL_LOGGER_NAME)

    def names(self) -> list[str]:
        """Return the names of all created handles, sorted."""

        with self._lock:
            return sorted(self._loggers)

    def __contains__(self, name: object) -> bool:
        return name in self._loggers

    def __len__(self) -> int:
        return len(self._loggers)

    def __iter__(self) -> Iterator[ApiLogger]:
        with self._lock:
            return iter(list(self._loggers.values()))


__all__ = ["LoggerRegistry"]
