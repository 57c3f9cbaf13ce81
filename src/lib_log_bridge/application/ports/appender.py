"""Port describing sinks that receive records from the backend."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_bridge.domain.events import LogEvent


@runtime_checkable
class AppenderPort(Protocol):
    """Write a record to an output (memory, console, ...)."""

    def append(self, event: LogEvent) -> None:
        """Consume ``event``; exceptions are reported by the backend."""


__all__ = ["AppenderPort"]
