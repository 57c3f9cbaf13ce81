"""Backend port the bridge forwards translated records to.

Purpose
-------
Describe the three capabilities the facade needs from the backend: the
emission decision, the configured level per logger name, and the append path.

Contents
--------
* :class:`BackendPort` – runtime-checkable protocol.
* ``AppendResult`` – diagnostic dictionary returned by ``append``.

System Role
-----------
The facade owns no level configuration; every ``is_loggable``/``get_level``
question is answered through this port.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from lib_log_bridge.domain.events import LogEvent
from lib_log_bridge.domain.levels import LogLevel

AppendResult = dict[str, Any]


@runtime_checkable
class BackendPort(Protocol):
    """Level-aware sink owning configuration and output."""

    def is_enabled_for(self, logger_name: str, level: LogLevel) -> bool:
        """Return ``True`` when a record at ``level`` would be emitted."""

    def level_for(self, logger_name: str) -> LogLevel:
        """Return the minimum level configured for ``logger_name``."""

    def append(self, event: LogEvent) -> AppendResult:
        """Deliver ``event`` to the configured outputs."""


__all__ = ["AppendResult", "BackendPort"]
