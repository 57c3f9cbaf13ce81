"""Shared type aliases for application use cases."""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol

from lib_log_bridge.domain.levels import LogLevel

ProcessResult = dict[str, Any]
DiagnosticHook = Optional[Callable[[str, dict[str, Any]], None]]


class EmitCallable(Protocol):
    """Callable produced by :func:`create_emit_record`."""

    def __call__(
        self,
        *,
        logger_name: str,
        level: LogLevel,
        legacy_level: str,
        message: str,
        logger_fqcn: str,
        caller: str | None = None,
        resolve_caller: Callable[[], str | None] | None = None,
        exc_info: str | None = None,
    ) -> ProcessResult: ...


__all__ = ["DiagnosticHook", "EmitCallable", "ProcessResult"]
