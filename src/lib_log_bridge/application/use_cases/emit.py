"""Use case turning a facade call into a backend record.

Purpose
-------
Tie together the emission decision, record construction, context propagation
and the backend append path for a single legacy log call.

Contents
--------
* :func:`create_emit_record` factory returning the runtime callable.
* :func:`build_diagnostic_emitter` wrapping the optional diagnostic hook.

System Role
-----------
Application-layer orchestrator invoked by every :class:`ApiLogger` handle.
The facade translates levels and resolves callers; this module owns what
happens afterwards.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from lib_log_bridge.application.ports import BackendPort, ClockPort, IdProvider
from lib_log_bridge.domain import LEVEL_CONTEXT_KEY, ContextBinder, LogEvent, LogLevel

from ._types import DiagnosticHook, EmitCallable, ProcessResult

logger = logging.getLogger(__name__)


def create_emit_record(
    *,
    backend: BackendPort,
    clock: ClockPort,
    id_provider: IdProvider,
    context_binder: ContextBinder,
    diagnostic: DiagnosticHook = None,
) -> EmitCallable:
    """Build the callable every logger handle forwards to.

    Parameters
    ----------
    backend:
        Implementation of :class:`BackendPort` deciding and receiving records.
    clock:
        Provider of timezone-aware timestamps.
    id_provider:
        Callable returning unique event identifiers.
    context_binder:
        Source of the context fields bound to the current scope.
    diagnostic:
        Optional callback invoked with ``level_disabled``, ``emitted`` and
        ``adapter_error`` milestones.

    Returns
    -------
    EmitCallable
        Function accepting the translated call and returning a diagnostic
        dictionary (``ok``, ``event_id`` or ``reason``).

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> class DummyBackend:
    ...     def __init__(self):
    ...         self.events = []
    ...     def is_enabled_for(self, logger_name, level):
    ...         return level.is_at_least(LogLevel.INFO)
    ...     def level_for(self, logger_name):
    ...         return LogLevel.INFO
    ...     def append(self, event):
    ...         self.events.append(event)
    ...         return {"ok": True, "event_id": event.event_id}
    >>> class DummyClock:
    ...     def now(self):
    ...         return datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc)
    >>> backend = DummyBackend()
    >>> emit = create_emit_record(
    ...     backend=backend,
    ...     clock=DummyClock(),
    ...     id_provider=lambda: "event-1",
    ...     context_binder=ContextBinder(),
    ... )
    >>> emit(logger_name="Test", level=LogLevel.INFO, legacy_level="INFO", message="hello", logger_fqcn="x.ApiLogger")
    {'ok': True, 'event_id': 'event-1'}
    >>> backend.events[0].context["legacy.level"]
    'INFO'
    >>> emit(logger_name="Test", level=LogLevel.DEBUG, legacy_level="FINE", message="hidden", logger_fqcn="x.ApiLogger")
    {'ok': False, 'reason': 'level_disabled'}
    """

    toolkit = _EmitToolkit(
        backend=backend,
        clock=clock,
        id_provider=id_provider,
        context_binder=context_binder,
        emit=build_diagnostic_emitter(diagnostic),
    )
    return _EmitPipeline(toolkit)


def build_diagnostic_emitter(diagnostic: DiagnosticHook) -> Callable[[str, dict[str, Any]], None]:
    """Return a callable that forwards milestones to ``diagnostic``.

    Failures raised by the hook are logged and never reach the caller of the
    legacy facade.
    """

    if diagnostic is None:

        def _noop(name: str, payload: dict[str, Any]) -> None:
            return None

        return _noop

    def _emit(name: str, payload: dict[str, Any]) -> None:
        try:
            diagnostic(name, payload)
        except Exception:
            logger.exception("Diagnostic hook failed for %s", name)

    return _emit


@dataclass(frozen=True)
class _EmitToolkit:
    backend: BackendPort
    clock: ClockPort
    id_provider: IdProvider
    context_binder: ContextBinder
    emit: Callable[[str, dict[str, Any]], None]


class _EmitPipeline(EmitCallable):
    def __init__(self, toolkit: _EmitToolkit) -> None:
        self._toolkit = toolkit

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
    ) -> ProcessResult:
        if not self._toolkit.backend.is_enabled_for(logger_name, level):
            return _reject_disabled(self._toolkit, logger_name, level)
        if caller is None and resolve_caller is not None:
            caller = resolve_caller()
        event = _craft_event(self._toolkit, logger_name, level, legacy_level, message, logger_fqcn, caller, exc_info)
        return _append_event(self._toolkit, event)


def _reject_disabled(toolkit: _EmitToolkit, logger_name: str, level: LogLevel) -> ProcessResult:
    toolkit.emit("level_disabled", {"logger": logger_name, "level": level.name})
    return {"ok": False, "reason": "level_disabled"}


def _craft_event(
    toolkit: _EmitToolkit,
    logger_name: str,
    level: LogLevel,
    legacy_level: str,
    message: str,
    logger_fqcn: str,
    caller: str | None,
    exc_info: str | None,
) -> LogEvent:
    context = dict(toolkit.context_binder.current())
    context[LEVEL_CONTEXT_KEY] = legacy_level
    return LogEvent(
        event_id=toolkit.id_provider(),
        timestamp=toolkit.clock.now(),
        logger_name=logger_name,
        level=level,
        message=message,
        logger_fqcn=logger_fqcn,
        caller=caller,
        context=context,
        exc_info=exc_info,
    )


def _append_event(toolkit: _EmitToolkit, event: LogEvent) -> ProcessResult:
    outcome = toolkit.backend.append(event)
    payload = {"event_id": event.event_id, "logger": event.logger_name, "level": event.level.name}
    if outcome.get("ok", False):
        toolkit.emit("emitted", payload)
    else:
        toolkit.emit("adapter_error", {**payload, "failed": list(outcome.get("failed", ()))})
    return outcome


__all__ = ["build_diagnostic_emitter", "create_emit_record"]
