"""Runtime composition helpers wiring domain, application, and adapters.

Purpose
-------
Translate ``RuntimeSettings`` into a live ``LoggingRuntime``. The helpers here
keep wiring small, declarative, and testable.

Contents
--------
* :func:`build_runtime` – settings to runtime.
* :func:`build_registry` – registry around an existing backend, used by the
  runtime and by hosts that bring their own backend.
"""

from __future__ import annotations

from lib_log_bridge.application.ports import BackendPort, CallerResolverPort, ClockPort, IdProvider
from lib_log_bridge.application.use_cases import DiagnosticHook, create_emit_record
from lib_log_bridge.adapters import StackCallerResolver
from lib_log_bridge.bridge import LoggerRegistry
from lib_log_bridge.domain import ContextBinder, LevelTranslator

from ._factories import (
    SystemClock,
    UuidProvider,
    create_backend,
    create_caller_resolver,
    create_translator,
)
from ._settings import RuntimeSettings
from ._state import LoggingRuntime


def build_runtime(settings: RuntimeSettings) -> LoggingRuntime:
    """Assemble the logging runtime from resolved settings."""

    backend = create_backend(settings)
    translator = create_translator(settings)
    binder = ContextBinder()
    registry = build_registry(
        backend,
        translator=translator,
        caller_resolver=create_caller_resolver(settings),
        context_binder=binder,
        diagnostic=settings.diagnostic_hook,
    )
    return LoggingRuntime(
        registry=registry,
        backend=backend,
        translator=translator,
        binder=binder,
        settings=settings,
    )


def build_registry(
    backend: BackendPort,
    *,
    translator: LevelTranslator | None = None,
    caller_resolver: CallerResolverPort | None = None,
    context_binder: ContextBinder | None = None,
    clock: ClockPort | None = None,
    id_provider: IdProvider | None = None,
    diagnostic: DiagnosticHook = None,
) -> LoggerRegistry:
    """Return a :class:`LoggerRegistry` forwarding to ``backend``.

    Omitted collaborators fall back to the defaults used by :func:`init`.
    """

    emit = create_emit_record(
        backend=backend,
        clock=clock if clock is not None else SystemClock(),
        id_provider=id_provider if id_provider is not None else UuidProvider(),
        context_binder=context_binder if context_binder is not None else ContextBinder(),
        diagnostic=diagnostic,
    )
    return LoggerRegistry(
        backend=backend,
        emit=emit,
        translator=translator if translator is not None else LevelTranslator(),
        caller_resolver=caller_resolver if caller_resolver is not None else StackCallerResolver(),
    )


__all__ = ["build_registry", "build_runtime"]
