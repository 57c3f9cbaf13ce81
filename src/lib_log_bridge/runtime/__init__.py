"""Runtime façade that wires the legacy bridge to its backend.

Purpose
-------
Expose a stable entry point (`init`, `get_logger`, `bind`, `inspect_runtime`,
`shutdown`) that host applications use instead of composing the inner layers
themselves.

Contents
--------
* ``init`` – composition root for backend, translator and registry.
* ``get_logger`` / ``get_global_logger`` / ``bind`` – accessors for handles
  and scoped context.
* ``inspect_runtime`` – read-only snapshot of the active configuration.
* ``shutdown`` – deterministic teardown so tests and CLIs can re-initialise.
* ``summary_info`` – metadata banner used by the CLI.

System Role
-----------
Forms the outer shell: code written against the legacy API only needs
``get_logger``; adapters and the backend stay hidden behind this interface.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping

from lib_log_bridge.application.ports import AppenderPort, CallerResolverPort
from lib_log_bridge.application.use_cases import DiagnosticHook
from lib_log_bridge.bridge import ApiLogger
from lib_log_bridge.domain import CustomLevelPolicy, LogLevel

from ._composition import build_registry, build_runtime
from ._settings import build_runtime_settings, coerce_level
from ._state import LoggingRuntime, clear_runtime, current_runtime, is_initialised, set_runtime


@dataclass(frozen=True)
class RuntimeSnapshot:
    """Immutable view over the active logging runtime."""

    root_level: LogLevel
    levels: Mapping[str, LogLevel]
    custom_level_policy: CustomLevelPolicy
    custom_level_default: LogLevel
    console_enabled: bool
    appenders: tuple[str, ...]
    loggers: tuple[str, ...]


__all__ = [
    "LoggingRuntime",
    "RuntimeSnapshot",
    "bind",
    "build_registry",
    "coerce_level",
    "get_global_logger",
    "get_logger",
    "init",
    "inspect_runtime",
    "is_initialised",
    "shutdown",
    "summary_info",
]


def init(
    *,
    root_level: str | LogLevel = LogLevel.INFO,
    levels: Mapping[str, str | LogLevel] | None = None,
    custom_level_policy: str | CustomLevelPolicy = CustomLevelPolicy.DEFAULT,
    custom_level_default: str | LogLevel = LogLevel.INFO,
    console: bool = True,
    force_color: bool = False,
    no_color: bool = False,
    console_styles: Mapping[str, str] | None = None,
    console_format: str | None = None,
    appenders: Iterable[AppenderPort] = (),
    caller_resolver: CallerResolverPort | None = None,
    diagnostic_hook: DiagnosticHook = None,
) -> None:
    """Compose the bridge runtime according to configuration inputs.

    Parameters
    ----------
    root_level, levels:
        Backend thresholds: the root level and per-logger overrides that
        inherit along dotted names. ``LOG_ROOT_LEVEL`` and ``LOG_LEVELS``
        (``name=level,...``) take precedence.
    custom_level_policy, custom_level_default:
        How legacy levels outside the standard table are mapped
        (``LOG_CUSTOM_LEVEL_POLICY`` / ``LOG_CUSTOM_LEVEL_DEFAULT``).
    console, force_color, no_color, console_styles, console_format:
        Rich console appender options (``LOG_CONSOLE``, ``LOG_FORCE_COLOR``,
        ``LOG_NO_COLOR``, ``LOG_CONSOLE_STYLES``, ``LOG_CONSOLE_FORMAT``).
    appenders:
        Extra appenders receiving every emitted record.
    caller_resolver:
        Strategy attributing records to callers that do not pass ``caller=``;
        defaults to :class:`~lib_log_bridge.adapters.StackCallerResolver`.
    diagnostic_hook:
        Callback invoked with ``level_disabled``/``emitted``/``adapter_error``.

    Raises
    ------
    RuntimeError
        If called while a runtime is already active.
    ValueError
        When a level name or policy cannot be parsed.

    Examples
    --------
    >>> import lib_log_bridge as bridge
    >>> from lib_log_bridge.adapters import ListAppender
    >>> appender = ListAppender()
    >>> bridge.init(console=False, levels={"Test": "debug"}, appenders=[appender])  # doctest: +SKIP
    >>> bridge.get_logger("Test").info("ready")["ok"]  # doctest: +SKIP
    True
    >>> bridge.shutdown()  # doctest: +SKIP
    """

    if is_initialised():
        raise RuntimeError(
            "lib_log_bridge.init() cannot be called twice without shutdown(); call lib_log_bridge.shutdown() first",
        )

    settings = build_runtime_settings(
        root_level=root_level,
        levels=levels,
        custom_level_policy=custom_level_policy,
        custom_level_default=custom_level_default,
        console=console,
        force_color=force_color,
        no_color=no_color,
        console_styles=console_styles,
        console_format=console_format,
        appenders=appenders,
        caller_resolver=caller_resolver,
        diagnostic_hook=diagnostic_hook,
    )
    set_runtime(build_runtime(settings))


def get_logger(name: str) -> ApiLogger:
    """Return the cached legacy handle for ``name``.

    Raises
    ------
    RuntimeError
        When ``init`` has not been called.
    """

    return current_runtime().registry.get_logger(name)


def get_global_logger() -> ApiLogger:
    return current_runtime().registry.get_global_logger()


@contextmanager
def bind(**fields: Any) -> Iterator[Mapping[str, str]]:
    """Bind string context fields to every record emitted inside the block."""

    runtime = current_runtime()
    with runtime.binder.bind(**fields) as ctx:
        yield ctx


def inspect_runtime() -> RuntimeSnapshot:
    """Return a read-only snapshot of the current runtime state."""

    runtime = current_runtime()
    settings = runtime.settings
    return RuntimeSnapshot(
        root_level=settings.root_level,
        levels=MappingProxyType(dict(settings.levels)),
        custom_level_policy=settings.custom_level_policy,
        custom_level_default=settings.custom_level_default,
        console_enabled=settings.console.enabled,
        appenders=tuple(type(appender).__name__ for appender in runtime.backend.appenders),
        loggers=tuple(runtime.registry.names()),
    )


def shutdown() -> None:
    """Drop the active runtime; handles obtained earlier keep their backend.

    Raises
    ------
    RuntimeError
        When no runtime is active.
    """

    current_runtime()
    clear_runtime()


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """

    from .. import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)
