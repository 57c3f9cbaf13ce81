"""Runtime settings resolved from keyword arguments and ``LOG_*`` variables.

Environment variables win over keyword arguments so operators can retune a
deployed application without touching code.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from lib_log_bridge.application.ports import AppenderPort, CallerResolverPort
from lib_log_bridge.application.use_cases import DiagnosticHook
from lib_log_bridge.domain import CustomLevelPolicy, LogLevel


@dataclass(frozen=True)
class ConsoleSettings:
    """Options for the Rich console appender."""

    enabled: bool = True
    force_color: bool = False
    no_color: bool = False
    styles: Mapping[str, str] = field(default_factory=dict)
    template: str | None = None


@dataclass(frozen=True)
class RuntimeSettings:
    """Fully resolved configuration consumed by :func:`build_runtime`."""

    root_level: LogLevel
    levels: Mapping[str, LogLevel]
    custom_level_policy: CustomLevelPolicy
    custom_level_default: LogLevel
    console: ConsoleSettings
    appenders: tuple[AppenderPort, ...] = ()
    caller_resolver: CallerResolverPort | None = None
    diagnostic_hook: DiagnosticHook = None


def build_runtime_settings(
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
) -> RuntimeSettings:
    """Merge keyword arguments with environment overrides.

    Raises
    ------
    ValueError
        When a level name or the custom level policy cannot be parsed.
    """

    resolved_root = coerce_level(os.getenv("LOG_ROOT_LEVEL") or root_level)
    resolved_levels = _merge_levels(levels, parse_pairs(os.getenv("LOG_LEVELS")))
    policy_raw = os.getenv("LOG_CUSTOM_LEVEL_POLICY") or custom_level_policy
    policy = policy_raw if isinstance(policy_raw, CustomLevelPolicy) else CustomLevelPolicy.from_name(policy_raw)
    custom_default = coerce_level(os.getenv("LOG_CUSTOM_LEVEL_DEFAULT") or custom_level_default)
    if custom_default is LogLevel.OFF:
        raise ValueError("custom_level_default must be an emitting level, not OFF")

    console_settings = ConsoleSettings(
        enabled=env_bool("LOG_CONSOLE", console),
        force_color=env_bool("LOG_FORCE_COLOR", force_color),
        no_color=env_bool("LOG_NO_COLOR", no_color),
        styles=MappingProxyType(_merge_styles(console_styles, parse_pairs(os.getenv("LOG_CONSOLE_STYLES")))),
        template=os.getenv("LOG_CONSOLE_FORMAT") or console_format,
    )

    return RuntimeSettings(
        root_level=resolved_root,
        levels=MappingProxyType(resolved_levels),
        custom_level_policy=policy,
        custom_level_default=custom_default,
        console=console_settings,
        appenders=tuple(appenders),
        caller_resolver=caller_resolver,
        diagnostic_hook=diagnostic_hook,
    )


def coerce_level(level: str | LogLevel) -> LogLevel:
    """Normalise level inputs (string or enum) into :class:`LogLevel`.

    Examples
    --------
    >>> coerce_level("warn") is LogLevel.WARNING
    True
    >>> coerce_level(LogLevel.ERROR) is LogLevel.ERROR
    True
    """
    if isinstance(level, LogLevel):
        return level
    return LogLevel.from_name(level)


def env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> import os
    >>> _ = os.environ.pop('LOG_EXAMPLE_BOOL', None)
    >>> env_bool('LOG_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['LOG_EXAMPLE_BOOL'] = '0'
    >>> env_bool('LOG_EXAMPLE_BOOL', default=True)
    False
    >>> _ = os.environ.pop('LOG_EXAMPLE_BOOL', None)
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def parse_pairs(raw: str | None) -> dict[str, str]:
    """Convert ``key=value`` comma-separated strings into a dictionary.

    Blank chunks and chunks without ``=`` are skipped.

    Examples
    --------
    >>> parse_pairs('Test=debug, Test.CallerClass = trace, ,invalid')
    {'Test': 'debug', 'Test.CallerClass': 'trace'}
    >>> parse_pairs(None)
    {}
    """
    if not raw:
        return {}
    result: dict[str, str] = {}
    for chunk in raw.split(","):
        if "=" not in chunk:
            continue
        key, value = chunk.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key or not value:
            continue
        result[key] = value
    return result


def _merge_levels(
    explicit: Mapping[str, str | LogLevel] | None,
    env_levels: Mapping[str, str],
) -> dict[str, LogLevel]:
    merged: dict[str, LogLevel] = {}
    for name, level in (explicit or {}).items():
        merged[name] = coerce_level(level)
    for name, level in env_levels.items():
        merged[name] = coerce_level(level)
    return merged


def _merge_styles(explicit: Mapping[str, str] | None, env_styles: Mapping[str, str]) -> dict[str, str]:
    merged: dict[str, str] = {}
    for key, value in (explicit or {}).items():
        merged[coerce_level(key).name] = value
    for key, value in env_styles.items():
        merged[coerce_level(key).name] = value
    return merged


__all__ = [
    "ConsoleSettings",
    "RuntimeSettings",
    "build_runtime_settings",
    "coerce_level",
    "env_bool",
    "parse_pairs",
]
