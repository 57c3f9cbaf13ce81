"""Small factories used by the composition root."""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

from lib_log_bridge.adapters import ConfiguredBackend, RichConsoleAppender, StackCallerResolver
from lib_log_bridge.application.ports import AppenderPort, CallerResolverPort, ClockPort, IdProvider
from lib_log_bridge.domain import LevelThresholds, LevelTranslator

from ._settings import ConsoleSettings, RuntimeSettings


class SystemClock(ClockPort):
    """Concrete clock port returning timezone-aware UTC timestamps."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class UuidProvider(IdProvider):
    """Generate hexadecimal identifiers for log events."""

    def __call__(self) -> str:
        return uuid4().hex


def create_console(console: ConsoleSettings) -> RichConsoleAppender:
    return RichConsoleAppender(
        force_color=console.force_color,
        no_color=console.no_color,
        styles=console.styles,
        template=console.template,
    )


def create_appenders(settings: RuntimeSettings) -> list[AppenderPort]:
    """Return the console appender (when enabled) followed by injected ones."""

    appenders: list[AppenderPort] = []
    if settings.console.enabled:
        appenders.append(create_console(settings.console))
    appenders.extend(settings.appenders)
    return appenders


def create_backend(settings: RuntimeSettings) -> ConfiguredBackend:
    thresholds = LevelThresholds(root=settings.root_level, overrides=settings.levels)
    return ConfiguredBackend(thresholds=thresholds, appenders=create_appenders(settings))


def create_translator(settings: RuntimeSettings) -> LevelTranslator:
    return LevelTranslator(policy=settings.custom_level_policy, default=settings.custom_level_default)


def create_caller_resolver(settings: RuntimeSettings) -> CallerResolverPort:
    if settings.caller_resolver is not None:
        return settings.caller_resolver
    return StackCallerResolver()


__all__ = [
    "SystemClock",
    "UuidProvider",
    "create_appenders",
    "create_backend",
    "create_caller_resolver",
    "create_console",
    "create_translator",
]
