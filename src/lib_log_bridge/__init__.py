"""Public package surface of the logging bridge.

Code written against the legacy logging facade obtains handles through
:func:`get_logger` after the host called :func:`init`; hosts that manage their
own backend compose a :class:`LoggerRegistry` with :func:`build_registry`.
"""

from __future__ import annotations

from .bridge import GLOBAL_LOGGER_NAME, ROOT_LOGGER_NAME, ApiLogger, LoggerRegistry, UnsupportedOperationError
from .domain import LEVEL_CONTEXT_KEY, CustomLevelPolicy, LegacyLevel, LevelTranslator, LogLevel
from .domain import legacy_levels
from .runtime import (
    RuntimeSnapshot,
    bind,
    build_registry,
    get_global_logger,
    get_logger,
    init,
    inspect_runtime,
    is_initialised,
    shutdown,
    summary_info,
)

__all__ = [
    "ApiLogger",
    "CustomLevelPolicy",
    "GLOBAL_LOGGER_NAME",
    "LEVEL_CONTEXT_KEY",
    "LegacyLevel",
    "LevelTranslator",
    "LogLevel",
    "LoggerRegistry",
    "ROOT_LOGGER_NAME",
    "RuntimeSnapshot",
    "UnsupportedOperationError",
    "bind",
    "build_registry",
    "get_global_logger",
    "get_logger",
    "init",
    "inspect_runtime",
    "is_initialised",
    "legacy_levels",
    "shutdown",
    "summary_info",
]
