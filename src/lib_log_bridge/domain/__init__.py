"""Domain entities and value objects used by the logging bridge."""

from __future__ import annotations

from .context import ContextBinder
from .events import LogEvent
from .legacy_levels import STANDARD_LEVELS, LegacyLevel
from .levels import LogLevel
from .thresholds import LevelThresholds
from .translation import LEVEL_CONTEXT_KEY, CustomLevelPolicy, LevelTranslator

__all__ = [
    "ContextBinder",
    "CustomLevelPolicy",
    "LEVEL_CONTEXT_KEY",
    "LegacyLevel",
    "LevelThresholds",
    "LevelTranslator",
    "LogEvent",
    "LogLevel",
    "STANDARD_LEVELS",
]
