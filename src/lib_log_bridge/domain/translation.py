"""Deterministic translation between legacy and backend levels.

Purpose
-------
Keep the level mapping table in one place so the facade, the CLI ``levels``
command and the tests agree on it.

Contents
--------
* :data:`LEVEL_CONTEXT_KEY` – context key carrying the original legacy name.
* :class:`CustomLevelPolicy` – how levels missing from the table are mapped.
* :class:`LevelTranslator` – the total, monotonic mapping in both directions.

System Role
-----------
Pure domain policy; the facade asks it for the backend level of every call and
for the legacy level reported by :meth:`ApiLogger.get_level`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from . import legacy_levels as legacy
from .legacy_levels import LegacyLevel
from .levels import LogLevel


LEVEL_CONTEXT_KEY = "legacy.level"
"""Context key holding the name of the legacy level a record was logged at."""


LEGACY_TO_BACKEND: Mapping[LegacyLevel, LogLevel] = MappingProxyType(
    {
        legacy.ALL: LogLevel.TRACE,
        legacy.FINEST: LogLevel.TRACE,
        legacy.FINER: LogLevel.TRACE,
        legacy.FINE: LogLevel.DEBUG,
        legacy.CONFIG: LogLevel.CONFIG,
        legacy.INFO: LogLevel.INFO,
        legacy.WARNING: LogLevel.WARNING,
        legacy.SEVERE: LogLevel.ERROR,
        legacy.OFF: LogLevel.OFF,
    }
)

BACKEND_TO_LEGACY: Mapping[LogLevel, LegacyLevel] = MappingProxyType(
    {
        LogLevel.TRACE: legacy.FINER,
        LogLevel.DEBUG: legacy.FINE,
        LogLevel.CONFIG: legacy.CONFIG,
        LogLevel.INFO: legacy.INFO,
        LogLevel.WARNING: legacy.WARNING,
        LogLevel.ERROR: legacy.SEVERE,
        LogLevel.CRITICAL: legacy.SEVERE,
        LogLevel.OFF: legacy.OFF,
    }
)


class CustomLevelPolicy(Enum):
    """Strategy applied to legacy levels missing from the mapping table."""

    DEFAULT = "default"
    NEAREST = "nearest"

    @classmethod
    def from_name(cls, name: str) -> "CustomLevelPolicy":
        try:
            return cls(name.strip().lower())
        except ValueError as exc:
            raise ValueError(f"Unknown custom level policy: {name!r}") from exc


@dataclass(frozen=True, slots=True)
class LevelTranslator:
    """Map legacy levels onto the backend scale and back.

    Attributes
    ----------
    policy:
        :attr:`CustomLevelPolicy.DEFAULT` sends every custom level to
        ``default``; :attr:`CustomLevelPolicy.NEAREST` uses the mapping of the
        closest standard level whose value does not exceed the custom value,
        never ``OFF``.
    default:
        Backend level used for custom levels under the default policy.

    Examples
    --------
    >>> translator = LevelTranslator()
    >>> translator.to_backend(legacy.SEVERE) is LogLevel.ERROR
    True
    >>> translator.to_backend(LegacyLevel("AUDIT", 950)) is LogLevel.INFO
    True
    >>> LevelTranslator(policy=CustomLevelPolicy.NEAREST).to_backend(LegacyLevel("AUDIT", 950)) is LogLevel.WARNING
    True
    """

    policy: CustomLevelPolicy = CustomLevelPolicy.DEFAULT
    default: LogLevel = LogLevel.INFO

    def to_backend(self, level: LegacyLevel) -> LogLevel:
        """Return the backend level for ``level``; never fails."""

        mapped = LEGACY_TO_BACKEND.get(level)
        if mapped is not None:
            return mapped
        if self.policy is CustomLevelPolicy.NEAREST:
            return LEGACY_TO_BACKEND[_nearest_standard_floor(level.value)]
        return self.default

    def to_legacy(self, level: LogLevel) -> LegacyLevel:
        """Return the legacy level reported for a backend level."""

        return BACKEND_TO_LEGACY[level]

    @staticmethod
    def is_custom(level: LegacyLevel) -> bool:
        return level not in LEGACY_TO_BACKEND


def _nearest_standard_floor(value: int) -> LegacyLevel:
    # Floors stop at SEVERE.
    chosen = legacy.ALL
    for candidate in legacy.STANDARD_LEVELS:
        if candidate is not legacy.OFF and candidate.value <= value:
            chosen = candidate
    return chosen


__all__ = [
    "BACKEND_TO_LEGACY",
    "CustomLevelPolicy",
    "LEGACY_TO_BACKEND",
    "LEVEL_CONTEXT_KEY",
    "LevelTranslator",
]
