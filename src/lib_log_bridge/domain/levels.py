"""Backend log levels receiving translated legacy severities.

Purpose
-------
Offer the ordered severity scale owned by the backend. Legacy levels are
translated onto this scale by :mod:`lib_log_bridge.domain.translation`.

Contents
--------
* :class:`LogLevel` enum with parsing helpers and presentation metadata.
* ``_ICON_TABLE`` / ``_CODE_TABLE`` constants used by console rendering.

System Role
-----------
Used by the backend to decide which records are emitted and by the appenders
to present human-friendly icons and fixed-width codes.
"""

from __future__ import annotations

from enum import Enum


class LogLevel(Enum):
    """Enumerated backend levels; ``OFF`` only exists as a threshold."""

    TRACE = 5
    DEBUG = 10
    CONFIG = 15
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100

    @property
    def severity(self) -> str:
        """Return the lowercase severity name for structured payloads."""

        return self.name.lower()

    @property
    def icon(self) -> str:
        """Return the unicode icon visualizing the level on colored consoles."""

        return _ICON_TABLE[self]

    @property
    def code(self) -> str:
        """Return the four-character code used in compact console lines."""

        return _CODE_TABLE[self]

    def is_at_least(self, threshold: "LogLevel") -> bool:
        """Return ``True`` when this level is as severe as ``threshold`` or more."""

        return self.value >= threshold.value

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        if normalized == "WARN":
            normalized = "WARNING"
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_numeric(cls, level: int) -> "LogLevel":
        """Return the :class:`LogLevel` corresponding to ``level``."""
        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported log level numeric: {level}") from exc


_ICON_TABLE = {
    LogLevel.TRACE: "·",
    LogLevel.DEBUG: "🐞",
    LogLevel.CONFIG: "⚙",
    LogLevel.INFO: "ℹ",
    LogLevel.WARNING: "⚠",
    LogLevel.ERROR: "✖",
    LogLevel.CRITICAL: "☠",
    LogLevel.OFF: "⊘",
}
# Console glyphs displayed by the Rich appender per level.

_CODE_TABLE = {
    LogLevel.TRACE: "TRAC",
    LogLevel.DEBUG: "DEBG",
    LogLevel.CONFIG: "CONF",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARN",
    LogLevel.ERROR: "ERRO",
    LogLevel.CRITICAL: "CRIT",
    LogLevel.OFF: "OFF ",
}


__all__ = ["LogLevel"]
