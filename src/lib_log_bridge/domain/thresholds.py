"""Per-logger minimum levels with dotted-name inheritance."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .levels import LogLevel


@dataclass(frozen=True, slots=True)
class LevelThresholds:
    """Backend level configuration keyed by logger name.

    A logger without its own entry inherits from the closest configured
    ancestor (``"a.b.c"`` -> ``"a.b"`` -> ``"a"``) and finally from ``root``.

    Examples
    --------
    >>> thresholds = LevelThresholds(root=LogLevel.ERROR, overrides={"Test": LogLevel.DEBUG})
    >>> thresholds.level_for("Test.CallerClass") is LogLevel.DEBUG
    True
    >>> thresholds.level_for("Other") is LogLevel.ERROR
    True
    """

    root: LogLevel = LogLevel.INFO
    overrides: Mapping[str, LogLevel] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "overrides", MappingProxyType(dict(self.overrides)))

    def level_for(self, logger_name: str) -> LogLevel:
        name = logger_name
        while name:
            configured = self.overrides.get(name)
            if configured is not None:
                return configured
            name, _, _ = name.rpartition(".")
        return self.root

    def with_override(self, logger_name: str, level: LogLevel) -> "LevelThresholds":
        """Return a copy where ``logger_name`` is configured at ``level``."""

        overrides = dict(self.overrides)
        overrides[logger_name] = level
        return LevelThresholds(root=self.root, overrides=overrides)


__all__ = ["LevelThresholds"]
