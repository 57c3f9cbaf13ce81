"""Levels of the legacy logging facade.

The legacy facade orders severities by integer value and lets applications
define their own levels by instantiating (or subclassing) :class:`LegacyLevel`
with a fresh name/value pair. Only the instances listed in
:data:`STANDARD_LEVELS` are considered standard; everything else is custom and
goes through the custom-level policy of
:class:`~lib_log_bridge.domain.translation.LevelTranslator`.
"""

from __future__ import annotations

from dataclasses import dataclass


_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)


@dataclass(frozen=True, slots=True)
class LegacyLevel:
    """Named severity of the legacy facade.

    Attributes
    ----------
    name:
        Level name as reported by the facade (``"INFO"``, ``"FINE"`` ...).
    value:
        Integer rank; higher means more severe.
    """

    name: str
    value: int

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("level name must not be empty")

    def __str__(self) -> str:
        return self.name

    @classmethod
    def parse(cls, text: str) -> "LegacyLevel":
        """Resolve a level name or integer string.

        Names are matched case-insensitively against the standard levels.
        Integers return the standard level with that value when one exists and
        a new level named after the number otherwise.
        """

        candidate = text.strip()
        by_name = _BY_NAME.get(candidate.upper())
        if by_name is not None:
            return by_name
        try:
            number = int(candidate)
        except ValueError as exc:
            raise ValueError(f"Unknown legacy level: {text!r}") from exc
        by_value = _BY_VALUE.get(number)
        if by_value is not None:
            return by_value
        return cls(name=candidate, value=number)


OFF = LegacyLevel("OFF", _INT_MAX)
SEVERE = LegacyLevel("SEVERE", 1000)
WARNING = LegacyLevel("WARNING", 900)
INFO = LegacyLevel("INFO", 800)
CONFIG = LegacyLevel("CONFIG", 700)
FINE = LegacyLevel("FINE", 500)
FINER = LegacyLevel("FINER", 400)
FINEST = LegacyLevel("FINEST", 300)
ALL = LegacyLevel("ALL", _INT_MIN)

STANDARD_LEVELS: tuple[LegacyLevel, ...] = (ALL, FINEST, FINER, FINE, CONFIG, INFO, WARNING, SEVERE, OFF)
"""Standard legacy levels ordered from least to most severe."""

_BY_NAME = {level.name: level for level in STANDARD_LEVELS}
_BY_VALUE = {level.value: level for level in STANDARD_LEVELS}


def is_standard(level: LegacyLevel) -> bool:
    """Return ``True`` when ``level`` is one of :data:`STANDARD_LEVELS`."""

    return _BY_NAME.get(level.name) == level


__all__ = [
    "ALL",
    "CONFIG",
    "FINE",
    "FINER",
    "FINEST",
    "INFO",
    "LegacyLevel",
    "OFF",
    "SEVERE",
    "STANDARD_LEVELS",
    "WARNING",
    "is_standard",
]
