"""Record handed from the legacy facade to the backend.

Purpose
-------
Carry one forwarded log call as an immutable value: the translated backend
level, who produced it (facade class and calling class) and the string context
that preserves what the backend scale cannot express, such as the name of a
custom legacy level.

Contents
--------
* :class:`LogEvent` – the record, with ``to_dict`` and ``replace`` helpers.

System Role
-----------
Built by the emit use case, consumed by the backend and its appenders. Keeping
it free of adapter concerns lets every appender render the same data.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping

from .levels import LogLevel
from .translation import LEVEL_CONTEXT_KEY


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None or moment.tzinfo.utcoffset(moment) is None:
        raise ValueError("timestamp must be timezone-aware")
    return moment.astimezone(timezone.utc)


@dataclass(slots=True, frozen=True)
class LogEvent:
    """A single record as the backend sees it.

    Attributes
    ----------
    event_id:
        Identifier reported back to the caller in the emit result.
    timestamp:
        Creation time, stored in UTC; naive datetimes are rejected.
    logger_name:
        Name of the legacy logger handle that produced the record.
    level:
        Backend :class:`LogLevel` after translation.
    message:
        Message with positional parameters already applied; may be empty.
    logger_fqcn:
        Fully-qualified name of the facade class that built the record.
    caller:
        Fully-qualified name of the calling class (or module), when known.
    context:
        String key/value pairs; always contains the original legacy level name.
    exc_info:
        Formatted traceback of the exception passed by the caller, if any.
    """

    event_id: str
    timestamp: datetime
    logger_name: str
    level: LogLevel
    message: str
    logger_fqcn: str
    caller: str | None = None
    context: Mapping[str, str] = field(default_factory=dict)
    exc_info: str | None = None

    def __post_init__(self) -> None:
        if not self.event_id:
            raise ValueError("event_id must not be empty")
        object.__setattr__(self, "timestamp", _as_utc(self.timestamp))
        object.__setattr__(self, "context", {str(key): str(value) for key, value in self.context.items()})

    @property
    def legacy_level(self) -> str | None:
        """Name of the legacy level the record was logged at."""

        return self.context.get(LEVEL_CONTEXT_KEY)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly view; ``exc_info`` only appears when set.

        Examples
        --------
        >>> event = LogEvent("e1", datetime(2025, 9, 30, tzinfo=timezone.utc), "Test", LogLevel.DEBUG, "hi", "pkg.ApiLogger")
        >>> event.to_dict()["timestamp"], event.to_dict()["level"]
        ('2025-09-30T00:00:00+00:00', 'debug')
        """

        payload: dict[str, Any] = {
            "event_id": self.event_id,
            "timestamp": self.timestamp.isoformat(),
            "logger_name": self.logger_name,
            "level": self.level.severity,
            "legacy_level": self.legacy_level,
            "message": self.message,
            "logger_fqcn": self.logger_fqcn,
            "caller": self.caller,
            "context": dict(self.context),
        }
        if self.exc_info is not None:
            payload["exc_info"] = self.exc_info
        return payload

    def replace(self, **changes: Any) -> "LogEvent":
        return dataclasses.replace(self, **changes)


__all__ = ["LogEvent"]
