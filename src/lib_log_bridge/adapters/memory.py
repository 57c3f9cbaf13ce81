"""In-memory appender collecting records and rendered lines."""

from __future__ import annotations

from threading import Lock

from lib_log_bridge.application.ports.appender import AppenderPort
from lib_log_bridge.domain.events import LogEvent

from ._formatting import render_template


class ListAppender(AppenderPort):
    """Keep every appended record, plus its rendering when a template is set.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> from lib_log_bridge.domain.levels import LogLevel
    >>> appender = ListAppender(template="{caller}")
    >>> event = LogEvent('id', datetime(2025, 9, 30, tzinfo=timezone.utc), 'Test', LogLevel.INFO, 'msg', 'pkg.ApiLogger', caller='app.Service')
    >>> appender.append(event)
    >>> appender.messages
    ['app.Service']
    """

    def __init__(self, *, name: str = "list", template: str | None = None) -> None:
        self.name = name
        self._template = template
        self._events: list[LogEvent] = []
        self._messages: list[str] = []
        self._lock = Lock()

    def append(self, event: LogEvent) -> None:
        rendered = render_template(self._template, event) if self._template is not None else None
        with self._lock:
            self._events.append(event)
            if rendered is not None:
                self._messages.append(rendered)

    @property
    def events(self) -> list[LogEvent]:
        """Return a snapshot of the collected records."""

        with self._lock:
            return list(self._events)

    @property
    def messages(self) -> list[str]:
        """Return a snapshot of the rendered lines (empty without a template)."""

        with self._lock:
            return list(self._messages)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()
            self._messages.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)


__all__ = ["ListAppender"]
