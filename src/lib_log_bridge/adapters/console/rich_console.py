"""Rich-powered console appender implementing :class:`AppenderPort`.

Purpose
-------
Give the bridge a human-facing sink: every record the backend accepts is
printed through Rich with a per-level style.

Contents
--------
* :data:`_STYLE_MAP` - default level-to-style mapping.
* :class:`RichConsoleAppender` - appender constructed by :func:`lib_log_bridge.init`.

System Role
-----------
Default output of the runtime and of the ``logdemo`` CLI command; honours
colour overrides passed through settings or ``LOG_*`` environment variables.
"""

from __future__ import annotations

from typing import Mapping

from rich.console import Console

from lib_log_bridge.application.ports.appender import AppenderPort
from lib_log_bridge.domain.events import LogEvent
from lib_log_bridge.domain.levels import LogLevel

from .._formatting import DEFAULT_TEMPLATE, render_template


_STYLE_MAP: Mapping[LogLevel, str] = {
    LogLevel.TRACE: "dim",
    LogLevel.DEBUG: "dim",
    LogLevel.CONFIG: "blue",
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
    LogLevel.CRITICAL: "bold red",
    LogLevel.OFF: "",
}

#: Default Rich styles keyed by :class:`LogLevel` severity.


class RichConsoleAppender(AppenderPort):
    """Render records using Rich formatting with style overrides."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: Mapping[LogLevel | str, str] | None = None,
        template: str | None = None,
    ) -> None:
        """Configure the console appender with colour and style overrides."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color or None, no_color=no_color)
        self._no_color = no_color
        self._template = template or DEFAULT_TEMPLATE
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            level = LogLevel.from_name(key) if isinstance(key, str) else key
            merged[level] = value
        self._style_map = merged

    @property
    def console(self) -> Console:
        return self._console

    def append(self, event: LogEvent) -> None:
        """Print ``event`` with the style of its level, followed by its traceback when set.

        Examples
        --------
        >>> from datetime import datetime, timezone
        >>> from io import StringIO
        >>> event = LogEvent('id', datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc), 'Test', LogLevel.INFO, 'msg', 'pkg.ApiLogger')
        >>> console = Console(file=StringIO(), record=True)
        >>> appender = RichConsoleAppender(console=console)
        >>> appender.append(event)
        >>> 'msg' in console.export_text()
        True
        """
        style = "" if self._no_color else self._style_map.get(event.level, "")
        line = render_template(self._template, event)
        self._console.print(line, style=style or None, highlight=False, markup=False, soft_wrap=True)
        if event.exc_info:
            self._console.print(event.exc_info.rstrip("\n"), style=style or None, highlight=False, markup=False, soft_wrap=True)


__all__ = ["RichConsoleAppender"]
