"""Utilities that normalise log events into template-friendly dictionaries.

Why
---
The console appender and the list appender accept the same ``str.format``
placeholders. Producing the payload in one place keeps both in sync.

Contents
--------
* :func:`build_format_payload` – generate placeholder values for a log event.
* :func:`render_template` – apply a template to an event.
"""

from __future__ import annotations

from typing import Any

from lib_log_bridge.domain.events import LogEvent


DEFAULT_TEMPLATE = "{timestamp} {level_icon} {LEVEL:>8} {logger_name} [{caller}] {message}{context_fields}"


def build_format_payload(event: LogEvent) -> dict[str, Any]:
    """Return the mapping of placeholders exposed to format templates."""

    context_dict = dict(event.context)
    context_fields = ""
    if context_dict:
        context_fields = " " + " ".join(f"{key}={value}" for key, value in sorted(context_dict.items()))

    level_text = event.level.severity.upper()

    return {
        "timestamp": event.timestamp.isoformat(),
        "hh": f"{event.timestamp.hour:02d}",
        "mm": f"{event.timestamp.minute:02d}",
        "ss": f"{event.timestamp.second:02d}",
        "level": level_text,
        "LEVEL": level_text,
        "level_enum": event.level,
        "level_code": event.level.code,
        "level_icon": event.level.icon,
        "legacy_level": event.legacy_level or "",
        "logger_name": event.logger_name,
        "logger_fqcn": event.logger_fqcn,
        "caller": event.caller or "",
        "exc_info": event.exc_info or "",
        "event_id": event.event_id,
        "message": event.message,
        "context": context_dict,
        "context_fields": context_fields,
    }


def render_template(template: str, event: LogEvent) -> str:
    """Render ``template`` for ``event``.

    Raises
    ------
    ValueError
        When the template references an unknown placeholder.
    """

    try:
        return template.format(**build_format_payload(event))
    except KeyError as exc:
        raise ValueError(f"Unknown placeholder in template: {exc.args[0]!r}") from exc


__all__ = ["DEFAULT_TEMPLATE", "build_format_payload", "render_template"]
