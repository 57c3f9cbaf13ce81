from __future__ import annotations

from datetime import datetime, timezone
from io import StringIO

from rich.console import Console

from lib_log_bridge.adapters import RichConsoleAppender
from lib_log_bridge.domain import LogEvent, LogLevel


def _event(level: LogLevel = LogLevel.ERROR) -> LogEvent:
    return LogEvent(
        event_id="evt-1",
        timestamp=datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc),
        logger_name="Test",
        level=level,
        message="disk almost full",
        logger_fqcn="pkg.ApiLogger",
        caller="app.Service",
        context={"legacy.level": "SEVERE"},
    )


def test_default_template_shows_attribution(record_console: Console) -> None:
    appender = RichConsoleAppender(console=record_console)

    appender.append(_event())

    text = record_console.export_text()
    assert "ERROR" in text
    assert "Test [app.Service] disk almost full" in text
    assert "legacy.level=SEVERE" in text


def test_custom_template(record_console: Console) -> None:
    appender = RichConsoleAppender(console=record_console, template="{level_code}|{legacy_level}|{message}")

    appender.append(_event())

    assert record_console.export_text().strip() == "ERRO|SEVERE|disk almost full"


def test_markup_in_messages_is_printed_literally(record_console: Console) -> None:
    appender = RichConsoleAppender(console=record_console, template="{message}")

    appender.append(_event().replace(message="[bold]not markup[/bold]"))

    assert record_console.export_text().strip() == "[bold]not markup[/bold]"


def test_styles_are_applied_per_level() -> None:
    console = Console(file=StringIO(), record=True, force_terminal=True, color_system="truecolor", width=200)
    appender = RichConsoleAppender(console=console, template="{message}", styles={"error": "magenta"})

    appender.append(_event())

    assert "\x1b[35m" in console.export_text(styles=True)


def test_no_color_suppresses_styles() -> None:
    console = Console(file=StringIO(), record=True, force_terminal=True, color_system="truecolor", width=200)
    appender = RichConsoleAppender(console=console, template="{message}", no_color=True)

    appender.append(_event())

    assert "\x1b[" not in console.export_text(styles=True)


def test_default_console_is_created_when_none_is_given() -> None:
    appender = RichConsoleAppender(no_color=True)

    assert isinstance(appender.console, Console)


def test_traceback_is_printed_below_the_line(record_console: Console) -> None:
    appender = RichConsoleAppender(console=record_console, template="{message}")

    appender.append(_event().replace(exc_info="Traceback (most recent call last):\nValueError: bad input\n"))

    lines = record_console.export_text().splitlines()
    assert lines == ["disk almost full", "Traceback (most recent call last):", "ValueError: bad input"]


def test_exc_info_is_available_as_a_placeholder(record_console: Console) -> None:
    appender = RichConsoleAppender(console=record_console, template="{message}|{exc_info}")

    appender.append(_event())

    assert record_console.export_text().strip() == "disk almost full|"
