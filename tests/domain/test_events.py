from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from lib_log_bridge.domain.events import LogEvent
from lib_log_bridge.domain.levels import LogLevel


def _event(**overrides: object) -> LogEvent:
    fields: dict[str, object] = {
        "event_id": "evt-1",
        "timestamp": datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc),
        "logger_name": "Test",
        "level": LogLevel.INFO,
        "message": "Test",
        "logger_fqcn": "lib_log_bridge.bridge.logger.ApiLogger",
        "caller": "app.Service",
        "context": {"legacy.level": "INFO"},
    }
    fields.update(overrides)
    return LogEvent(**fields)  # type: ignore[arg-type]


def test_naive_timestamps_are_rejected() -> None:
    with pytest.raises(ValueError, match="timezone-aware"):
        _event(timestamp=datetime(2025, 9, 30, 12, 0))


def test_timestamps_are_normalised_to_utc() -> None:
    local = datetime(2025, 9, 30, 14, 0, tzinfo=timezone(timedelta(hours=2)))

    event = _event(timestamp=local)

    assert event.timestamp == datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc)
    assert event.timestamp.tzinfo is timezone.utc


def test_event_id_must_not_be_empty() -> None:
    with pytest.raises(ValueError, match="event_id"):
        _event(event_id="")


def test_context_values_are_stringified() -> None:
    event = _event(context={"attempt": 3, "legacy.level": "INFO"})

    assert event.context == {"attempt": "3", "legacy.level": "INFO"}


def test_empty_messages_are_allowed() -> None:
    assert _event(message="").message == ""


def test_to_dict_serialises_attribution_and_context() -> None:
    data = _event().to_dict()

    assert data["timestamp"] == "2025-09-30T12:00:00+00:00"
    assert data["level"] == "info"
    assert data["logger_fqcn"] == "lib_log_bridge.bridge.logger.ApiLogger"
    assert data["caller"] == "app.Service"
    assert data["context"] == {"legacy.level": "INFO"}
    assert "exc_info" not in data


def test_to_dict_includes_exc_info_when_present() -> None:
    assert _event(exc_info="Traceback ...").to_dict()["exc_info"] == "Traceback ..."


def test_replace_returns_a_modified_copy() -> None:
    original = _event()

    changed = original.replace(message="other")

    assert changed.message == "other"
    assert original.message == "Test"


def test_legacy_level_is_read_from_context() -> None:
    assert _event().legacy_level == "INFO"
    assert _event(context={}).legacy_level is None
    assert _event().to_dict()["legacy_level"] == "INFO"
