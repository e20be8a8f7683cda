"""Unit tests for log line formatting."""

from __future__ import annotations

from datetime import datetime

from serialdeck.core.log_format import format_entry, format_payload, format_timestamp
from serialdeck.models.message_log import LogDirection, LogEntry
from serialdeck.models.modes import DisplayMode


def entry(direction: LogDirection, data: bytes) -> LogEntry:
    return LogEntry(
        timestamp=datetime(2024, 5, 1, 12, 0, 1, 250_000),
        direction=direction,
        data=data,
    )


class TestLogFormat:
    """Test timestamped RX/TX lines."""

    def test_timestamp_has_milliseconds(self):
        assert format_timestamp(entry(LogDirection.RX, b"")) == "12:00:01.250"

    def test_payload_modes(self):
        assert format_payload(b"Hi\n", DisplayMode.HEX) == "48 69 0A"
        assert format_payload(b"Hi\n", DisplayMode.TEXT) == "Hi\\x0A"

    def test_rx_line(self):
        line = format_entry(entry(LogDirection.RX, b"He"), DisplayMode.HEX)
        assert line == "12:00:01.250 RX: 48 65"

    def test_tx_line(self):
        line = format_entry(entry(LogDirection.TX, b"AT"), DisplayMode.TEXT)
        assert line == "12:00:01.250 TX: AT"
