"""Unit tests for the serial config model."""

from __future__ import annotations

import pytest

from serialdeck.exceptions import ConfigValidationError
from serialdeck.models.serial_config import (
    BAUD_RATES,
    FlowControl,
    Parity,
    SerialConfig,
)


class TestSerialConfigDefaults:
    """Test default values and constructors."""

    def test_defaults(self):
        config = SerialConfig()
        assert config.port == ""
        assert config.baud_rate == 9600
        assert config.data_bits == 8
        assert config.parity is Parity.NONE
        assert config.stop_bits == 1
        assert config.flow_control is FlowControl.NONE

    def test_with_port(self):
        assert SerialConfig.with_port("COM3").port == "COM3"

    def test_baud_catalogue(self):
        assert BAUD_RATES[0] == 300
        assert BAUD_RATES[-1] == 230400
        assert 115200 in BAUD_RATES


class TestSerialConfigCheck:
    """Test connection-time validation."""

    def test_valid_config_passes(self):
        SerialConfig(port="/dev/ttyUSB0").check()

    @pytest.mark.parametrize("update, message", [
        ({"port": ""}, "Port cannot be empty"),
        ({"baud_rate": 0}, "Baud rate must be greater than 0"),
        ({"data_bits": 4}, "Data bits must be between 5 and 8"),
        ({"data_bits": 9}, "Data bits must be between 5 and 8"),
        ({"stop_bits": 3}, "Stop bits must be 1 or 2"),
    ])
    def test_invalid_fields(self, update, message):
        config = SerialConfig(port="/dev/ttyUSB0").model_copy(update=update)
        with pytest.raises(ConfigValidationError) as exc_info:
            config.check()
        assert str(exc_info.value) == message


class TestSerialConfigDisplay:
    """Test the one-line summary."""

    def test_format_display(self):
        config = SerialConfig(port="/dev/ttyUSB0", baud_rate=115200)
        assert config.format_display() == "/dev/ttyUSB0 @ 115200 bps, 8-N-1"

    def test_format_display_parity_letters(self):
        config = SerialConfig(port="COM1", data_bits=7, parity=Parity.EVEN, stop_bits=2)
        assert config.format_display() == "COM1 @ 9600 bps, 7-E-2"
        config.parity = Parity.ODD
        assert config.format_display().endswith("7-O-2")
