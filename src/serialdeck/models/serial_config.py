"""Serial port configuration model and option catalogues."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

from serialdeck.exceptions import ConfigValidationError


class Parity(StrEnum):
    """Serial parity setting."""
    NONE = "none"
    EVEN = "even"
    ODD = "odd"


class FlowControl(StrEnum):
    """Serial flow control setting."""
    NONE = "none"
    HARDWARE = "hardware"
    SOFTWARE = "software"


BAUD_RATES: tuple[int, ...] = (
    300, 1200, 2400, 4800, 9600, 19200, 38400, 57600, 115200, 230400,
)
DATA_BITS: tuple[int, ...] = (5, 6, 7, 8)
STOP_BITS: tuple[int, ...] = (1, 2)
PARITIES: tuple[Parity, ...] = tuple(Parity)
FLOW_CONTROLS: tuple[FlowControl, ...] = tuple(FlowControl)

_PARITY_CHAR: dict[Parity, str] = {
    Parity.NONE: "N",
    Parity.EVEN: "E",
    Parity.ODD: "O",
}


class SerialConfig(BaseModel):
    """Parameters used to open a serial port.

    Field values are not range-checked on assignment so that a loaded or
    hand-edited config can still be displayed; call :meth:`check` before
    opening a port.
    """
    model_config = {"frozen": False}

    port: str = Field(default="", description="Port identifier, e.g. /dev/ttyUSB0 or COM3")
    baud_rate: int = Field(default=9600, description="Line speed in bits per second")
    data_bits: int = Field(default=8, description="Bits per character (5-8)")
    parity: Parity = Field(default=Parity.NONE)
    stop_bits: int = Field(default=1, description="Stop bits (1 or 2)")
    flow_control: FlowControl = Field(default=FlowControl.NONE)

    @classmethod
    def with_port(cls, port: str) -> SerialConfig:
        return cls(port=port)

    def check(self) -> None:
        """Validate the config for connecting.

        Raises:
            ConfigValidationError: On the first unusable field.
        """
        if not self.port:
            raise ConfigValidationError("Port cannot be empty")
        if self.baud_rate <= 0:
            raise ConfigValidationError("Baud rate must be greater than 0")
        if self.data_bits < 5 or self.data_bits > 8:
            raise ConfigValidationError("Data bits must be between 5 and 8")
        if self.stop_bits not in STOP_BITS:
            raise ConfigValidationError("Stop bits must be 1 or 2")

    def format_display(self) -> str:
        """Short summary, e.g. ``/dev/ttyUSB0 @ 115200 bps, 8-N-1``."""
        return (
            f"{self.port} @ {self.baud_rate} bps, "
            f"{self.data_bits}-{_PARITY_CHAR[self.parity]}-{self.stop_bits}"
        )
