"""pyserial-backed transport implementation."""

from __future__ import annotations

import serial
from serial.tools.list_ports import comports

from serialdeck.exceptions import ConnectionError, TransportError
from serialdeck.models.serial_config import FlowControl, Parity, SerialConfig
from serialdeck.transport.base import READ_CHUNK_SIZE, READ_TIMEOUT_S, PortHandle, Transport
from serialdeck.utils.logging import get_logger

logger = get_logger(__name__)

# pyserial lets raw OSError out of ioctl and select when a device disappears.
_PORT_ERRORS = (serial.SerialException, OSError)

_BYTESIZE: dict[int, int] = {
    5: serial.FIVEBITS,
    6: serial.SIXBITS,
    7: serial.SEVENBITS,
    8: serial.EIGHTBITS,
}

_PARITY: dict[Parity, str] = {
    Parity.NONE: serial.PARITY_NONE,
    Parity.EVEN: serial.PARITY_EVEN,
    Parity.ODD: serial.PARITY_ODD,
}

_STOPBITS: dict[int, float] = {
    1: serial.STOPBITS_ONE,
    2: serial.STOPBITS_TWO,
}


class SerialPortHandle(PortHandle):
    """Wraps an open :class:`serial.Serial`."""

    def __init__(self, port: serial.Serial) -> None:
        self._port = port

    @property
    def name(self) -> str:
        return self._port.port or ""

    def read_nonblocking(self) -> bytes:
        try:
            waiting = self._port.in_waiting
            return self._port.read(waiting or READ_CHUNK_SIZE)
        except _PORT_ERRORS as exc:
            raise TransportError(f"Read error: {exc}") from exc

    def write(self, data: bytes) -> int:
        try:
            self._port.write(data)
        except _PORT_ERRORS as exc:
            raise TransportError(f"Write error: {exc}") from exc
        return len(data)

    def close(self) -> None:
        try:
            self._port.close()
        except _PORT_ERRORS:
            logger.warning("serial_close_failed", port=self.name)


class SerialTransport(Transport):
    """Opens real serial ports through pyserial."""

    def list_ports(self) -> list[str]:
        return sorted(p.device for p in comports())

    def open(self, config: SerialConfig) -> SerialPortHandle:
        logger.info("serial_opening", port=config.port, settings=config.format_display())
        try:
            port = serial.Serial(
                port=config.port,
                baudrate=config.baud_rate,
                bytesize=_BYTESIZE.get(config.data_bits, serial.EIGHTBITS),
                parity=_PARITY[config.parity],
                stopbits=_STOPBITS.get(config.stop_bits, serial.STOPBITS_ONE),
                rtscts=config.flow_control == FlowControl.HARDWARE,
                xonxoff=config.flow_control == FlowControl.SOFTWARE,
                timeout=READ_TIMEOUT_S,
                write_timeout=1.0,
            )
        except (serial.SerialException, ValueError) as exc:
            raise ConnectionError(f"Failed to open port: {exc}") from exc
        logger.info("serial_opened", port=config.port)
        return SerialPortHandle(port)
