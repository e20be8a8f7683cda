"""Transport layer for serial port communication."""

from serialdeck.transport.base import READ_TIMEOUT_S, PortHandle, Transport
from serialdeck.transport.codec import bytes_to_hex, bytes_to_text, hex_to_bytes
from serialdeck.transport.serial_port import SerialPortHandle, SerialTransport

__all__ = [
    "PortHandle",
    "READ_TIMEOUT_S",
    "SerialPortHandle",
    "SerialTransport",
    "Transport",
    "bytes_to_hex",
    "bytes_to_text",
    "hex_to_bytes",
]
