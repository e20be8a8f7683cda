"""Abstract transport layer for serial port communication."""

from __future__ import annotations

from abc import ABC, abstractmethod

from serialdeck.models.serial_config import SerialConfig

# Read timeout applied at the transport boundary so that a poll never
# stalls the UI loop.
READ_TIMEOUT_S = 0.01
READ_CHUNK_SIZE = 256


class PortHandle(ABC):
    """An open serial port exclusively owned by one session."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Port identifier this handle was opened on."""

    @abstractmethod
    def read_nonblocking(self) -> bytes:
        """Read whatever is available.

        Returns ``b""`` when nothing arrives before the read timeout.

        Raises:
            TransportError: On a genuine I/O failure.
        """

    @abstractmethod
    def write(self, data: bytes) -> int:
        """Write all of ``data`` and return the number of bytes written.

        Raises:
            TransportError: On a write failure.
        """

    @abstractmethod
    def close(self) -> None:
        """Release the port."""


class Transport(ABC):
    """Factory for port handles plus port enumeration."""

    @abstractmethod
    def list_ports(self) -> list[str]:
        """Return available port identifiers in a stable order."""

    @abstractmethod
    def open(self, config: SerialConfig) -> PortHandle:
        """Open a port with ``config``.

        Raises:
            ConnectionError: If the port cannot be opened.
        """
