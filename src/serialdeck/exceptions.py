"""Exception hierarchy for SerialDeck errors."""

from __future__ import annotations


class SerialDeckError(Exception):
    """Base exception for all SerialDeck errors."""

    def __init__(self, message: str, detail: str | None = None) -> None:
        self.detail = detail
        super().__init__(message)


class ConfigValidationError(SerialDeckError):
    """Serial configuration is not usable for opening a port."""


class TransportError(SerialDeckError):
    """Error in the serial transport layer."""


class ConnectionError(TransportError):
    """Failed to establish or maintain a connection."""


class NotConnectedError(TransportError):
    """Operation requires an open port but the session is disconnected."""


class HexDecodeError(SerialDeckError, ValueError):
    """Text could not be decoded as hexadecimal bytes."""


class PersistenceError(SerialDeckError):
    """Failed to read or write the saved configuration."""
