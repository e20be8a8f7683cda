"""Open port handles, one per connected session."""

from __future__ import annotations

from serialdeck.core.session import SerialSession
from serialdeck.exceptions import NotConnectedError, TransportError
from serialdeck.transport.base import PortHandle, Transport
from serialdeck.utils.logging import get_logger

logger = get_logger(__name__)


class ConnectionManager:
    """Maps session ids to open :class:`PortHandle` objects.

    Each handle is owned by exactly one session. Reads are single
    non-blocking polls; a read error is logged and counted but does not
    disconnect the session unless ``max_read_errors`` consecutive errors
    have occurred.
    """

    def __init__(self, transport: Transport, max_read_errors: int | None = None) -> None:
        self._transport = transport
        self._handles: dict[int, PortHandle] = {}
        self._read_errors: dict[int, int] = {}
        self.max_read_errors = max_read_errors

    @property
    def transport(self) -> Transport:
        return self._transport

    def list_ports(self) -> list[str]:
        try:
            return self._transport.list_ports()
        except TransportError:
            logger.warning("port_scan_failed")
            return []

    def is_connected(self, session: SerialSession) -> bool:
        return session.id in self._handles

    @property
    def connected_ids(self) -> list[int]:
        return list(self._handles)

    def read_errors(self, session: SerialSession) -> int:
        return self._read_errors.get(session.id, 0)

    def connect(self, session: SerialSession) -> None:
        """Open the session's port and lock its config.

        Raises:
            ConfigValidationError: The config cannot be used; nothing is opened.
            ConnectionError: The transport refused to open the port.
        """
        if self.is_connected(session):
            return
        session.config.check()
        handle = self._transport.open(session.config)
        self._handles[session.id] = handle
        self._read_errors[session.id] = 0
        session.mark_connected()
        logger.info("session_connected", session_id=session.id, port=session.config.port)

    def disconnect(self, session: SerialSession) -> None:
        self.forget(session.id)
        session.mark_disconnected()

    def forget(self, session_id: int) -> None:
        """Close and drop the handle for ``session_id`` if there is one."""
        handle = self._handles.pop(session_id, None)
        self._read_errors.pop(session_id, None)
        if handle is not None:
            handle.close()
            logger.info("session_disconnected", session_id=session_id)

    def disconnect_all(self) -> None:
        for session_id in list(self._handles):
            self.forget(session_id)

    def send(self, session: SerialSession, data: bytes) -> int:
        """Write ``data`` and record it in the session log.

        Raises:
            NotConnectedError: The session has no open port.
            TransportError: The write failed.
        """
        handle = self._handles.get(session.id)
        if handle is None:
            raise NotConnectedError("Port not connected")
        written = handle.write(data)
        session.record_tx(data)
        logger.debug("session_tx", session_id=session.id, nbytes=written)
        return written

    def poll(self, session: SerialSession) -> bytes:
        """Perform one non-blocking read and log any received bytes.

        Returns the bytes read; ``b""`` on timeout, on a read error, or when
        the session is not connected.
        """
        handle = self._handles.get(session.id)
        if handle is None:
            return b""
        try:
            data = handle.read_nonblocking()
        except TransportError as exc:
            count = self._read_errors.get(session.id, 0) + 1
            self._read_errors[session.id] = count
            logger.warning("session_read_failed", session_id=session.id, error=str(exc), count=count)
            if self.max_read_errors is not None and count >= self.max_read_errors:
                self.disconnect(session)
                session.error(f"Disconnected after {count} read errors: {exc}")
            return b""
        self._read_errors[session.id] = 0
        if data:
            session.record_rx(data)
        return data
