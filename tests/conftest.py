"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from serialdeck.core.connections import ConnectionManager
from serialdeck.core.dispatcher import Dispatcher
from serialdeck.core.tabs import TabsController
from serialdeck.exceptions import ConnectionError, TransportError
from serialdeck.models.serial_config import SerialConfig
from serialdeck.persistence import ConfigStore
from serialdeck.transport.base import PortHandle, Transport


class FakePortHandle(PortHandle):
    """In-memory port: queued reads, recorded writes."""

    def __init__(self, name: str):
        self._name = name
        self.reads: list[bytes | Exception] = []
        self.writes: list[bytes] = []
        self.closed = False
        self.fail_writes = False

    @property
    def name(self) -> str:
        return self._name

    def read_nonblocking(self) -> bytes:
        if not self.reads:
            return b""
        item = self.reads.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def write(self, data: bytes) -> int:
        if self.fail_writes:
            raise TransportError("Write failed: device gone")
        self.writes.append(data)
        return len(data)

    def close(self) -> None:
        self.closed = True


class FakeTransport(Transport):
    """Transport over a fixed port list; ports in ``refuse`` fail to open."""

    def __init__(self, ports: list[str] | None = None):
        self.ports = ["/dev/ttyUSB0", "/dev/ttyUSB1"] if ports is None else ports
        self.refuse: set[str] = set()
        self.handles: dict[str, FakePortHandle] = {}
        self.opened: list[SerialConfig] = []

    def list_ports(self) -> list[str]:
        return list(self.ports)

    def open(self, config: SerialConfig) -> FakePortHandle:
        if config.port in self.refuse:
            raise ConnectionError(f"Failed to open port: {config.port} busy")
        self.opened.append(config.model_copy())
        handle = FakePortHandle(config.port)
        self.handles[config.port] = handle
        return handle


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def connections(fake_transport):
    return ConnectionManager(fake_transport)


@pytest.fixture
def controller():
    return TabsController()


@pytest.fixture
def config_store(tmp_path):
    return ConfigStore(tmp_path / "config.json")


@pytest.fixture
def dispatcher(controller, connections, config_store):
    return Dispatcher(controller, connections, config_store)
