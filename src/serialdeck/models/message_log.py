"""Bounded log of serial traffic for a session."""

from __future__ import annotations

from collections import deque
from datetime import datetime
from enum import StrEnum
from typing import Iterator

from pydantic import BaseModel, Field

MAX_LOG_ENTRIES = 10_000


class LogDirection(StrEnum):
    """Direction of a logged transfer."""
    RX = "rx"
    TX = "tx"


class LogEntry(BaseModel):
    """One chunk of bytes received from or written to the port."""
    model_config = {"frozen": True}

    timestamp: datetime = Field(default_factory=datetime.now)
    direction: LogDirection
    data: bytes


class MessageLog:
    """FIFO ring of :class:`LogEntry`; the oldest entry is evicted at capacity."""

    def __init__(self, capacity: int = MAX_LOG_ENTRIES) -> None:
        self._entries: deque[LogEntry] = deque(maxlen=capacity)
        self.rx_count = 0
        self.tx_count = 0
        self.rx_bytes = 0
        self.tx_bytes = 0

    @property
    def capacity(self) -> int:
        return self._entries.maxlen or 0

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self._entries)

    def push_rx(self, data: bytes) -> LogEntry:
        entry = LogEntry(direction=LogDirection.RX, data=bytes(data))
        self._entries.append(entry)
        self.rx_count += 1
        self.rx_bytes += len(data)
        return entry

    def push_tx(self, data: bytes) -> LogEntry:
        entry = LogEntry(direction=LogDirection.TX, data=bytes(data))
        self._entries.append(entry)
        self.tx_count += 1
        self.tx_bytes += len(data)
        return entry

    def window(self, start: int, count: int) -> list[LogEntry]:
        """Return up to ``count`` entries beginning at ``start``."""
        if count <= 0 or start >= len(self._entries):
            return []
        start = max(start, 0)
        return [self._entries[i] for i in range(start, min(start + count, len(self._entries)))]

    def tail(self, count: int) -> list[LogEntry]:
        return self.window(len(self._entries) - count, count)

    def clear(self) -> None:
        self._entries.clear()
        self.rx_count = 0
        self.tx_count = 0
        self.rx_bytes = 0
        self.tx_bytes = 0
