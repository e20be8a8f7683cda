"""Transient, self-expiring user notifications."""

from __future__ import annotations

import time
from enum import StrEnum

from pydantic import BaseModel, Field

DEFAULT_TTL_SECONDS = 3.0


class NotificationLevel(StrEnum):
    """Severity of a notification."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    SUCCESS = "success"


class Notification(BaseModel):
    """A status message that disappears once its TTL has elapsed.

    ``created_at`` is a :func:`time.monotonic` reading.
    """
    model_config = {"frozen": True}

    message: str
    level: NotificationLevel = NotificationLevel.INFO
    created_at: float = Field(default_factory=time.monotonic)
    ttl: float = Field(default=DEFAULT_TTL_SECONDS, description="Lifetime in seconds")

    def age(self, now: float | None = None) -> float:
        return (time.monotonic() if now is None else now) - self.created_at

    def is_expired(self, now: float | None = None) -> bool:
        return self.age(now) > self.ttl
