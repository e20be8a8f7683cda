"""Display, transmit and line-ending modes for a session."""

from __future__ import annotations

from enum import StrEnum


class DisplayMode(StrEnum):
    """How received/transmitted bytes are shown in the log."""
    HEX = "hex"
    TEXT = "text"

    def toggled(self) -> DisplayMode:
        return DisplayMode.TEXT if self is DisplayMode.HEX else DisplayMode.HEX


class TxMode(StrEnum):
    """How the TX input text is turned into bytes."""
    HEX = "hex"
    ASCII = "ascii"

    def toggled(self) -> TxMode:
        return TxMode.ASCII if self is TxMode.HEX else TxMode.HEX


class AppendMode(StrEnum):
    """Line ending appended to every transmission."""
    NONE = "none"
    LF = "lf"
    CR = "cr"
    CRLF = "crlf"
    LFCR = "lfcr"

    @property
    def suffix(self) -> bytes:
        return _APPEND_SUFFIX[self]

    @property
    def label(self) -> str:
        return _APPEND_LABEL[self]


_APPEND_SUFFIX: dict[AppendMode, bytes] = {
    AppendMode.NONE: b"",
    AppendMode.LF: b"\n",
    AppendMode.CR: b"\r",
    AppendMode.CRLF: b"\r\n",
    AppendMode.LFCR: b"\n\r",
}

_APPEND_LABEL: dict[AppendMode, str] = {
    AppendMode.NONE: "None",
    AppendMode.LF: "\\n",
    AppendMode.CR: "\\r",
    AppendMode.CRLF: "\\r\\n",
    AppendMode.LFCR: "\\n\\r",
}

APPEND_MODES: tuple[AppendMode, ...] = tuple(AppendMode)
