"""Editable transmit line with a codepoint cursor."""

from __future__ import annotations

from dataclasses import dataclass

from serialdeck.models.modes import AppendMode, TxMode
from serialdeck.transport.codec import hex_to_bytes


@dataclass
class TxBuffer:
    """Text awaiting transmission.

    ``cursor`` counts characters (codepoints), not encoded bytes, and always
    satisfies ``0 <= cursor <= len(text)``.
    """

    text: str = ""
    cursor: int = 0

    def __len__(self) -> int:
        return len(self.text)

    @property
    def is_empty(self) -> bool:
        return not self.text

    def insert(self, chars: str) -> None:
        self.text = self.text[:self.cursor] + chars + self.text[self.cursor:]
        self.cursor += len(chars)

    def backspace(self) -> bool:
        if self.cursor == 0:
            return False
        self.text = self.text[:self.cursor - 1] + self.text[self.cursor:]
        self.cursor -= 1
        return True

    def delete(self) -> bool:
        if self.cursor >= len(self.text):
            return False
        self.text = self.text[:self.cursor] + self.text[self.cursor + 1:]
        return True

    def move_left(self) -> None:
        self.cursor = max(self.cursor - 1, 0)

    def move_right(self) -> None:
        self.cursor = min(self.cursor + 1, len(self.text))

    def home(self) -> None:
        self.cursor = 0

    def end(self) -> None:
        self.cursor = len(self.text)

    def set_cursor(self, position: int) -> None:
        self.cursor = min(max(position, 0), len(self.text))

    def clear(self) -> None:
        self.text = ""
        self.cursor = 0

    def encode(self, tx_mode: TxMode, append_mode: AppendMode = AppendMode.NONE) -> bytes:
        """Convert the text to the bytes that would be sent.

        Raises:
            HexDecodeError: In hex mode, when the text is not valid hex.
        """
        if tx_mode is TxMode.HEX:
            payload = hex_to_bytes(self.text)
        else:
            payload = self.text.encode("utf-8")
        return payload + append_mode.suffix
