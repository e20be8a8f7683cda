"""Keyboard focus ring over a session's widgets."""

from __future__ import annotations

from enum import StrEnum

from serialdeck.core.cycling import step_index


class FocusedField(StrEnum):
    """Widget of a session pane that receives keyboard input."""
    PORT = "port"
    BAUD_RATE = "baud_rate"
    DATA_BITS = "data_bits"
    PARITY = "parity"
    STOP_BITS = "stop_bits"
    FLOW_CONTROL = "flow_control"
    LOG_AREA = "log_area"
    TX_INPUT = "tx_input"

    @property
    def is_config(self) -> bool:
        """True for fields that edit the serial config (locked while connected)."""
        return self in CONFIG_FIELDS

    def next(self) -> FocusedField:
        return FOCUS_RING[step_index(FOCUS_RING.index(self), len(FOCUS_RING), 1)]

    def prev(self) -> FocusedField:
        return FOCUS_RING[step_index(FOCUS_RING.index(self), len(FOCUS_RING), -1)]


FOCUS_RING: tuple[FocusedField, ...] = tuple(FocusedField)

CONFIG_FIELDS: frozenset[FocusedField] = frozenset({
    FocusedField.PORT,
    FocusedField.BAUD_RATE,
    FocusedField.DATA_BITS,
    FocusedField.PARITY,
    FocusedField.STOP_BITS,
    FocusedField.FLOW_CONTROL,
})
