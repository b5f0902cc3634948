"""
Maps connection state to the strings the window shows. No UI toolkit here.
"""

from __future__ import annotations

from dataclasses import dataclass

from .state import ConnectionState


@dataclass(frozen=True)
class DisplayLabels:
    button_text: str
    window_title: str


DISCONNECTED_LABELS = DisplayLabels(button_text="Connect Me", window_title="Disconnected")
CONNECTED_LABELS = DisplayLabels(button_text="Disconnect Me", window_title="Connected")


def labels_for(state: ConnectionState) -> DisplayLabels:
    """Button text offers the next action; window title reports the current state."""
    if state is ConnectionState.CONNECTED:
        return CONNECTED_LABELS
    return DISCONNECTED_LABELS
