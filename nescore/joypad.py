"""The standard NES controller."""

from __future__ import annotations

from enum import IntEnum


class Button(IntEnum):
    """Controller buttons; the value is the bit position in the report."""

    A = 0
    B = 1
    SELECT = 2
    START = 3
    UP = 4
    DOWN = 5
    LEFT = 6
    RIGHT = 7


class Joypad:
    """Holds button state and shifts it out one bit per read."""

    def __init__(self) -> None:
        self._button_index = 0
        self._button_status = 0

    def write(self, value: int) -> None:
        """Handle a strobe write: restart reporting from button A."""
        self._button_index = 0

    def read_status(self) -> int:
        """Return all button states as a bit field."""
        return self._button_status

    def read(self) -> int:
        """Return the state of the next button in order A, B, Select, Start, Up, Down, Left, Right."""
        if self._button_index < 8:
            result = (self._button_status >> self._button_index) & 1
        else:
            result = 1
        self._button_index += 1
        if self._button_index > 7:
            self._button_index = 0
        return result

    def set_button_status(self, button: Button, status: bool) -> None:
        """Press or release ``button``."""
        mask = 1 << Button(button).value
        if status:
            self._button_status |= mask
        else:
            self._button_status &= ~mask & 0xFF