"""The volume envelope used by the pulse and noise channels."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Envelope:
    """Decaying volume generator with an optional loop."""

    start: bool = False
    volume: int = 0
    counter: int = 0

    def clock(self, reg_ctrl: int) -> None:
        """Advance the envelope; ``reg_ctrl`` holds the period and loop flag."""
        if self.start:
            self.start = False
            self.volume = 15
            self.counter = reg_ctrl & 0x0F
        elif self.counter > 0:
            self.counter -= 1
        else:
            self.counter = reg_ctrl & 0x0F
            if self.volume > 0:
                self.volume -= 1
            elif reg_ctrl & 0x20:
                self.volume = 15

    def set_start(self, value: bool) -> None:
        """Request a restart on the next clock."""
        self.start = value

    def output(self, reg_ctrl: int) -> int:
        """Return the constant volume if ``reg_ctrl`` asks for it, else the envelope volume."""
        if reg_ctrl & 0x10:
            return reg_ctrl & 0x0F
        return self.volume