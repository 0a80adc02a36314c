"""The triangle wave channel."""

from __future__ import annotations

from dataclasses import dataclass

from nescore.apu.tables import LENGTH_TABLE

TRIANGLE_TABLE: tuple[int, ...] = (
    15, 14, 13, 12, 11, 10, 9, 8, 7, 6, 5, 4, 3, 2, 1, 0,
    0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15,
)


@dataclass
class Triangle:
    """A 32-step triangle sequencer gated by length and linear counters."""

    reg_ctrl: int = 0
    reg_timer_lo: int = 0
    reg_timer_hi: int = 0

    timer: int = 0
    timer_counter: int = 0
    sequence_pos: int = 0
    length_counter: int = 0
    linear_counter: int = 0
    linear_reload: bool = False
    control_flag: bool = False

    enabled: bool = False

    def set(self, address: int, val: int) -> None:
        """Write one of the channel's registers."""
        register = address & 0x03
        if register == 0:
            self.reg_ctrl = val
            self.control_flag = bool(val & 0x80)
        elif register == 2:
            self.reg_timer_lo = val
            self.timer = (self.timer & 0x700) | val
        elif register == 3:
            self.set_timer_high(val)

    def step(self) -> None:
        """Clock the timer; called once per CPU cycle."""
        if self.timer_counter == 0:
            self.timer_counter = self.timer
            if self.length_counter > 0 and self.linear_counter > 0 and self.timer >= 2:
                self.sequence_pos = (self.sequence_pos + 1) & 31
        else:
            self.timer_counter -= 1

    def clock_linear_counter(self) -> None:
        if self.linear_reload:
            self.linear_counter = self.reg_ctrl & 0x7F
        elif self.linear_counter > 0:
            self.linear_counter -= 1
        if not self.control_flag:
            self.linear_reload = False

    def output(self) -> int:
        return TRIANGLE_TABLE[self.sequence_pos]

    def set_timer_high(self, val: int) -> None:
        self.reg_timer_hi = val
        self.timer = (self.timer & 0xFF) | ((val & 0x07) << 8)
        if self.enabled:
            self.length_counter = LENGTH_TABLE[val >> 3]
        self.linear_reload = True

    def set_enabled(self, value: bool) -> None:
        self.enabled = value
        if not value:
            self.length_counter = 0