"""The pseudo-random noise channel."""

from __future__ import annotations

from dataclasses import dataclass, field

from nescore.apu.envelope import Envelope
from nescore.apu.tables import LENGTH_TABLE

NOISE_PERIOD_TABLE: tuple[int, ...] = (
    4, 8, 16, 32, 64, 96, 128, 160, 202, 254, 380, 508, 762, 1016, 2034, 4068,
)


@dataclass
class Noise:
    """Noise generator driven by a 15-bit linear feedback shift register."""

    reg_ctrl: int = 0
    reg_period: int = 0
    reg_length: int = 0

    shift_reg: int = 1
    timer: int = 0
    timer_counter: int = 0
    length_counter: int = 0
    envelope: Envelope = field(default_factory=Envelope)
    # Feedback taps bit 6 when set, bit 1 otherwise.
    mode: bool = False
    enabled: bool = False

    def set(self, address: int, val: int) -> None:
        """Write one of the channel's registers."""
        register = address & 0x03
        if register == 0:
            self.reg_ctrl = val
        elif register == 2:
            self.reg_period = val
            self.mode = bool(val & 0x80)
            self.timer = NOISE_PERIOD_TABLE[val & 0x0F]
        elif register == 3:
            self.reg_length = val
            if self.enabled:
                self.length_counter = LENGTH_TABLE[val >> 3]
            self.envelope.set_start(True)

    def clock_envelope(self) -> None:
        self.envelope.clock(self.reg_ctrl)

    def output(self) -> int:
        if not self.enabled or self.length_counter == 0 or self.shift_reg & 1:
            return 0
        return self.envelope.output(self.reg_ctrl)

    def clock_timer(self) -> None:
        """Clock the timer, shifting the register when it expires.

        Feedback is bit 0 XOR bit 6 (mode set) or bit 1; the register shifts
        right and the feedback enters at bit 14.
        """
        if self.timer_counter == 0:
            self.timer_counter = self.timer
            tap = 6 if self.mode else 1
            feedback = (self.shift_reg & 1) ^ ((self.shift_reg >> tap) & 1)
            self.shift_reg = (self.shift_reg >> 1) | (feedback << 14)
        else:
            self.timer_counter -= 1

    def set_enabled(self, value: bool) -> None:
        self.enabled = value
        if not value:
            self.length_counter = 0