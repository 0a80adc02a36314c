"""The two pulse (square wave) channels."""

from __future__ import annotations

from dataclasses import dataclass, field

from nescore.apu.envelope import Envelope
from nescore.apu.tables import LENGTH_TABLE

DUTY_TABLE: tuple[tuple[int, ...], ...] = (
    (0, 1, 0, 0, 0, 0, 0, 0),  # 12.5%
    (0, 1, 1, 0, 0, 0, 0, 0),  # 25%
    (0, 1, 1, 1, 1, 0, 0, 0),  # 50%
    (1, 0, 0, 1, 1, 1, 1, 1),  # 25% negated
)


@dataclass
class Pulse:
    """A pulse channel with envelope, sweep unit and length counter."""

    reg_ctrl: int = 0
    reg_sweep: int = 0
    reg_timer_lo: int = 0
    reg_timer_hi: int = 0

    timer: int = 0
    timer_counter: int = 0
    duty_pos: int = 0
    length_counter: int = 0
    envelope: Envelope = field(default_factory=Envelope)

    sweep_reload: bool = False
    sweep_counter: int = 0
    sweep_enabled: bool = False
    sweep_negate: bool = False
    sweep_period: int = 0
    sweep_shift: int = 0

    enabled: bool = False

    def set(self, address: int, val: int) -> None:
        """Write one of the channel's four registers."""
        register = address & 0x03
        if register == 0:
            self.reg_ctrl = val
        elif register == 1:
            self.sweep_control(val)
        elif register == 2:
            self.reg_timer_lo = val
            self.timer = (self.timer & 0x0700) | val
        else:
            self.set_timer_high(val)

    def clock_timer(self) -> None:
        if self.timer_counter == 0:
            self.timer_counter = self.timer
            self.duty_pos = (self.duty_pos + 1) & 7
        else:
            self.timer_counter -= 1

    def clock_envelope(self) -> None:
        self.envelope.clock(self.reg_ctrl)

    def clock_sweep(self, is_pulse1: bool) -> None:
        """Clock the sweep unit; pulse 1 negates with one's complement."""
        change = self.timer >> self.sweep_shift
        if self.sweep_negate:
            target = self.timer - change
            if is_pulse1 and target > 0:
                target -= 1
        else:
            target = self.timer + change
        mute = target > 0x7FF or self.timer < 8

        if self.sweep_counter == 0 and self.sweep_enabled and not mute and self.sweep_shift > 0:
            self.timer = target
        if self.sweep_counter == 0 or self.sweep_reload:
            self.sweep_counter = self.sweep_period
            self.sweep_reload = False
        else:
            self.sweep_counter -= 1

    def output(self) -> int:
        if not self.enabled or self.length_counter == 0 or self.timer < 8 or self.timer > 0x7FF:
            return 0
        duty = DUTY_TABLE[(self.reg_ctrl >> 6) & 0x03][self.duty_pos]
        if duty == 0:
            return 0
        return self.envelope.output(self.reg_ctrl)

    def sweep_control(self, val: int) -> None:
        self.reg_sweep = val
        self.sweep_enabled = bool(val & 0x80)
        self.sweep_period = (val >> 4) & 0x07
        self.sweep_negate = bool(val & 0x08)
        self.sweep_shift = val & 0x07
        self.sweep_reload = True

    def set_timer_high(self, val: int) -> None:
        self.reg_timer_hi = val
        self.timer = (self.timer & 0xFF) | ((val & 0x07) << 8)
        if self.enabled:
            self.length_counter = LENGTH_TABLE[val >> 3]
        self.duty_pos = 0
        self.envelope.set_start(True)

    def set_enabled(self, value: bool) -> None:
        self.enabled = value
        if not value:
            self.length_counter = 0