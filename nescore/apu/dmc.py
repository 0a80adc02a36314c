"""The delta modulation channel (DMC)."""

from __future__ import annotations

from dataclasses import dataclass

from nescore.memory import Memory

# NTSC DMC rates, in CPU cycles between output steps.
RATES: tuple[int, ...] = (
    428, 380, 340, 320, 286, 254, 226, 214,
    190, 160, 142, 128, 106, 84, 72, 54,
)


@dataclass
class Dmc:
    """Plays 1-bit delta samples fetched from CPU memory."""

    # $4010
    irq_enabled: bool = False
    loop_enabled: bool = False
    rate_index: int = 0
    rate: int = 0
    current_rate: int = 0

    # $4011, a 7-bit level
    output_level: int = 0

    # $4012 / $4013
    sample_address: int = 0
    sample_length: int = 0

    current_address: int = 0
    current_length: int = 0

    sample_buffer: int | None = None
    shift_register: int = 0
    bits_remaining: int = 0
    silence_flag: bool = False

    irq_flag: bool = False

    def set(self, address: int, val: int) -> None:
        """Write one of the registers $4010-$4013."""
        register = address & 0x03
        if register == 0:
            self.irq_enabled = bool(val & 0x80)
            if not self.irq_enabled:
                self.irq_flag = False
            self.loop_enabled = bool(val & 0x40)
            self.rate_index = val & 0x0F
            self.rate = RATES[self.rate_index]
        elif register == 1:
            self.output_level = val & 0x7F
        elif register == 2:
            # %11AAAAAA.AA000000
            self.sample_address = 0xC000 | (val << 6)
        else:
            # %LLLL.LLLL0001 bytes
            self.sample_length = (val << 4) | 1

    def set_enabled(self, enabled: bool) -> None:
        """Handle the DMC bit of $4015: stop, or restart an idle sample."""
        if not enabled:
            self.current_length = 0
        elif self.current_length == 0:
            self.current_address = self.sample_address
            self.current_length = self.sample_length
        self.irq_flag = False

    def _fill_sample_buffer(self, memory: Memory) -> None:
        if self.sample_buffer is not None or self.current_length == 0:
            return
        self.sample_buffer = memory.get(self.current_address)
        if self.current_address == 0xFFFF:
            self.current_address = 0x8000
        else:
            self.current_address += 1

        self.current_length -= 1
        if self.current_length == 0:
            if self.loop_enabled:
                self.current_address = self.sample_address
                self.current_length = self.sample_length
            elif self.irq_enabled:
                self.irq_flag = True

    def step(self, memory: Memory) -> None:
        """Advance one CPU cycle, fetching sample bytes from ``memory`` as needed."""
        self._fill_sample_buffer(memory)

        if self.current_rate > 0:
            self.current_rate -= 1
            return
        self.current_rate = self.rate

        if not self.silence_flag:
            if self.shift_register & 0x01:
                if self.output_level <= 125:
                    self.output_level += 2
            elif self.output_level >= 2:
                self.output_level -= 2

        self.shift_register >>= 1
        if self.bits_remaining > 0:
            self.bits_remaining -= 1

        if self.bits_remaining == 0:
            self.bits_remaining = 8
            if self.sample_buffer is not None:
                self.shift_register = self.sample_buffer
                self.sample_buffer = None
                self.silence_flag = False
            else:
                self.silence_flag = True

    def output(self) -> int:
        return self.output_level

    def is_active(self) -> bool:
        return self.current_length > 0