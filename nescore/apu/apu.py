"""The audio processing unit: channel registers, frame counter and mixer."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from enum import Enum

from nescore.apu.dmc import Dmc
from nescore.apu.noise import Noise
from nescore.apu.pulse import Pulse
from nescore.apu.triangle import Triangle
from nescore.memory import Memory

SAMPLE_RATE = 44_100
# CPU 1.789773 MHz / 44100 Hz
CYCLES_PER_SAMPLE = 40.5844


class FrameCounterMode(Enum):
    """Sequencer mode selected by bit 7 of $4017."""

    STEP4 = 4
    STEP5 = 5


class Apu:
    """Mixes the five NES sound channels into a stream of float samples.

    Samples are collected locally while the CPU runs and moved into the
    shared ``buffer`` by :meth:`flush_samples`, usually once per frame.
    """

    def __init__(self, buffer: deque[float] | None = None) -> None:
        self.buffer: deque[float] = buffer if buffer is not None else deque()
        self.local_buffer: list[float] = []

        self.pulse1 = Pulse()
        self.pulse2 = Pulse()
        self.triangle = Triangle()
        self.noise = Noise()
        self.dmc = Dmc()

        self.frame_counter_mode = FrameCounterMode.STEP4
        self.frame_counter = 0
        self.cycle_count = 0
        self.sample_accumulator = 0.0
        self.last_sample = 0.0
        self.frame_irq_inhibit = False

        self.gui_pulse1_enabled = True
        self.gui_pulse2_enabled = True
        self.gui_triangle_enabled = True
        self.gui_noise_enabled = True
        self.gui_dmc_enabled = True

    def _clock_length_counters(self) -> None:
        if self.pulse1.length_counter > 0 and not self.pulse1.reg_ctrl & 0x20:
            self.pulse1.length_counter -= 1
        if self.pulse2.length_counter > 0 and not self.pulse2.reg_ctrl & 0x20:
            self.pulse2.length_counter -= 1
        if self.triangle.length_counter > 0 and not self.triangle.control_flag:
            self.triangle.length_counter -= 1
        if self.noise.length_counter > 0 and not self.noise.reg_ctrl & 0x20:
            self.noise.length_counter -= 1

    def _clock_envelopes(self) -> None:
        self.pulse1.clock_envelope()
        self.pulse2.clock_envelope()
        self.noise.clock_envelope()
        self.triangle.clock_linear_counter()

    def _clock_lengths_and_sweeps(self) -> None:
        self._clock_length_counters()
        self.pulse1.clock_sweep(True)
        self.pulse2.clock_sweep(False)

    def _clock_frame_counter(self) -> None:
        self.frame_counter += 1
        count = self.frame_counter
        clock_env = False
        clock_len = False

        if count == 3729 or count == 11186:
            clock_env = True
        elif count == 7457:
            clock_env = True
            clock_len = True
        elif self.frame_counter_mode is FrameCounterMode.STEP4:
            if count == 14915:
                clock_env = True
                clock_len = True
                self.frame_counter = 0
        elif count == 18641:
            clock_env = True
            clock_len = True
            self.frame_counter = 0

        if clock_env:
            self._clock_envelopes()
        if clock_len:
            self._clock_lengths_and_sweeps()

    def _mix(self) -> float:
        p1 = self.pulse1.output() if self.gui_pulse1_enabled else 0
        p2 = self.pulse2.output() if self.gui_pulse2_enabled else 0
        tri = self.triangle.output() if self.gui_triangle_enabled else 0
        noise = self.noise.output() if self.gui_noise_enabled else 0
        dmc = self.dmc.output() if self.gui_dmc_enabled else 0

        pulse_out = 95.88 / ((8128.0 / (p1 + p2)) + 100.0) if p1 + p2 > 0 else 0.0
        tnd_denom = tri / 8227.0 + noise / 12241.0 + dmc / 22638.0
        tnd_out = 159.79 / ((1.0 / tnd_denom) + 100.0) if tnd_denom > 0.0 else 0.0
        return (pulse_out + tnd_out) / 2.0

    def step(self, memory: Memory) -> None:
        """Advance one CPU cycle."""
        self.cycle_count += 1

        self.triangle.step()
        self.dmc.step(memory)

        # Pulse and noise timers, and the frame counter, run at APU rate.
        if self.cycle_count % 2 == 0:
            self._clock_frame_counter()
            self.pulse1.clock_timer()
            self.pulse2.clock_timer()
            self.noise.clock_timer()

        self.sample_accumulator += 1.0
        if self.sample_accumulator >= CYCLES_PER_SAMPLE:
            self.sample_accumulator -= CYCLES_PER_SAMPLE
            sample = self._mix()
            self.last_sample = sample
            self.local_buffer.append(sample)

    def flush_samples(self) -> None:
        """Move the samples gathered so far into the shared buffer."""
        if not self.local_buffer:
            return
        self.buffer.extend(self.local_buffer)
        self.local_buffer.clear()

    def set(self, addr: int, val: int) -> None:
        """Write an APU register."""
        if 0x4000 <= addr <= 0x4003:
            self.pulse1.set(addr, val)
        elif 0x4004 <= addr <= 0x4007:
            self.pulse2.set(addr, val)
        elif 0x4008 <= addr <= 0x400B:
            self.triangle.set(addr, val)
        elif 0x400C <= addr <= 0x400F:
            self.noise.set(addr, val)
        elif 0x4010 <= addr <= 0x4013:
            self.dmc.set(addr, val)
        elif addr == 0x4015:
            self.pulse1.set_enabled(bool(val & 0x01))
            self.pulse2.set_enabled(bool(val & 0x02))
            self.triangle.set_enabled(bool(val & 0x04))
            self.noise.set_enabled(bool(val & 0x08))
            self.dmc.set_enabled(bool(val & 0x10))
        elif addr == 0x4017:
            self.frame_counter_mode = (
                FrameCounterMode.STEP5 if val & 0x80 else FrameCounterMode.STEP4
            )
            self.frame_irq_inhibit = bool(val & 0x40)
            self.frame_counter = 0
            # Five-step mode clocks every unit immediately.
            if self.frame_counter_mode is FrameCounterMode.STEP5:
                self._clock_envelopes()
                self._clock_lengths_and_sweeps()

    def get(self, addr: int) -> int:
        """Read an APU register; only $4015 (status) returns data."""
        if addr != 0x4015:
            return 0
        result = 0
        if self.pulse1.length_counter > 0:
            result |= 0x01
        if self.pulse2.length_counter > 0:
            result |= 0x02
        if self.triangle.length_counter > 0:
            result |= 0x04
        if self.noise.length_counter > 0:
            result |= 0x08
        if self.dmc.is_active():
            result |= 0x10
        if self.dmc.irq_flag:
            result |= 0x80
        return result

    def set_pulse1_enabled(self, enabled: bool) -> None:
        self.gui_pulse1_enabled = enabled

    def set_pulse2_enabled(self, enabled: bool) -> None:
        self.gui_pulse2_enabled = enabled

    def set_triangle_enabled(self, enabled: bool) -> None:
        self.gui_triangle_enabled = enabled

    def set_noise_enabled(self, enabled: bool) -> None:
        self.gui_noise_enabled = enabled

    def set_dmc_enabled(self, enabled: bool) -> None:
        self.gui_dmc_enabled = enabled


class SampleSource:
    """An endless mono sample stream fed from a shared buffer.

    When the buffer runs dry the last sample is repeated, which avoids
    audible pops.
    """

    channels = 1

    def __init__(self, buffer: deque[float], sample_rate: int = SAMPLE_RATE) -> None:
        self.buffer = buffer
        self.sample_rate = sample_rate
        self.last_sample = 0.0

    def __iter__(self) -> Iterator[float]:
        return self

    def __next__(self) -> float:
        try:
            self.last_sample = self.buffer.popleft()
        except IndexError:
            pass
        return self.last_sample