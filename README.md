# nescore

Building blocks for a NES emulator, in plain Python.

## Install

    pip install nescore

With the test dependencies:

    pip install "nescore[test]"

## Modules

- `nescore.labels`: `Labels`, a mapping from 16-bit addresses to names. `Labels.from_file`
  reads lines of the form `Name=Address`, where the address is hexadecimal with or without
  a `0x` or `$` prefix; blank lines and `#` comments are skipped, and lines with an
  unparsable address are logged as a warning and skipped.
- `nescore.memory`: the abstract `Memory` with little-endian `word` and `word_ind_y`
  (the latter wraps `$FF` to `$00` for `(zp),Y` pointers), and `DefaultMemory`, a flat
  RAM backed by a `bytearray`. `DefaultMemory.from_file` loads up to 64 KiB from a file.
- `nescore.bits`: `is_set`, `get_bit`, `get_bits` and `set_bit_with_mask`.
- `nescore.color`: the 64-entry NES palette as `PALETTE_U32` and `PALETTE_TUPLES`, with
  `to_u32` and `to_tuple` conversions.
- `nescore.joypad`: `Button` and `Joypad`, which reports one button per `read()` in the
  order A, B, Select, Start, Up, Down, Left, Right; `write()` restarts the sequence.
- `nescore.internal_registers`: `InternalRegisters`, the PPU `v`, `t`, `x` and `w`
  scroll registers with coarse/fine X and Y, nametable switching and copy operations.
- `nescore.apu.envelope`, `nescore.apu.pulse`, `nescore.apu.triangle`,
  `nescore.apu.noise`, `nescore.apu.dmc`: the `Envelope`, `Pulse`, `Triangle`, `Noise`
  and `Dmc` sound channels. `nescore.apu.tables` holds the shared `LENGTH_TABLE`.
- `nescore.apu.apu`: `Apu`, which takes register writes at `$4000`-`$4017`, runs the
  frame counter (`FrameCounterMode`) and mixes the channels into float samples at
  about 44.1 kHz. `step(memory)` advances one CPU cycle; `flush_samples()` moves the
  samples gathered so far into `Apu.buffer`, a `deque`. `SampleSource` is an endless
  iterator over such a buffer that repeats the last sample when the buffer is empty.
- `nescore.compare_logs`: `parse_line` turns one CPU trace line into a `LogLine`;
  `lines_match` lists the fields that differ; `compare_log` compares two trace files
  and returns an empty list when they match, or a report of the first line that differs.
- `nescore.config_file`: `EmulatorConfig`, a JSON file holding `rom_dir`.
  `read_or_create()` and `save()` use `config_file_name()`, a `config.json` in the
  user's config directory, unless a path is given.
- `nescore.constants`: screen geometry, supported mapper numbers, `RomInfo` and the
  `ROM_NAMES` catalogue. `RomInfo.name()` derives a readable name from the file name.

## Example

    from nescore.joypad import Button, Joypad

    pad = Joypad()
    pad.set_button_status(Button.START, True)
    pad.write(1)
    bits = [pad.read() for _ in range(8)]   # [0, 0, 0, 1, 0, 0, 0, 0]

    from nescore.memory import DefaultMemory

    memory = DefaultMemory()
    memory.set(0x10, 0x34)
    memory.set(0x11, 0x12)
    assert memory.word(0x10) == 0x1234

    from nescore.apu.apu import Apu

    apu = Apu()
    apu.set(0x4015, 0x01)          # enable pulse 1
    apu.set(0x4003, 0x08)          # load its length counter
    assert apu.get(0x4015) & 0x01

    from nescore.compare_logs import compare_log

    for line in compare_log("mine.txt", "reference.txt"):
        print(line)

## What it does not do

There is no CPU core, no PPU renderer, no cartridge or mapper loading, and no audio
output device: `Apu` only produces samples into a buffer. There is no window and no
command-line program; the package is a library of parts.