"""Building blocks of a NES emulator: memory, joypad, PPU scroll registers, APU and trace logs."""

__version__ = "0.1.0"