"""A 6502 address space abstraction and a flat RAM implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from os import PathLike


class Memory(ABC):
    """A 16-bit addressable byte memory."""

    @abstractmethod
    def get(self, address: int) -> int:
        """Read a byte, with any side effects a read has."""

    @abstractmethod
    def set(self, address: int, value: int) -> None:
        """Write a byte."""

    @abstractmethod
    def set_force(self, address: int, value: int) -> None:
        """Write a byte, bypassing any write protection."""

    @abstractmethod
    def get_direct(self, address: int) -> int:
        """Read a byte without side effects."""

    @abstractmethod
    def main_memory(self) -> bytes:
        """Return a copy of the whole memory."""

    def word_ind_y(self, address: int, ind_y: bool) -> int:
        """Read a little-endian word; with ``ind_y`` the pointer wraps inside page zero."""
        if address == 0xFF and ind_y:
            next_address = 0
        else:
            next_address = (address + 1) & 0xFFFF
        return self.get(address) | (self.get(next_address) << 8)

    def word(self, address: int) -> int:
        """Read a little-endian word, wrapping at the end of the address space."""
        return self.get(address) | (self.get((address + 1) & 0xFFFF) << 8)


class DefaultMemory(Memory):
    """Plain RAM backed by a bytearray."""

    MEMORY_SIZE = 65_536

    def __init__(self, buffer: bytes | bytearray | None = None) -> None:
        if buffer is None:
            self._buffer = bytearray(self.MEMORY_SIZE + 1)
        else:
            self._buffer = bytearray(buffer)

    @classmethod
    def from_file(cls, file_name: str | PathLike[str]) -> "DefaultMemory":
        """Load up to 64 KiB from a file; the rest of memory is zero."""
        buffer = bytearray(cls.MEMORY_SIZE)
        with open(file_name, "rb") as handle:
            data = handle.read(cls.MEMORY_SIZE)
        buffer[: len(data)] = data
        return cls(buffer)

    def get(self, address: int) -> int:
        return self._buffer[address]

    def set(self, address: int, value: int) -> None:
        self._buffer[address] = value

    def set_force(self, address: int, value: int) -> None:
        self._buffer[address] = value

    def get_direct(self, address: int) -> int:
        return self._buffer[address]

    def main_memory(self) -> bytes:
        return bytes(self._buffer)