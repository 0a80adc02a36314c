"""Address labels: a mapping from 16-bit addresses to symbolic names."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from os import PathLike
from typing import Union

logger = logging.getLogger(__name__)

_HEX = re.compile(r"\+?[0-9A-Fa-f]+")

Entries = Union[Mapping[int, str], Iterable[tuple[int, str]], None]


def _parse_address(text: str) -> int | None:
    """Parse a hexadecimal address with an optional ``0x`` or ``$`` prefix."""
    if text.startswith(("0x", "0X")):
        digits = text[2:]
    elif text.startswith("$"):
        digits = text[1:]
    else:
        digits = text
    if not _HEX.fullmatch(digits):
        return None
    value = int(digits, 16)
    if value > 0xFFFF:
        return None
    return value


class Labels:
    """Maps 16-bit addresses to label names."""

    def __init__(self, entries: Entries = None) -> None:
        self._map: dict[int, str] = dict(entries) if entries is not None else {}

    @classmethod
    def from_file(cls, filename: str | PathLike[str]) -> "Labels":
        """Read labels from a file with lines of the form ``Name=Address``.

        Blank lines and lines starting with ``#`` are skipped. Addresses are
        hexadecimal, with or without a ``0x`` or ``$`` prefix. Lines whose
        address cannot be parsed are reported and skipped.
        """
        with open(filename, encoding="utf-8") as handle:
            content = handle.read()

        labels = cls()
        for raw in content.splitlines():
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            label, sep, address_text = line.partition("=")
            if not sep:
                continue
            label = label.strip()
            address_text = address_text.strip()
            address = _parse_address(address_text)
            if address is None:
                logger.warning(
                    "Could not parse address '%s' for label '%s'", address_text, label
                )
                continue
            labels._map[address] = label
        return labels

    def get(self, address: int) -> str | None:
        """Return the label at ``address``, or None."""
        return self._map.get(address)

    def insert(self, address: int, label: str) -> str | None:
        """Set the label at ``address`` and return the label it replaced, if any."""
        previous = self._map.get(address)
        self._map[address] = label
        return previous

    def __getitem__(self, address: int) -> str:
        return self._map[address]

    def __contains__(self, address: object) -> bool:
        return address in self._map

    def __iter__(self) -> Iterator[int]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def items(self):
        """Return the (address, label) pairs."""
        return self._map.items()

    def __repr__(self) -> str:
        return f"Labels({self._map!r})"