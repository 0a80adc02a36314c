"""PPU internal scroll registers (v, t, x, w).

``v`` and ``t`` have the layout::

    yyy NN YYYYY XXXXX
    ||| || ||||| +++++-- coarse X scroll
    ||| || +++++-------- coarse Y scroll
    ||| ++-------------- nametable select
    +++----------------- fine Y scroll
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_U16 = 0xFFFF


def format_binary_with_underscores(n: int) -> str:
    """Format ``n`` in binary with an underscore between groups of four digits."""
    digits = format(n, "b")
    groups = []
    while digits:
        groups.append(digits[-4:])
        digits = digits[:-4]
    return "_".join(reversed(groups))


@dataclass
class InternalRegisters:
    """The loopy registers: v and t are 15 bits, x is fine X (3 bits), w the write toggle."""

    v: int = 0
    t: int = 0
    x: int = 0
    w: bool = False

    def set_coarse_x(self, x: int) -> None:
        logger.debug("set_coarse_x(%s) %s", x, self)
        self.v = ((self.v & ~0x1F) | x) & _U16

    def set_coarse_y(self, y: int) -> None:
        logger.debug("set_coarse_y(%s) %s", y, self)
        mask = 0b11111_00000
        self.v = ((self.v & ~mask) | (y << 5)) & _U16

    def increment_coarse_x(self) -> None:
        logger.debug("increment_coarse_x %s", self)
        self.set_coarse_x((self.coarse_x() + 1) & 0b11111)

    def increment_coarse_y(self) -> None:
        logger.debug("increment_coarse_y %s", self)
        self.set_coarse_y((self.coarse_y() + 1) & 0b11111)

    def increment_fine_y(self) -> None:
        logger.debug("increment_fine_y %s", self)
        self.set_fine_y((self.fine_y() + 1) & 0b111)

    def set_fine_y(self, y: int) -> None:
        logger.debug("set_fine_y(%02X) %s", y, self)
        mask = 0x7000
        self.v = ((self.v & ~mask) | (y << 12)) & _U16

    def horizontal_nametable(self) -> int:
        return (self.v & 0x400) >> 10

    def switch_horizontal_nametable(self) -> None:
        logger.debug("switch_horizontal_nametable %s", self)
        self.v ^= 0x0400

    def vertical_nametable(self) -> int:
        return (self.v & 0x800) >> 11

    def switch_vertical_nametable(self) -> None:
        logger.debug("switch_vertical_nametable %s", self)
        self.v ^= 0x0800

    def hori_v_equals_hori_t(self) -> None:
        """Copy coarse X and the horizontal nametable bit from t to v."""
        logger.debug("hori(v)=hori(t) %s", self)
        mask = 0b000_01_00000_11111
        self.v = (self.v & ~mask) | (self.t & mask)

    def vert_v_equals_vert_t(self) -> None:
        """Copy fine Y, coarse Y and the vertical nametable bit from t to v."""
        logger.debug("vert(v)=vert(t) %s", self)
        mask = 0b111_10_11111_00000
        self.v = (self.v & ~mask) | (self.t & mask)

    def increment_v(self, inc: int) -> None:
        logger.debug("increment_v(%02X) %s", inc, self)
        self.v = ((self.v + inc) & _U16) & 0x3FFF

    def set_v_to_t(self) -> None:
        logger.debug("set_v_to_t %s", self)
        self.v = self.t

    def coarse_y(self) -> int:
        return (self.v >> 5) & 0b1_1111

    def fine_y(self) -> int:
        return (self.v & 0b111_00_00000_00000) >> 12

    def coarse_x(self) -> int:
        return self.v & 0b1_1111

    def fine_x(self) -> int:
        return self.x

    def nametable(self) -> int:
        return (self.v & 0b11_00000_00000) >> 10

    def __str__(self) -> str:
        return (
            f"IR: v:{self.v:04X}/{format_binary_with_underscores(self.v)} "
            f"t:{self.t:04X}/{format_binary_with_underscores(self.t)} "
            f"w:{'true' if self.w else 'false'} NT:{self.nametable()} "
            f"coarse_x:{self.coarse_x()} fine_x:{self.fine_x()} "
            f"coarse_y:{self.coarse_y()} fine_y:{self.fine_y()}"
        )