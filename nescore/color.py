"""The NES master palette."""


def to_u32(color: tuple[int, int, int]) -> int:
    """Pack an (r, g, b) tuple into 0xRRGGBB."""
    r, g, b = color
    return (r << 16) | (g << 8) | b


def to_tuple(color: int) -> tuple[int, int, int]:
    """Unpack 0xRRGGBB into an (r, g, b) tuple."""
    return ((color & 0xFF0000) >> 16, (color & 0xFF00) >> 8, color & 0xFF)


# Eight entries per row, 64 entries in all.
_PALETTE_HEX = """
808080 003DA6 0012B0 440096 A1005E C70028 BA0600 8C1700
5C2F00 104500 054A00 00472E 004166 000000 050505 050505
C7C7C7 0077FF 2155FF 8237FA EB2FB5 FF2950 FF2200 D63200
C46200 358000 058F00 008A55 0099CC 212121 090909 090909
FFFFFF 0FD7FF 69A2FF D480FF FF45F3 FF618B FF8833 FF9C12
FABC20 9FE30E 2BF035 0CF0A4 05FBFF 5E5E5E 0D0D0D 0D0D0D
FFFFFF A6FCFF B3ECFF DAABEB FFA8F9 FFABB3 FFD2B0 FFEFA6
FFF79C D7E895 A6EDAF A2F2DA 99FFFC DDDDDD 111111 111111
"""

PALETTE_U32: tuple[int, ...] = tuple(int(word, 16) for word in _PALETTE_HEX.split())

PALETTE_TUPLES: tuple[tuple[int, int, int], ...] = tuple(to_tuple(c) for c in PALETTE_U32)