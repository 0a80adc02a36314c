import pytest

from nescore.color import PALETTE_TUPLES, PALETTE_U32, to_tuple, to_u32


def test_palette_has_64_packable_entries():
    packed = [to_u32(color) for color in PALETTE_TUPLES]
    assert len(packed) == 64
    assert len(PALETTE_U32) == 64
    assert all(0 <= value <= 0xFFFFFF for value in packed)


@pytest.mark.parametrize("index", range(64))
def test_tuple_palette_matches_packed_palette(index):
    assert to_u32(PALETTE_TUPLES[index]) == PALETTE_U32[index]
    assert to_tuple(PALETTE_U32[index]) == PALETTE_TUPLES[index]


@pytest.mark.parametrize(
    "index, rgb",
    [
        (0x00, (0x80, 0x80, 0x80)),
        (0x01, (0x00, 0x3D, 0xA6)),
        (0x0D, (0x00, 0x00, 0x00)),
        (0x20, (0xFF, 0xFF, 0xFF)),
        (0x2D, (0x5E, 0x5E, 0x5E)),
        (0x3F, (0x11, 0x11, 0x11)),
    ],
)
def test_pinned_entries(index, rgb):
    assert PALETTE_TUPLES[index] == rgb
    assert to_u32(rgb) == PALETTE_U32[index]


def test_first_entry():
    assert to_tuple(0x808080) == (0x80, 0x80, 0x80)


@pytest.mark.parametrize("color", [(0, 0, 0), (255, 255, 255), (1, 2, 3), (0xAB, 0, 0xCD)])
def test_roundtrip(color):
    assert to_tuple(to_u32(color)) == color


def test_to_tuple_ignores_high_bits():
    assert to_tuple(0xFF000000 | 0x123456) == to_tuple(0x123456)