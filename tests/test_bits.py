import pytest

from nescore.bits import get_bit, get_bits, is_set, set_bit_with_mask


def test_is_set():
    assert is_set(0b100, 2) is True
    assert is_set(0b100, 1) is False


@pytest.mark.parametrize("value", [0, 0x5A, 0xFF, 0x1234, 0x7FFF])
def test_get_bit_agrees_with_is_set(value):
    for bit in range(16):
        assert get_bit(value, bit) == int(is_set(value, bit))


@pytest.mark.parametrize("value", [0, 0xA5, 0xBEEF])
def test_get_bits_single_bit_is_get_bit(value):
    for bit in range(16):
        assert get_bits(value, 1, bit) == get_bit(value, bit)


def test_get_bits_full_byte():
    assert get_bits(0xAB, 8, 0) == 0xAB


@pytest.mark.parametrize("original", [0, 0x7FFF, 0x1234])
@pytest.mark.parametrize("field", [0b00, 0b01, 0b10, 0b11])
def test_set_bit_with_mask_roundtrip(original, field):
    result = set_bit_with_mask(original, field, 0b11, 10)
    assert get_bits(result, 2, 10) == field
    untouched = ~(0b11 << 10)
    assert result & untouched == original & untouched


def test_set_bit_with_mask_ignores_excess_value_bits():
    result = set_bit_with_mask(0, 0xFF, 0b11, 10)
    assert result == set_bit_with_mask(0, 0b11, 0b11, 10)