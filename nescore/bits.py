"""Small bit-twiddling helpers."""


def is_set(value: int, bit: int) -> bool:
    """Return True if ``bit`` of ``value`` is 1."""
    return (value & (1 << bit)) != 0


def get_bit(value: int, bit: int) -> int:
    """Return ``bit`` of ``value`` as 0 or 1."""
    return (value >> bit) & 1


def get_bits(value: int, count: int, shift: int) -> int:
    """Return ``count`` bits of ``value`` starting at bit ``shift``."""
    return (value >> shift) & ((1 << count) - 1)


def set_bit_with_mask(v: int, value: int, keep_mask: int, shift: int) -> int:
    """Replace the bits of ``v`` under ``keep_mask << shift`` with ``value``.

    For example ``set_bit_with_mask(t, d, 0b11, 10)`` copies the two low bits
    of ``d`` into bits 10 and 11 of ``t``.
    """
    field = keep_mask << shift
    return (v & ~field) | (((value & keep_mask) << shift) & field)