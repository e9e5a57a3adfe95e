"""Bit manipulation and rounding helpers."""

_UINT32_MASK = 0xFFFFFFFF


def set_bit(val: int, pos: int) -> int:
    """Return val with the bit at pos set."""
    return val | (1 << pos)


def clear_bit(val: int, pos: int) -> int:
    """Return val with the bit at pos cleared."""
    return val & ~(1 << pos)


def toggle_bit(val: int, pos: int) -> int:
    """Return val with the bit at pos flipped."""
    return val ^ (1 << pos)


def test_bit(val: int, pos: int) -> int:
    """Return a non-zero value if the bit at pos is set in val."""
    return val & (1 << pos)


# Keep pytest from collecting the helper above when it is imported into tests.
test_bit.__test__ = False  # type: ignore[attr-defined]


def ceil2(val: int) -> int:
    """Round val up to the nearest multiple of 2."""
    return ((val - 1) | 0x01) + 1


def ceil4(val: int) -> int:
    """Round val up to the nearest multiple of 4."""
    return ((val - 1) | 0x03) + 1


def ceil8(val: int) -> int:
    """Round val up to the nearest multiple of 8."""
    return ((val - 1) | 0x07) + 1


def ceil_pow2(val: int) -> int:
    """Round an unsigned 32-bit value up to the next power of two.

    As with 32-bit unsigned arithmetic, 0 and values above 2**31 wrap to 0.
    """
    val = (val - 1) & _UINT32_MASK
    for shift in (1, 2, 4, 8, 16):
        val |= val >> shift
    return (val + 1) & _UINT32_MASK