"""Integer helpers: min/max, sign conversion and byte-order swapping."""

from __future__ import annotations

import struct

MAX_PACKET_LEN = 4096

_MASK16 = 0xFFFF
_MASK32 = 0xFFFF_FFFF
_MASK64 = 0xFFFF_FFFF_FFFF_FFFF


def get_min(a, b):
    """Return the lesser of ``a`` and ``b`` (``b`` when they compare equal)."""
    return b if a > b else a


def get_max(a, b):
    """Return the greater of ``a`` and ``b`` (``b`` when they compare equal)."""
    return a if a > b else b


def to_signed(value: int, bits: int) -> int:
    """Interpret the low ``bits`` bits of ``value`` as a two's complement number."""
    if bits <= 0:
        raise ValueError("bits must be positive")
    mask = (1 << bits) - 1
    value &= mask
    if value & (1 << (bits - 1)):
        return value - (1 << bits)
    return value


def swap16(value: int) -> int:
    """Swap the two bytes of a 16-bit value; the result is unsigned."""
    value &= _MASK16
    return ((value << 8) | (value >> 8)) & _MASK16


def swap32(value: int) -> int:
    """Reverse the byte order of a 32-bit value; the result is unsigned."""
    value &= _MASK32
    return (
        ((value << 24) & 0xFF000000)
        | ((value << 8) & 0x00FF0000)
        | ((value >> 8) & 0x0000FF00)
        | ((value >> 24) & 0x000000FF)
    )


def swap64(value: int) -> int:
    """Reverse the byte order of a 64-bit value; the result is unsigned."""
    value &= _MASK64
    low = value & _MASK32
    high = value >> 32
    return (swap32(low) << 32) | swap32(high)


def swap_float64(value: float) -> float:
    """Reinterpret a double with its eight bytes in reverse order."""
    return struct.unpack("<d", struct.pack(">d", value))[0]