import math
import struct

import pytest

from xnetframe.platform import (
    get_max,
    get_min,
    swap16,
    swap32,
    swap64,
    swap_float64,
    to_signed,
)


@pytest.mark.parametrize("a,b", [(1, 2), (2, 1), (-5, 3), (1.5, 0.25), (7, 7)])
def test_min_max_agree_with_builtins(a, b):
    assert get_min(a, b) == min(a, b)
    assert get_max(a, b) == max(a, b)


@pytest.mark.parametrize("value", [0, 1, 0x7FFF, 0x8000, 0xFFFF])
def test_to_signed_16(value):
    expected = int.from_bytes(value.to_bytes(2, "little"), "little", signed=True)
    assert to_signed(value, 16) == expected


def test_to_signed_all_ones_is_minus_one():
    assert to_signed(0xFFFF_FFFF, 32) == -1


def test_to_signed_rejects_zero_bits():
    with pytest.raises(ValueError):
        to_signed(1, 0)


@pytest.mark.parametrize("value", [0, 0x1234, 0xABCD, 0xFFFF])
def test_swap16_is_byte_reversal(value):
    assert swap16(value).to_bytes(2, "little") == value.to_bytes(2, "big")
    assert swap16(swap16(value)) == value


@pytest.mark.parametrize("value", [0, 0x01020304, 0xDEADBEEF, 0xFFFF_FFFF])
def test_swap32_is_byte_reversal(value):
    assert swap32(value).to_bytes(4, "little") == value.to_bytes(4, "big")
    assert swap32(swap32(value)) == value


@pytest.mark.parametrize("value", [0, 0x0102030405060708, 0xFFFF_FFFF_FFFF_FFFF])
def test_swap64_is_byte_reversal(value):
    assert swap64(value).to_bytes(8, "little") == value.to_bytes(8, "big")
    assert swap64(swap64(value)) == value


def test_swap_of_negative_values_uses_twos_complement():
    assert to_signed(swap32(swap32(-2)), 32) == -2
    assert to_signed(swap16(swap16(-300)), 16) == -300


@pytest.mark.parametrize("value", [0.0, 1.5, -2.25, 1e300])
def test_swap_float64_round_trips(value):
    assert swap_float64(swap_float64(value)) == value


def test_swap_float64_reverses_bytes():
    assert struct.pack("<d", swap_float64(1.5)) == struct.pack(">d", 1.5)


def test_swap_float64_handles_nan():
    nan = float("nan")
    swapped = swap_float64(nan)
    assert struct.pack("<d", swapped) == struct.pack(">d", nan)
    result = swap_float64(swapped)
    assert math.isnan(result) is True