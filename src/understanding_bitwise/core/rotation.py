"""Circular shifts of an 8-bit word.

Bits pushed past one end of the byte re-enter at the other end.  Left
and right rotation by the same count undo each other.
"""

from __future__ import annotations

import operator
from collections.abc import Callable

from understanding_bitwise.core.words import WORD8, require_count

_Shift = Callable[[int, int], int]


def _circular_shift(byte: int, count: int, toward: _Shift, back: _Shift) -> int:
    """Rotate *byte* by *count* using the two opposite shifts."""
    WORD8.require_value(byte, "byte")
    require_count(count)
    if byte == 0:
        return 0

    effective = count % WORD8.bits
    if effective == 0:
        return byte
    rotated = toward(byte, effective) | back(byte, WORD8.bits - effective)
    return rotated & WORD8.max_value


def circular_shl(byte: int, count: int) -> int:
    """Rotate *byte* left by *count* positions.

    >>> bin(circular_shl(0b10000011, 2))
    '0b1110'
    """
    return _circular_shift(byte, count, operator.lshift, operator.rshift)


def circular_shr(byte: int, count: int) -> int:
    """Rotate *byte* right by *count* positions.

    >>> bin(circular_shr(0b10000011, 2))
    '0b11100000'
    """
    return _circular_shift(byte, count, operator.rshift, operator.lshift)
