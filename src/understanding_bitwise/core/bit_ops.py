"""Single-bit manipulation on 32-bit words.

Every function returns a new word, or ``None`` when *index* does not
name a bit of the word.  ``None`` means "cannot apply", which callers
must keep apart from "applied, nothing changed".

Clearing a bit has three interchangeable formulations, all with
``mask = 1 << index``:

* :func:`unset_bit`: ``(number | mask) - mask``
* :func:`unset_bit_xor`: ``number & (number ^ mask)``
* :func:`unset_bit_bitwise_not`: ``number & ~mask``
"""

from __future__ import annotations

from collections.abc import Callable

from understanding_bitwise.core.words import WORD32


def _manipulate_bit(
    number: int,
    index: int,
    operation: Callable[[int], int],
) -> int | None:
    """Apply *operation* to the single-bit mask, or return ``None``."""
    WORD32.require_value(number)
    if not WORD32.contains_index(index):
        return None
    return operation(1 << index)


def set_bit(number: int, index: int) -> int | None:
    """Return *number* with bit *index* set to 1."""
    return _manipulate_bit(number, index, lambda mask: number | mask)


def unset_bit(number: int, index: int) -> int | None:
    """Return *number* with bit *index* cleared (subtraction method)."""
    return _manipulate_bit(number, index, lambda mask: (number | mask) - mask)


def unset_bit_xor(number: int, index: int) -> int | None:
    """Return *number* with bit *index* cleared (XOR method)."""
    return _manipulate_bit(number, index, lambda mask: number & (number ^ mask))


def unset_bit_bitwise_not(number: int, index: int) -> int | None:
    """Return *number* with bit *index* cleared (bitwise-NOT method)."""
    return _manipulate_bit(number, index, lambda mask: number & ~mask)


def invert_bit(number: int, index: int) -> int | None:
    """Return *number* with bit *index* flipped."""
    return _manipulate_bit(number, index, lambda mask: number ^ mask)
