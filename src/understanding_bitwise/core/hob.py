"""Highest-order-bit locators.

Three independent algorithms return the zero-based index of the most
significant set bit of a 32-bit word, or ``None`` for ``0`` (which has
no set bit at all):

* :func:`hob`: shift right until the value is exhausted.
* :func:`hob_thr`: lower a power-of-two threshold until it fits.
* :func:`hob_comp_pot`: probe every power of two from the top.
"""

from __future__ import annotations

from understanding_bitwise.core.words import WORD32, iter_shifts_until_hob


def _no_hob(number: int) -> bool:
    return number == 0


def hob(number: int) -> int | None:
    """Return the highest set bit index by counting right shifts."""
    WORD32.require_value(number)
    if _no_hob(number):
        return None

    shifts = sum(1 for _ in iter_shifts_until_hob(number))
    return shifts - 1


def hob_thr(number: int) -> int | None:
    """Return the highest set bit index using the threshold method."""
    WORD32.require_value(number)
    if _no_hob(number):
        return None

    index = WORD32.bits - 1
    threshold = WORD32.top_bit
    while number < threshold:
        threshold >>= 1
        index -= 1
    return index


def hob_comp_pot(number: int) -> int | None:
    """Return the highest set bit index by comparing with powers of two."""
    WORD32.require_value(number)
    if _no_hob(number):
        return None

    for index in reversed(range(WORD32.bits)):
        power = 1 << index
        if number & power == power:
            return index
    return None
