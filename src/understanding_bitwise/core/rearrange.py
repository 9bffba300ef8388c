"""Moving bits around inside a 32-bit word: swapping and removal."""

from __future__ import annotations

from collections.abc import Callable

from understanding_bitwise.core.words import WORD32


# ---------------------------------------------------------------------------
# Swap
# ---------------------------------------------------------------------------

def _swap_bits_base(
    number: int,
    first_index: int,
    second_index: int,
    swap: Callable[[], int],
) -> int | None:
    """Check both indices, short-circuit equal ones, then call *swap*."""
    WORD32.require_value(number)
    if not (
        WORD32.contains_index(first_index) and WORD32.contains_index(second_index)
    ):
        return None
    if first_index == second_index:
        return number
    return swap()


def swap_bits(number: int, first_index: int, second_index: int) -> int | None:
    """Exchange two bits of *number* with direct mask arithmetic.

    Both target bits are cleared first, then each one is refilled with
    the other bit moved across by the distance between them.
    """

    def swap() -> int:
        low, high = sorted((first_index, second_index))
        distance = high - low
        low_mask = 1 << low
        high_mask = 1 << high
        return (
            number & (number ^ low_mask ^ high_mask)
            | number >> distance & low_mask
            | number << distance & high_mask
        )

    return _swap_bits_base(number, first_index, second_index, swap)


def swap_bits_xor(number: int, first_index: int, second_index: int) -> int | None:
    """Exchange two bits of *number* by toggling both when they differ."""

    def swap() -> int:
        first_bit = (number >> first_index) & 1
        second_bit = (number >> second_index) & 1
        swapper = first_bit ^ second_bit
        swapper = swapper << first_index | swapper << second_index
        return number ^ swapper

    return _swap_bits_base(number, first_index, second_index, swap)


# ---------------------------------------------------------------------------
# Removal
# ---------------------------------------------------------------------------

def remove_bit(number: int, index: int) -> int | None:
    """Remove bit *index*, compacting the higher bits down by one.

    Bits below *index* are untouched and the vacated top bit becomes 0.
    Returns ``None`` for an out-of-range *index*.
    """
    WORD32.require_value(number)
    if not WORD32.contains_index(index):
        return None

    # Each bit at or above index becomes its upper neighbour.
    remover = (number >> (index + 1) ^ number >> index) << index
    return (number ^ remover) & WORD32.max_value
