"""Counting set bits and runs of consecutive ones in a 32-bit word.

Two population-count algorithms live here side by side:

* :func:`binary_ones_count` walks the word one shift at a time and adds
  the low bit on every step, stopping after the highest set bit.
* :func:`binary_ones_count_sub_method` relies on ``n & (n - 1)``
  clearing the lowest set bit and counts how many times that is needed.

Both must agree for every 32-bit input.
"""

from __future__ import annotations

from understanding_bitwise.core.words import WORD32, iter_shifts_until_hob


# ---------------------------------------------------------------------------
# Population count
# ---------------------------------------------------------------------------

def binary_ones_count(number: int) -> int:
    """Return the number of set bits by scanning up to the highest one."""
    WORD32.require_value(number)
    return sum(value & 1 for value in iter_shifts_until_hob(number))


def binary_ones_count_sub_method(number: int) -> int:
    """Return the number of set bits using the subtraction identity."""
    WORD32.require_value(number)
    if number == 0:
        return 0

    count = 0
    while True:
        number &= number - 1
        count += 1
        if number == 0:
            break
    return count


# ---------------------------------------------------------------------------
# Runs of consecutive ones
# ---------------------------------------------------------------------------

def _consecutive_ones_mask(run_length: int) -> int | None:
    """Return a word whose low *run_length* bits are set, or ``None``."""
    if 1 <= run_length <= WORD32.bits:
        return (1 << run_length) - 1
    return None


def consecutive_ones_entries_count(number: int, run_length: int) -> int | None:
    """Count the alignments where *run_length* contiguous bits are all set.

    The mask slides from position ``0`` until its top bit reaches the
    most significant bit of the word.  Overlapping runs are counted
    separately: ``0b111`` holds two runs of length two.

    Returns ``None`` when *run_length* is ``0`` or exceeds the word width.
    """
    WORD32.require_value(number)
    pattern = _consecutive_ones_mask(run_length)
    if pattern is None:
        return None

    matches = 0
    while True:
        if pattern & number == pattern:
            matches += 1
        if pattern & WORD32.top_bit:
            break
        pattern <<= 1
    return matches
