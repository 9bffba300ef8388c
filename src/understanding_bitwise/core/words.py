"""Word model for understanding-bitwise.

A word is a fixed-width unsigned integer treated as an indexable
sequence of bits, index ``0`` being the least significant.  Python
integers are unbounded, so the width is described by a **frozen**
dataclass and enforced at each call instead of by the type system.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from understanding_bitwise.exceptions import WordValueError, word_width_hint


# ---------------------------------------------------------------------------
# Word width
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class WordWidth:
    """Width of an unsigned word, in bits."""

    bits: int
    """Number of bits in the word (``8`` or ``32`` in this package)."""

    @property
    def max_value(self) -> int:
        """Largest value the word can hold (all bits set)."""
        return (1 << self.bits) - 1

    @property
    def top_bit(self) -> int:
        """Value of the most significant bit alone."""
        return 1 << (self.bits - 1)

    def contains_index(self, index: int) -> bool:
        """Return ``True`` when *index* names a bit of this word."""
        return 0 <= index < self.bits

    def require_value(self, number: int, name: str = "number") -> int:
        """Return *number* unchanged or raise :class:`WordValueError`."""
        if not 0 <= number <= self.max_value:
            raise WordValueError(
                f"{name}={number} does not fit in an unsigned {self.bits}-bit word.",
                hint=word_width_hint(self.bits),
            )
        return number


WORD8: WordWidth = WordWidth(8)
"""8-bit word, used by the circular shifts."""

WORD32: WordWidth = WordWidth(32)
"""32-bit word, used by every other operation."""


# ---------------------------------------------------------------------------
# Shared scanning helper
# ---------------------------------------------------------------------------

def iter_shifts_until_hob(number: int) -> Iterator[int]:
    """Yield *number* and its right shifts up to the highest set bit.

    The first value is *number* itself, so ``0`` still yields once.
    Iteration stops as soon as the next shift would reach zero.
    """
    while True:
        yield number
        number >>= 1
        if number == 0:
            return


def require_count(count: int, name: str = "count") -> int:
    """Return a non-negative shift *count* or raise :class:`WordValueError`."""
    if count < 0:
        raise WordValueError(
            f"{name}={count} must not be negative.",
            hint="Shift counts are unsigned.",
        )
    return count
