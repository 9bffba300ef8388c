"""Powers of two within a 32-bit word."""

from __future__ import annotations

from understanding_bitwise.core.words import WORD32
from understanding_bitwise.exceptions import (
    WordOverflowError,
    WordValueError,
    word_width_hint,
)


def power_of_two(power: int) -> int:
    """Return ``2 ** power`` computed as a single left shift.

    Raises
    ------
    WordOverflowError
        When *power* meets or exceeds the word width, so the result
        would not fit in a 32-bit word.
    WordValueError
        When *power* is negative.
    """
    if power < 0:
        raise WordValueError(
            f"power={power} must not be negative.",
            hint="Exponents are unsigned.",
        )
    if power >= WORD32.bits:
        raise WordOverflowError(
            f"2**{power} does not fit in a {WORD32.bits}-bit word.",
            hint=word_width_hint(WORD32.bits),
        )
    return 1 << power
