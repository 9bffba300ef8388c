"""Finding the odd-one-out with an XOR fold."""

from __future__ import annotations

import operator
from collections.abc import Iterable
from functools import reduce


def find_unique(values: Iterable[int]) -> int | None:
    """Return the element that occurs an odd number of times.

    Every other element must occur an even number of times so that the
    pairs cancel under XOR.  The precondition is not checked; violating
    it yields a computed but meaningless value.  Returns ``None`` for an
    empty iterable.
    """
    iterator = iter(values)
    first = next(iterator, None)
    if first is None:
        return None
    return reduce(operator.xor, iterator, first)
