"""Minimal binary text rendering.

Digits are produced least-significant first and prepended, so the
output reads most-significant first with no leading zeros.  The value
``0`` still renders as ``"0"`` because the scan always runs once.
"""

from __future__ import annotations

import io
from collections import deque

from understanding_bitwise.core.protocols import TextSink
from understanding_bitwise.core.words import WORD32, iter_shifts_until_hob

_ZERO_CODE: int = ord("0")


def write_binary_representation(number: int, sink: TextSink) -> None:
    """Write the binary digits of *number* to *sink* in a single call.

    Write failures raised by *sink* propagate unchanged.
    """
    WORD32.require_value(number)
    digits: deque[str] = deque()
    for value in iter_shifts_until_hob(number):
        digits.appendleft(chr(_ZERO_CODE + (value & 1)))
    sink.write("".join(digits))


def binary_representation(number: int) -> str:
    """Return the binary digits of *number* as a string."""
    buffer = io.StringIO()
    write_binary_representation(number, buffer)
    return buffer.getvalue()
