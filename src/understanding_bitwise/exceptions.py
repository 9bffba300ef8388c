"""Custom exception hierarchy for understanding-bitwise.

All exceptions that cross layer boundaries must inherit from
:class:`BitwiseError`.  Structural problems with a *bit index* are not
exceptions at all: the core returns ``None`` for them.  Exceptions are
reserved for magnitudes a word cannot represent and for values that do
not fit the word width in the first place.

Hierarchy
---------
BitwiseError
├── WordOverflowError        (also OverflowError)
├── WordValueError           (also ValueError)
├── OperationSelectionError
└── EnvironmentError
"""

from __future__ import annotations


class BitwiseError(Exception):
    """Base exception for all understanding-bitwise errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Arithmetic ------------------------------------------------------------

class WordOverflowError(BitwiseError, OverflowError):
    """Raised when a requested power of two does not fit in the word."""


class WordValueError(BitwiseError, ValueError):
    """Raised when an argument lies outside the unsigned word range."""


# --- Interactive selection -------------------------------------------------

class OperationSelectionError(BitwiseError):
    """Raised when the interactive prompt ends without a usable answer."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(BitwiseError):
    """Raised when an optional UI dependency is not available."""


def word_width_hint(bits: int) -> str:
    """Return the standard hint describing the accepted range of a word."""
    return f"A {bits}-bit word holds values from 0 to {(1 << bits) - 1}."
