"""understanding-bitwise: small lessons in fixed-width bit manipulation.

Every public operation lives in :mod:`understanding_bitwise.core` and is
re-exported here for convenience.
"""

from understanding_bitwise.core import *  # noqa: F403
from understanding_bitwise.core import __all__ as _core_all
from understanding_bitwise.exceptions import (
    BitwiseError,
    WordOverflowError,
    WordValueError,
)
from understanding_bitwise.version import __version__

__all__: list[str] = [
    "BitwiseError",
    "WordOverflowError",
    "WordValueError",
    "__version__",
    *_core_all,
]
