import logging

"""
Create the package logger.

The core layer never logs; only the CLI layer reports through this logger.
"""

logger = logging.getLogger("understanding_bitwise")
logger.propagate = False
logger.setLevel(logging.WARNING)
logger.addHandler(logging.StreamHandler())


def set_verbosity(verbose: bool) -> None:
    """Switch the package logger between WARNING and DEBUG."""
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
