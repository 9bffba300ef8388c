"""Integer literal parsing shared by the CLI parser and the prompt."""

from __future__ import annotations


def parse_int_literal(text: str) -> int:
    """Parse a Python integer literal (``42``, ``0b101``, ``0x2A``, ``0o52``).

    Underscore separators are accepted as in source code.

    Raises
    ------
    ValueError
        When *text* is not an integer literal.
    """
    stripped = text.strip()
    if not stripped:
        raise ValueError("empty integer literal")
    return int(stripped, 0)


def parse_int_list(text: str) -> list[int]:
    """Parse whitespace- or comma-separated integer literals."""
    return [parse_int_literal(part) for part in text.replace(",", " ").split()]


def is_int_literal(text: str) -> bool:
    try:
        parse_int_literal(text)
    except ValueError:
        return False
    return True


def is_int_list(text: str) -> bool:
    try:
        parse_int_list(text)
    except ValueError:
        return False
    return True
