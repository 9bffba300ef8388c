"""Registry of the operation commands exposed by the CLI.

Each :class:`Command` binds a sub-command name to one or more core
functions (its *methods*) and says how to render the result.  The
argument parser, the dispatcher and the interactive prompt are all
driven from :data:`COMMANDS`, so adding an operation means adding one
entry here.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from understanding_bitwise.core.bit_ops import invert_bit, set_bit
from understanding_bitwise.core.counting import consecutive_ones_entries_count
from understanding_bitwise.core.powers import power_of_two
from understanding_bitwise.core.rearrange import remove_bit
from understanding_bitwise.core.rendering import binary_representation
from understanding_bitwise.core.rotation import circular_shl, circular_shr
from understanding_bitwise.core.unique import find_unique
from understanding_bitwise.core.variants import (
    HIGHEST_ORDER_BIT,
    POPULATION_COUNT,
    SWAP_BITS,
    UNSET_BIT,
    Variant,
)
from understanding_bitwise.core.words import WORD8, WORD32


class Render(str, Enum):
    """How a command result is printed."""

    WORD = "word"
    """Decimal value followed by its minimal binary form."""

    BYTE = "byte"
    """Decimal value followed by all eight bits."""

    NUMBER = "number"
    """Plain decimal (counts and indices)."""

    BINARY = "binary"
    """Binary digits only, streamed straight to stdout."""


_INDEX_RANGE = f"bit index outside 0..{WORD32.bits - 1}"


@dataclass(frozen=True, slots=True)
class Command:
    """One operation sub-command."""

    name: str
    summary: str
    arguments: tuple[str, ...]
    """Positional argument names, in call order."""

    methods: tuple[tuple[str, Variant], ...]
    """``(method_name, function)`` pairs; the first one is the default.

    Empty for :attr:`Render.BINARY` commands, whose argument is written
    straight to stdout by :func:`write_binary_representation`.
    """

    render: Render = Render.WORD
    absent_reason: str = "no value"
    """Message shown when the function returns ``None``."""

    variadic: bool = False
    """The last argument accepts zero or more values, passed as a list."""

    @property
    def method_names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.methods)

    @property
    def default_method(self) -> str | None:
        return self.methods[0][0] if self.methods else None

    def resolve(self, method: str | None) -> Callable[..., int | None]:
        """Return the function for *method*, or the default one.

        Raises
        ------
        KeyError
            When *method* is unknown or the command has no methods.
        """
        wanted = method or self.default_method
        for name, function in self.methods:
            if name == wanted:
                return function
        raise KeyError(wanted)


COMMANDS: tuple[Command, ...] = (
    Command(
        name="power",
        summary="Raise two to a power within a 32-bit word",
        arguments=("power",),
        methods=(("shift", power_of_two),),
    ),
    Command(
        name="binary",
        summary="Write the minimal binary representation",
        arguments=("number",),
        methods=(),
        render=Render.BINARY,
    ),
    Command(
        name="popcount",
        summary="Count the set bits",
        arguments=("number",),
        methods=POPULATION_COUNT.variants,
        render=Render.NUMBER,
    ),
    Command(
        name="hob",
        summary="Locate the highest set bit",
        arguments=("number",),
        methods=HIGHEST_ORDER_BIT.variants,
        render=Render.NUMBER,
        absent_reason="zero has no set bit",
    ),
    Command(
        name="set",
        summary="Set one bit to 1",
        arguments=("number", "index"),
        methods=(("or", set_bit),),
        absent_reason=_INDEX_RANGE,
    ),
    Command(
        name="unset",
        summary="Clear one bit to 0",
        arguments=("number", "index"),
        methods=UNSET_BIT.variants,
        absent_reason=_INDEX_RANGE,
    ),
    Command(
        name="invert",
        summary="Flip one bit",
        arguments=("number", "index"),
        methods=(("xor", invert_bit),),
        absent_reason=_INDEX_RANGE,
    ),
    Command(
        name="shl",
        summary="Rotate an 8-bit word left",
        arguments=("byte", "count"),
        methods=(("rotate", circular_shl),),
        render=Render.BYTE,
    ),
    Command(
        name="shr",
        summary="Rotate an 8-bit word right",
        arguments=("byte", "count"),
        methods=(("rotate", circular_shr),),
        render=Render.BYTE,
    ),
    Command(
        name="runs",
        summary="Count runs of consecutive ones of a given length",
        arguments=("number", "run_length"),
        methods=(("slide", consecutive_ones_entries_count),),
        render=Render.NUMBER,
        absent_reason=f"run length outside 1..{WORD32.bits}",
    ),
    Command(
        name="swap",
        summary="Exchange two bits",
        arguments=("number", "first_index", "second_index"),
        methods=SWAP_BITS.variants,
        absent_reason=_INDEX_RANGE,
    ),
    Command(
        name="remove",
        summary="Remove one bit and compact the higher bits",
        arguments=("number", "index"),
        methods=(("compact", remove_bit),),
        absent_reason=_INDEX_RANGE,
    ),
    Command(
        name="unique",
        summary="Find the element without a duplicate",
        arguments=("values",),
        methods=(("xor", find_unique),),
        render=Render.NUMBER,
        absent_reason="no values given",
        variadic=True,
    ),
)


def get_command(name: str) -> Command:
    """Look up a command by name.

    Raises
    ------
    KeyError
        When no command carries *name*.
    """
    for command in COMMANDS:
        if command.name == name:
            return command
    raise KeyError(name)


def format_result(render: Render, value: int) -> str:
    """Render *value* for stdout according to *render*.

    :attr:`Render.BINARY` is streamed by the caller and never reaches
    this function.
    """
    if render is Render.WORD:
        return f"{value} (0b{binary_representation(value)})"
    if render is Render.BYTE:
        return f"{value} (0b{value:0{WORD8.bits}b})"
    return str(value)
