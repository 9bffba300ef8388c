"""Core layer: pure bit-manipulation functions on fixed-width words.

Rules
-----
* No ``print()`` calls and no logging.
* No I/O other than the caller-supplied sink of the rendering function.
* No imports from ``cli``.
* Index problems return ``None``; unrepresentable magnitudes raise.
"""

from understanding_bitwise.core.bit_ops import (
    invert_bit,
    set_bit,
    unset_bit,
    unset_bit_bitwise_not,
    unset_bit_xor,
)
from understanding_bitwise.core.counting import (
    binary_ones_count,
    binary_ones_count_sub_method,
    consecutive_ones_entries_count,
)
from understanding_bitwise.core.hob import hob, hob_comp_pot, hob_thr
from understanding_bitwise.core.powers import power_of_two
from understanding_bitwise.core.protocols import TextSink
from understanding_bitwise.core.rearrange import remove_bit, swap_bits, swap_bits_xor
from understanding_bitwise.core.rendering import (
    binary_representation,
    write_binary_representation,
)
from understanding_bitwise.core.rotation import circular_shl, circular_shr
from understanding_bitwise.core.unique import find_unique
from understanding_bitwise.core.words import WORD8, WORD32, WordWidth

__all__: list[str] = [
    "TextSink",
    "WORD8",
    "WORD32",
    "WordWidth",
    "binary_ones_count",
    "binary_ones_count_sub_method",
    "binary_representation",
    "circular_shl",
    "circular_shr",
    "consecutive_ones_entries_count",
    "find_unique",
    "hob",
    "hob_comp_pot",
    "hob_thr",
    "invert_bit",
    "power_of_two",
    "remove_bit",
    "set_bit",
    "swap_bits",
    "swap_bits_xor",
    "unset_bit",
    "unset_bit_bitwise_not",
    "unset_bit_xor",
    "write_binary_representation",
]
