"""Cross-checking the alternate algorithms of each operation.

Several operations ship more than one algorithm on purpose.  This module
groups them into :class:`VariantFamily` records and runs every member of
a family over the same argument tuples, collecting any disagreement.

Guarantees
----------
* Pure: no I/O, no ``print()``, no logging.
* Deterministic: random cases come from a seeded :class:`random.Random`.
* Progress is reported through an optional callback, never rendered here.
"""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from understanding_bitwise.core.bit_ops import (
    unset_bit,
    unset_bit_bitwise_not,
    unset_bit_xor,
)
from understanding_bitwise.core.counting import (
    binary_ones_count,
    binary_ones_count_sub_method,
)
from understanding_bitwise.core.hob import hob, hob_comp_pot, hob_thr
from understanding_bitwise.core.rearrange import swap_bits, swap_bits_xor
from understanding_bitwise.core.words import WORD32

Variant = Callable[..., int | None]
ProgressCallback = Callable[[str, int], None]
"""Called with ``(family_name, cases_completed)`` after each case."""


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class VariantFamily:
    """Algorithms that must return identical results for identical input."""

    name: str
    """Stable identifier, also used as a CLI label."""

    description: str

    variants: tuple[tuple[str, Variant], ...]
    """``(method_name, function)`` pairs; the first one is the default."""

    edge_cases: tuple[tuple[int, ...], ...]
    """Argument tuples always checked before the random ones."""

    random_case: Callable[[random.Random], tuple[int, ...]]

    @property
    def method_names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.variants)


@dataclass(frozen=True, slots=True)
class Mismatch:
    """One argument tuple on which the variants disagreed."""

    arguments: tuple[int, ...]
    results: tuple[tuple[str, int | None], ...]


@dataclass(frozen=True, slots=True)
class CrossCheckResult:
    """Outcome of running one family over a set of cases."""

    family: str
    cases_checked: int
    mismatches: tuple[Mismatch, ...]

    @property
    def passed(self) -> bool:
        return not self.mismatches


# ---------------------------------------------------------------------------
# Case generation
# ---------------------------------------------------------------------------

_EDGE_WORDS: tuple[int, ...] = (
    0,
    1,
    2,
    3,
    0b11100100,
    1982,
    0b11001100101,
    0xAAAAAAAA,
    0x55555555,
    WORD32.top_bit,
    WORD32.max_value,
)

_EDGE_INDICES: tuple[int, ...] = (0, 1, 5, 18, WORD32.bits - 1, WORD32.bits)


def _random_word(rng: random.Random) -> int:
    return rng.getrandbits(WORD32.bits)


def _random_index(rng: random.Random) -> int:
    # One slot past the end so out-of-range handling is exercised too.
    return rng.randrange(WORD32.bits + 1)


def build_cases(
    family: VariantFamily,
    samples: int,
    seed: int = 0,
) -> list[tuple[int, ...]]:
    """Return the edge cases of *family* followed by *samples* random ones."""
    rng = random.Random(seed)
    cases = list(family.edge_cases)
    cases.extend(family.random_case(rng) for _ in range(samples))
    return cases


# ---------------------------------------------------------------------------
# Families
# ---------------------------------------------------------------------------

POPULATION_COUNT = VariantFamily(
    name="population-count",
    description="Number of set bits",
    variants=(
        ("iterate", binary_ones_count),
        ("subtract", binary_ones_count_sub_method),
    ),
    edge_cases=tuple((word,) for word in _EDGE_WORDS),
    random_case=lambda rng: (_random_word(rng),),
)

HIGHEST_ORDER_BIT = VariantFamily(
    name="highest-order-bit",
    description="Index of the most significant set bit",
    variants=(
        ("scan", hob),
        ("threshold", hob_thr),
        ("compare", hob_comp_pot),
    ),
    edge_cases=tuple((word,) for word in _EDGE_WORDS),
    random_case=lambda rng: (_random_word(rng),),
)

UNSET_BIT = VariantFamily(
    name="unset-bit",
    description="Clear one bit",
    variants=(
        ("subtract", unset_bit),
        ("xor", unset_bit_xor),
        ("not", unset_bit_bitwise_not),
    ),
    edge_cases=tuple(
        (word, index) for word in _EDGE_WORDS for index in _EDGE_INDICES
    ),
    random_case=lambda rng: (_random_word(rng), _random_index(rng)),
)

SWAP_BITS = VariantFamily(
    name="swap-bits",
    description="Exchange two bits",
    variants=(
        ("mask", swap_bits),
        ("xor", swap_bits_xor),
    ),
    edge_cases=tuple(
        (word, first, second)
        for word in _EDGE_WORDS
        for first in _EDGE_INDICES
        for second in _EDGE_INDICES
    ),
    random_case=lambda rng: (
        _random_word(rng),
        _random_index(rng),
        _random_index(rng),
    ),
)

VARIANT_FAMILIES: tuple[VariantFamily, ...] = (
    POPULATION_COUNT,
    HIGHEST_ORDER_BIT,
    UNSET_BIT,
    SWAP_BITS,
)


def get_family(name: str) -> VariantFamily:
    """Look up a family by :attr:`VariantFamily.name`.

    Raises
    ------
    KeyError
        When no family carries *name*.
    """
    for family in VARIANT_FAMILIES:
        if family.name == name:
            return family
    raise KeyError(name)


# ---------------------------------------------------------------------------
# Cross-check
# ---------------------------------------------------------------------------

def cross_check(
    family: VariantFamily,
    cases: Iterable[Sequence[int]],
    *,
    progress_callback: ProgressCallback | None = None,
) -> CrossCheckResult:
    """Run every variant of *family* on each case and compare results."""
    mismatches: list[Mismatch] = []
    checked = 0
    for case in cases:
        arguments = tuple(case)
        results = tuple((name, variant(*arguments)) for name, variant in family.variants)
        if len({result for _, result in results}) > 1:
            mismatches.append(Mismatch(arguments=arguments, results=results))
        checked += 1
        if progress_callback is not None:
            progress_callback(family.name, checked)

    return CrossCheckResult(
        family=family.name,
        cases_checked=checked,
        mismatches=tuple(mismatches),
    )


def run_cross_checks(
    samples: int,
    seed: int = 0,
    *,
    families: Sequence[VariantFamily] = VARIANT_FAMILIES,
    progress_callback: ProgressCallback | None = None,
) -> list[CrossCheckResult]:
    """Cross-check every family on its edge cases plus *samples* random ones."""
    return [
        cross_check(
            family,
            build_cases(family, samples, seed),
            progress_callback=progress_callback,
        )
        for family in families
    ]


def total_cases(
    samples: int,
    families: Sequence[VariantFamily] = VARIANT_FAMILIES,
) -> int:
    """Number of cases :func:`run_cross_checks` will evaluate."""
    return sum(len(family.edge_cases) + samples for family in families)
