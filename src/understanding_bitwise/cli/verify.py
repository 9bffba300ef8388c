"""``understanding-bitwise verify``: cross-check the algorithm variants.

Runs every variant family over its edge cases plus a seeded random
sample and renders a Rich table summarising whether the variants agree.
Falls back to a plain-text table on stderr when Rich is not installed.

This module lives in the CLI layer: it drives the core cross-check
engine and renders the outcome.  No comparison logic resides here.
"""

from __future__ import annotations

import contextlib
import sys
from collections.abc import Sequence

from understanding_bitwise.cli import exit_codes
from understanding_bitwise.cli.console import console
from understanding_bitwise.core.variants import (
    VARIANT_FAMILIES,
    CrossCheckResult,
    Mismatch,
    VariantFamily,
    run_cross_checks,
)
from understanding_bitwise.exceptions import EnvironmentError
from understanding_bitwise.logging import logger

_MAX_REPORTED_MISMATCHES: int = 5


# ---------------------------------------------------------------------------
# Row builders
# ---------------------------------------------------------------------------

def _result_row(
    family: VariantFamily,
    result: CrossCheckResult,
) -> tuple[str, str, str, str]:
    """Return (family, methods, cases, status) for one table row."""
    methods = ", ".join(family.method_names)
    if result.passed:
        status = "[green]OK[/green]"
    else:
        status = f"[red]FAIL ({len(result.mismatches)})[/red]"
    return result.family, methods, str(result.cases_checked), status


def _describe_mismatch(mismatch: Mismatch) -> str:
    arguments = ", ".join(str(argument) for argument in mismatch.arguments)
    results = ", ".join(f"{name}={value}" for name, value in mismatch.results)
    return f"({arguments}) -> {results}"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return status.replace("[red]", "").replace("[/red]", "")
    if "OK" in status:
        return "OK"
    return status


def _print_plain_table(rows: Sequence[tuple[str, str, str, str]]) -> None:
    """Render verify output without Rich."""
    print("\nunderstanding-bitwise verify", file=sys.stderr)
    print("=" * 72, file=sys.stderr)
    print(
        f"{'Family':<20} {'Methods':<30} {'Cases':>8} {'Status':<10}",
        file=sys.stderr,
    )
    print("-" * 72, file=sys.stderr)
    for family, methods, cases, status in rows:
        print(
            f"{family:<20} {methods:<30} {cases:>8} {_status_plain(status):<10}",
            file=sys.stderr,
        )
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_verify(
    samples: int = 256,
    seed: int = 0,
    families: Sequence[VariantFamily] = VARIANT_FAMILIES,
) -> int:
    """Cross-check every family and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all variants agree,
        :data:`exit_codes.GENERAL_ERROR` on any mismatch.
    """
    logger.debug("Cross-checking %d families, samples=%d seed=%d", len(families), samples, seed)
    totals = {family.name: len(family.edge_cases) + samples for family in families}

    progress: contextlib.AbstractContextManager[object]
    try:
        from understanding_bitwise.cli.progress import RichSweepProgress

        progress = RichSweepProgress(totals)
    except EnvironmentError:
        progress = contextlib.nullcontext()

    with progress as callback:
        results = run_cross_checks(
            samples,
            seed,
            families=families,
            progress_callback=callback if callable(callback) else None,
        )

    rows = [_result_row(family, result) for family, result in zip(families, results)]

    rich_available = True
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title="understanding-bitwise verify",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Family", style="bold", min_width=18)
        table.add_column("Methods", min_width=20)
        table.add_column("Cases", justify="right", min_width=6)
        table.add_column("Status", justify="center", min_width=8)

        for row in rows:
            table.add_row(*row)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_table(rows)

    failed = [result for result in results if not result.passed]
    for result in failed:
        for mismatch in result.mismatches[:_MAX_REPORTED_MISMATCHES]:
            logger.warning("%s mismatch %s", result.family, _describe_mismatch(mismatch))

    if failed:
        console.print("[bold red]Some variants disagree.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All variants agree.[/bold green]")
    return exit_codes.SUCCESS
