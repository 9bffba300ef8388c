"""CLI application entry point and command routing for understanding-bitwise.

This module is the **sole error boundary** for the entire application.
It catches :class:`~understanding_bitwise.exceptions.BitwiseError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No bit manipulation lives here; all work is delegated to ``core``.
* Results go to stdout, diagnostics go to stderr through the console.
* A ``None`` result is not an error: it is reported and mapped to
  :data:`exit_codes.NO_RESULT`.
"""

from __future__ import annotations

import argparse
import sys

from understanding_bitwise.cli import exit_codes
from understanding_bitwise.cli.commands import (
    COMMANDS,
    Command,
    Render,
    format_result,
    get_command,
)
from understanding_bitwise.cli.console import console, emit
from understanding_bitwise.core.rendering import write_binary_representation
from understanding_bitwise.exceptions import BitwiseError
from understanding_bitwise.logging import logger, set_verbosity
from understanding_bitwise.utils.literals import parse_int_literal
from understanding_bitwise.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _int_argument(text: str) -> int:
    """argparse ``type=`` adapter for integer literals."""
    try:
        return parse_int_literal(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer literal: {text!r}") from exc


def _add_command_parser(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    command: Command,
) -> None:
    sub = subparsers.add_parser(
        command.name,
        help=command.summary,
        description=f"{command.summary}.",
    )
    for position, argument in enumerate(command.arguments, start=1):
        last = position == len(command.arguments)
        sub.add_argument(
            argument,
            type=_int_argument,
            nargs="*" if command.variadic and last else None,
            metavar=argument.upper(),
        )
    if len(command.methods) > 1:
        sub.add_argument(
            "-m",
            "--method",
            choices=command.method_names,
            default=command.default_method,
            help=f"Algorithm to use (default: {command.default_method}).",
        )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``understanding-bitwise <operation> ARGS...`` for each command
    * ``understanding-bitwise verify`` to cross-check algorithm variants
    * ``understanding-bitwise interactive`` to pick an operation by menu
    * ``understanding-bitwise --version``
    """
    parser = argparse.ArgumentParser(
        prog="understanding-bitwise",
        description="Bit manipulation on fixed-width unsigned words.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log dispatch details to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    for command in COMMANDS:
        _add_command_parser(subparsers, command)

    verify = subparsers.add_parser(
        "verify",
        help="Cross-check every algorithm variant",
        description="Run all algorithm variants on the same inputs and compare.",
    )
    verify.add_argument(
        "--samples",
        type=int,
        default=256,
        help="Random cases per family on top of the edge cases (default: 256).",
    )
    verify.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Seed for the random cases (default: 0).",
    )

    subparsers.add_parser(
        "interactive",
        help="Pick an operation from a menu",
        description="Pick an operation and enter its arguments interactively.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_operation(command: Command, args: argparse.Namespace) -> int:
    """Run one operation command and print its result."""
    values = [getattr(args, argument) for argument in command.arguments]

    if command.render is Render.BINARY:
        (number,) = values
        logger.debug("Writing %s in binary", number)
        write_binary_representation(number, sys.stdout)
        sys.stdout.write("\n")
        return exit_codes.SUCCESS

    method: str | None = getattr(args, "method", None)
    function = command.resolve(method)
    logger.debug(
        "Running %s (method=%s) with %s",
        command.name,
        method or command.default_method,
        values,
    )

    result = function(*values)
    if result is None:
        console.print(f"[yellow]No value:[/yellow] {command.absent_reason}")
        return exit_codes.NO_RESULT

    emit(format_result(command.render, result))
    return exit_codes.SUCCESS


def _handle_verify(samples: int, seed: int) -> int:
    """Dispatch the ``verify`` cross-check command."""
    from understanding_bitwise.cli.verify import run_verify

    return run_verify(samples=samples, seed=seed)


def _handle_interactive() -> int:
    """Prompt for an operation, then run it like a typed command."""
    from understanding_bitwise.cli.operation_prompt import prompt_operation

    argv = prompt_operation(COMMANDS)
    logger.debug("Interactive selection: %s", argv)
    args = _build_parser().parse_args(argv)
    return _handle_operation(get_command(args.command), args)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the understanding-bitwise CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    set_verbosity(args.verbose)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.command == "verify":
        return _handle_verify(args.samples, args.seed)

    if args.command == "interactive":
        return _handle_interactive()

    return _handle_operation(get_command(args.command), args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except BitwiseError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
