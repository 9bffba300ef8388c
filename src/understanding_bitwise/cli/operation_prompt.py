"""Interactive operation selection UI for the CLI layer.

This module is responsible for:

* Rendering a Rich table showing the available operations.
* Prompting the user to pick an operation via questionary arrow keys.
* Asking for each argument, and for the method when there is a choice.
* Returning an argument vector the regular parser understands.

All display-related logic lives here; no bit manipulation happens.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from understanding_bitwise.cli.commands import Command
from understanding_bitwise.cli.console import console
from understanding_bitwise.exceptions import EnvironmentError, OperationSelectionError
from understanding_bitwise.utils.literals import is_int_list, is_int_literal


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for operation rendering."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms)
# ---------------------------------------------------------------------------

def _format_arguments(command: Command) -> str:
    """Render the argument list, marking a variadic tail with ``...``."""
    names = [name.upper() for name in command.arguments]
    if command.variadic and names:
        names[-1] = f"{names[-1]}..."
    return " ".join(names)


def _format_methods(command: Command) -> str:
    if len(command.methods) < 2:
        return "-"
    return ", ".join(command.method_names)


def _build_choice_label(index: int, command: Command) -> str:
    """Build the single-line label shown in the questionary selector.

    Format: ``"  3.  popcount   NUMBER   Count the set bits"``
    """
    return (
        f"  {index + 1}.  {command.name:<10} "
        f"{_format_arguments(command):<36} {command.summary}"
    )


def _validate_answer(command: Command, argument: str, text: str) -> bool | str:
    """questionary validator: ``True`` or an error message.

    Signed answers are refused here: argparse would read ``-0b1`` as an
    option flag once the answer is passed on to the parser.
    """
    if "-" in text:
        return "Words are unsigned; enter the number without a sign."
    if command.variadic and argument == command.arguments[-1]:
        return is_int_list(text) or "Enter integers separated by spaces."
    return is_int_literal(text) or "Enter an integer such as 42, 0b101 or 0x2A."


# ---------------------------------------------------------------------------
# Rich table display
# ---------------------------------------------------------------------------

def _display_command_table(commands: Sequence[Command]) -> None:
    """Print a Rich table summarising the available operations."""
    table_class = _import_rich_table()

    table = table_class(
        title="Available Operations",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Command", justify="left", min_width=10)
    table.add_column("Arguments", justify="left", min_width=12)
    table.add_column("Methods", justify="left", min_width=8)
    table.add_column("Summary", justify="left")

    for i, command in enumerate(commands, start=1):
        table.add_row(
            str(i),
            command.name,
            _format_arguments(command),
            _format_methods(command),
            command.summary,
        )

    console.print()
    console.print(table)
    console.print()


# ---------------------------------------------------------------------------
# Public prompt function
# ---------------------------------------------------------------------------

def prompt_operation(commands: Sequence[Command]) -> list[str]:
    """Display operations and prompt the user for one, with its arguments.

    Parameters
    ----------
    commands:
        Operation commands offered for selection, in display order.

    Returns
    -------
    list[str]
        Argument vector such as ``["set", "0b101", "1"]`` or
        ``["hob", "1982", "--method", "threshold"]``.

    Raises
    ------
    OperationSelectionError
        If the user cancels any prompt (Esc / Ctrl+C returns ``None``).
    """
    questionary = _import_questionary()

    _display_command_table(commands)

    choices = [
        questionary.Choice(title=_build_choice_label(i, command), value=command.name)
        for i, command in enumerate(commands)
    ]
    selected: str | None = questionary.select(
        "Select an operation:",
        choices=choices,
        use_arrow_keys=True,
        use_shortcuts=False,
    ).ask()  # Returns None on Ctrl+C / Esc

    if selected is None:
        raise OperationSelectionError(
            "No operation selected.",
            hint="Use arrow keys to pick an operation, then press Enter.",
        )
    command = next(command for command in commands if command.name == selected)

    argv = [command.name]
    for argument in command.arguments:
        answer: str | None = questionary.text(
            f"{argument.replace('_', ' ')}:",
            validate=lambda text, argument=argument: _validate_answer(
                command, argument, text,
            ),
        ).ask()
        if answer is None:
            raise OperationSelectionError(f"No value entered for {argument}.")
        if command.variadic and argument == command.arguments[-1]:
            argv.extend(answer.replace(",", " ").split())
        else:
            argv.append(answer.strip())

    if len(command.methods) > 1:
        method: str | None = questionary.select(
            "Select an algorithm:",
            choices=list(command.method_names),
            default=command.default_method,
        ).ask()
        if method is None:
            raise OperationSelectionError("No algorithm selected.")
        argv.extend(["--method", method])

    return argv
