"""Tests for operation commands routed through the CLI (cli/app.py).

Coverage:
* Each operation prints its result on stdout with exit 0.
* ``--method`` selects an algorithm variant.
* ``None`` results map to NO_RESULT with a message on stderr.
* Domain errors propagate from ``main`` and are rendered by ``cli``.
* Integer literal parsing and the command registry.
"""

from __future__ import annotations

import sys
from unittest.mock import MagicMock, patch

import pytest

from understanding_bitwise.cli import exit_codes
from understanding_bitwise.cli.app import cli, main
from understanding_bitwise.cli.commands import (
    COMMANDS,
    Render,
    format_result,
    get_command,
)
from understanding_bitwise.core.counting import binary_ones_count_sub_method
from understanding_bitwise.core.hob import hob_thr
from understanding_bitwise.exceptions import WordOverflowError, WordValueError
from understanding_bitwise.utils.literals import (
    is_int_list,
    is_int_literal,
    parse_int_list,
    parse_int_literal,
)


def _run(argv: list[str], capsys: pytest.CaptureFixture[str]) -> tuple[int, str, str]:
    code = main(argv)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

class TestOperations:
    @pytest.mark.parametrize(
        ("argv", "expected"),
        [
            (["power", "3"], "8 (0b1000)"),
            (["binary", "0b11100100"], "11100100"),
            (["binary", "0"], "0"),
            (["popcount", "0b11100100"], "4"),
            (["hob", "0b100"], "2"),
            (["set", "0b101", "1"], "7 (0b111)"),
            (["unset", "0b101", "2"], "1 (0b1)"),
            (["invert", "0b100", "1"], "6 (0b110)"),
            (["shl", "0b10000011", "2"], "14 (0b00001110)"),
            (["shr", "0b10000011", "2"], "224 (0b11100000)"),
            (["runs", "0b111011011", "2"], "4"),
            (["swap", "0b100011", "1", "4"], "49 (0b110001)"),
            (["remove", "0b100011", "1"], "17 (0b10001)"),
            (["unique", "45", "32", "777", "10", "45", "10", "32"], "777"),
            (["set", "0x10", "0"], "17 (0b10001)"),
        ],
    )
    def test_prints_result(
        self,
        argv: list[str],
        expected: str,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code, out, _ = _run(argv, capsys)
        assert code == exit_codes.SUCCESS
        assert out == f"{expected}\n"

    @pytest.mark.parametrize(
        ("argv", "expected"),
        [
            (["popcount", "0xFF", "--method", "subtract"], "8"),
            (["hob", "1982", "--method", "threshold"], "10"),
            (["hob", "1982", "-m", "compare"], "10"),
            (["unset", "11", "1", "--method", "not"], "9 (0b1001)"),
            (["swap", "0b101", "0", "1", "--method", "xor"], "6 (0b110)"),
        ],
    )
    def test_method_selection(
        self,
        argv: list[str],
        expected: str,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code, out, _ = _run(argv, capsys)
        assert code == exit_codes.SUCCESS
        assert out == f"{expected}\n"

    def test_method_is_dispatched(self, capsys: pytest.CaptureFixture[str]) -> None:
        spy = MagicMock(side_effect=hob_thr)
        command = get_command("hob")
        with patch.object(type(command), "resolve", return_value=spy):
            _run(["hob", "12", "--method", "threshold"], capsys)
        spy.assert_called_once_with(12)

    def test_unknown_method_rejected(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["hob", "4", "--method", "guess"])
        assert exc_info.value.code == 2

    def test_binary_streams_through_sink_writer(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        with patch(
            "understanding_bitwise.cli.app.write_binary_representation",
        ) as mock_write:
            code = main(["binary", "0x2A"])
        assert code == exit_codes.SUCCESS
        mock_write.assert_called_once_with(42, sys.stdout)
        assert capsys.readouterr().out == "\n"

    def test_binary_rejects_value_outside_word(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        with pytest.raises(WordValueError):
            main(["binary", str(2**32)])
        assert capsys.readouterr().out == ""

    def test_invalid_literal_rejected(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit):
            main(["popcount", "twelve"])
        assert "invalid integer literal" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Absent results
# ---------------------------------------------------------------------------

class TestAbsentResults:
    @pytest.mark.parametrize(
        ("argv", "reason"),
        [
            (["hob", "0"], "zero has no set bit"),
            (["set", "5", "32"], "bit index"),
            (["swap", "5", "1", "40"], "bit index"),
            (["runs", "7", "0"], "run length"),
            (["unique"], "no values"),
        ],
    )
    def test_no_result(
        self,
        argv: list[str],
        reason: str,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code, out, err = _run(argv, capsys)
        assert code == exit_codes.NO_RESULT
        assert out == ""
        assert reason in err


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class TestErrors:
    def test_overflow_propagates_from_main(self) -> None:
        with pytest.raises(WordOverflowError):
            main(["power", "32"])

    def test_word_value_propagates_from_main(self) -> None:
        with pytest.raises(WordValueError):
            main(["shl", "256", "1"])

    def test_cli_renders_known_error(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr(sys, "argv", ["understanding-bitwise", "power", "40"])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "does not fit" in err
        assert "Hint" in err

    def test_cli_exit_code_for_success(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "argv", ["understanding-bitwise", "popcount", "7"])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.SUCCESS

    def test_cli_keyboard_interrupt(self) -> None:
        with patch("understanding_bitwise.cli.app.main", side_effect=KeyboardInterrupt):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.KEYBOARD_INTERRUPT

    def test_cli_unexpected_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("understanding_bitwise.cli.app.main", side_effect=RuntimeError("kaput")):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.UNEXPECTED_ERROR
        assert "RuntimeError: kaput" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Verbose logging
# ---------------------------------------------------------------------------

class TestVerbose:
    def test_verbose_sets_debug_level(self, capsys: pytest.CaptureFixture[str]) -> None:
        import logging

        from understanding_bitwise.logging import logger, set_verbosity

        try:
            main(["--verbose", "popcount", "3"])
            assert logger.level == logging.DEBUG
        finally:
            set_verbosity(False)
        assert logger.level == logging.WARNING
        assert capsys.readouterr().out == "2\n"


# ---------------------------------------------------------------------------
# Registry and formatting
# ---------------------------------------------------------------------------

class TestCommandRegistry:
    def test_names_are_unique(self) -> None:
        names = [command.name for command in COMMANDS]
        assert len(names) == len(set(names))

    def test_get_command(self) -> None:
        assert get_command("swap").arguments == ("number", "first_index", "second_index")

    def test_get_unknown_command(self) -> None:
        with pytest.raises(KeyError):
            get_command("rotate")

    def test_resolve_default(self) -> None:
        assert get_command("popcount").default_method == "iterate"

    def test_resolve_named(self) -> None:
        assert get_command("popcount").resolve("subtract") is binary_ones_count_sub_method

    def test_resolve_unknown(self) -> None:
        with pytest.raises(KeyError):
            get_command("popcount").resolve("magic")

    def test_binary_has_no_methods(self) -> None:
        command = get_command("binary")
        assert command.render is Render.BINARY
        assert command.methods == ()
        assert command.default_method is None
        with pytest.raises(KeyError):
            command.resolve(None)

    def test_binary_takes_no_method_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["binary", "5", "--method", "render"])
        assert exc_info.value.code == 2

    def test_only_unique_is_variadic(self) -> None:
        assert [command.name for command in COMMANDS if command.variadic] == ["unique"]


class TestFormatResult:
    def test_word(self) -> None:
        assert format_result(Render.WORD, 5) == "5 (0b101)"

    def test_word_zero(self) -> None:
        assert format_result(Render.WORD, 0) == "0 (0b0)"

    def test_byte_is_padded(self) -> None:
        assert format_result(Render.BYTE, 5) == "5 (0b00000101)"

    def test_number(self) -> None:
        assert format_result(Render.NUMBER, 31) == "31"


class TestLiterals:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [("42", 42), ("0b101", 5), ("0x2A", 42), ("0o52", 42), (" 7 ", 7), ("1_000", 1000)],
    )
    def test_parse_int_literal(self, text: str, expected: int) -> None:
        assert parse_int_literal(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "0b102", "1.5"])
    def test_parse_int_literal_rejects(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_int_literal(text)

    def test_parse_int_list(self) -> None:
        assert parse_int_list("1, 0b10 0x3") == [1, 2, 3]
        assert parse_int_list("") == []

    def test_predicates(self) -> None:
        assert is_int_literal("0x10")
        assert not is_int_literal("x")
        assert is_int_list("1 2 3")
        assert not is_int_list("1 two")
