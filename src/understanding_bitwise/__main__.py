"""Allow ``python -m understanding_bitwise`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m understanding_bitwise`` behaves identically to the
``understanding-bitwise`` console script.
"""

from __future__ import annotations

from understanding_bitwise.cli.app import cli

if __name__ == "__main__":
    cli()
