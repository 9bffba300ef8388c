"""Shared pytest configuration for the understanding-bitwise test suite.

Guidelines
----------
* Core tests must be pure: no I/O except in-memory sinks.
* questionary and Rich are mocked at the CLI boundary.
* "For every word" properties use ``hypothesis`` strategies over the
  full word range, pinned with ``hypothesis.example`` at the edges.
"""
