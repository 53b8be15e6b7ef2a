"""Functional tests.

Purpose
- Validate user-visible behavior of the ``sequtils`` CLI.

Guidelines
- Treat the CLI as a black box; avoid asserting internal state.
- One flow/concern per test; check messages, outputs and exit codes.
"""
