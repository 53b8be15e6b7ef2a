"""Entrypoints (inbound adapters) for SEQUTILS.

Expose the sequence helpers to the outside world. Parse and validate
inputs, call into `sequtils.sequences`, and present results.
"""
