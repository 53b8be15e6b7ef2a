"""The ``sequtils`` command-line interface."""
