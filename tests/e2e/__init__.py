"""End-to-end tests.

Purpose
- Run the installed ``sequtils`` command group the way a user would, including
  logging configuration, verbosity flags and the flight recorder.
"""
