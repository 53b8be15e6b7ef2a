"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real I/O; feed helpers in-memory iterables and generators.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
