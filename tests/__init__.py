"""SEQUTILS test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- functional/   : User-visible CLI flows, checked through stdout/stderr and exit codes.
- e2e/          : Full CLI runs including logging and flight-recorder setup.
- helpers/      : Shared utilities (no tests here).

General guidance
- Keep unit fast and deterministic; use the iterable doubles in helpers/ to
  observe laziness instead of mocking.
- Functional asserts user-observable results, not internals.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
