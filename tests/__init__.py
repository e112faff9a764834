"""MIXIN test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- e2e/          : The ``mixin`` CLI driven through Click's CliRunner.
- fixtures/     : Sample contracts shared by both (no tests here).

General guidance
- Contracts used by CLI tests live in ``fixtures/contracts.py`` so they can be
  referenced as ``tests.fixtures.contracts:Name``.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
