"""The ``mixin`` command-line interface."""
