"""Entrypoints (inbound adapters) for MIXIN.

Expose the library to the outside world. Today that is the ``mixin`` developer
CLI, which validates and describes contract classes.
"""
