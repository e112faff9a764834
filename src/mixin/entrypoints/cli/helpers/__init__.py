"""Helpers shared by the ``mixin`` CLI commands."""

from .log_level_parser import parse_log_level
from .messages import error, success, warn
from .object_ref import OBJECT_REF, ObjectRef, load_object

__all__ = [
    "OBJECT_REF",
    "ObjectRef",
    "error",
    "load_object",
    "parse_log_level",
    "success",
    "warn",
]
