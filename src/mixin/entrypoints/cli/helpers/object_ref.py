"""Resolution of ``module:attribute`` references given on the command line."""

import importlib
from typing import Any

import click


def load_object(ref: str) -> Any:
    """Import the object named by ``ref``.

    Args:
        ref: A reference of the form ``package.module:Name`` or
            ``package.module:Outer.Inner``.

    Returns:
        The referenced object.

    Raises:
        ValueError: If ``ref`` is not of the form MODULE:ATTRIBUTE.
        ImportError: If the module cannot be imported.
        AttributeError: If the attribute path does not resolve.
    """
    module_name, sep, attr_path = ref.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"Expected MODULE:ATTRIBUTE, got {ref!r}")
    obj: Any = importlib.import_module(module_name)
    for part in attr_path.split("."):
        obj = getattr(obj, part)
    return obj


class ObjectRef(click.ParamType):
    """Click parameter type resolving ``module:attribute`` to the object itself."""

    name = "MODULE:ATTR"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> Any:
        if not isinstance(value, str):
            return value
        try:
            return load_object(value)
        except (ValueError, ImportError, AttributeError) as e:
            self.fail(f"Cannot resolve {value!r}: {e}", param, ctx)


OBJECT_REF = ObjectRef()
