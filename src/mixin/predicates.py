"""Capability checks evaluated at the API boundary.

The core operates across otherwise unrelated nominal types, so shape is
checked explicitly at run time instead of being inferred from annotations.
"""

from . import _realm


def is_constructor(value: object) -> bool:
    """Return True if ``value`` can be the target of an object-construction call.

    Only classes qualify; functions, lambdas and other callables do not.
    """
    return _realm.is_instance(value, type)


def is_object(value: object) -> bool:
    """Return True if ``value`` is an object rather than a primitive.

    Primitives are ``None``, booleans, numbers, strings and bytes (including
    their subclasses). Everything else, classes and modules included, is an
    object.
    """
    return not _realm.is_instance(value, _realm.PRIMITIVE_TYPES)


def strictly_derives_from(candidate: type, base: type) -> bool:
    """Return True if ``base`` appears in ``candidate``'s MRO other than as itself."""
    return base in _realm.mro_of(candidate)[1:]
