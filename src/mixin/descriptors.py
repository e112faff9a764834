"""Descriptor extraction and projection for contract surfaces.

A contract's surface is read straight from its class namespace and split in
two ordered, read-only mappings:

* the **static surface**: members that are ``staticmethod`` or ``classmethod``
  objects;
* the **instance surface**: every other member (functions, properties and
  other descriptors, plain class-level values).

Members every class owns for its own identity, and the constructor hooks that
tie a namespace back to its class, are stripped from both so that projecting a
surface can never shadow a host's own identity.
"""

from __future__ import annotations

import inspect
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, Literal, TypeAlias

from . import _realm

MemberKind: TypeAlias = Literal[
    "method", "accessor", "staticmethod", "classmethod", "descriptor", "value"
]

IDENTITY_MEMBERS = frozenset(
    {
        "__module__",
        "__qualname__",
        "__doc__",
        "__dict__",
        "__weakref__",
        "__slots__",
        "__annotations__",
        "__annotate__",
        "__annotate_func__",
        "__annotations_cache__",
        "__firstlineno__",
        "__static_attributes__",
        "__orig_bases__",
        "__parameters__",
        "__type_params__",
        "__classcell__",
        "__abstractmethods__",
        "_abc_impl",
    }
)
"""Implicit members describing the class itself rather than its behaviour."""

CONSTRUCTOR_MEMBERS = frozenset({"__init__", "__new__", "__init_subclass__"})
"""Members that belong to the class's own construction chain."""


def _surface_members(constructor: type) -> Iterator[tuple[str, Any]]:
    for name, value in _realm.namespace_of(constructor).items():
        if name in IDENTITY_MEMBERS or name in CONSTRUCTOR_MEMBERS:
            continue
        # Python sets __hash__ = None on its own when a class defines __eq__.
        if name == "__hash__" and value is None:
            continue
        yield name, value


def is_static_member(value: object) -> bool:
    """Return True if ``value`` belongs on the static surface."""
    return _realm.is_instance(value, (staticmethod, classmethod))


def get_static_descriptors(constructor: type) -> Mapping[str, Any]:
    """Return the static-surface descriptors of ``constructor``, in definition order."""
    return MappingProxyType(
        {
            name: value
            for name, value in _surface_members(constructor)
            if is_static_member(value)
        }
    )


def get_instance_descriptors(constructor: type) -> Mapping[str, Any]:
    """Return the instance-surface descriptors of ``constructor``, in definition order."""
    return MappingProxyType(
        {
            name: value
            for name, value in _surface_members(constructor)
            if not is_static_member(value)
        }
    )


def define_descriptors(target: type, descriptors: Mapping[str, Any]) -> None:
    """Define each descriptor directly in ``target``'s namespace.

    Uses ``type.__setattr__`` so a metaclass-level ``__setattr__`` on the
    target cannot intercept or veto the definition. Existing members of the
    same name are replaced.

    Args:
        target: The class receiving the descriptors.
        descriptors: Mapping of member name to descriptor object.

    Raises:
        TypeError: If ``target`` is a built-in type whose namespace is immutable.
    """
    for name, descriptor in descriptors.items():
        _realm.define_on_type(target, name, descriptor)


def member_kind(descriptor: object) -> MemberKind:
    """Classify a surface member by how it behaves when reached through an instance.

    Returns:
        ``"staticmethod"`` or ``"classmethod"`` for static members, ``"accessor"``
        for data descriptors (``property`` and friends), ``"method"`` for
        callable non-data descriptors such as functions, ``"descriptor"`` for
        other non-data descriptors and ``"value"`` for plain class-level values.
    """
    if _realm.is_instance(descriptor, staticmethod):
        return "staticmethod"
    if _realm.is_instance(descriptor, classmethod):
        return "classmethod"
    if inspect.isdatadescriptor(descriptor):
        return "accessor"
    if hasattr(_realm.type_of(descriptor), "__get__"):
        return "method" if callable(descriptor) else "descriptor"
    return "value"


def is_ambiguous_accessor(descriptor: object) -> bool:
    """Return True if an accessor's set form can also be called with no value.

    Arity-based dispatch picks the get form for zero extra arguments and the
    set form for one. A setter whose value parameter is optional or variadic
    accepts both shapes, so the choice is ambiguous.
    """
    if not _realm.is_instance(descriptor, property) or descriptor.fset is None:
        return False
    try:
        parameters = list(inspect.signature(descriptor.fset).parameters.values())
    except (TypeError, ValueError):
        return False
    for parameter in parameters[1:]:
        if parameter.kind is parameter.VAR_POSITIONAL:
            return True
        if parameter.kind in (
            parameter.POSITIONAL_ONLY,
            parameter.POSITIONAL_OR_KEYWORD,
        ) and parameter.default is not parameter.empty:
            return True
    return False
