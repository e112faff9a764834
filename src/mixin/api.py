"""Inverted dispatch over a contract's instance surface.

Every instance-surface member is re-expressed as a free function taking the
receiver as its first argument, so contract behaviour can be invoked on any
object that carries the contract's privileged state, including objects that
never had the surface projected onto them.

Dispatch rules:

* methods: ``api.name(receiver, *args, **kwargs)`` calls the method with
  ``receiver`` bound as ``self``;
* accessors (data descriptors): ``api.name(receiver)`` runs the get form,
  ``api.name(receiver, value)`` runs the set form and returns ``None``;
* other members are read-only: ``api.name(receiver)`` returns the member as
  seen through ``receiver``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from . import _realm
from .config import get_accessor_policy
from .descriptors import is_ambiguous_accessor, member_kind
from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

Dispatcher = Callable[..., Any]


def _label(dispatch: Dispatcher, name: str, descriptor: object) -> Dispatcher:
    dispatch.__name__ = name
    dispatch.__qualname__ = f"api.{name}"
    dispatch.__doc__ = getattr(descriptor, "__doc__", None)
    return dispatch


def _method_dispatcher(name: str, descriptor: Any) -> Dispatcher:
    def dispatch(receiver: object, /, *args: Any, **kwargs: Any) -> Any:
        bound = descriptor.__get__(receiver, _realm.type_of(receiver))
        return bound(*args, **kwargs)

    return _label(dispatch, name, descriptor)


def _accessor_dispatcher(name: str, descriptor: Any) -> Dispatcher:
    def dispatch(receiver: object, /, *args: Any) -> Any:
        if not args:
            return descriptor.__get__(receiver, _realm.type_of(receiver))
        if len(args) == 1:
            descriptor.__set__(receiver, args[0])
            return None
        raise InvalidArgumentError(
            f"api.{name} accessor takes a receiver and at most one value, "
            f"got {len(args)} values",
            args,
        )

    return _label(dispatch, name, descriptor)


def _getter_dispatcher(name: str, descriptor: Any) -> Dispatcher:
    binds = hasattr(_realm.type_of(descriptor), "__get__")

    def dispatch(receiver: object, /, *args: Any) -> Any:
        if args:
            raise InvalidArgumentError(
                f"api.{name} is read-only and takes only a receiver", args
            )
        if binds:
            return descriptor.__get__(receiver, _realm.type_of(receiver))
        return descriptor

    return _label(dispatch, name, descriptor)


def build_dispatch_table(
    descriptors: Mapping[str, Any], *, owner: str = "contract"
) -> Mapping[str, Dispatcher]:
    """Build the receiver-first function for every instance-surface member.

    Args:
        descriptors: The instance-surface descriptors, keyed by member name.
        owner: Name of the contract, used in log and error messages.

    Returns:
        A read-only mapping of member name to dispatcher, in surface order.

    Raises:
        InvalidArgumentError: If an accessor is ambiguous under arity dispatch
            and the configured policy is ``"error"``.
        InvalidAccessorPolicyError: If the configured policy is unknown.
    """
    policy = get_accessor_policy()
    table: dict[str, Dispatcher] = {}
    for name, descriptor in descriptors.items():
        kind = member_kind(descriptor)
        if kind == "accessor":
            if is_ambiguous_accessor(descriptor):
                message = (
                    f"{owner}.{name} has a setter with an optional value; "
                    f"api.{name}(receiver) always runs the getter"
                )
                if policy == "error":
                    raise InvalidArgumentError(message, descriptor)
                if policy == "warn":
                    logger.warning(message)
            table[name] = _accessor_dispatcher(name, descriptor)
        elif kind == "method":
            table[name] = _method_dispatcher(name, descriptor)
        else:
            table[name] = _getter_dispatcher(name, descriptor)
    logger.debug("Built api for %s with %d entries", owner, len(table))
    return MappingProxyType(table)


class SurfaceApi:
    """Read-only view of a contract's inverted dispatch table.

    Every non-dunder attribute name resolves to an entry, so contract members
    named ``get``, ``keys`` or ``_owner`` are reached like any other. The view
    has no public attributes of its own; it supports ``api[name]``, ``in``,
    ``len`` and iteration, and dunder members need subscription
    (``api["__len__"]``). `Mixin.api_table` holds the same entries as a
    plain read-only mapping.
    """

    __slots__ = ("_owner", "_entries")

    def __init__(self, owner: str, entries: Mapping[str, Dispatcher]) -> None:
        _realm.define_on_object(self, "_owner", owner)
        _realm.define_on_object(self, "_entries", entries)

    def __getattribute__(self, name: str) -> Any:
        if name.startswith("__") and name.endswith("__"):
            return object.__getattribute__(self, name)
        entries = object.__getattribute__(self, "_entries")
        try:
            return entries[name]
        except KeyError:
            raise AttributeError(
                f"{object.__getattribute__(self, '_owner')} api has no member {name!r}"
            ) from None

    def __getitem__(self, name: str) -> Dispatcher:
        return object.__getattribute__(self, "_entries")[name]

    def __contains__(self, name: object) -> bool:
        return name in object.__getattribute__(self, "_entries")

    def __iter__(self) -> Iterator[str]:
        return iter(object.__getattribute__(self, "_entries"))

    def __len__(self) -> int:
        return len(object.__getattribute__(self, "_entries"))

    def __setattr__(self, name: str, value: object) -> None:
        owner = object.__getattribute__(self, "_owner")
        raise AttributeError(f"{owner} api is read-only")

    def __delattr__(self, name: str) -> None:
        owner = object.__getattribute__(self, "_owner")
        raise AttributeError(f"{owner} api is read-only")

    def __dir__(self) -> list[str]:
        return list(object.__getattribute__(self, "_entries"))

    def __repr__(self) -> str:
        owner = object.__getattribute__(self, "_owner")
        entries = object.__getattribute__(self, "_entries")
        return f"<{owner} api: {', '.join(entries)}>"
