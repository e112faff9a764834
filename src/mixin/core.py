"""The `Mixin` contract wrapper and the `Mixin.Super` base.

A contract is authored as a class deriving from `Mixin.Super` (`ContractBase`)
and wrapped in a `Mixin`:

```py
_greeting = PrivateField("greeting")


class Greeter(Mixin.Super):
    def __init__(self, greeting):
        _greeting.init(self, greeting)

    def greet(self, name):
        return f"{_greeting.get(self)}, {name}"


greeter = Mixin(Greeter)
```

Construction of a contract class is a two-phase protocol run by
`ContractMeta`:

1. **forward**: `ContractBase.__new__` validates the externally supplied
   instance and returns it as-is, in place of a freshly allocated object;
2. **initialize**: the author's ``__init__`` runs with ``self`` bound to that
   instance, whatever its class.

`Mixin.super` triggers exactly this protocol, which is how a pre-existing
object receives privileged state belonging to a contract it never declared.

Most of the errors raised here flag the API not being used as intended. The
contract is not obvious, so misuse fails loudly with a message naming the
violated precondition. Some misuse is opaque to us: we can confirm that
`Mixin.Super` is a strict ancestor of the author class, not that its
initializer behaves.
"""

from __future__ import annotations

import functools
import logging
import weakref
from collections.abc import Callable, Mapping
from typing import Any, ClassVar, TypeVar

from . import _realm
from .api import SurfaceApi, build_dispatch_table
from .descriptors import (
    define_descriptors,
    get_instance_descriptors,
    get_static_descriptors,
)
from .errors import InvalidArgumentError, InvalidOperationError
from .predicates import is_constructor, is_object, strictly_derives_from

logger = logging.getLogger(__name__)

T = TypeVar("T")
C = TypeVar("C", bound=type)

_SURFACE_CLASSES: weakref.WeakSet[type] = weakref.WeakSet()


class ContractMeta(type):
    """Metaclass running the forward-then-initialize construction protocol."""

    def __call__(cls, instance: object = None, /, *args: Any, **kwargs: Any) -> Any:
        target = cls.__new__(cls, instance)
        cls.__init__(target, *args, **kwargs)
        return target


class ContractBase(metaclass=ContractMeta):
    """Base every contract class must strictly derive from.

    Constructing a subclass with an instance returns that instance, after the
    subclass's ``__init__`` has run against it. Author initializers receive the
    carrier as ``self`` and must not chain to ``super().__init__()``: the
    carrier is not an instance of the contract class.
    """

    def __new__(cls, instance: object = None):
        if cls is ContractBase:
            raise InvalidOperationError("Mixin.Super cannot be constructed directly")
        if not is_object(instance):
            raise InvalidArgumentError(
                "Mixin.Super instance argument must be an object", instance
            )
        return instance

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """No-op; contracts without an initializer ignore extra arguments."""


def _surface_class(instance: object) -> type:
    """Return the per-instance class of ``instance``, creating it on first use."""
    current = _realm.type_of(instance)
    if current in _SURFACE_CLASSES:
        return current
    try:
        surface = _realm.type_of(current)(
            current.__name__,
            (current,),
            {
                "__module__": current.__module__,
                "__qualname__": current.__qualname__,
                "__slots__": (),
            },
        )
        _realm.define_on_object(instance, "__class__", surface)
    except TypeError as e:
        raise InvalidArgumentError(
            "Mixin extends target must be an object that can carry a surface",
            instance,
        ) from e
    _SURFACE_CLASSES.add(surface)
    logger.debug("Created surface class for %s instance", current.__qualname__)
    return surface


class Mixin:
    """A contract definition wrapping a `Mixin.Super` subclass.

    Args:
        constructor: The contract class. Must strictly derive from
            `Mixin.Super`.

    Raises:
        InvalidArgumentError: If ``constructor`` is not a class or does not
            strictly derive from `Mixin.Super`.
    """

    Super: ClassVar[type[ContractBase]] = ContractBase

    def __init__(self, constructor: type) -> None:
        if not is_constructor(constructor):
            raise InvalidArgumentError(
                "Argument to Mixin must be a constructor", constructor
            )
        if not strictly_derives_from(constructor, ContractBase):
            raise InvalidArgumentError(
                "Argument to Mixin must inherit from Mixin.Super", constructor
            )

        self._constructor = constructor
        self._static_descriptors = get_static_descriptors(constructor)
        self._instance_descriptors = get_instance_descriptors(constructor)
        logger.debug(
            "Wrapped contract %s (static=%d, instance=%d)",
            constructor.__qualname__,
            len(self._static_descriptors),
            len(self._instance_descriptors),
        )

    def __repr__(self) -> str:
        return f"<Mixin {self._constructor.__qualname__}>"

    @property
    def constructor(self) -> type:
        """The wrapped contract class."""
        return self._constructor

    @property
    def static_surface(self) -> Mapping[str, Any]:
        """Static-surface descriptors (static and class methods), read-only."""
        return self._static_descriptors

    @property
    def instance_surface(self) -> Mapping[str, Any]:
        """Instance-surface descriptors, read-only."""
        return self._instance_descriptors

    # --- Surface projection ---

    def extend(self, target: C) -> C:
        """Copy the static and instance surface onto a class.

        This is a flat copy, not an inheritance link: no base is added to
        ``target``. Members already present on ``target`` are overwritten.

        Args:
            target: The class to augment.

        Returns:
            ``target`` itself.

        Raises:
            InvalidArgumentError: If ``target`` is not a class.
        """
        if not is_constructor(target):
            raise InvalidArgumentError(
                "Mixin extends target must be a constructor", target
            )

        define_descriptors(target, self._static_descriptors)
        define_descriptors(target, self._instance_descriptors)
        logger.debug(
            "Extended %s with %s", target.__qualname__, self._constructor.__qualname__
        )
        return target

    def extend_object(self, target: T) -> T:
        """Copy the instance surface onto a single object.

        A class passed here is treated as a prototype: the descriptors land in
        its own namespace, without the static surface. Any other object gets a
        per-instance subclass of its current class to hold the descriptors; it
        keeps its identity and remains an instance of its original class.

        Args:
            target: The object to augment.

        Returns:
            ``target`` itself.

        Raises:
            InvalidArgumentError: If ``target`` is a primitive, or an object
                whose class cannot be subclassed or swapped. This covers
                instances of built-in types such as `object`, `dict` and
                `types.SimpleNamespace`, classes whose ``__init_subclass__``
                requires arguments and enums with members. Use a plain
                user-defined class as the record instead.
        """
        if not is_object(target):
            raise InvalidArgumentError("Mixin extends target must be an object", target)

        holder = target if is_constructor(target) else _surface_class(target)
        define_descriptors(holder, self._instance_descriptors)
        logger.debug(
            "Extended %s object with %s",
            _realm.type_of(target).__qualname__,
            self._constructor.__qualname__,
        )
        return target

    # --- Privileged initialization ---

    def super(self, instance: T, *args: Any, **kwargs: Any) -> T:
        """Run the contract's initializer against an existing object.

        The contract class is constructed with ``instance`` as its first
        argument; its forwarding step makes the initializer, and any private
        state it allocates, attach to ``instance``.

        Args:
            instance: The object receiving the contract's privileged state.
            *args: Extra positional arguments for the contract's ``__init__``.
            **kwargs: Extra keyword arguments for the contract's ``__init__``.

        Returns:
            ``instance`` itself.

        Raises:
            InvalidArgumentError: If ``instance`` is a primitive.
        """
        if not is_object(instance):
            raise InvalidArgumentError(
                "Mixin super first argument must be an object", instance
            )

        self._constructor(instance, *args, **kwargs)
        logger.debug(
            "Initialized %s state on %s",
            self._constructor.__qualname__,
            _realm.type_of(instance).__qualname__,
        )
        return instance

    # --- Inverted dispatch ---

    @functools.cached_property
    def api_table(self) -> Mapping[str, Callable[..., Any]]:
        """Receiver-first functions keyed by instance-surface name, read-only."""
        return build_dispatch_table(
            self._instance_descriptors, owner=self._constructor.__qualname__
        )

    @functools.cached_property
    def api(self) -> SurfaceApi:
        """Attribute access to `api_table`: ``api.member(receiver, *args)``."""
        return SurfaceApi(self._constructor.__qualname__, self.api_table)
