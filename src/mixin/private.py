"""Privileged per-instance state for contracts.

A `PrivateField` is an identity-keyed table of per-object values. Contract
authors create fields at module or closure scope and capture them inside the
contract's methods; since the field itself is never part of the contract's
surface, only the contract's own logic can read or write the state.

Example:
    ```py
    _answer = PrivateField("answer", default=42)

    class Answer(Mixin.Super):
        def __init__(self):
            _answer.init(self)

        def the_answer(self):
            value = _answer.get(self)
            _answer.set(self, value + 1)
            return value
    ```
"""

from __future__ import annotations

import weakref
from collections.abc import Callable
from typing import Any, Generic, TypeVar, cast

from .errors import PrivateStateError

T = TypeVar("T")


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class PrivateField(Generic[T]):
    """Per-object storage slot reachable only through the field object itself.

    Entries are keyed by object identity, so carriers need not be hashable.
    Weakly referenceable carriers have their entry evicted when they are
    collected. Carriers that cannot be weakly referenced are pinned by the
    field for as long as the field lives.

    Args:
        name: Name used in error messages.
        default: Value stored by `init` when none is given.
        default_factory: Zero-argument callable producing the value stored by
            `init` when none is given. Mutually exclusive with ``default``.

    Raises:
        ValueError: If both ``default`` and ``default_factory`` are given.
    """

    __slots__ = ("name", "_default", "_default_factory", "_values", "_anchors")

    def __init__(
        self,
        name: str = "field",
        *,
        default: T = MISSING,
        default_factory: Callable[[], T] | None = None,
    ) -> None:
        if default is not MISSING and default_factory is not None:
            raise ValueError("cannot specify both default and default_factory")
        self.name = name
        self._default = default
        self._default_factory = default_factory
        self._values: dict[int, T] = {}
        self._anchors: dict[int, object] = {}

    def __repr__(self) -> str:
        return f"<PrivateField {self.name!r}>"

    # --- Plumbing ---

    def _evict(self, key: int) -> None:
        self._values.pop(key, None)
        self._anchors.pop(key, None)

    def _anchor(self, instance: object) -> object:
        key = id(instance)
        try:
            return weakref.ref(instance, lambda _ref: self._evict(key))
        except TypeError:
            return instance

    def _anchored(self, instance: object) -> bool:
        anchor = self._anchors.get(id(instance), MISSING)
        if isinstance(anchor, weakref.ref):
            return anchor() is instance
        return anchor is instance

    # --- Public API ---

    def has(self, instance: object) -> bool:
        """Return True if ``instance`` carries this field."""
        return self._anchored(instance)

    def init(self, instance: object, value: T = MISSING) -> T:
        """Attach this field to ``instance``.

        Args:
            instance: The carrier receiving the state.
            value: Initial value. Falls back to ``default``, then to
                ``default_factory()``, then to ``None``.

        Returns:
            The stored value.

        Raises:
            PrivateStateError: If ``instance`` already carries this field.
        """
        if self._anchored(instance):
            raise PrivateStateError(
                self.name,
                f"Cannot initialize private field {self.name!r} twice on the same object",
            )
        if value is MISSING:
            if self._default is not MISSING:
                value = self._default
            elif self._default_factory is not None:
                value = self._default_factory()
            else:
                value = cast(T, None)
        key = id(instance)
        self._anchors[key] = self._anchor(instance)
        self._values[key] = value
        return value

    def get(self, instance: object) -> T:
        """Return the value stored for ``instance``.

        Raises:
            PrivateStateError: If ``instance`` does not carry this field.
        """
        if not self._anchored(instance):
            raise PrivateStateError(
                self.name,
                f"Cannot read private field {self.name!r} from an object "
                "that was not initialized with it",
            )
        return self._values[id(instance)]

    def set(self, instance: object, value: T) -> None:
        """Replace the value stored for ``instance``.

        Raises:
            PrivateStateError: If ``instance`` does not carry this field.
        """
        if not self._anchored(instance):
            raise PrivateStateError(
                self.name,
                f"Cannot write private field {self.name!r} to an object "
                "that was not initialized with it",
            )
        self._values[id(instance)] = value
