"""Configuration utilities for MIXIN.

This module centralizes the small set of environment-driven settings the
library and its CLI read.
"""

import os
from typing import Literal, TypeAlias, cast

AccessorPolicy: TypeAlias = Literal["warn", "error", "ignore"]

AMBIGUOUS_ACCESSORS_ENV = "MIXIN_AMBIGUOUS_ACCESSORS"  # pragma: no mutate
LOGGER_LEVELS_ENV = "MIXIN_LOGGER_LEVELS"  # pragma: no mutate

ACCESSOR_POLICIES: tuple[AccessorPolicy, ...] = ("warn", "error", "ignore")
DEFAULT_ACCESSOR_POLICY: AccessorPolicy = "warn"


class InvalidAccessorPolicyError(ValueError):
    """Raised when MIXIN_AMBIGUOUS_ACCESSORS holds an unknown policy."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"{AMBIGUOUS_ACCESSORS_ENV}={value!r} is not one of "
            f"{', '.join(ACCESSOR_POLICIES)}"
        )
        self.value = value


def get_accessor_policy() -> AccessorPolicy:
    """Get the policy for accessors that are ambiguous under arity dispatch.

    Returns:
        The value of `MIXIN_AMBIGUOUS_ACCESSORS` (case-insensitive), or
        ``"warn"`` when it is unset or empty.

    Raises:
        InvalidAccessorPolicyError: If the variable holds an unknown policy.
    """
    if not (value := os.environ.get(AMBIGUOUS_ACCESSORS_ENV, "").strip()):
        return DEFAULT_ACCESSOR_POLICY
    if (policy := value.lower()) not in ACCESSOR_POLICIES:
        raise InvalidAccessorPolicyError(value)
    return cast(AccessorPolicy, policy)
