"""Errors raised by the mixin core."""


class MixinError(Exception):
    """Base class for all mixin errors."""


class InvalidArgumentError(MixinError, TypeError):
    """Raised when a caller-supplied value violates a stated precondition."""

    def __init__(self, message: str, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class InvalidOperationError(MixinError, TypeError):
    """Raised when a type is used in a way that is disallowed regardless of arguments."""


class PrivateStateError(MixinError, AttributeError):
    """Raised when privileged state is missing from, or already present on, an object."""

    def __init__(self, field_name: str, message: str) -> None:
        super().__init__(message)
        self.field_name = field_name
