"""Global pytest fixtures for MIXIN."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from mixin import Mixin
from mixin.config import AMBIGUOUS_ACCESSORS_ENV
from tests.fixtures.contracts import AnswerContract, LabelContract

# pylint: disable=redefined-outer-name


@pytest.fixture
def answer_mixin() -> Mixin:
    """A Mixin wrapping the 42-seeded AnswerContract."""
    return Mixin(AnswerContract)


@pytest.fixture
def label_mixin() -> Mixin:
    """A Mixin wrapping LabelContract (method, accessor, static and class members)."""
    return Mixin(LabelContract)


@pytest.fixture
def accessor_policy(monkeypatch: pytest.MonkeyPatch) -> Callable[[str | None], None]:
    """Set or clear MIXIN_AMBIGUOUS_ACCESSORS for the duration of a test.

    Example:
        ```py
        def test_something(accessor_policy):
            accessor_policy("error")
        ```
    """

    def _set(value: str | None) -> None:
        if value is None:
            monkeypatch.delenv(AMBIGUOUS_ACCESSORS_ENV, raising=False)
        else:
            monkeypatch.setenv(AMBIGUOUS_ACCESSORS_ENV, value)

    _set(None)
    return _set
