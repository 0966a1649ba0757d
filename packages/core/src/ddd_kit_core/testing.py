"""Assertion helpers for tests of validated entities."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .primitives.exceptions import EntityValidationError

if TYPE_CHECKING:
    from collections.abc import Callable


def assert_contains_error_messages(
    func: Callable[[], Any], expected: dict[str, list[str]]
) -> dict[str, list[str]]:
    """Call *func* and assert it raises ``EntityValidationError`` whose
    errors contain every message in *expected*, field by field.

    Extra fields or messages in the raised errors are allowed. Returns the
    raised errors for further assertions.
    """
    try:
        func()
    except EntityValidationError as exc:
        errors = exc.errors
    else:
        raise AssertionError("Expected EntityValidationError to be raised")

    for field_name, messages in expected.items():
        actual = errors.get(field_name, [])
        missing = [message for message in messages if message not in actual]
        if missing:
            raise AssertionError(
                f"Field {field_name!r} is missing messages {missing!r}; got {errors!r}"
            )
    return errors
