"""Condition-to-error translation for preconditions and invariants.

Builders call :func:`check_state` when accumulated configuration is
inconsistent; algorithms call :func:`check_argument` on their inputs;
:func:`validate` takes any error constructor for custom error kinds::

    self.size = check_argument(size, size > 0, "size must be positive, got {}", size)

The message is only formatted when the condition fails.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from propguard.domain.messages import format_message

_T = TypeVar("_T")

ErrorFactory = Callable[[str | None], BaseException]


class StateViolationError(RuntimeError):
    """An object's internal invariant does not hold."""


class ArgumentViolationError(ValueError):
    """A caller-supplied input failed a precondition."""


def validate(
    condition: bool,
    error_factory: ErrorFactory,
    template: str | None,
    *params: Any,
) -> None:
    """Raise ``error_factory(message)`` unless *condition* holds.

    Args:
        condition: Result of the check.
        error_factory: Builds the error from the formatted message. An
            exception class works directly. Receives None when
            *template* is None.
        template: Message with ``{}`` placeholders.
        params: Values for the placeholders. Without params the template
            is used verbatim.
    """
    if condition:
        return
    raise error_factory(format_message(template, *params))


def check_state(condition: bool, template: str | None = None, *params: Any) -> None:
    """Raise :class:`StateViolationError` unless *condition* holds."""
    validate(condition, StateViolationError, template, *params)


def check_argument(value: _T, condition: bool, template: str | None = None, *params: Any) -> _T:
    """Raise :class:`ArgumentViolationError` unless *condition* holds.

    Returns *value* unchanged so the check can be used inline.
    """
    validate(condition, ArgumentViolationError, template, *params)
    return value


def check_not_none(
    value: _T | None,
    template: str | None = "Value must not be None",
    *params: Any,
) -> _T:
    """Shorthand for ``check_argument(value, value is not None, ...)``."""
    return check_argument(value, value is not None, template, *params)  # type: ignore[return-value]
