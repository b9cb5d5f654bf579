from __future__ import annotations

from collections.abc import Sized
from typing import Any, TypeVar

from argwire.exceptions import AbsentValueCoercedError, NullDereferenceError

T = TypeVar("T")


def require_present(value: T | None, argument_type: Any) -> T:
    """Return ``value`` after checking that it is not ``None``.

    This is the checked counterpart of ``typing.cast(T, value)``.

    Args:
        value: Resolved value that may be absent.
        argument_type: Argument type the value was resolved for. Used in the error.

    Raises:
        AbsentValueCoercedError: ``value`` is ``None``.

    """
    if value is None:
        raise AbsentValueCoercedError(argument_type)
    return value


def length_of(value: Sized) -> int:
    """Return the length of ``value``.

    Args:
        value: Sized value. It is typed as present, but may be ``None`` at runtime
            when it came from an unchecked coercion.

    Raises:
        NullDereferenceError: ``value`` is ``None``.

    """
    try:
        return len(value)
    except TypeError as error:
        if value is None:
            raise NullDereferenceError("length") from error
        raise
