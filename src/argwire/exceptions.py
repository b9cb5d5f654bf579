from __future__ import annotations

from typing import Any


class ArgwireError(Exception):
    """Represent a base class for all argwire-specific failures.

    Catch this type when you want to handle any argwire error path without
    matching each concrete exception class individually.
    """


class AbsentValueCoercedError(ArgwireError):
    """Signal that an absent argument was about to be treated as present.

    Raised by checked extraction paths such as ``require_present`` and
    ``BaseInvocationContext.require_argument`` when no operation argument
    resolver produced a value for the requested type.

    ``UnsoundResolver.resolve_argument_assuming_present`` never raises this
    error: it performs the same coercion without checking.

    Typical fixes include registering an ``OperationArgumentResolver`` for the
    requested type, or switching to ``resolve_argument_or_absent`` and handling
    ``None`` explicitly.
    """

    def __init__(self, argument_type: Any) -> None:
        self.argument_type = argument_type
        super().__init__(
            f"No value could be resolved for argument type {_describe(argument_type)}",
        )


class NullDereferenceError(ArgwireError, AttributeError):
    """Signal that a member of an absent value was read.

    Raised by ``length_of`` and other dereference helpers when the value they
    receive is ``None``. This is the deferred failure of an unchecked coercion:
    the value was typed as present but was absent at runtime.

    Subclasses ``AttributeError`` so callers already expecting Python's own
    ``None.<member>`` failure keep matching it.
    """

    def __init__(self, member: str) -> None:
        self.member = member
        super().__init__(f"Cannot read {member!r} of an absent value (None)")


def _describe(argument_type: Any) -> str:
    qualname = getattr(argument_type, "__qualname__", None)
    if isinstance(qualname, str):
        return qualname
    return repr(argument_type)
