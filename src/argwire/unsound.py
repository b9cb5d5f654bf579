"""Invocation context whose typed resolution trusts the caller without checking.

``UnsoundResolver`` is a negative example. Its ``resolve_argument_or_absent``
always returns ``None`` and ``resolve_argument_assuming_present`` casts that
``None`` to the requested type with ``typing.cast``. Type checkers accept the
cast, so the mistake only surfaces when the result is first dereferenced.
Use ``BaseInvocationContext.require_argument`` for the checked variant.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar, cast, overload

from argwire.invocation_context import BaseInvocationContext

T = TypeVar("T")

logger = logging.getLogger(__name__)


class UnsoundResolver(BaseInvocationContext):
    """Resolve every argument as absent, then coerce it to the requested type.

    The resolver is stateless: it has no instance attributes and every call is
    independent of previous ones. All other accessors keep the placeholder
    values of ``BaseInvocationContext``.
    """

    __slots__ = ()

    @overload
    def resolve_argument_or_absent(self, argument_type: type[T]) -> T | None: ...

    @overload
    def resolve_argument_or_absent(self, argument_type: Any) -> Any: ...

    def resolve_argument_or_absent(self, argument_type: Any) -> Any:
        """Return ``None`` for every argument type.

        Operation argument resolvers are not consulted.

        Args:
            argument_type: Argument type requested by the operation. Any value is accepted.

        """
        return None

    def resolve_argument_assuming_present(self, argument_type: type[T]) -> T:
        """Resolve an argument and cast the result to ``argument_type`` without checking it.

        The returned value is typed as ``T`` but is ``None`` at runtime. No error is
        raised here; the first dereference of the result fails instead.

        Args:
            argument_type: Argument type requested by the operation.

        """
        value = self.resolve_argument_or_absent(argument_type)
        logger.debug("Casting unchecked %r to %r", value, argument_type)
        return cast("T", value)


__all__ = ["UnsoundResolver"]
