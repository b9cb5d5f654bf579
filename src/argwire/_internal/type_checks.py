from __future__ import annotations

import types
from typing import Any, TypeGuard


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a runtime class safe for class-only operations.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def is_assignable_request(requested: Any, provided: Any) -> bool:
    """Return true when a value bound to ``provided`` satisfies a request for ``requested``.

    Runtime classes match along the MRO of ``provided``; virtual subclasses
    registered through ``abc`` and structural protocol matches are ignored.
    Non-class keys such as generic aliases or ``Annotated`` tokens match by
    equality only.

    Args:
        requested: Argument type asked for by the caller.
        provided: Argument type a resolver is bound to.

    """
    if requested == provided:
        return True
    if not (is_runtime_class(requested) and is_runtime_class(provided)):
        return False
    return requested in provided.__mro__


__all__ = ["is_assignable_request", "is_runtime_class"]
