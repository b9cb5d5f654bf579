from argwire.exceptions import AbsentValueCoercedError, ArgwireError, NullDereferenceError
from argwire.invocation_context import (
    BaseInvocationContext,
    InvocationContext,
    InvocationContextProtocol,
    OperationArgumentResolver,
    OperationArgumentResolverProtocol,
)
from argwire.presence import length_of, require_present
from argwire.security import NO_SECURITY_CONTEXT, SecurityContext
from argwire.unsound import UnsoundResolver

__all__ = [
    "NO_SECURITY_CONTEXT",
    "AbsentValueCoercedError",
    "ArgwireError",
    "BaseInvocationContext",
    "InvocationContext",
    "InvocationContextProtocol",
    "NullDereferenceError",
    "OperationArgumentResolver",
    "OperationArgumentResolverProtocol",
    "SecurityContext",
    "UnsoundResolver",
    "length_of",
    "require_present",
]
