from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Generic, Protocol, TypeVar, overload

from argwire._internal.type_checks import is_assignable_request
from argwire.presence import require_present
from argwire.security import NO_SECURITY_CONTEXT, SecurityContext

T = TypeVar("T")

logger = logging.getLogger(__name__)

_EMPTY_MAPPING: Mapping[str, object] = MappingProxyType({})


class OperationArgumentResolverProtocol(Protocol):
    """Protocol for a resolver that supplies one kind of operation argument."""

    def can_resolve(self, argument_type: Any) -> bool:
        """Return true when this resolver can supply ``argument_type``.

        Args:
            argument_type: Argument type requested by the operation.

        """

    @overload
    def resolve(self, argument_type: type[T]) -> T | None: ...

    @overload
    def resolve(self, argument_type: Any) -> Any: ...

    def resolve(self, argument_type: Any) -> Any:
        """Resolve ``argument_type`` or return ``None`` when no value is available.

        Args:
            argument_type: Argument type requested by the operation.

        """


class InvocationContextProtocol(Protocol):
    """Protocol for the context an operation is invoked with.

    Implementations expose the caller's security context, the named arguments
    of the invocation and the operation argument resolvers used to supply
    arguments by type.
    """

    @property
    def security_context(self) -> SecurityContext:
        """Return the security context of the caller."""

    @property
    def arguments(self) -> Mapping[str, object]:
        """Return the named invocation arguments."""

    @property
    def parameters(self) -> Mapping[str, object]:
        """Return the named operation parameters."""

    @property
    def operation_argument_resolvers(self) -> Sequence[OperationArgumentResolverProtocol]:
        """Return the resolvers consulted by ``resolve_argument_or_absent``, in order."""

    def can_resolve(self, argument_type: Any) -> bool:
        """Return true when some operation argument resolver can supply ``argument_type``.

        Args:
            argument_type: Argument type requested by the operation.

        """

    @overload
    def resolve_argument_or_absent(self, argument_type: type[T]) -> T | None: ...

    @overload
    def resolve_argument_or_absent(self, argument_type: Any) -> Any: ...

    def resolve_argument_or_absent(self, argument_type: Any) -> Any:
        """Resolve an argument by type, returning ``None`` when it is absent.

        Args:
            argument_type: Argument type requested by the operation.

        """


@dataclass(frozen=True, slots=True)
class OperationArgumentResolver(Generic[T]):
    """Supply values of one argument type from a zero-argument callable.

    A resolver bound to a class also serves requests for any of that class's
    bases, so a resolver for ``str`` answers a request for ``object``.

    Examples:
        .. code-block:: python

            resolver = OperationArgumentResolver.of(str, lambda: "admin")
            context = InvocationContext(resolver)
            context.require_argument(str)  # "admin"

    """

    argument_type: type[T]
    supplier: Callable[[], T | None]

    @classmethod
    def of(
        cls,
        argument_type: type[T],
        supplier: Callable[[], T | None],
    ) -> OperationArgumentResolver[T]:
        """Build a resolver that answers ``argument_type`` with ``supplier()``.

        Args:
            argument_type: Argument type the resolver is bound to.
            supplier: Callable invoked on every resolution. It may return ``None``
                to signal that no value is available right now.

        """
        return cls(argument_type=argument_type, supplier=supplier)

    def can_resolve(self, argument_type: Any) -> bool:
        """Return true when ``argument_type`` is the bound type or one of its bases.

        Args:
            argument_type: Argument type requested by the operation.

        """
        return is_assignable_request(argument_type, self.argument_type)

    def resolve(self, argument_type: Any) -> Any:
        """Return ``supplier()`` when ``argument_type`` can be resolved, otherwise ``None``.

        Args:
            argument_type: Argument type requested by the operation.

        """
        if not self.can_resolve(argument_type):
            return None
        return self.supplier()


class BaseInvocationContext:
    """Provide placeholder implementations for every invocation context accessor.

    Subclasses override only the accessors they need. Unless overridden, the
    context has no security principal, no arguments, no parameters and no
    operation argument resolvers, so every argument resolves to ``None``.
    """

    __slots__ = ()

    @property
    def security_context(self) -> SecurityContext:
        """Return ``NO_SECURITY_CONTEXT``."""
        return NO_SECURITY_CONTEXT

    @property
    def arguments(self) -> Mapping[str, object]:
        """Return an empty read-only mapping."""
        return _EMPTY_MAPPING

    @property
    def parameters(self) -> Mapping[str, object]:
        """Return an empty read-only mapping."""
        return _EMPTY_MAPPING

    @property
    def operation_argument_resolvers(self) -> Sequence[OperationArgumentResolverProtocol]:
        """Return an empty tuple."""
        return ()

    def can_resolve(self, argument_type: Any) -> bool:
        """Return true when any operation argument resolver can supply ``argument_type``.

        Args:
            argument_type: Argument type requested by the operation.

        """
        return any(
            resolver.can_resolve(argument_type) for resolver in self.operation_argument_resolvers
        )

    @overload
    def resolve_argument_or_absent(self, argument_type: type[T]) -> T | None: ...

    @overload
    def resolve_argument_or_absent(self, argument_type: Any) -> Any: ...

    def resolve_argument_or_absent(self, argument_type: Any) -> Any:
        """Resolve an argument by type, returning ``None`` when it is absent.

        Resolvers are consulted in order. The first resolver that can resolve
        the type and returns a value other than ``None`` wins. A resolver that
        returns ``None`` passes the request on to the next one.

        Args:
            argument_type: Argument type requested by the operation.

        """
        for resolver in self.operation_argument_resolvers:
            if not resolver.can_resolve(argument_type):
                continue
            value = resolver.resolve(argument_type)
            if value is not None:
                return value

        logger.debug("No operation argument resolver produced a value for %r", argument_type)
        return None

    def require_argument(self, argument_type: type[T]) -> T:
        """Resolve an argument by type and fail when it is absent.

        Args:
            argument_type: Argument type requested by the operation.

        Raises:
            AbsentValueCoercedError: No resolver produced a value for ``argument_type``.

        """
        return require_present(self.resolve_argument_or_absent(argument_type), argument_type)


class InvocationContext(BaseInvocationContext):
    """Hold the security context, arguments and resolvers of one invocation.

    ``arguments`` and ``parameters`` are copied into read-only mappings when
    the context is created, so later changes to the caller's dictionaries are
    not visible through the context.

    Examples:
        .. code-block:: python

            context = InvocationContext(
                OperationArgumentResolver.of(SecurityContext, lambda: caller),
                arguments={"name": "health"},
            )
            if context.can_resolve(SecurityContext):
                caller = context.require_argument(SecurityContext)

    """

    __slots__ = ("_arguments", "_parameters", "_resolvers", "_security_context")

    def __init__(
        self,
        *resolvers: OperationArgumentResolverProtocol,
        security_context: SecurityContext = NO_SECURITY_CONTEXT,
        arguments: Mapping[str, object] | None = None,
        parameters: Mapping[str, object] | None = None,
    ) -> None:
        """Initialize an invocation context.

        Args:
            *resolvers: Operation argument resolvers, consulted in the given order.
            security_context: Security context of the caller.
            arguments: Named invocation arguments.
            parameters: Named operation parameters.

        """
        self._resolvers: tuple[OperationArgumentResolverProtocol, ...] = resolvers
        self._security_context = security_context
        self._arguments: Mapping[str, object] = MappingProxyType(dict(arguments or {}))
        self._parameters: Mapping[str, object] = MappingProxyType(dict(parameters or {}))

    @property
    def security_context(self) -> SecurityContext:
        """Return the security context passed at construction."""
        return self._security_context

    @property
    def arguments(self) -> Mapping[str, object]:
        """Return a read-only copy of the named invocation arguments."""
        return self._arguments

    @property
    def parameters(self) -> Mapping[str, object]:
        """Return a read-only copy of the named operation parameters."""
        return self._parameters

    @property
    def operation_argument_resolvers(self) -> Sequence[OperationArgumentResolverProtocol]:
        """Return the operation argument resolvers in consultation order."""
        return self._resolvers

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(resolvers={len(self._resolvers)}, "
            f"arguments={sorted(self._arguments)!r}, "
            f"security_context={self._security_context!r})"
        )


__all__ = [
    "BaseInvocationContext",
    "InvocationContext",
    "InvocationContextProtocol",
    "OperationArgumentResolver",
    "OperationArgumentResolverProtocol",
]
