"""Resolve operation arguments by type.

This topic demonstrates:

1. ``resolve_argument_or_absent`` returning ``None`` for unknown types.
2. Resolvers serving requests for a base class of their bound type.
3. A resolver returning ``None`` passing the request to the next resolver.
4. ``require_argument`` failing loudly instead of coercing ``None``.
"""

from __future__ import annotations

from argwire import (
    AbsentValueCoercedError,
    InvocationContext,
    OperationArgumentResolver,
    SecurityContext,
)


class Tenant:
    def __init__(self, name: str) -> None:
        self.name = name


class AdminTenant(Tenant):
    pass


def main() -> None:
    caller = SecurityContext(principal="alice", roles=frozenset({"ops"}))
    context = InvocationContext(
        OperationArgumentResolver.of(Tenant, lambda: None),
        OperationArgumentResolver.of(AdminTenant, lambda: AdminTenant("root")),
        security_context=caller,
        arguments={"endpoint": "health"},
    )

    print(f"missing={context.resolve_argument_or_absent(int)!r}")  # => missing=None
    print(f"can_resolve_tenant={context.can_resolve(Tenant)}")  # => can_resolve_tenant=True

    tenant = context.require_argument(Tenant)
    print(f"tenant={tenant.name}")  # => tenant=root
    print(f"endpoint={context.arguments['endpoint']}")  # => endpoint=health
    print(
        f"is_ops={context.security_context.is_user_in_role('ops')}",
    )  # => is_ops=True

    try:
        context.require_argument(int)
    except AbsentValueCoercedError as error:
        print(f"required_error={type(error).__name__}")  # => required_error=AbsentValueCoercedError


if __name__ == "__main__":
    main()
