from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class SecurityContext:
    """Describe the caller of an operation.

    Resolvers that do not authenticate callers return ``NO_SECURITY_CONTEXT``,
    which has no principal and no roles.
    """

    principal: str | None = None
    roles: frozenset[str] = field(default_factory=frozenset)

    def is_user_in_role(self, role: str) -> bool:
        """Return true when the current principal holds the given role.

        Args:
            role: Role name to check.

        """
        return role in self.roles


NO_SECURITY_CONTEXT = SecurityContext()
"""Placeholder security context with no principal and no roles."""
