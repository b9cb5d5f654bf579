from __future__ import annotations

from typing import TypeVar

from argwire import BaseInvocationContext

T = TypeVar("T")


class UncheckedContext(BaseInvocationContext):
    def resolve_argument_assuming_present(self, argument_type: type[T]) -> T:
        return self.resolve_argument_or_absent(argument_type)
