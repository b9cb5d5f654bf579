"""Shared pytest fixtures for argwire tests."""

import pytest

from argwire.invocation_context import InvocationContext, OperationArgumentResolver
from argwire.unsound import UnsoundResolver


@pytest.fixture()
def unsound_resolver() -> UnsoundResolver:
    """Resolver that coerces absent values without checking."""
    return UnsoundResolver()


@pytest.fixture()
def empty_context() -> InvocationContext:
    """Invocation context without resolvers, arguments or parameters."""
    return InvocationContext()


@pytest.fixture()
def str_context() -> InvocationContext:
    """Invocation context that resolves ``str`` to ``"hello"``."""
    return InvocationContext(OperationArgumentResolver.of(str, lambda: "hello"))
