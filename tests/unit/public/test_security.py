from __future__ import annotations

import dataclasses

import pytest

from argwire import NO_SECURITY_CONTEXT, SecurityContext


def test_no_security_context_is_empty() -> None:
    assert NO_SECURITY_CONTEXT.principal is None
    assert NO_SECURITY_CONTEXT.roles == frozenset()
    assert NO_SECURITY_CONTEXT.is_user_in_role("admin") is False


def test_is_user_in_role() -> None:
    context = SecurityContext(principal="alice", roles=frozenset({"ops", "dev"}))

    assert context.is_user_in_role("ops") is True
    assert context.is_user_in_role("admin") is False


def test_security_context_is_frozen_and_value_based() -> None:
    context = SecurityContext(principal="alice")

    assert context == SecurityContext(principal="alice")
    with pytest.raises(dataclasses.FrozenInstanceError):
        context.principal = "bob"  # type: ignore[misc]
