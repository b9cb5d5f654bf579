from __future__ import annotations

from collections.abc import Sized
from typing import Annotated, Any, Protocol

import pytest

from argwire._internal.type_checks import is_assignable_request, is_runtime_class


class _Named(Protocol):
    name: str


class _Base:
    pass


class _Derived(_Base):
    pass


@pytest.mark.parametrize(
    ("candidate", "expected"),
    [
        (int, True),
        (_Derived, True),
        (list[int], False),
        (Annotated[int, "x"], False),
        ("int", False),
        (None, False),
    ],
)
def test_is_runtime_class(candidate: Any, expected: bool) -> None:
    assert is_runtime_class(candidate) is expected


@pytest.mark.parametrize(
    ("requested", "provided", "expected"),
    [
        (_Derived, _Derived, True),
        (_Base, _Derived, True),
        (object, _Derived, True),
        (_Derived, _Base, False),
        (list[int], list[int], True),
        (list, list[int], False),
        (list[int], list, False),
        ("str", str, False),
    ],
)
def test_is_assignable_request(requested: Any, provided: Any, expected: bool) -> None:
    assert is_assignable_request(requested, provided) is expected


def test_protocols_and_virtual_bases_do_not_match_structurally() -> None:
    assert is_assignable_request(_Named, _Derived) is False
    assert is_assignable_request(Sized, str) is False
