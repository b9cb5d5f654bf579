from __future__ import annotations

from typing import Any, cast

import pytest

from argwire import AbsentValueCoercedError, NullDereferenceError, length_of, require_present


def test_require_present_returns_value() -> None:
    assert require_present("value", str) == "value"
    assert require_present(0, int) == 0
    assert require_present("", str) == ""


def test_require_present_raises_for_none() -> None:
    with pytest.raises(AbsentValueCoercedError) as exc_info:
        require_present(None, str)

    assert exc_info.value.argument_type is str


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("hello", 5),
        ("", 0),
        ([1, 2, 3], 3),
        ({"a": 1}, 1),
    ],
)
def test_length_of_sized_values(value: Any, expected: int) -> None:
    assert length_of(value) == expected


def test_length_of_none_raises_null_dereference() -> None:
    absent = cast("str", None)

    with pytest.raises(NullDereferenceError) as exc_info:
        length_of(absent)

    assert exc_info.value.member == "length"
    assert isinstance(exc_info.value.__cause__, TypeError)


def test_length_of_none_is_also_an_attribute_error() -> None:
    with pytest.raises(AttributeError):
        length_of(cast("str", None))


def test_length_of_unsized_value_propagates_type_error() -> None:
    with pytest.raises(TypeError) as exc_info:
        length_of(cast("str", 42))

    assert not isinstance(exc_info.value, NullDereferenceError)
