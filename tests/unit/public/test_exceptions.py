from __future__ import annotations

import pytest

from argwire import AbsentValueCoercedError, ArgwireError, NullDereferenceError


@pytest.mark.parametrize("error_type", [AbsentValueCoercedError, NullDereferenceError])
def test_errors_share_base_class(error_type: type[ArgwireError]) -> None:
    assert issubclass(error_type, ArgwireError)


def test_null_dereference_error_is_attribute_error() -> None:
    error = NullDereferenceError("length")

    assert isinstance(error, AttributeError)
    assert error.member == "length"
    assert "'length'" in str(error)
    assert "None" in str(error)


def test_absent_value_coerced_error_describes_type() -> None:
    class Tenant:
        pass

    error = AbsentValueCoercedError(Tenant)

    assert error.argument_type is Tenant
    assert "Tenant" in str(error)


def test_absent_value_coerced_error_describes_non_class_key() -> None:
    error = AbsentValueCoercedError("tenant")

    assert "'tenant'" in str(error)
