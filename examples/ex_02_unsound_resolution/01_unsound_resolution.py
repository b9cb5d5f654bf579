"""Unchecked casts hide absent values from the type checker.

This topic demonstrates:

1. ``UnsoundResolver`` resolving every type as ``None``.
2. ``resolve_argument_assuming_present`` returning ``None`` typed as ``str``
   without raising.
3. The deferred ``NullDereferenceError`` when the result is dereferenced.
"""

from __future__ import annotations

from argwire import NullDereferenceError, UnsoundResolver, length_of


def main() -> None:
    resolver = UnsoundResolver()

    print(f"or_absent={resolver.resolve_argument_or_absent(str)!r}")  # => or_absent=None

    value = resolver.resolve_argument_assuming_present(str)
    print(f"assumed_present={value!r}")  # => assumed_present=None

    try:
        length_of(value)
    except NullDereferenceError as error:
        print(f"dereference_error={type(error).__name__}")  # => dereference_error=NullDereferenceError
        print(f"member={error.member}")  # => member=length


if __name__ == "__main__":
    main()
