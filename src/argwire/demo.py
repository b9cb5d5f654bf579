from __future__ import annotations

import logging

from argwire.presence import length_of
from argwire.unsound import UnsoundResolver

logger = logging.getLogger(__name__)


def main(resolver: UnsoundResolver | None = None) -> None:
    """Resolve a ``str`` argument through an unchecked cast and print its length.

    With the default ``UnsoundResolver`` the resolved value is ``None``, so
    ``NullDereferenceError`` propagates and nothing is printed.

    Args:
        resolver: Resolver to use. A new ``UnsoundResolver`` when omitted.

    """
    if resolver is None:
        resolver = UnsoundResolver()

    logger.info("Resolving %s through %s", str.__name__, type(resolver).__name__)
    result = resolver.resolve_argument_assuming_present(str)
    length = length_of(result)
    print(f"Length: {length}")
