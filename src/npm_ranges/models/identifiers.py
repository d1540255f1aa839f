"""Validation helpers for version components and dot-separated identifiers."""

from __future__ import annotations

import re
from collections.abc import Iterable

from ..errors import (
    BUILD_METADATA_EMPTY,
    BUILD_METADATA_INVALID,
    SemverValidationError,
)

MAX_COMPONENT = 2**31 - 1

_IDENTIFIER_PATTERN = re.compile(r"[0-9A-Za-z-]+")


def is_valid_identifier(text: str) -> bool:
    """Return True if ``text`` only contains ``[A-Za-z0-9-]`` characters."""
    return _IDENTIFIER_PATTERN.fullmatch(text) is not None


def validate_component(value: int, negative_message: str, too_big_message: str) -> int:
    """Validate a single numeric version component.

    Raises:
        SemverValidationError: if ``value`` is not an int in ``0..MAX_COMPONENT``.
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise SemverValidationError(f"Version components must be integers, got {value!r}")
    if value < 0:
        raise SemverValidationError(negative_message)
    if value > MAX_COMPONENT:
        raise SemverValidationError(too_big_message)
    return value


def validate_build_metadata(identifiers: Iterable[str]) -> tuple[str, ...]:
    """Return ``identifiers`` as a tuple after checking each one."""
    result = tuple(identifiers)
    for identifier in result:
        if not isinstance(identifier, str):
            raise SemverValidationError(
                f"Build metadata identifiers must be strings, got {identifier!r}"
            )
        if not identifier:
            raise SemverValidationError(BUILD_METADATA_EMPTY)
        if not is_valid_identifier(identifier):
            raise SemverValidationError(BUILD_METADATA_INVALID)
    return result
