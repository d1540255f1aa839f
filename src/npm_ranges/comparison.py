"""Configurable equality and ordering for versions, partial versions and comparators.

The default semantics of the value types ignore build metadata, treat every
wildcard spelling as the same value and treat ``=`` and an implicit ``=`` as
the same operator. ``SemverComparer`` lets callers opt into stricter
comparisons without changing the range algebra itself.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from enum import IntFlag
from typing import Any

from .errors import InvalidOperandError
from .models.partial import PartialComponent, PartialVersion
from .models.prerelease import compare_pre_releases
from .models.version import Version
from .ranges.comparator_set import ComparatorSet
from .ranges.comparators import (
    AdvancedComparator,
    Comparator,
    HyphenRangeComparator,
    PrimitiveComparator,
    XRangeComparator,
)
from .ranges.version_range import VersionRange

_SUPPORTED_TYPES = "Version, PartialVersion or PartialComponent"


class SemverComparison(IntFlag):
    DEFAULT = 0
    INCLUDE_BUILD_METADATA = 1
    DIFFERENTIATE_WILDCARDS = 2
    DIFFERENTIATE_EQUALITY = 4
    EXACT = INCLUDE_BUILD_METADATA | DIFFERENTIATE_WILDCARDS | DIFFERENTIATE_EQUALITY


def compare_identifiers(left: tuple[str, ...], right: tuple[str, ...]) -> int:
    """Order build metadata sequences; an empty sequence sorts last."""
    if not left:
        return 0 if not right else 1
    if not right:
        return -1
    for mine, theirs in zip(left, right):
        if mine != theirs:
            return -1 if mine < theirs else 1
    return (len(left) > len(right)) - (len(left) < len(right))


class SemverComparer:
    """Compare, equate and hash values under a ``SemverComparison`` mode."""

    __slots__ = ("_comparison",)

    def __init__(self, comparison: SemverComparison = SemverComparison.DEFAULT) -> None:
        self._comparison = SemverComparison(comparison)

    @classmethod
    def from_comparison(cls, comparison: SemverComparison) -> SemverComparer:
        return _INSTANCES.get(comparison) or cls(comparison)

    @property
    def comparison(self) -> SemverComparison:
        return self._comparison

    @property
    def include_build_metadata(self) -> bool:
        return bool(self._comparison & SemverComparison.INCLUDE_BUILD_METADATA)

    @property
    def differentiate_wildcards(self) -> bool:
        return bool(self._comparison & SemverComparison.DIFFERENTIATE_WILDCARDS)

    @property
    def differentiate_equality(self) -> bool:
        return bool(self._comparison & SemverComparison.DIFFERENTIATE_EQUALITY)

    # Ordering

    def compare(self, left: Any, right: Any) -> int:
        """Return -1, 0 or 1. ``None`` sorts before every value.

        Raises:
            InvalidOperandError: if the operands are not both Version,
                PartialVersion or PartialComponent values.
        """
        if left is None:
            return 0 if right is None else -1
        if right is None:
            return 1
        if isinstance(left, Version) and isinstance(right, Version):
            return self._compare_versions(left, right)
        if isinstance(left, PartialVersion) and isinstance(right, PartialVersion):
            return self._compare_partials(left, right)
        if isinstance(left, PartialComponent) and isinstance(right, PartialComponent):
            return self._compare_components(left, right)
        raise InvalidOperandError(
            f"Cannot compare {type(left).__name__} with {type(right).__name__}; "
            f"expected two {_SUPPORTED_TYPES} values"
        )

    def sort_key(self) -> Callable[[Any], Any]:
        return functools.cmp_to_key(self.compare)

    def _compare_versions(self, left: Version, right: Version) -> int:
        result = left.compare(right)
        if result == 0 and self.include_build_metadata:
            result = compare_identifiers(left.build_metadata, right.build_metadata)
        return result

    def _compare_components(self, left: PartialComponent, right: PartialComponent) -> int:
        if self.differentiate_wildcards:
            return left.compare_exact(right)
        return left.compare(right)

    def _compare_partials(self, left: PartialVersion, right: PartialVersion) -> int:
        for mine, theirs in ((left.major, right.major), (left.minor, right.minor), (left.patch, right.patch)):
            result = self._compare_components(mine, theirs)
            if result:
                return result
        result = compare_pre_releases(left.pre_releases, right.pre_releases)
        if result == 0 and self.include_build_metadata:
            result = compare_identifiers(left.build_metadata, right.build_metadata)
        return result

    # Equality

    def equals(self, left: Any, right: Any) -> bool:
        """Equality under this mode. Also accepts comparators, sets and ranges."""
        if left is right:
            return True
        if left is None or right is None:
            return False
        if isinstance(left, Comparator) and isinstance(right, Comparator):
            return self._comparators_equal(left, right)
        if isinstance(left, ComparatorSet) and isinstance(right, ComparatorSet):
            return self._sequences_equal(left.comparators, right.comparators)
        if isinstance(left, VersionRange) and isinstance(right, VersionRange):
            return self._sequences_equal(left.comparator_sets, right.comparator_sets)
        return self.compare(left, right) == 0

    def _sequences_equal(self, left: tuple, right: tuple) -> bool:
        return len(left) == len(right) and all(self.equals(mine, theirs) for mine, theirs in zip(left, right))

    def _operators_equal(self, left, right) -> bool:
        if self.differentiate_equality:
            return left == right
        return left.normalize() == right.normalize()

    def _comparators_equal(self, left: Comparator, right: Comparator) -> bool:
        if type(left) is not type(right):
            return False
        if isinstance(left, PrimitiveComparator):
            return self._operators_equal(left.operator, right.operator) and self.equals(
                left.operand, right.operand
            )
        if isinstance(left, XRangeComparator) and not self._operators_equal(left.operator, right.operator):
            return False
        if isinstance(left, HyphenRangeComparator) and not self.equals(left.to, right.to):
            return False
        if isinstance(left, AdvancedComparator):
            return self.equals(left.operand, right.operand)
        raise InvalidOperandError(f"Unsupported comparator type {type(left).__name__}")

    # Hashing

    def hash(self, value: Any) -> int:
        """Hash consistent with ``equals`` under this mode."""
        if value is None:
            return 0
        if isinstance(value, Version):
            key: tuple = (value.major, value.minor, value.patch, value.pre_releases)
            if self.include_build_metadata:
                key += (value.build_metadata,)
            return hash(key)
        if isinstance(value, PartialComponent):
            if self.differentiate_wildcards or value.is_numeric:
                return hash(value.value)
            return hash(-1)
        if isinstance(value, PartialVersion):
            key = (
                self.hash(value.major),
                self.hash(value.minor),
                self.hash(value.patch),
                value.pre_releases,
            )
            if self.include_build_metadata:
                key += (value.build_metadata,)
            return hash(key)
        if isinstance(value, PrimitiveComparator):
            operator = value.operator if self.differentiate_equality else value.operator.normalize()
            return hash((PrimitiveComparator, operator, self.hash(value.operand)))
        if isinstance(value, HyphenRangeComparator):
            return hash((HyphenRangeComparator, self.hash(value.from_), self.hash(value.to)))
        if isinstance(value, XRangeComparator):
            operator = value.operator if self.differentiate_equality else value.operator.normalize()
            return hash((XRangeComparator, operator, self.hash(value.operand)))
        if isinstance(value, AdvancedComparator):
            return hash((type(value), self.hash(value.operand)))
        if isinstance(value, ComparatorSet):
            return hash(tuple(self.hash(comparator) for comparator in value.comparators))
        if isinstance(value, VersionRange):
            return hash(tuple(self.hash(item) for item in value.comparator_sets))
        raise InvalidOperandError(f"Cannot hash {type(value).__name__}; expected {_SUPPORTED_TYPES}")


_INSTANCES: dict[SemverComparison, SemverComparer] = {}

DEFAULT = SemverComparer(SemverComparison.DEFAULT)
INCLUDE_BUILD_METADATA = SemverComparer(SemverComparison.INCLUDE_BUILD_METADATA)
DIFFERENTIATE_WILDCARDS = SemverComparer(SemverComparison.DIFFERENTIATE_WILDCARDS)
EXACT = SemverComparer(SemverComparison.EXACT)

for _comparer in (DEFAULT, INCLUDE_BUILD_METADATA, DIFFERENTIATE_WILDCARDS, EXACT):
    _INSTANCES[_comparer.comparison] = _comparer
