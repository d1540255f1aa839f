"""Disjunction of comparator sets, the value behind ``1.x || >=2.5.0``."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import chain
from typing import ClassVar

from ..errors import InvalidOperandError, SemverValidationError
from ..formatting import TextBuilder, format_buildable, joined_length
from ..models.version import Version
from .comparator_set import ComparatorSet, merge_sets
from .comparators import Comparator

logger = logging.getLogger(__name__)


def _add_with_combine(results: list[ComparatorSet], item: ComparatorSet) -> None:
    """Add ``item`` to ``results``, merging it with every set it touches.

    The merged set takes the position of the first set it absorbed, so
    repeated calls keep the operands' original order.
    """
    position: int | None = None
    merged = True
    while merged:
        merged = False
        for index, existing in enumerate(results):
            combined = merge_sets(existing, item)
            if combined is None:
                continue
            logger.debug("Merging comparator sets %s and %s into %s", existing, item, combined)
            del results[index]
            item = combined
            position = index if position is None else min(position, index)
            merged = True
            break
    results.insert(len(results) if position is None else position, item)


@dataclass(slots=True, frozen=True)
class VersionRange:
    """Comparator sets of which at least one must be satisfied.

    Items may be given as ``ComparatorSet`` or bare ``Comparator`` values; a
    bare comparator becomes a single-comparator set.
    """

    comparator_sets: tuple[ComparatorSet, ...]

    NONE: ClassVar[VersionRange]
    ALL: ClassVar[VersionRange]

    def __post_init__(self) -> None:
        sets = []
        for item in self.comparator_sets:
            if isinstance(item, Comparator):
                item = ComparatorSet((item,))
            if not isinstance(item, ComparatorSet):
                raise InvalidOperandError(
                    f"Version ranges can only contain comparator sets, got {type(item).__name__}"
                )
            sets.append(item)
        if not sets:
            raise SemverValidationError("A version range must contain at least one comparator set.")
        object.__setattr__(self, "comparator_sets", tuple(sets))

    @classmethod
    def of(cls, *items: ComparatorSet | Comparator) -> VersionRange:
        return cls(items)

    @classmethod
    def from_sets(cls, sets: Iterable[ComparatorSet]) -> VersionRange:
        """Build a range from algebra results.

        Empty sets are dropped; no sets at all gives ``NONE`` and a lone set
        equal to ``ComparatorSet.ALL`` gives ``ALL``.
        """
        remaining = [item for item in sets if not item.is_empty]
        if not remaining:
            return cls.NONE
        if len(remaining) == 1 and remaining[0] == ComparatorSet.ALL:
            return cls.ALL
        return cls(tuple(remaining))

    @property
    def is_empty(self) -> bool:
        return all(item.is_empty for item in self.comparator_sets)

    @property
    def is_sugared(self) -> bool:
        return any(item.is_sugared for item in self.comparator_sets)

    def is_satisfied_by(self, version: Version | None, include_pre_releases: bool = False) -> bool:
        return any(item.is_satisfied_by(version, include_pre_releases) for item in self.comparator_sets)

    def desugar(self) -> VersionRange:
        if not self.is_sugared:
            return self
        return VersionRange(tuple(item.desugar() for item in self.comparator_sets))

    def normalize(self) -> VersionRange:
        """Return the canonical form: merged sets, each rebuilt from its bounds."""
        results: list[ComparatorSet] = []
        for item in self.comparator_sets:
            if not item.is_empty:
                _add_with_combine(results, item.normalize())
        return VersionRange.from_sets(item.normalize() for item in results)

    def __and__(self, other: object) -> VersionRange:
        other_range = _coerce_range(other)
        if other_range is None:
            return NotImplemented
        results: list[ComparatorSet] = []
        for mine in self.comparator_sets:
            for theirs in other_range.comparator_sets:
                intersection = mine & theirs
                if not intersection.is_empty:
                    _add_with_combine(results, intersection)
        return VersionRange.from_sets(results)

    def __or__(self, other: object) -> VersionRange:
        other_range = _coerce_range(other)
        if other_range is None:
            return NotImplemented
        results: list[ComparatorSet] = []
        for item in chain(self.comparator_sets, other_range.comparator_sets):
            if not item.is_empty:
                _add_with_combine(results, item)
        return VersionRange.from_sets(results)

    def __invert__(self) -> VersionRange:
        result: VersionRange | None = None
        for item in self.comparator_sets:
            complement = ~item
            result = complement if result is None else result & complement
        return result

    def calculate_length(self) -> int:
        return joined_length(" || ", self.comparator_sets)

    def build_string(self, builder: TextBuilder) -> None:
        builder.append_joined(" || ", self.comparator_sets)

    def __str__(self) -> str:
        return format_buildable(self)


def _coerce_range(value: object) -> VersionRange | None:
    if isinstance(value, VersionRange):
        return value
    if isinstance(value, ComparatorSet):
        return VersionRange((value,))
    if isinstance(value, Comparator):
        return VersionRange((ComparatorSet((value,)),))
    return None


VersionRange.NONE = VersionRange((ComparatorSet.NONE,))
VersionRange.ALL = VersionRange((ComparatorSet.ALL,))
