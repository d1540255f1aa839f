"""Conjunction of comparators describing one contiguous interval of versions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from ..errors import InvalidOperandError, SemverValidationError
from ..formatting import TextBuilder, format_buildable, joined_length
from ..models.version import Version
from .bounds import (
    Bounds,
    bounds_touch,
    collapse_bounds,
    compare_bounds,
    empty_bounds,
    expand_bounds,
    is_empty_bounds,
)
from .comparators import Comparator, PrimitiveComparator, XRangeComparator

if TYPE_CHECKING:
    from .version_range import VersionRange


@dataclass(slots=True, frozen=True)
class ComparatorSet:
    """Comparators that must all be satisfied, e.g. ``>=1.2.3 <2.0.0``.

    ``ComparatorSet.NONE`` (``<0.0.0-0``) matches nothing and
    ``ComparatorSet.ALL`` (``*``) matches every release.
    """

    comparators: tuple[Comparator, ...]
    _bounds: Bounds | None = field(default=None, init=False, repr=False, compare=False)

    NONE: ClassVar[ComparatorSet]
    ALL: ClassVar[ComparatorSet]

    def __post_init__(self) -> None:
        comparators = tuple(self.comparators)
        if not comparators:
            raise SemverValidationError("A comparator set must contain at least one comparator.")
        for comparator in comparators:
            if not isinstance(comparator, Comparator):
                raise InvalidOperandError(
                    f"Comparator sets can only contain comparators, got {type(comparator).__name__}"
                )
        object.__setattr__(self, "comparators", comparators)

    @classmethod
    def of(cls, *comparators: Comparator) -> ComparatorSet:
        return cls(comparators)

    @classmethod
    def from_bounds(cls, low: PrimitiveComparator | None, high: PrimitiveComparator | None) -> ComparatorSet:
        """Build the canonical set for a bound pair, using the sentinels where possible."""
        low, high = collapse_bounds(low, high)
        if is_empty_bounds((low, high)):
            return cls.NONE
        if low is None:
            return cls.ALL if high is None else cls((high,))
        return cls((low,)) if high is None else cls((low, high))

    @property
    def is_sugared(self) -> bool:
        return any(comparator.is_advanced for comparator in self.comparators)

    @property
    def bounds(self) -> Bounds:
        """The tightest ``(low, high)`` primitive pair implied by every member.

        An ``=v`` member makes the bounds ``(=v, None)`` when every other member
        admits ``v``. Unsatisfiable sets have the empty bounds
        ``(None, <0.0.0-0)``.
        """
        bounds = self._bounds
        if bounds is None:
            bounds = self._compute_bounds()
            object.__setattr__(self, "_bounds", bounds)
        return bounds

    def _compute_bounds(self) -> Bounds:
        low: PrimitiveComparator | None = None
        high: PrimitiveComparator | None = None
        for comparator in self.comparators:
            left, right = comparator.as_primitives()
            if left is not None and left.operator.is_eq():
                if all(member.is_satisfied_by_core(left.operand) for member in self.comparators):
                    return (left, None)
                return empty_bounds()
            if left is not None and compare_bounds(left, low) > 0:
                low = left
            if right is not None and compare_bounds(right, high, -1) < 0:
                high = right
        return collapse_bounds(low, high)

    def _interval(self) -> Bounds:
        return expand_bounds(*self.bounds)

    @property
    def is_empty(self) -> bool:
        return is_empty_bounds(self.bounds)

    def is_satisfied_by(self, version: Version | None, include_pre_releases: bool = False) -> bool:
        if version is None:
            return False
        if not isinstance(version, Version):
            raise InvalidOperandError(f"Expected a Version, got {type(version).__name__}")
        if version.is_pre_release and not include_pre_releases:
            if not any(
                comparator.can_match_pre_release(version.major, version.minor, version.patch)
                for comparator in self.comparators
            ):
                return False
        return self.is_satisfied_by_core(version)

    def is_satisfied_by_core(self, version: Version) -> bool:
        return all(comparator.is_satisfied_by_core(version) for comparator in self.comparators)

    def contains(self, other: ComparatorSet | Comparator) -> bool:
        """True if every version matching ``other`` also matches this set."""
        other = _coerce_set(other)
        if other.is_empty:
            return True
        if self.is_empty:
            return False
        mine_low, mine_high = self._interval()
        their_low, their_high = other._interval()
        return compare_bounds(mine_low, their_low) <= 0 and compare_bounds(mine_high, their_high, -1) >= 0

    def intersects(self, other: ComparatorSet | Comparator) -> bool:
        return not (self & _coerce_set(other)).is_empty

    def touches(self, other: ComparatorSet | Comparator) -> bool:
        """True if the union with ``other`` is a single contiguous interval."""
        return merge_sets(self, _coerce_set(other)) is not None

    def desugar(self) -> ComparatorSet:
        """Return an equivalent set made of primitive comparators only.

        A set whose members impose no bound at all becomes ``>=0.0.0``.
        """
        if not self.is_sugared:
            return self
        primitives: list[Comparator] = []
        for comparator in self.comparators:
            if not comparator.is_advanced:
                primitives.append(comparator)
                continue
            low, high = comparator.as_primitives()
            if low is not None:
                primitives.append(low)
            if high is not None:
                primitives.append(high)
        if not primitives:
            primitives.append(PrimitiveComparator.greater_than_or_equal(Version(0, 0, 0)))
        return ComparatorSet(tuple(primitives))

    def normalize(self) -> ComparatorSet:
        """Return the canonical set for this set's bounds."""
        return ComparatorSet.from_bounds(*self.bounds)

    def __and__(self, other: object) -> ComparatorSet | VersionRange:
        from .version_range import VersionRange

        if isinstance(other, VersionRange):
            return VersionRange((self,)) & other
        if isinstance(other, Comparator):
            other = ComparatorSet((other,))
        if not isinstance(other, ComparatorSet):
            return NotImplemented
        return intersect_sets(self, other)

    def __or__(self, other: object) -> VersionRange:
        from .version_range import VersionRange

        if isinstance(other, VersionRange):
            return VersionRange((self,)) | other
        if isinstance(other, Comparator):
            other = ComparatorSet((other,))
        if not isinstance(other, ComparatorSet):
            return NotImplemented
        merged = merge_sets(self, other)
        if merged is None:
            return VersionRange((self, other))
        return VersionRange.from_sets([merged])

    def __invert__(self) -> VersionRange:
        from .version_range import VersionRange

        low, high = self.bounds
        if low is None:
            if high is None:
                return VersionRange.NONE
            return VersionRange.from_sets([_complement_bound(high)])
        if low.operator.is_eq():
            return VersionRange(
                (
                    ComparatorSet((PrimitiveComparator.less_than(low.operand),)),
                    ComparatorSet((PrimitiveComparator.greater_than(low.operand),)),
                )
            )
        sets = [_complement_bound(low)]
        if high is not None:
            sets.append(_complement_bound(high))
        return VersionRange.from_sets(sets)

    def calculate_length(self) -> int:
        return joined_length(" ", self.comparators)

    def build_string(self, builder: TextBuilder) -> None:
        builder.append_joined(" ", self.comparators)

    def __str__(self) -> str:
        return format_buildable(self)


def _coerce_set(value: ComparatorSet | Comparator) -> ComparatorSet:
    if isinstance(value, ComparatorSet):
        return value
    if isinstance(value, Comparator):
        return ComparatorSet((value,))
    raise InvalidOperandError(f"Expected a ComparatorSet or Comparator, got {type(value).__name__}")


def _complement_bound(bound: PrimitiveComparator) -> ComparatorSet:
    if bound == PrimitiveComparator.NONE:
        return ComparatorSet.ALL
    return ComparatorSet((PrimitiveComparator(bound.operand, bound.operator.invert()),))


def _prefer_sugared(left: ComparatorSet, right: ComparatorSet) -> ComparatorSet:
    return left if left.is_sugared or not right.is_sugared else right


def intersect_sets(left: ComparatorSet, right: ComparatorSet) -> ComparatorSet:
    """Intersect two sets, returning an operand unchanged when it lies inside the other."""
    if left.is_empty or right.is_empty:
        return ComparatorSet.NONE
    left_low, left_high = left._interval()
    right_low, right_high = right._interval()

    low_order = compare_bounds(left_low, right_low)
    high_order = compare_bounds(left_high, right_high, -1)
    if low_order == 0 and high_order == 0:
        return _prefer_sugared(left, right)
    if low_order >= 0 and high_order <= 0:
        return left
    if low_order <= 0 and high_order >= 0:
        return right

    low = left_low if low_order >= 0 else right_low
    high = left_high if high_order <= 0 else right_high
    return ComparatorSet.from_bounds(low, high)


def merge_sets(left: ComparatorSet, right: ComparatorSet) -> ComparatorSet | None:
    """Return a single set equal to ``left | right``, or None if the sets leave a gap."""
    if left.is_empty:
        return right
    if right.is_empty:
        return left
    left_low, left_high = left._interval()
    right_low, right_high = right._interval()
    if not (bounds_touch(left_high, right_low) and bounds_touch(right_high, left_low)):
        return None

    low_order = compare_bounds(left_low, right_low)
    high_order = compare_bounds(left_high, right_high, -1)
    if low_order == 0 and high_order == 0:
        return _prefer_sugared(left, right)
    if low_order <= 0 and high_order >= 0:
        return left
    if low_order >= 0 and high_order <= 0:
        return right

    low = left_low if low_order <= 0 else right_low
    high = left_high if high_order >= 0 else right_high
    return ComparatorSet.from_bounds(low, high)


ComparatorSet.NONE = ComparatorSet((PrimitiveComparator.NONE,))
ComparatorSet.ALL = ComparatorSet((XRangeComparator.ALL,))
