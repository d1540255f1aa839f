"""Comparator-level intersection, union and complement.

Two primitives are combined directly so that results keep the operands'
own comparators and order (``<3.4.5 & >1.2.3`` stays ``<3.4.5 >1.2.3``).
Every other combination is lifted into single-comparator sets and handled
by the ``ComparatorSet`` algebra.
"""

from __future__ import annotations

from .bounds import bounds_touch, compare_bounds, intersect_opposite
from .comparator_set import ComparatorSet
from .comparators import Comparator, PrimitiveComparator, XRangeComparator
from .operators import same_direction
from .version_range import VersionRange


def _intersect_primitives(left: PrimitiveComparator, right: PrimitiveComparator) -> ComparatorSet:
    left_operator, right_operator = left.operator, right.operator

    if same_direction(left_operator, right_operator):
        order = compare_bounds(left, right)
        if left_operator.is_gt_or_gte():
            return ComparatorSet((left if order >= 0 else right,))
        return ComparatorSet((left if order <= 0 else right,))

    if left_operator.is_eq():
        return ComparatorSet((left,)) if right.is_satisfied_by_core(left.operand) else ComparatorSet.NONE
    if right_operator.is_eq():
        return ComparatorSet((right,)) if left.is_satisfied_by_core(right.operand) else ComparatorSet.NONE

    low, high = (left, right) if left_operator.is_gt_or_gte() else (right, left)
    single = intersect_opposite(low, high)
    if single is None:
        return ComparatorSet((left, right))
    if single is PrimitiveComparator.NONE:
        return ComparatorSet.NONE
    return ComparatorSet((single,))


def _union_primitives(left: PrimitiveComparator, right: PrimitiveComparator) -> Comparator | None:
    """Return a single comparator equal to ``left | right``, or None if there is none."""
    left_operator, right_operator = left.operator, right.operator

    if same_direction(left_operator, right_operator):
        order = compare_bounds(left, right)
        if left_operator.is_gt_or_gte():
            return left if order <= 0 else right
        return left if order >= 0 else right

    if left_operator.is_eq():
        return right if right.is_satisfied_by_core(left.operand) else None
    if right_operator.is_eq():
        return left if left.is_satisfied_by_core(right.operand) else None

    low, high = (left, right) if left_operator.is_gt_or_gte() else (right, left)
    if bounds_touch(high, low):
        return XRangeComparator.ALL
    if high == PrimitiveComparator.NONE:
        return low
    return None


def intersect(left: Comparator, right: Comparator) -> ComparatorSet:
    """Return the set of versions satisfying both comparators."""
    if isinstance(left, PrimitiveComparator) and isinstance(right, PrimitiveComparator):
        return _intersect_primitives(left, right)
    return ComparatorSet((left,)) & ComparatorSet((right,))


def union(left: Comparator, right: Comparator) -> VersionRange:
    """Return the range of versions satisfying either comparator."""
    if isinstance(left, PrimitiveComparator) and isinstance(right, PrimitiveComparator):
        merged = _union_primitives(left, right)
        if merged is None:
            return VersionRange((ComparatorSet((left,)), ComparatorSet((right,))))
        return VersionRange.from_sets([ComparatorSet((merged,))])
    return ComparatorSet((left,)) | ComparatorSet((right,))


def complement(comparator: Comparator) -> VersionRange:
    """Return the range of versions that do not satisfy ``comparator``."""
    return ~ComparatorSet((comparator,))
