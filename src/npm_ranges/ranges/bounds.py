"""Helpers for reasoning about (low, high) primitive bound pairs.

A bound pair describes one contiguous interval of versions: ``low`` is a
``>``/``>=`` primitive (or ``=`` for a single version, in which case ``high``
is None) and ``high`` is a ``<``/``<=`` primitive. ``None`` on either side
means the interval is unbounded in that direction.
"""

from __future__ import annotations

from typing import Optional, Tuple

from ..models.partial import PartialVersion
from ..models.version import MAX_VALUE, Version
from .comparators import PrimitiveComparator
from .operators import PrimitiveOperator

Bound = Optional[PrimitiveComparator]
Bounds = Tuple[Bound, Bound]


def trim(operand: PartialVersion) -> Version:
    """Return ``operand`` with everything after the first wildcard dropped.

    Non-numeric slots become 0 and pre-releases only survive when the patch is
    numeric. Build metadata is never carried over.
    """
    major = operand.major.value_or_zero()
    if not operand.minor.is_numeric:
        return Version(major, 0, 0)
    if not operand.patch.is_numeric:
        return Version(major, operand.minor.as_number, 0)
    return Version(major, operand.minor.as_number, operand.patch.as_number, operand.pre_releases)


def compare_bounds(left: Bound, right: Bound, null_sign: int = 1) -> int:
    """Order two bounds pointing the same way.

    A missing bound counts as ``-null_sign`` (pass ``-1`` when comparing upper
    bounds so that "unbounded" sorts above every concrete bound). At equal
    operands ``>`` is stricter than ``>=`` and ``<=`` is looser than ``<``.
    """
    if left is None:
        return 0 if right is None else -null_sign
    if right is None:
        return null_sign
    result = left.operand.compare(right.operand)
    if result:
        return result
    left_operator = left.operator.normalize()
    if left_operator == right.operator.normalize():
        return 0
    if left_operator in (PrimitiveOperator.GREATER_THAN, PrimitiveOperator.LESS_THAN_OR_EQUAL):
        return 1
    return -1


def bounds_intersect(high: Bound, low: Bound) -> bool:
    """True if some version satisfies both ``high`` and ``low``."""
    if high is None or low is None:
        return True
    result = high.operand.compare(low.operand)
    if result:
        return result > 0
    return high.operator.is_inclusive() and low.operator.is_inclusive()


def bounds_touch(high: Bound, low: Bound) -> bool:
    """True if every version satisfies ``high`` or ``low`` (no gap between them)."""
    if high is None or low is None:
        return True
    result = high.operand.compare(low.operand)
    if result:
        return result > 0
    return high.operator.is_inclusive() or low.operator.is_inclusive()


def empty_bounds() -> Bounds:
    return (None, PrimitiveComparator.NONE)


def is_empty_bounds(bounds: Bounds) -> bool:
    low, high = bounds
    return low is None and high is not None and high == PrimitiveComparator.NONE


def intersect_opposite(low: PrimitiveComparator, high: PrimitiveComparator) -> PrimitiveComparator | None:
    """Try to reduce a ``>``/``>=`` and ``<``/``<=`` pair to a single primitive.

    Returns ``PrimitiveComparator.NONE`` when the pair cannot be satisfied, an
    ``=`` primitive when both are inclusive on the same operand, and None when
    the pair has to stay as two comparators.
    """
    result = low.operand.compare(high.operand)
    if result > 0:
        return PrimitiveComparator.NONE
    if result == 0:
        if low.operator.is_inclusive() and high.operator.is_inclusive():
            return PrimitiveComparator.equal(low.operand)
        return PrimitiveComparator.NONE
    return None


def expand_bounds(low: Bound, high: Bound) -> Bounds:
    """Rewrite an ``=v`` bound as the equivalent ``>=v <=v`` pair."""
    if low is not None and low.operator.is_eq():
        return (
            PrimitiveComparator.greater_than_or_equal(low.operand),
            PrimitiveComparator.less_than_or_equal(low.operand),
        )
    return (low, high)


def collapse_bounds(low: Bound, high: Bound) -> Bounds:
    """Canonicalise a bound pair.

    Contradictory pairs become the empty pair, ``>=v <=v`` becomes ``=v`` and
    ``>MAX`` (which nothing can satisfy) becomes empty.
    """
    if low is not None:
        if low.operator is PrimitiveOperator.GREATER_THAN and low.operand == MAX_VALUE:
            return empty_bounds()
        if low.operator.is_eq():
            return (low, None)
    if low is None or high is None:
        return (low, high)
    single = intersect_opposite(low, high)
    if single is None:
        return (low, high)
    if single is PrimitiveComparator.NONE:
        return empty_bounds()
    return (single, None)
