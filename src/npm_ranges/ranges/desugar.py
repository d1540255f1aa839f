"""Reduction of sugared comparators to primitive bounds, and the way back.

``desugar`` follows node-semver: ``^1.2.3`` is ``>=1.2.3 <2.0.0-0``, ``~1.2``
is ``>=1.2.0 <1.3.0-0``, ``1.x`` is ``>=1.0.0 <2.0.0-0`` and ``1.2 - 2`` is
``>=1.2.0 <3.0.0-0``. Upper bounds use the ``-0`` pre-release so that no
pre-release of the next unit slips into the range.
"""

from __future__ import annotations

import logging

from .. import errors
from ..errors import ComponentOverflowError, InvalidOperandError
from ..models.identifiers import MAX_COMPONENT
from ..models.partial import PartialVersion
from ..models.version import Version
from .bounds import Bound, Bounds, trim
from .comparators import (
    CaretComparator,
    Comparator,
    HyphenRangeComparator,
    PrimitiveComparator,
    TildeComparator,
    XRangeComparator,
)
from .operators import PrimitiveOperator

logger = logging.getLogger(__name__)


def _increment(value: int, message: str) -> int:
    if value == MAX_COMPONENT:
        logger.debug("Cannot desugar past the maximum component value: %s", message)
        raise ComponentOverflowError(message)
    return value + 1


def _below(major: int, minor: int = 0, patch: int = 0) -> PrimitiveComparator:
    """``<major.minor.patch-0``, excluding every pre-release of that version."""
    return PrimitiveComparator.less_than(Version(major, minor, patch, (0,)))


def _at_least(major: int, minor: int = 0, patch: int = 0) -> PrimitiveComparator:
    return PrimitiveComparator.greater_than_or_equal(Version(major, minor, patch))


def _next_unit(operand: PartialVersion) -> PrimitiveComparator:
    """Strict upper bound just past the granularity of the first wildcard."""
    major = operand.major.as_number
    if not operand.minor.is_numeric:
        return _below(_increment(major, errors.MAJOR_TOO_BIG))
    return _below(major, _increment(operand.minor.as_number, errors.MINOR_TOO_BIG))


def _desugar_caret(operand: PartialVersion) -> Bounds:
    if not operand.major.is_numeric:
        return (None, None)
    low = PrimitiveComparator.greater_than_or_equal(trim(operand))
    major = operand.major.as_number
    minor, patch = operand.minor, operand.patch

    if major != 0 or not minor.is_numeric:
        high = _below(_increment(major, errors.MAJOR_TOO_BIG))
    elif minor.as_number != 0 or not patch.is_numeric:
        high = _below(0, _increment(minor.as_number, errors.MINOR_TOO_BIG))
    else:
        high = _below(0, 0, _increment(patch.as_number, errors.PATCH_TOO_BIG))
    return (low, high)


def _desugar_tilde(operand: PartialVersion) -> Bounds:
    if not operand.major.is_numeric:
        return (None, None)
    major = operand.major.as_number
    if not operand.minor.is_numeric:
        return (_at_least(major), _below(_increment(major, errors.MAJOR_TOO_BIG)))
    minor = operand.minor.as_number
    low = PrimitiveComparator.greater_than_or_equal(trim(operand))
    return (low, _below(major, _increment(minor, errors.MINOR_TOO_BIG)))


def _desugar_x_range(operand: PartialVersion, operator: PrimitiveOperator) -> Bounds:
    if not operand.major.is_numeric:
        # >* and <* cannot be satisfied, every other spelling matches anything
        if operator.is_strict():
            return (None, PrimitiveComparator.NONE)
        return (None, None)

    if operand.minor.is_numeric and operand.patch.is_numeric:
        return PrimitiveComparator(trim(operand), operator).as_primitives()

    major = operand.major.as_number
    minor = operand.minor.value_or_zero()

    if operator is PrimitiveOperator.GREATER_THAN:
        # >1.x is >=2.0.0, >1.2.x is >=1.3.0
        if not operand.minor.is_numeric:
            return (_at_least(_increment(major, errors.MAJOR_TOO_BIG)), None)
        return (_at_least(major, _increment(minor, errors.MINOR_TOO_BIG)), None)
    if operator is PrimitiveOperator.LESS_THAN_OR_EQUAL:
        return (None, _next_unit(operand))
    if operator is PrimitiveOperator.GREATER_THAN_OR_EQUAL:
        # >=1.2.x admits the pre-releases of 1.2.0
        return (PrimitiveComparator.greater_than_or_equal(Version(major, minor, 0, (0,))), None)
    if operator is PrimitiveOperator.LESS_THAN:
        return (None, _below(major, minor))
    return (_at_least(major, minor), _next_unit(operand))


def _desugar_hyphen(start: PartialVersion, end: PartialVersion) -> Bounds:
    low: Bound = None
    if start.major.is_numeric:
        low = PrimitiveComparator.greater_than_or_equal(trim(start))

    high: Bound = None
    if end.major.is_numeric:
        if end.minor.is_numeric and end.patch.is_numeric:
            high = PrimitiveComparator.less_than_or_equal(
                Version(end.major.as_number, end.minor.as_number, end.patch.as_number, end.pre_releases)
            )
        else:
            high = _next_unit(end)
    return (low, high)


def desugar(comparator: Comparator) -> Bounds:
    """Return the ``(low, high)`` primitive bounds equivalent to ``comparator``.

    ``low`` is a ``>``, ``>=`` or ``=`` primitive, ``high`` is a ``<`` or ``<=``
    primitive, and either may be None when the range is unbounded on that side.

    Raises:
        ComponentOverflowError: if a bound would need a component past the maximum.
        InvalidOperandError: if ``comparator`` is not one of the known variants.
    """
    match comparator:
        case PrimitiveComparator():
            return comparator.as_primitives()
        case CaretComparator(operand=operand):
            return _desugar_caret(operand)
        case TildeComparator(operand=operand):
            return _desugar_tilde(operand)
        case XRangeComparator(operand=operand, operator=operator):
            return _desugar_x_range(operand, operator)
        case HyphenRangeComparator(from_=start, to=end):
            return _desugar_hyphen(start, end)
        case _:
            raise InvalidOperandError(f"Cannot desugar {type(comparator).__name__}")


def resugar(comparator: Comparator, low: Bound, high: Bound) -> Comparator | None:
    """Return ``comparator`` if its own bounds are exactly ``(low, high)``.

    Only the original notation is ever restored: a bound pair is never
    re-expressed as a different sugared comparator.
    """
    if comparator.as_primitives() == (low, high):
        return comparator
    return None
