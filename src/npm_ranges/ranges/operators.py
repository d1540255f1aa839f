"""Primitive comparison operators."""

from __future__ import annotations

from enum import IntEnum


class PrimitiveOperator(IntEnum):
    """Operator of a primitive comparator.

    The numbering is significant: ``invert`` maps each operator to its
    complement by subtracting from 7, and two directional operators point
    the same way when their sum is even.
    """

    IMPLICIT_EQUAL = 0
    EQUAL = 1
    GREATER_THAN = 2
    LESS_THAN = 3
    GREATER_THAN_OR_EQUAL = 4
    LESS_THAN_OR_EQUAL = 5

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    def is_eq(self) -> bool:
        return self <= PrimitiveOperator.EQUAL

    def is_gt_or_gte(self) -> bool:
        return self in (PrimitiveOperator.GREATER_THAN, PrimitiveOperator.GREATER_THAN_OR_EQUAL)

    def is_lt_or_lte(self) -> bool:
        return self in (PrimitiveOperator.LESS_THAN, PrimitiveOperator.LESS_THAN_OR_EQUAL)

    def is_inclusive(self) -> bool:
        """True for ``>=`` and ``<=``."""
        return self >= PrimitiveOperator.GREATER_THAN_OR_EQUAL

    def is_strict(self) -> bool:
        return self in (PrimitiveOperator.GREATER_THAN, PrimitiveOperator.LESS_THAN)

    def invert(self) -> PrimitiveOperator:
        """Return the operator matching exactly the versions this one rejects.

        Only defined for the four directional operators.
        """
        if self.is_eq():
            raise ValueError("Equality operators have no single-operator complement")
        return PrimitiveOperator(7 - self)

    def normalize(self) -> PrimitiveOperator:
        return PrimitiveOperator.EQUAL if self is PrimitiveOperator.IMPLICIT_EQUAL else self


_SYMBOLS = {
    PrimitiveOperator.IMPLICIT_EQUAL: "",
    PrimitiveOperator.EQUAL: "=",
    PrimitiveOperator.GREATER_THAN: ">",
    PrimitiveOperator.LESS_THAN: "<",
    PrimitiveOperator.GREATER_THAN_OR_EQUAL: ">=",
    PrimitiveOperator.LESS_THAN_OR_EQUAL: "<=",
}


def same_direction(left: PrimitiveOperator, right: PrimitiveOperator) -> bool:
    """True if both operators are bounds pointing the same way (``>``/``>=`` or ``<``/``<=``)."""
    return left > PrimitiveOperator.EQUAL and right > PrimitiveOperator.EQUAL and (left + right) % 2 == 0
