"""Comparator variants: primitive bounds and the sugared node-semver forms.

The family is closed: ``PrimitiveComparator`` holds a concrete operator and
version, while ``CaretComparator`` (``^1.2.3``), ``TildeComparator``
(``~1.2.3``), ``XRangeComparator`` (``1.2.x``, ``>=1.x``) and
``HyphenRangeComparator`` (``1.2.3 - 2.3.4``) hold partial versions and are
reduced to at most two primitive bounds by ``npm_ranges.ranges.desugar``.

Combining comparators with ``&``, ``|`` and ``~`` yields ``ComparatorSet`` and
``VersionRange`` values.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from ..errors import InvalidOperandError
from ..formatting import TextBuilder, format_buildable
from ..models.partial import STAR, PartialVersion
from ..models.version import MIN_VALUE, Version
from .operators import PrimitiveOperator

if TYPE_CHECKING:
    from .comparator_set import ComparatorSet
    from .version_range import VersionRange


class Comparator:
    """Base class of every comparator variant."""

    __slots__ = ()

    @property
    def is_primitive(self) -> bool:
        return False

    @property
    def is_advanced(self) -> bool:
        return False

    def is_satisfied_by(self, version: Version | None, include_pre_releases: bool = False) -> bool:
        """Return True if ``version`` satisfies this comparator.

        Pre-release versions are only matched when ``include_pre_releases`` is
        set or when the comparator names a pre-release on the same
        ``major.minor.patch`` triple.
        """
        if version is None:
            return False
        if not isinstance(version, Version):
            raise InvalidOperandError(f"Expected a Version, got {type(version).__name__}")
        if (
            version.is_pre_release
            and not include_pre_releases
            and not self.can_match_pre_release(version.major, version.minor, version.patch)
        ):
            return False
        return self.is_satisfied_by_core(version)

    def is_satisfied_by_core(self, version: Version) -> bool:
        raise NotImplementedError

    def can_match_pre_release(self, major: int, minor: int, patch: int) -> bool:
        raise NotImplementedError

    def as_primitives(self) -> tuple[PrimitiveComparator | None, PrimitiveComparator | None]:
        raise NotImplementedError

    def calculate_length(self) -> int:
        raise NotImplementedError

    def build_string(self, builder: TextBuilder) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return format_buildable(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __and__(self, other: object) -> ComparatorSet | VersionRange:
        from .algebra import intersect
        from .comparator_set import ComparatorSet
        from .version_range import VersionRange

        if isinstance(other, Comparator):
            return intersect(self, other)
        if isinstance(other, ComparatorSet):
            return ComparatorSet((self,)) & other
        if isinstance(other, VersionRange):
            return VersionRange.of(self) & other
        return NotImplemented

    def __or__(self, other: object) -> VersionRange:
        from .algebra import union
        from .comparator_set import ComparatorSet
        from .version_range import VersionRange

        if isinstance(other, Comparator):
            return union(self, other)
        if isinstance(other, ComparatorSet):
            return ComparatorSet((self,)) | other
        if isinstance(other, VersionRange):
            return VersionRange.of(self) | other
        return NotImplemented

    def __invert__(self) -> VersionRange:
        from .algebra import complement

        return complement(self)


class PrimitiveComparator(Comparator):
    """A single operator applied to a concrete version, e.g. ``>=1.2.3``."""

    __slots__ = ("_operand", "_operator")

    NONE: ClassVar[PrimitiveComparator]

    def __init__(
        self,
        operand: Version,
        operator: PrimitiveOperator = PrimitiveOperator.IMPLICIT_EQUAL,
    ) -> None:
        if not isinstance(operand, Version):
            raise InvalidOperandError(f"Primitive operand must be a Version, got {type(operand).__name__}")
        self._operand = operand
        self._operator = PrimitiveOperator(operator)

    @classmethod
    def implicit_equal(cls, operand: Version) -> PrimitiveComparator:
        return cls(operand, PrimitiveOperator.IMPLICIT_EQUAL)

    @classmethod
    def equal(cls, operand: Version) -> PrimitiveComparator:
        return cls(operand, PrimitiveOperator.EQUAL)

    @classmethod
    def greater_than(cls, operand: Version) -> PrimitiveComparator:
        return cls(operand, PrimitiveOperator.GREATER_THAN)

    @classmethod
    def less_than(cls, operand: Version) -> PrimitiveComparator:
        return cls(operand, PrimitiveOperator.LESS_THAN)

    @classmethod
    def greater_than_or_equal(cls, operand: Version) -> PrimitiveComparator:
        return cls(operand, PrimitiveOperator.GREATER_THAN_OR_EQUAL)

    @classmethod
    def less_than_or_equal(cls, operand: Version) -> PrimitiveComparator:
        return cls(operand, PrimitiveOperator.LESS_THAN_OR_EQUAL)

    @property
    def operand(self) -> Version:
        return self._operand

    @property
    def operator(self) -> PrimitiveOperator:
        return self._operator

    @property
    def is_primitive(self) -> bool:
        return True

    def is_satisfied_by_core(self, version: Version) -> bool:
        result = version.compare(self._operand)
        operator = self._operator
        if operator.is_eq():
            return result == 0
        if operator is PrimitiveOperator.GREATER_THAN:
            return result > 0
        if operator is PrimitiveOperator.LESS_THAN:
            return result < 0
        if operator is PrimitiveOperator.GREATER_THAN_OR_EQUAL:
            return result >= 0
        return result <= 0

    def can_match_pre_release(self, major: int, minor: int, patch: int) -> bool:
        operand = self._operand
        return (
            operand.is_pre_release
            and operand.major == major
            and operand.minor == minor
            and operand.patch == patch
        )

    def as_primitives(self) -> tuple[PrimitiveComparator | None, PrimitiveComparator | None]:
        if self._operator.is_lt_or_lte():
            return (None, self)
        return (self, None)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrimitiveComparator):
            return NotImplemented
        return self._operator.normalize() == other._operator.normalize() and self._operand == other._operand

    def __hash__(self) -> int:
        return hash((PrimitiveComparator, self._operator.normalize(), self._operand))

    def calculate_length(self) -> int:
        return len(self._operator.symbol) + self._operand.calculate_length()

    def build_string(self, builder: TextBuilder) -> None:
        builder.append(self._operator.symbol)
        self._operand.build_string(builder)


class AdvancedComparator(Comparator):
    """Base class of the sugared comparators over a ``PartialVersion`` operand.

    The desugared bounds are computed on first use and memoized. The
    computation is pure, so concurrent first accesses at worst compute it twice.
    """

    __slots__ = ("_operand", "_primitives")

    _symbol: ClassVar[str] = ""

    def __init__(self, operand: PartialVersion) -> None:
        if not isinstance(operand, PartialVersion):
            raise InvalidOperandError(
                f"{type(self).__name__} operand must be a PartialVersion, got {type(operand).__name__}"
            )
        self._operand = operand
        self._primitives: tuple[PrimitiveComparator | None, PrimitiveComparator | None] | None = None

    @property
    def operand(self) -> PartialVersion:
        return self._operand

    @property
    def is_advanced(self) -> bool:
        return True

    def to_primitives(self) -> tuple[PrimitiveComparator | None, PrimitiveComparator | None]:
        """Return the ``(low, high)`` primitive bounds equivalent to this comparator.

        Raises:
            ComponentOverflowError: if the upper bound needs a component past the maximum.
        """
        primitives = self._primitives
        if primitives is None:
            from .desugar import desugar

            primitives = desugar(self)
            self._primitives = primitives
        return primitives

    def as_primitives(self) -> tuple[PrimitiveComparator | None, PrimitiveComparator | None]:
        return self.to_primitives()

    def is_satisfied_by_core(self, version: Version) -> bool:
        low, high = self.to_primitives()
        return (low is None or low.is_satisfied_by_core(version)) and (
            high is None or high.is_satisfied_by_core(version)
        )

    def can_match_pre_release(self, major: int, minor: int, patch: int) -> bool:
        return operand_can_match_pre_release(self._operand, major, minor, patch)

    def _key(self) -> tuple:
        return (self._operand,)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Comparator):
            return NotImplemented
        return type(other) is type(self) and self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self).__name__, *self._key()))

    def calculate_length(self) -> int:
        return len(self._symbol) + self._operand.calculate_length()

    def build_string(self, builder: TextBuilder) -> None:
        builder.append(self._symbol)
        self._operand.build_string(builder)


def operand_can_match_pre_release(operand: PartialVersion, major: int, minor: int, patch: int) -> bool:
    """True if ``operand`` is a pre-release whose numeric slots equal the given triple."""
    if not operand.is_pre_release:
        return False
    for component, value in ((operand.major, major), (operand.minor, minor), (operand.patch, patch)):
        if component.is_numeric and component.as_number != value:
            return False
    return True


class CaretComparator(AdvancedComparator):
    """``^1.2.3``: changes that do not modify the left-most non-zero component."""

    __slots__ = ()

    _symbol = "^"


class TildeComparator(AdvancedComparator):
    """``~1.2.3``: patch-level changes, or minor-level ones if the minor is a wildcard."""

    __slots__ = ()

    _symbol = "~"


class XRangeComparator(AdvancedComparator):
    """A partial version with an optional operator, such as ``1.2.x`` or ``>=1.x``."""

    __slots__ = ("_operator",)

    ALL: ClassVar[XRangeComparator]

    def __init__(
        self,
        operand: PartialVersion,
        operator: PrimitiveOperator = PrimitiveOperator.IMPLICIT_EQUAL,
    ) -> None:
        super().__init__(operand)
        self._operator = PrimitiveOperator(operator)

    @property
    def operator(self) -> PrimitiveOperator:
        return self._operator

    def _key(self) -> tuple:
        return (self._operator.normalize(), self._operand)

    def calculate_length(self) -> int:
        return len(self._operator.symbol) + self._operand.calculate_length()

    def build_string(self, builder: TextBuilder) -> None:
        builder.append(self._operator.symbol)
        self._operand.build_string(builder)


class HyphenRangeComparator(AdvancedComparator):
    """``1.2.3 - 2.3.4``: an inclusive range between two partial versions."""

    __slots__ = ("_to",)

    def __init__(self, from_: PartialVersion, to: PartialVersion) -> None:
        super().__init__(from_)
        if not isinstance(to, PartialVersion):
            raise InvalidOperandError(f"Hyphen range end must be a PartialVersion, got {type(to).__name__}")
        self._to = to

    @property
    def from_(self) -> PartialVersion:
        return self._operand

    @property
    def to(self) -> PartialVersion:
        return self._to

    def can_match_pre_release(self, major: int, minor: int, patch: int) -> bool:
        return operand_can_match_pre_release(self._operand, major, minor, patch) or (
            operand_can_match_pre_release(self._to, major, minor, patch)
        )

    def _key(self) -> tuple:
        return (self._operand, self._to)

    def calculate_length(self) -> int:
        return self._operand.calculate_length() + 3 + self._to.calculate_length()

    def build_string(self, builder: TextBuilder) -> None:
        self._operand.build_string(builder)
        builder.append(" - ")
        self._to.build_string(builder)


PrimitiveComparator.NONE = PrimitiveComparator.less_than(MIN_VALUE)
XRangeComparator.ALL = XRangeComparator(PartialVersion(STAR))
