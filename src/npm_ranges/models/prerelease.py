"""Pre-release identifier model."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..errors import (
    PRE_RELEASE_EMPTY,
    PRE_RELEASE_INVALID,
    PRE_RELEASE_LEADING_ZEROES,
    PRE_RELEASE_NEGATIVE,
    PRE_RELEASE_TOO_BIG,
    SemverValidationError,
)
from ..formatting import TextBuilder, count_digits, format_buildable
from .identifiers import MAX_COMPONENT, is_valid_identifier, validate_component


@dataclass(slots=True, frozen=True, eq=False)
class PreReleaseIdentifier:
    """A single dot-separated pre-release segment.

    Numeric identifiers hold ``number`` and have ``text`` set to None;
    alphanumeric identifiers hold ``text``. Numeric identifiers always sort
    before alphanumeric ones.
    """

    number: int = 0
    text: str | None = None

    def __post_init__(self) -> None:
        if self.text is None:
            validate_component(self.number, PRE_RELEASE_NEGATIVE, PRE_RELEASE_TOO_BIG)
            return
        if not self.text:
            raise SemverValidationError(PRE_RELEASE_EMPTY)
        if not is_valid_identifier(self.text):
            raise SemverValidationError(PRE_RELEASE_INVALID)
        if self.text.isdigit():
            raise SemverValidationError(
                "All-digit pre-release identifiers must be created as numeric identifiers"
            )

    @classmethod
    def from_string(cls, text: str, allow_leading_zeroes: bool = False) -> PreReleaseIdentifier:
        """Validate ``text`` and return the matching identifier.

        All-digit strings become numeric identifiers. A leading zero is only
        accepted when ``allow_leading_zeroes`` is set, in which case the
        value is normalised (``"007"`` becomes ``7``).
        """
        if not text:
            raise SemverValidationError(PRE_RELEASE_EMPTY)
        if text.isascii() and text.isdigit():
            if len(text) > 1 and text[0] == "0" and not allow_leading_zeroes:
                raise SemverValidationError(PRE_RELEASE_LEADING_ZEROES)
            number = int(text)
            if number > MAX_COMPONENT:
                raise SemverValidationError(PRE_RELEASE_TOO_BIG)
            return cls(number=number)
        return cls(text=text)

    @classmethod
    def of(cls, value: int | str | PreReleaseIdentifier) -> PreReleaseIdentifier:
        if isinstance(value, PreReleaseIdentifier):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        return cls(number=value)

    @property
    def is_numeric(self) -> bool:
        return self.text is None

    @property
    def as_number(self) -> int:
        if self.text is not None:
            raise SemverValidationError(f"Pre-release identifier {self.text!r} is not numeric")
        return self.number

    def compare(self, other: PreReleaseIdentifier) -> int:
        if self.text is None:
            if other.text is not None:
                return -1
            return (self.number > other.number) - (self.number < other.number)
        if other.text is None:
            return 1
        return (self.text > other.text) - (self.text < other.text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PreReleaseIdentifier):
            return NotImplemented
        return self.text == other.text and (self.text is not None or self.number == other.number)

    def __hash__(self) -> int:
        return hash(self.number) if self.text is None else hash(self.text)

    def __lt__(self, other: PreReleaseIdentifier) -> bool:
        if not isinstance(other, PreReleaseIdentifier):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: PreReleaseIdentifier) -> bool:
        if not isinstance(other, PreReleaseIdentifier):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: PreReleaseIdentifier) -> bool:
        if not isinstance(other, PreReleaseIdentifier):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: PreReleaseIdentifier) -> bool:
        if not isinstance(other, PreReleaseIdentifier):
            return NotImplemented
        return self.compare(other) >= 0

    def calculate_length(self) -> int:
        return count_digits(self.number) if self.text is None else len(self.text)

    def build_string(self, builder: TextBuilder) -> None:
        if self.text is None:
            builder.append_int(self.number)
        else:
            builder.append(self.text)

    def __str__(self) -> str:
        return format_buildable(self)


ZERO = PreReleaseIdentifier(0)


def coerce_pre_releases(
    identifiers: Iterable[int | str | PreReleaseIdentifier],
) -> tuple[PreReleaseIdentifier, ...]:
    return tuple(PreReleaseIdentifier.of(identifier) for identifier in identifiers)


def compare_pre_releases(
    left: tuple[PreReleaseIdentifier, ...],
    right: tuple[PreReleaseIdentifier, ...],
) -> int:
    """Compare two identifier sequences with SemVer precedence.

    An empty sequence (a release) sorts after any non-empty one; otherwise
    identifiers are compared in order and a shorter prefix sorts first.
    """
    if not left:
        return 0 if not right else 1
    if not right:
        return -1
    for mine, theirs in zip(left, right):
        result = mine.compare(theirs)
        if result:
            return result
    return (len(left) > len(right)) - (len(left) < len(right))
