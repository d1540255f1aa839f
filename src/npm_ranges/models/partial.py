"""Partial version model used as the operand of range comparators.

A ``PartialVersion`` may leave its minor and patch slots omitted (``1``,
``1.2``) or fill them with one of the wildcard spellings (``1.x``, ``1.2.*``).
It is operand data only: versions are never tested for satisfaction against
a partial version directly, only through the comparators built on top of it.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .. import errors
from ..errors import ComponentKindError, SemverValidationError
from ..formatting import TextBuilder, count_digits, format_buildable
from .identifiers import MAX_COMPONENT, validate_build_metadata
from .prerelease import PreReleaseIdentifier, coerce_pre_releases, compare_pre_releases
from .version import Version

WILDCARDS = ("x", "X", "*")

# Ordering of non-numeric values when wildcards are differentiated.
_RAW_RANK = {"x": 1, "X": 2, "*": 3, None: 4}


@dataclass(slots=True, frozen=True, eq=False)
class PartialComponent:
    """One version slot: a number, a wildcard character, or omitted (None)."""

    value: int | str | None = None

    def __post_init__(self) -> None:
        value = self.value
        if value is None:
            return
        if isinstance(value, str):
            if value not in WILDCARDS:
                raise SemverValidationError(
                    f"Invalid wildcard character {value!r}; expected one of 'x', 'X' or '*'"
                )
            return
        if isinstance(value, bool) or not isinstance(value, int):
            raise SemverValidationError(f"Invalid partial component {value!r}")
        if value < 0:
            raise SemverValidationError("A partial version component cannot be less than 0.")
        if value > MAX_COMPONENT:
            raise SemverValidationError(
                f"A partial version component cannot be greater than {MAX_COMPONENT}."
            )

    @classmethod
    def of(cls, value: int | str | None | PartialComponent) -> PartialComponent:
        if isinstance(value, PartialComponent):
            return value
        return cls(value)

    @property
    def is_numeric(self) -> bool:
        return isinstance(self.value, int)

    @property
    def is_omitted(self) -> bool:
        return self.value is None

    @property
    def is_wildcard(self) -> bool:
        return isinstance(self.value, str)

    @property
    def as_number(self) -> int:
        if not isinstance(self.value, int):
            raise ComponentKindError("The partial component is not numeric.")
        return self.value

    @property
    def as_wildcard(self) -> str:
        if not isinstance(self.value, str):
            raise ComponentKindError("The partial component is not a wildcard.")
        return self.value

    def value_or_zero(self) -> int:
        return self.value if isinstance(self.value, int) else 0

    def compare(self, other: PartialComponent) -> int:
        """Compare with non-numeric values equal to each other and below numbers."""
        mine, theirs = self.value, other.value
        if not isinstance(mine, int):
            return 0 if not isinstance(theirs, int) else -1
        if not isinstance(theirs, int):
            return 1
        return (mine > theirs) - (mine < theirs)

    def compare_exact(self, other: PartialComponent) -> int:
        """Compare distinguishing every wildcard spelling and omission.

        Numbers sort first, followed by ``x``, ``X``, ``*`` and finally omitted.
        """
        mine, theirs = self.value, other.value
        if isinstance(mine, int) and isinstance(theirs, int):
            return (mine > theirs) - (mine < theirs)
        left = 0 if isinstance(mine, int) else _RAW_RANK[mine]
        right = 0 if isinstance(theirs, int) else _RAW_RANK[theirs]
        return (left > right) - (left < right)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PartialComponent):
            return NotImplemented
        return self.compare(other) == 0

    def __hash__(self) -> int:
        return hash(self.value) if isinstance(self.value, int) else hash(-1)

    def __lt__(self, other: PartialComponent) -> bool:
        if not isinstance(other, PartialComponent):
            return NotImplemented
        return self.compare(other) < 0

    def __gt__(self, other: PartialComponent) -> bool:
        if not isinstance(other, PartialComponent):
            return NotImplemented
        return self.compare(other) > 0

    def calculate_length(self) -> int:
        if self.value is None:
            return 0
        if isinstance(self.value, str):
            return 1
        return count_digits(self.value)

    def build_string(self, builder: TextBuilder) -> None:
        if isinstance(self.value, int):
            builder.append_int(self.value)
        elif self.value is not None:
            builder.append(self.value)

    def __str__(self) -> str:
        return format_buildable(self)


OMITTED = PartialComponent(None)
ZERO_COMPONENT = PartialComponent(0)
LOWER_X = PartialComponent("x")
UPPER_X = PartialComponent("X")
STAR = PartialComponent("*")


@dataclass(slots=True, frozen=True, eq=False)
class PartialVersion:
    """A version whose components may be wildcards or omitted."""

    major: PartialComponent
    minor: PartialComponent = OMITTED
    patch: PartialComponent = OMITTED
    pre_releases: tuple[PreReleaseIdentifier, ...] = ()
    build_metadata: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        major = PartialComponent.of(self.major)
        minor = PartialComponent.of(self.minor)
        patch = PartialComponent.of(self.patch)
        if major.is_omitted:
            raise SemverValidationError(errors.MAJOR_OMITTED)
        if minor.is_omitted and not patch.is_omitted:
            raise SemverValidationError(errors.PATCH_WITHOUT_MINOR)
        pre_releases = coerce_pre_releases(self.pre_releases)
        build_metadata = validate_build_metadata(self.build_metadata)
        if patch.is_omitted:
            if pre_releases:
                raise SemverValidationError(errors.PRE_RELEASE_WITHOUT_PATCH)
            if build_metadata:
                raise SemverValidationError(errors.BUILD_METADATA_WITHOUT_PATCH)
        object.__setattr__(self, "major", major)
        object.__setattr__(self, "minor", minor)
        object.__setattr__(self, "patch", patch)
        object.__setattr__(self, "pre_releases", pre_releases)
        object.__setattr__(self, "build_metadata", build_metadata)

    @classmethod
    def from_version(cls, version: Version) -> PartialVersion:
        return cls(
            PartialComponent(version.major),
            PartialComponent(version.minor),
            PartialComponent(version.patch),
            version.pre_releases,
            version.build_metadata,
        )

    @property
    def is_partial(self) -> bool:
        return not (self.major.is_numeric and self.minor.is_numeric and self.patch.is_numeric)

    @property
    def is_pre_release(self) -> bool:
        return bool(self.pre_releases)

    @property
    def has_build_metadata(self) -> bool:
        return bool(self.build_metadata)

    def to_version(self) -> Version:
        """Return the version with every non-numeric slot replaced by 0."""
        return Version(
            self.major.value_or_zero(),
            self.minor.value_or_zero(),
            self.patch.value_or_zero(),
            self.pre_releases,
            self.build_metadata,
        )

    def compare(self, other: PartialVersion) -> int:
        if self is other:
            return 0
        for mine, theirs in (
            (self.major, other.major),
            (self.minor, other.minor),
            (self.patch, other.patch),
        ):
            result = mine.compare(theirs)
            if result:
                return result
        return compare_pre_releases(self.pre_releases, other.pre_releases)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PartialVersion):
            return NotImplemented
        return (
            self.major == other.major
            and self.minor == other.minor
            and self.patch == other.patch
            and self.pre_releases == other.pre_releases
        )

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.pre_releases))

    def __lt__(self, other: PartialVersion) -> bool:
        if not isinstance(other, PartialVersion):
            return NotImplemented
        return self.compare(other) < 0

    def __gt__(self, other: PartialVersion) -> bool:
        if not isinstance(other, PartialVersion):
            return NotImplemented
        return self.compare(other) > 0

    def calculate_length(self) -> int:
        length = self.major.calculate_length()
        if not self.minor.is_omitted:
            length += 1 + self.minor.calculate_length()
            if not self.patch.is_omitted:
                length += 1 + self.patch.calculate_length()
        if self.pre_releases:
            length += len(self.pre_releases)
            length += sum(identifier.calculate_length() for identifier in self.pre_releases)
        if self.build_metadata:
            length += len(self.build_metadata)
            length += sum(len(identifier) for identifier in self.build_metadata)
        return length

    def build_string(self, builder: TextBuilder) -> None:
        self.major.build_string(builder)
        if not self.minor.is_omitted:
            builder.append(".")
            self.minor.build_string(builder)
            if not self.patch.is_omitted:
                builder.append(".")
                self.patch.build_string(builder)
        if self.pre_releases:
            builder.append("-")
            builder.append_joined(".", self.pre_releases)
        if self.build_metadata:
            builder.append("+")
            builder.append(".".join(self.build_metadata))

    def __str__(self) -> str:
        return format_buildable(self)


def partial(
    major: int | str,
    minor: int | str | None = None,
    patch: int | str | None = None,
    pre_releases: Iterable[int | str | PreReleaseIdentifier] = (),
    build_metadata: Iterable[str] = (),
) -> PartialVersion:
    """Shorthand constructor accepting raw component values."""
    return PartialVersion(
        PartialComponent.of(major),
        PartialComponent.of(minor),
        PartialComponent.of(patch),
        tuple(pre_releases),
        tuple(build_metadata),
    )
