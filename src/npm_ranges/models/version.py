"""Concrete semantic version model."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .. import errors
from ..formatting import TextBuilder, count_digits, format_buildable
from .identifiers import MAX_COMPONENT, validate_build_metadata, validate_component
from .prerelease import PreReleaseIdentifier, coerce_pre_releases, compare_pre_releases

if TYPE_CHECKING:
    from .builder import IncrementType, VersionBuilder


@dataclass(slots=True, frozen=True, eq=False)
class Version:
    """An immutable SemVer 2.0.0 version.

    ``pre_releases`` accepts ints, strings or ``PreReleaseIdentifier`` values and
    is stored as a tuple of identifiers. Build metadata is kept for rendering
    but never takes part in ordering or equality.
    """

    major: int
    minor: int
    patch: int
    pre_releases: tuple[PreReleaseIdentifier, ...] = ()
    build_metadata: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        validate_component(self.major, errors.MAJOR_NEGATIVE, errors.MAJOR_TOO_BIG)
        validate_component(self.minor, errors.MINOR_NEGATIVE, errors.MINOR_TOO_BIG)
        validate_component(self.patch, errors.PATCH_NEGATIVE, errors.PATCH_TOO_BIG)
        object.__setattr__(self, "pre_releases", coerce_pre_releases(self.pre_releases))
        object.__setattr__(self, "build_metadata", validate_build_metadata(self.build_metadata))

    @property
    def is_pre_release(self) -> bool:
        return bool(self.pre_releases)

    @property
    def has_build_metadata(self) -> bool:
        return bool(self.build_metadata)

    def compare(self, other: Version) -> int:
        """Return -1, 0 or 1 according to SemVer precedence."""
        if self is other:
            return 0
        mine = (self.major, self.minor, self.patch)
        theirs = (other.major, other.minor, other.patch)
        if mine != theirs:
            return -1 if mine < theirs else 1
        return compare_pre_releases(self.pre_releases, other.pre_releases)

    def with_build_metadata(self, build_metadata: Iterable[str]) -> Version:
        return Version(self.major, self.minor, self.patch, self.pre_releases, tuple(build_metadata))

    def without_build_metadata(self) -> Version:
        if not self.build_metadata:
            return self
        return Version(self.major, self.minor, self.patch, self.pre_releases)

    def to_builder(self) -> VersionBuilder:
        from .builder import VersionBuilder

        return VersionBuilder.from_version(self)

    def increment(self, increment_type: IncrementType, pre_release: int | str = 0) -> Version:
        """Return the version bumped by ``increment_type``; see ``VersionBuilder.increment``."""
        return self.to_builder().increment(increment_type, pre_release).to_version()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == 0

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.pre_releases))

    def __lt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0

    def calculate_length(self) -> int:
        length = count_digits(self.major) + count_digits(self.minor) + count_digits(self.patch) + 2
        if self.pre_releases:
            length += len(self.pre_releases)
            length += sum(identifier.calculate_length() for identifier in self.pre_releases)
        if self.build_metadata:
            length += len(self.build_metadata)
            length += sum(len(identifier) for identifier in self.build_metadata)
        return length

    def build_string(self, builder: TextBuilder) -> None:
        builder.append_int(self.major)
        builder.append(".")
        builder.append_int(self.minor)
        builder.append(".")
        builder.append_int(self.patch)
        if self.pre_releases:
            builder.append("-")
            builder.append_joined(".", self.pre_releases)
        if self.build_metadata:
            builder.append("+")
            builder.append(".".join(self.build_metadata))

    def __str__(self) -> str:
        return format_buildable(self)


MIN_VALUE = Version(0, 0, 0, (0,))
MAX_VALUE = Version(MAX_COMPONENT, MAX_COMPONENT, MAX_COMPONENT)
