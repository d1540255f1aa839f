"""Mutable builder for ``Version`` values, including increment rules."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from .. import errors
from ..errors import ComponentOverflowError
from .identifiers import MAX_COMPONENT, validate_build_metadata, validate_component
from .prerelease import ZERO, PreReleaseIdentifier
from .version import Version


class IncrementType(Enum):
    NONE = "none"
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PRE_MAJOR = "premajor"
    PRE_MINOR = "preminor"
    PRE_PATCH = "prepatch"
    PRE_RELEASE = "prerelease"


class VersionBuilder:
    """Mutable counterpart of ``Version``.

    Not meant to be shared between threads. Call ``to_version()`` to obtain an
    immutable snapshot.
    """

    def __init__(self, major: int = 0, minor: int = 0, patch: int = 0) -> None:
        self._major = validate_component(major, errors.MAJOR_NEGATIVE, errors.MAJOR_TOO_BIG)
        self._minor = validate_component(minor, errors.MINOR_NEGATIVE, errors.MINOR_TOO_BIG)
        self._patch = validate_component(patch, errors.PATCH_NEGATIVE, errors.PATCH_TOO_BIG)
        self._pre_releases: list[PreReleaseIdentifier] = []
        self._build_metadata: list[str] = []

    @classmethod
    def from_version(cls, version: Version) -> VersionBuilder:
        builder = cls(version.major, version.minor, version.patch)
        builder._pre_releases.extend(version.pre_releases)
        builder._build_metadata.extend(version.build_metadata)
        return builder

    @property
    def major(self) -> int:
        return self._major

    @major.setter
    def major(self, value: int) -> None:
        self._major = validate_component(value, errors.MAJOR_NEGATIVE, errors.MAJOR_TOO_BIG)

    @property
    def minor(self) -> int:
        return self._minor

    @minor.setter
    def minor(self, value: int) -> None:
        self._minor = validate_component(value, errors.MINOR_NEGATIVE, errors.MINOR_TOO_BIG)

    @property
    def patch(self) -> int:
        return self._patch

    @patch.setter
    def patch(self, value: int) -> None:
        self._patch = validate_component(value, errors.PATCH_NEGATIVE, errors.PATCH_TOO_BIG)

    @property
    def pre_releases(self) -> tuple[PreReleaseIdentifier, ...]:
        return tuple(self._pre_releases)

    @property
    def build_metadata(self) -> tuple[str, ...]:
        return tuple(self._build_metadata)

    def with_major(self, value: int) -> VersionBuilder:
        self.major = value
        return self

    def with_minor(self, value: int) -> VersionBuilder:
        self.minor = value
        return self

    def with_patch(self, value: int) -> VersionBuilder:
        self.patch = value
        return self

    def append_pre_release(self, identifier: int | str | PreReleaseIdentifier) -> VersionBuilder:
        self._pre_releases.append(PreReleaseIdentifier.of(identifier))
        return self

    def clear_pre_releases(self) -> VersionBuilder:
        self._pre_releases.clear()
        return self

    def append_build_metadata(self, identifiers: str | Iterable[str]) -> VersionBuilder:
        if isinstance(identifiers, str):
            identifiers = (identifiers,)
        self._build_metadata.extend(validate_build_metadata(identifiers))
        return self

    def clear_build_metadata(self) -> VersionBuilder:
        self._build_metadata.clear()
        return self

    def to_version(self) -> Version:
        return Version(
            self._major,
            self._minor,
            self._patch,
            tuple(self._pre_releases),
            tuple(self._build_metadata),
        )

    # Increments

    def increment_major(self) -> VersionBuilder:
        # 1.0.0-0 is a pre-release of 1.0.0 and only loses its pre-release
        if self._minor != 0 or self._patch != 0 or not self._pre_releases:
            if self._major == MAX_COMPONENT:
                raise ComponentOverflowError(errors.MAJOR_TOO_BIG)
            self._major += 1
        self._minor = 0
        self._patch = 0
        self._pre_releases.clear()
        return self

    def increment_minor(self) -> VersionBuilder:
        if self._patch != 0 or not self._pre_releases:
            if self._minor == MAX_COMPONENT:
                raise ComponentOverflowError(errors.MINOR_TOO_BIG)
            self._minor += 1
        self._patch = 0
        self._pre_releases.clear()
        return self

    def increment_patch(self) -> VersionBuilder:
        if not self._pre_releases:
            if self._patch == MAX_COMPONENT:
                raise ComponentOverflowError(errors.PATCH_TOO_BIG)
            self._patch += 1
        self._pre_releases.clear()
        return self

    def _set_pre_release(self, pre_release: PreReleaseIdentifier) -> None:
        self._pre_releases = [pre_release]
        if pre_release != ZERO:
            self._pre_releases.append(ZERO)

    def increment_pre_major(self, pre_release: int | str | PreReleaseIdentifier = ZERO) -> VersionBuilder:
        """Bump to the first pre-release of the next major version.

        ``1.2.3`` becomes ``2.0.0-0``, or ``2.0.0-alpha.0`` with ``"alpha"``.
        """
        pre_release = PreReleaseIdentifier.of(pre_release)
        if self._major == MAX_COMPONENT:
            raise ComponentOverflowError(errors.MAJOR_TOO_BIG)
        self._major += 1
        self._minor = 0
        self._patch = 0
        self._set_pre_release(pre_release)
        return self

    def increment_pre_minor(self, pre_release: int | str | PreReleaseIdentifier = ZERO) -> VersionBuilder:
        pre_release = PreReleaseIdentifier.of(pre_release)
        if self._minor == MAX_COMPONENT:
            raise ComponentOverflowError(errors.MINOR_TOO_BIG)
        self._minor += 1
        self._patch = 0
        self._set_pre_release(pre_release)
        return self

    def increment_pre_patch(self, pre_release: int | str | PreReleaseIdentifier = ZERO) -> VersionBuilder:
        pre_release = PreReleaseIdentifier.of(pre_release)
        if self._patch == MAX_COMPONENT:
            raise ComponentOverflowError(errors.PATCH_TOO_BIG)
        self._patch += 1
        self._set_pre_release(pre_release)
        return self

    def increment_pre_release(self, pre_release: int | str | PreReleaseIdentifier = ZERO) -> VersionBuilder:
        """Bump to the next pre-release.

        A release moves to the first pre-release of the next patch. Otherwise the
        right-most numeric identifier is incremented and anything after it is
        dropped (``1.2.3-alpha.4.beta`` becomes ``1.2.3-alpha.5``); a ``0`` is
        appended when no identifier is numeric. A ``pre_release`` that differs
        from the current first identifier restarts at ``pre_release.0``.
        """
        pre_release = PreReleaseIdentifier.of(pre_release)
        if not self._pre_releases:
            return self.increment_pre_patch(pre_release)
        if pre_release != ZERO and pre_release != self._pre_releases[0]:
            self._set_pre_release(pre_release)
            return self

        for index in range(len(self._pre_releases) - 1, -1, -1):
            identifier = self._pre_releases[index]
            if identifier.is_numeric:
                if identifier.number == MAX_COMPONENT:
                    raise ComponentOverflowError(errors.PRE_RELEASE_TOO_BIG)
                self._pre_releases[index] = PreReleaseIdentifier(identifier.number + 1)
                del self._pre_releases[index + 1:]
                break
        else:
            self._pre_releases.append(ZERO)
        return self

    def increment(
        self,
        increment_type: IncrementType,
        pre_release: int | str | PreReleaseIdentifier = ZERO,
    ) -> VersionBuilder:
        if increment_type is IncrementType.NONE:
            return self
        if increment_type is IncrementType.MAJOR:
            return self.increment_major()
        if increment_type is IncrementType.MINOR:
            return self.increment_minor()
        if increment_type is IncrementType.PATCH:
            return self.increment_patch()
        if increment_type is IncrementType.PRE_MAJOR:
            return self.increment_pre_major(pre_release)
        if increment_type is IncrementType.PRE_MINOR:
            return self.increment_pre_minor(pre_release)
        if increment_type is IncrementType.PRE_PATCH:
            return self.increment_pre_patch(pre_release)
        if increment_type is IncrementType.PRE_RELEASE:
            return self.increment_pre_release(pre_release)
        raise ValueError(f"Invalid increment type: {increment_type!r}")
