"""Conversions between npm_ranges versions and ``packaging.version.Version``."""

from __future__ import annotations

from packaging.version import Version as PackagingVersion

from .errors import InvalidOperandError, SemverValidationError
from .models.partial import PartialVersion
from .models.version import Version

_PRE_RELEASE_LABELS = {"a": "alpha", "b": "beta", "rc": "rc"}


def from_packaging(version: PackagingVersion) -> Version:
    """Convert a PEP 440 version to a semantic version.

    The release is padded to three components. Pre-releases (``a``, ``b``,
    ``rc``) become pre-release identifiers, so ``1.2rc1`` is ``1.2.0-rc.1``;
    local version labels become build metadata.

    Raises:
        SemverValidationError: for epochs, post-releases, development releases
            and releases with more than three components. Development releases
            sort before their pre-release under PEP 440, which no SemVer
            identifier can express.
    """
    if not isinstance(version, PackagingVersion):
        raise InvalidOperandError(f"Expected a packaging Version, got {type(version).__name__}")
    if version.epoch:
        raise SemverValidationError(f"Version epochs cannot be represented: {version}")
    if version.post is not None:
        raise SemverValidationError(f"Post-releases cannot be represented: {version}")
    if version.dev is not None:
        raise SemverValidationError(f"Development releases cannot be represented: {version}")
    release = version.release
    if len(release) > 3:
        raise SemverValidationError(f"Releases with more than three components cannot be represented: {version}")
    major, minor, patch = (tuple(release) + (0, 0, 0))[:3]

    pre_releases: list[int | str] = []
    if version.pre is not None:
        label, number = version.pre
        pre_releases.extend((_PRE_RELEASE_LABELS[label], number))

    build_metadata: tuple[str, ...] = ()
    if version.local:
        build_metadata = tuple(version.local.split("."))

    return Version(major, minor, patch, tuple(pre_releases), build_metadata)


def to_packaging(version: Version | PartialVersion) -> PackagingVersion:
    """Narrow a version to its numeric release as a PEP 440 version.

    Non-numeric slots of a partial version become 0 and trailing omitted slots
    are dropped (``1.x`` becomes ``1.0``, ``2`` stays ``2``). Pre-release
    identifiers and build metadata are discarded.
    """
    if isinstance(version, Version):
        return PackagingVersion(f"{version.major}.{version.minor}.{version.patch}")
    if not isinstance(version, PartialVersion):
        raise InvalidOperandError(f"Expected a Version or PartialVersion, got {type(version).__name__}")
    parts = [version.major.value_or_zero()]
    if not version.minor.is_omitted:
        parts.append(version.minor.value_or_zero())
        if not version.patch.is_omitted:
            parts.append(version.patch.value_or_zero())
    return PackagingVersion(".".join(str(part) for part in parts))
