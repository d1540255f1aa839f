"""Entry points for matching and ordering versions against ranges.

These helpers apply a ``Settings`` object (pre-release matching and the
comparison mode) on top of the range algebra. They never read settings from
disk: callers pass the result of ``load_settings`` explicitly.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models.version import Version
from .ranges.comparator_set import ComparatorSet
from .ranges.comparators import Comparator
from .ranges.version_range import VersionRange
from .settings import Settings

RangeLike = VersionRange | ComparatorSet | Comparator

_DEFAULT_SETTINGS = Settings()


def satisfies(version: Version, range_: RangeLike, settings: Settings | None = None) -> bool:
    """Return True if ``version`` satisfies ``range_`` under ``settings``."""
    settings = settings or _DEFAULT_SETTINGS
    return range_.is_satisfied_by(version, settings.include_pre_releases)


def filter_satisfying(
    versions: Iterable[Version],
    range_: RangeLike,
    settings: Settings | None = None,
) -> list[Version]:
    """Return the versions satisfying ``range_``, in their original order."""
    settings = settings or _DEFAULT_SETTINGS
    return [
        version
        for version in versions
        if range_.is_satisfied_by(version, settings.include_pre_releases)
    ]


def sort_versions(
    versions: Iterable[Version],
    settings: Settings | None = None,
    reverse: bool = False,
) -> list[Version]:
    """Sort versions with the comparer selected by ``settings``.

    The sort is stable, so versions the comparer considers equal (for example
    differing only in build metadata under the default mode) keep their order.
    """
    settings = settings or _DEFAULT_SETTINGS
    return sorted(versions, key=settings.comparer().sort_key(), reverse=reverse)
