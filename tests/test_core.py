from __future__ import annotations

from npm_ranges import SemverComparison
from npm_ranges.core import filter_satisfying, satisfies, sort_versions
from npm_ranges.settings import Settings
from tests.helpers import comparator, comparator_set, version, version_range


def test_satisfies_uses_pre_release_setting() -> None:
    candidate = version("1.2.3-rc.1")
    assert not satisfies(candidate, comparator("^1.0.0"))
    assert satisfies(candidate, comparator("^1.0.0"), Settings(include_pre_releases=True))


def test_satisfies_accepts_sets_and_ranges() -> None:
    assert satisfies(version("1.5.0"), comparator_set(">=1.2.3 <2.0.0"))
    assert satisfies(version("3.1.0"), version_range("^1.0.0 || ^3.0.0"))
    assert not satisfies(version("2.0.0"), version_range("^1.0.0 || ^3.0.0"))


def test_filter_satisfying_keeps_order() -> None:
    versions = [version(text) for text in ("2.1.0", "1.0.0", "2.0.1-beta", "2.0.5", "3.0.0")]
    result = filter_satisfying(versions, comparator("^2.0.0"))
    assert [str(v) for v in result] == ["2.1.0", "2.0.5"]
    result = filter_satisfying(versions, comparator("^2.0.0"), Settings(include_pre_releases=True))
    assert [str(v) for v in result] == ["2.1.0", "2.0.1-beta", "2.0.5"]


def test_sort_versions() -> None:
    versions = [version(text) for text in ("1.0.0+b", "1.0.0-rc.1", "0.9.0", "1.0.0+a")]
    assert [str(v) for v in sort_versions(versions)] == ["0.9.0", "1.0.0-rc.1", "1.0.0+b", "1.0.0+a"]
    exact = Settings(comparison=SemverComparison.INCLUDE_BUILD_METADATA)
    assert [str(v) for v in sort_versions(versions, exact)] == ["0.9.0", "1.0.0-rc.1", "1.0.0+a", "1.0.0+b"]
    assert [str(v) for v in sort_versions(versions, exact, reverse=True)] == [
        "1.0.0+b",
        "1.0.0+a",
        "1.0.0-rc.1",
        "0.9.0",
    ]
