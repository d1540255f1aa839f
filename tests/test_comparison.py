from __future__ import annotations

import pytest

from npm_ranges import InvalidOperandError, SemverComparer, SemverComparison
from npm_ranges.comparison import (
    DEFAULT,
    DIFFERENTIATE_WILDCARDS,
    EXACT,
    INCLUDE_BUILD_METADATA,
    compare_identifiers,
)
from npm_ranges.models import LOWER_X, STAR
from tests.helpers import comparator, comparator_set, hyphen, partial_version, version, version_range

DIFFERENTIATE_EQUALITY = SemverComparer(SemverComparison.DIFFERENTIATE_EQUALITY)


class TestFlags:
    def test_exact_sets_every_flag(self) -> None:
        assert EXACT.include_build_metadata
        assert EXACT.differentiate_wildcards
        assert EXACT.differentiate_equality
        assert not DEFAULT.include_build_metadata

    def test_from_comparison_reuses_instances(self) -> None:
        assert SemverComparer.from_comparison(SemverComparison.EXACT) is EXACT
        assert SemverComparer.from_comparison(SemverComparison.DEFAULT) is DEFAULT
        comparer = SemverComparer.from_comparison(SemverComparison.DIFFERENTIATE_EQUALITY)
        assert comparer.comparison is SemverComparison.DIFFERENTIATE_EQUALITY


class TestCompare:
    def test_build_metadata(self) -> None:
        left, right = version("1.2.3+a"), version("1.2.3+b")
        assert DEFAULT.compare(left, right) == 0
        assert INCLUDE_BUILD_METADATA.compare(left, right) == -1
        assert INCLUDE_BUILD_METADATA.compare(version("1.2.3"), left) == 1
        assert INCLUDE_BUILD_METADATA.compare(version("1.2.3+a.b"), left) == 1

    def test_build_metadata_does_not_override_precedence(self) -> None:
        assert INCLUDE_BUILD_METADATA.compare(version("1.2.3+z"), version("1.2.4+a")) == -1

    def test_none_sorts_first(self) -> None:
        assert DEFAULT.compare(None, None) == 0
        assert DEFAULT.compare(None, version("0.0.0-0")) == -1
        assert DEFAULT.compare(version("0.0.0-0"), None) == 1

    def test_components(self) -> None:
        assert DEFAULT.compare(LOWER_X, STAR) == 0
        assert DIFFERENTIATE_WILDCARDS.compare(LOWER_X, STAR) == -1

    def test_partials(self) -> None:
        assert DEFAULT.compare(partial_version("1.x"), partial_version("1")) == 0
        assert DIFFERENTIATE_WILDCARDS.compare(partial_version("1.x"), partial_version("1")) == -1
        assert DEFAULT.compare(partial_version("1.2.3-rc"), partial_version("1.2.3")) == -1
        assert INCLUDE_BUILD_METADATA.compare(partial_version("1.2.3+b"), partial_version("1.2.3+a")) == 1

    def test_mixed_types_are_rejected(self) -> None:
        with pytest.raises(InvalidOperandError):
            DEFAULT.compare(version("1.2.3"), partial_version("1.2.3"))
        with pytest.raises(InvalidOperandError):
            DEFAULT.compare("1.2.3", "1.2.3")

    def test_sort_key(self) -> None:
        versions = [version("1.2.3+b"), version("1.0.0"), version("1.2.3+a")]
        assert [str(v) for v in sorted(versions, key=INCLUDE_BUILD_METADATA.sort_key())] == [
            "1.0.0",
            "1.2.3+a",
            "1.2.3+b",
        ]
        assert [str(v) for v in sorted(versions, key=DEFAULT.sort_key())] == ["1.0.0", "1.2.3+b", "1.2.3+a"]


class TestEquals:
    def test_versions(self) -> None:
        assert DEFAULT.equals(version("1.2.3+a"), version("1.2.3+b"))
        assert not EXACT.equals(version("1.2.3+a"), version("1.2.3+b"))
        assert not DEFAULT.equals(version("1.2.3"), None)

    def test_primitive_operators(self) -> None:
        assert DEFAULT.equals(comparator("1.2.3"), comparator("=1.2.3"))
        assert not DIFFERENTIATE_EQUALITY.equals(comparator("1.2.3"), comparator("=1.2.3"))
        assert not DEFAULT.equals(comparator(">1.2.3"), comparator(">=1.2.3"))

    def test_primitive_operands(self) -> None:
        assert DEFAULT.equals(comparator(">=1.2.3+a"), comparator(">=1.2.3+b"))
        assert not EXACT.equals(comparator(">=1.2.3+a"), comparator(">=1.2.3+b"))

    def test_advanced(self) -> None:
        assert DEFAULT.equals(comparator(">=1.x"), comparator(">=1.*"))
        assert not DIFFERENTIATE_WILDCARDS.equals(comparator(">=1.x"), comparator(">=1.*"))
        assert not DEFAULT.equals(comparator("^1.2"), comparator("~1.2"))
        assert DEFAULT.equals(hyphen("1.2", "2"), hyphen("1.2.x", "2.X"))
        assert not DEFAULT.equals(hyphen("1.2", "2"), hyphen("1.2", "3"))

    def test_sets_and_ranges(self) -> None:
        assert DEFAULT.equals(comparator_set("1.2.3 <2.0.0"), comparator_set("=1.2.3 <2.0.0"))
        assert not DEFAULT.equals(comparator_set("1.2.3"), comparator_set("1.2.3 <2.0.0"))
        assert DEFAULT.equals(version_range("^1.x || 3"), version_range("^1.* || 3.X"))
        assert not DIFFERENTIATE_WILDCARDS.equals(version_range("^1.x || 3"), version_range("^1.* || 3.X"))


class TestHash:
    @pytest.mark.parametrize(
        ("comparer", "left", "right"),
        [
            (DEFAULT, version("1.2.3+a"), version("1.2.3+b")),
            (DEFAULT, partial_version("1.x"), partial_version("1.*")),
            (DEFAULT, comparator("1.2.3"), comparator("=1.2.3")),
            (DEFAULT, comparator("^1.x"), comparator("^1")),
            (DEFAULT, hyphen("1", "2.x"), hyphen("1.*", "2")),
            (DEFAULT, comparator_set(">=1.x <2"), comparator_set(">=1.* <2.X")),
            (EXACT, version_range("^1.2.3 || 2.x"), version_range("^1.2.3 || 2.x")),
        ],
    )
    def test_consistent_with_equals(self, comparer: SemverComparer, left, right) -> None:
        assert comparer.equals(left, right)
        assert comparer.hash(left) == comparer.hash(right)

    def test_none(self) -> None:
        assert DEFAULT.hash(None) == 0

    def test_unsupported(self) -> None:
        with pytest.raises(InvalidOperandError):
            DEFAULT.hash("1.2.3")


def test_compare_identifiers() -> None:
    assert compare_identifiers((), ()) == 0
    assert compare_identifiers(("a",), ()) == -1
    assert compare_identifiers(("a",), ("a", "b")) == -1
    assert compare_identifiers(("b",), ("a", "z")) == 1
