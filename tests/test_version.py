from __future__ import annotations

import itertools

import pytest

from npm_ranges import MAX_VALUE, MIN_VALUE, PreReleaseIdentifier, SemverValidationError, Version
from npm_ranges.models import MAX_COMPONENT
from tests.helpers import version

# Ascending SemVer 2.0.0 precedence, including the example chain from semver.org.
ORDERED = [
    "0.0.0-0",
    "0.0.0-0.0",
    "0.0.0",
    "1.0.0-0",
    "1.0.0-alpha",
    "1.0.0-alpha.1",
    "1.0.0-alpha.beta",
    "1.0.0-beta",
    "1.0.0-beta.2",
    "1.0.0-beta.11",
    "1.0.0-rc.1",
    "1.0.0",
    "1.0.1",
    "1.1.0",
    "2.0.0",
    "10.0.0",
]


class TestConstruction:
    def test_stores_components(self) -> None:
        v = Version(1, 2, 3, ("alpha", 4), ("build", "007"))
        assert (v.major, v.minor, v.patch) == (1, 2, 3)
        assert v.pre_releases == (PreReleaseIdentifier(text="alpha"), PreReleaseIdentifier(4))
        assert v.build_metadata == ("build", "007")
        assert v.is_pre_release
        assert v.has_build_metadata

    @pytest.mark.parametrize(
        ("components", "message"),
        [
            ((-1, 0, 0), "major version component cannot be less than 0"),
            ((0, -1, 0), "minor version component cannot be less than 0"),
            ((0, 0, -1), "patch version component cannot be less than 0"),
            ((MAX_COMPONENT + 1, 0, 0), "major version component cannot be greater"),
        ],
    )
    def test_rejects_out_of_range_components(self, components, message) -> None:
        with pytest.raises(SemverValidationError, match=message):
            Version(*components)

    @pytest.mark.parametrize("identifier", ["", "al pha", "beta!", "01"])
    def test_rejects_malformed_pre_release(self, identifier: str) -> None:
        with pytest.raises(SemverValidationError):
            Version(1, 0, 0, (identifier,))

    @pytest.mark.parametrize("identifier", ["", "exp+sha", "a.b"])
    def test_rejects_malformed_build_metadata(self, identifier: str) -> None:
        with pytest.raises(SemverValidationError):
            Version(1, 0, 0, (), (identifier,))

    def test_build_metadata_allows_leading_zeroes(self) -> None:
        assert Version(1, 0, 0, (), ("001",)).build_metadata == ("001",)

    def test_validation_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            Version(-1, 0, 0)

    def test_sentinels(self) -> None:
        assert str(MIN_VALUE) == "0.0.0-0"
        assert str(MAX_VALUE) == "2147483647.2147483647.2147483647"
        assert all(MIN_VALUE <= version(text) <= MAX_VALUE for text in ORDERED)


class TestPreReleaseIdentifier:
    def test_numeric_strings_become_numbers(self) -> None:
        identifier = PreReleaseIdentifier.from_string("42")
        assert identifier.is_numeric
        assert identifier.as_number == 42

    def test_leading_zeroes_need_opt_in(self) -> None:
        with pytest.raises(SemverValidationError, match="leading zeroes"):
            PreReleaseIdentifier.from_string("007")
        assert PreReleaseIdentifier.from_string("007", allow_leading_zeroes=True) == PreReleaseIdentifier(7)

    def test_too_big(self) -> None:
        with pytest.raises(SemverValidationError, match="greater than 2147483647"):
            PreReleaseIdentifier.from_string("2147483648")

    def test_numeric_sorts_before_alphanumeric(self) -> None:
        assert PreReleaseIdentifier(999) < PreReleaseIdentifier(text="a")
        assert PreReleaseIdentifier(2) < PreReleaseIdentifier(11)
        assert PreReleaseIdentifier(text="B") < PreReleaseIdentifier(text="a")

    def test_alphanumeric_as_number_fails(self) -> None:
        with pytest.raises(SemverValidationError):
            PreReleaseIdentifier(text="rc").as_number


class TestOrdering:
    def test_alpha_before_release(self) -> None:
        assert version("1.0.0-alpha") < version("1.0.0")
        assert version("1.0.0-alpha") < version("1.0.0-alpha.1")

    @pytest.mark.parametrize(("lower", "higher"), list(zip(ORDERED, ORDERED[1:])))
    def test_adjacent_pairs(self, lower: str, higher: str) -> None:
        assert version(lower) < version(higher)
        assert version(higher) > version(lower)
        assert version(lower).compare(version(higher)) == -1
        assert version(higher).compare(version(lower)) == 1

    def test_total_order(self) -> None:
        versions = [version(text) for text in ORDERED]
        for a, b in itertools.product(versions, repeat=2):
            assert [a < b, a == b, a > b].count(True) == 1
        for a, b, c in itertools.combinations(versions, 3):
            assert a < b < c and a < c

    def test_sorting(self) -> None:
        shuffled = [version(text) for text in reversed(ORDERED)]
        assert [str(v) for v in sorted(shuffled)] == ORDERED

    def test_build_metadata_is_ignored(self) -> None:
        left = version("1.2.3+build.1")
        right = version("1.2.3+build.2")
        assert left == right
        assert hash(left) == hash(right)
        assert left.compare(right) == 0
        assert len({left, right}) == 1


class TestFormatting:
    @pytest.mark.parametrize(
        "text",
        ["0.0.0", "1.2.3", "1.2.3-alpha.1", "10.20.30-rc.1+build.5", "1.0.0+001", "2147483647.0.0-x-y.0"],
    )
    def test_round_trip(self, text: str) -> None:
        v = version(text)
        assert str(v) == text
        assert v.calculate_length() == len(text)

    def test_without_build_metadata(self) -> None:
        assert str(version("1.2.3-4+meta").without_build_metadata()) == "1.2.3-4"
        assert str(version("1.2.3").with_build_metadata(["a", "b"])) == "1.2.3+a.b"
