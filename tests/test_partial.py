from __future__ import annotations

import pytest

from npm_ranges import ComponentKindError, PartialComponent, PartialVersion, SemverValidationError, partial
from npm_ranges.models import LOWER_X, OMITTED, STAR, UPPER_X
from tests.helpers import partial_version, version


class TestPartialComponent:
    def test_predicates(self) -> None:
        assert PartialComponent(3).is_numeric
        assert OMITTED.is_omitted and not OMITTED.is_wildcard
        assert STAR.is_wildcard and not STAR.is_numeric

    def test_as_number(self) -> None:
        assert PartialComponent(7).as_number == 7
        with pytest.raises(ComponentKindError):
            LOWER_X.as_number
        with pytest.raises(ComponentKindError):
            PartialComponent(1).as_wildcard

    def test_rejects_invalid_values(self) -> None:
        with pytest.raises(SemverValidationError):
            PartialComponent(-1)
        with pytest.raises(SemverValidationError):
            PartialComponent("y")

    def test_non_numeric_values_are_equal(self) -> None:
        assert LOWER_X == UPPER_X == STAR == OMITTED
        assert hash(LOWER_X) == hash(OMITTED)
        assert LOWER_X != PartialComponent(0)

    def test_non_numeric_sorts_first(self) -> None:
        assert STAR < PartialComponent(0)
        assert PartialComponent(2) > PartialComponent(1)

    def test_exact_ordering(self) -> None:
        ordered = [PartialComponent(0), PartialComponent(5), LOWER_X, UPPER_X, STAR, OMITTED]
        for lower, higher in zip(ordered, ordered[1:]):
            assert lower.compare_exact(higher) == -1
            assert higher.compare_exact(lower) == 1
        assert STAR.compare_exact(PartialComponent("*")) == 0

    def test_value_or_zero(self) -> None:
        assert PartialComponent(4).value_or_zero() == 4
        assert UPPER_X.value_or_zero() == 0


class TestPartialVersion:
    def test_major_cannot_be_omitted(self) -> None:
        with pytest.raises(SemverValidationError, match="major"):
            PartialVersion(OMITTED)

    def test_patch_requires_minor(self) -> None:
        with pytest.raises(SemverValidationError):
            partial(1, None, 2)

    def test_pre_release_requires_patch(self) -> None:
        with pytest.raises(SemverValidationError):
            partial(1, 2, None, ["beta"])
        with pytest.raises(SemverValidationError):
            partial(1, 2, None, (), ["build"])

    def test_wildcard_patch_may_carry_pre_release(self) -> None:
        assert str(partial(1, 2, "x", ["rc", 1])) == "1.2.x-rc.1"

    def test_is_partial(self) -> None:
        assert partial_version("1.2").is_partial
        assert partial_version("1.x.3").is_partial
        assert not partial_version("1.2.3-beta").is_partial

    @pytest.mark.parametrize("text", ["1", "1.2", "1.2.3", "x", "1.X", "1.2.*", "1.2.3-alpha.1+build.7"])
    def test_round_trip(self, text: str) -> None:
        value = partial_version(text)
        assert str(value) == text
        assert value.calculate_length() == len(text)

    def test_equality_ignores_wildcard_spelling_and_build(self) -> None:
        assert partial_version("1.x") == partial_version("1.*")
        assert partial_version("1.x") == partial_version("1")
        assert partial_version("1.2.3+a") == partial_version("1.2.3+b")
        assert hash(partial_version("1.X")) == hash(partial_version("1"))
        assert partial_version("1.2.3-0") != partial_version("1.2.3")

    def test_ordering(self) -> None:
        assert partial_version("1.x") < partial_version("1.0")
        assert partial_version("1.2.3-rc") < partial_version("1.2.3")

    def test_to_version(self) -> None:
        assert str(partial_version("1.x").to_version()) == "1.0.0"
        assert str(partial_version("2.3.4-rc.1+b").to_version()) == "2.3.4-rc.1+b"

    def test_from_version(self) -> None:
        value = PartialVersion.from_version(version("3.2.1-beta+sha"))
        assert str(value) == "3.2.1-beta+sha"
        assert not value.is_partial
