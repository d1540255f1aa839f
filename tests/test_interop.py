from __future__ import annotations

import pytest
from packaging.version import Version as PackagingVersion

from npm_ranges import InvalidOperandError, SemverValidationError
from npm_ranges.interop import from_packaging, to_packaging
from tests.helpers import partial_version, version


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1.2.3", "1.2.3"),
        ("1.2", "1.2.0"),
        ("4", "4.0.0"),
        ("1.2.3a2", "1.2.3-alpha.2"),
        ("2b1", "2.0.0-beta.1"),
        ("1.2rc1", "1.2.0-rc.1"),
        ("1.2.3+ubuntu.1", "1.2.3+ubuntu.1"),
    ],
)
def test_from_packaging(text: str, expected: str) -> None:
    assert str(from_packaging(PackagingVersion(text))) == expected


def test_from_packaging_orders_like_packaging() -> None:
    texts = ["0.9", "1.0a1", "1.0a2", "1.0b2", "1.0rc1", "1.0", "1.0.1"]
    converted = [from_packaging(PackagingVersion(text)) for text in texts]
    assert converted == sorted(converted)


@pytest.mark.parametrize("text", ["1!1.0", "1.0.post1", "1.2.3.4", "1.0.dev3", "1.0a1.dev2"])
def test_from_packaging_rejects_unrepresentable(text: str) -> None:
    with pytest.raises(SemverValidationError):
        from_packaging(PackagingVersion(text))


def test_from_packaging_rejects_development_releases() -> None:
    with pytest.raises(SemverValidationError, match="Development releases"):
        from_packaging(PackagingVersion("1.0.dev3"))


def test_from_packaging_rejects_strings() -> None:
    with pytest.raises(InvalidOperandError):
        from_packaging("1.2.3")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (version("1.2.3-rc.1+b"), "1.2.3"),
        (partial_version("1.x"), "1.0"),
        (partial_version("2"), "2"),
        (partial_version("1.2.*"), "1.2.0"),
        (partial_version("x"), "0"),
        (partial_version("3.4.5-beta"), "3.4.5"),
    ],
)
def test_to_packaging(value, expected: str) -> None:
    result = to_packaging(value)
    assert isinstance(result, PackagingVersion)
    assert str(result) == expected


def test_to_packaging_rejects_strings() -> None:
    with pytest.raises(InvalidOperandError):
        to_packaging("1.2.3")
