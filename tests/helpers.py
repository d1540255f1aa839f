"""Small constructors that keep test cases readable.

Only the spellings used by the tests are understood; these are not a
general-purpose parser.
"""

from __future__ import annotations

from npm_ranges import (
    CaretComparator,
    ComparatorSet,
    HyphenRangeComparator,
    PartialVersion,
    PrimitiveComparator,
    PrimitiveOperator,
    TildeComparator,
    Version,
    VersionRange,
    XRangeComparator,
    partial,
)

_OPERATORS = (
    (">=", PrimitiveOperator.GREATER_THAN_OR_EQUAL),
    ("<=", PrimitiveOperator.LESS_THAN_OR_EQUAL),
    (">", PrimitiveOperator.GREATER_THAN),
    ("<", PrimitiveOperator.LESS_THAN),
    ("=", PrimitiveOperator.EQUAL),
)


def _split_suffixes(text: str) -> tuple[str, tuple[str, ...], tuple[str, ...]]:
    text, _, build = text.partition("+")
    core, _, pre = text.partition("-")
    pre_releases = tuple(pre.split(".")) if pre else ()
    build_metadata = tuple(build.split(".")) if build else ()
    return core, pre_releases, build_metadata


def version(text: str) -> Version:
    core, pre_releases, build_metadata = _split_suffixes(text)
    major, minor, patch = (int(part) for part in core.split("."))
    return Version(major, minor, patch, pre_releases, build_metadata)


def partial_version(text: str) -> PartialVersion:
    core, pre_releases, build_metadata = _split_suffixes(text)
    parts: list[int | str | None] = [
        part if part in ("x", "X", "*") else int(part) for part in core.split(".")
    ]
    parts += [None] * (3 - len(parts))
    return partial(parts[0], parts[1], parts[2], pre_releases, build_metadata)


def split_operator(text: str) -> tuple[PrimitiveOperator, str]:
    for symbol, operator in _OPERATORS:
        if text.startswith(symbol):
            return operator, text[len(symbol):]
    return PrimitiveOperator.IMPLICIT_EQUAL, text


def comparator(text: str):
    """``^1.2``, ``~1``, ``>=1.x`` or ``<1.2.3``; full versions become primitives."""
    if text.startswith("^"):
        return CaretComparator(partial_version(text[1:]))
    if text.startswith("~"):
        return TildeComparator(partial_version(text[1:]))
    operator, rest = split_operator(text)
    operand = partial_version(rest)
    if operand.is_partial:
        return XRangeComparator(operand, operator)
    return PrimitiveComparator(operand.to_version(), operator)


def hyphen(start: str, end: str) -> HyphenRangeComparator:
    return HyphenRangeComparator(partial_version(start), partial_version(end))


def comparator_set(text: str) -> ComparatorSet:
    if " - " in text:
        start, end = text.split(" - ")
        return ComparatorSet.of(hyphen(start.strip(), end.strip()))
    return ComparatorSet(tuple(comparator(part) for part in text.split()))


def version_range(text: str) -> VersionRange:
    return VersionRange(tuple(comparator_set(part.strip()) for part in text.split("||")))
