"""Comparators, comparator sets and version ranges with their set algebra."""

from __future__ import annotations

from .comparators import (
    AdvancedComparator,
    CaretComparator,
    Comparator,
    HyphenRangeComparator,
    PrimitiveComparator,
    TildeComparator,
    XRangeComparator,
)
from .comparator_set import ComparatorSet
from .desugar import desugar, resugar
from .operators import PrimitiveOperator
from .version_range import VersionRange

__all__ = [
    "AdvancedComparator",
    "CaretComparator",
    "Comparator",
    "ComparatorSet",
    "HyphenRangeComparator",
    "PrimitiveComparator",
    "PrimitiveOperator",
    "TildeComparator",
    "VersionRange",
    "XRangeComparator",
    "desugar",
    "resugar",
]
