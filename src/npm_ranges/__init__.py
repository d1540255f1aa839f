"""npm-ranges core package.

node-semver compatible versions and ranges: SemVer 2.0.0 ordering, the caret,
tilde, hyphen and X-range comparators, and intersection, union and complement
of ranges.
"""

from __future__ import annotations

from .comparison import SemverComparer, SemverComparison
from .errors import (
    ComponentKindError,
    ComponentOverflowError,
    InvalidOperandError,
    SemverError,
    SemverValidationError,
)
from .models import (
    MAX_VALUE,
    MIN_VALUE,
    IncrementType,
    PartialComponent,
    PartialVersion,
    PreReleaseIdentifier,
    Version,
    VersionBuilder,
    partial,
)
from .ranges import (
    CaretComparator,
    Comparator,
    ComparatorSet,
    HyphenRangeComparator,
    PrimitiveComparator,
    PrimitiveOperator,
    TildeComparator,
    VersionRange,
    XRangeComparator,
    desugar,
    resugar,
)

__all__ = [
    "CaretComparator",
    "Comparator",
    "ComparatorSet",
    "ComponentKindError",
    "ComponentOverflowError",
    "HyphenRangeComparator",
    "IncrementType",
    "InvalidOperandError",
    "MAX_VALUE",
    "MIN_VALUE",
    "PartialComponent",
    "PartialVersion",
    "PreReleaseIdentifier",
    "PrimitiveComparator",
    "PrimitiveOperator",
    "SemverComparer",
    "SemverComparison",
    "SemverError",
    "SemverValidationError",
    "TildeComparator",
    "Version",
    "VersionBuilder",
    "VersionRange",
    "XRangeComparator",
    "desugar",
    "partial",
    "resugar",
]
