"""Value types for concrete and partial versions."""

from __future__ import annotations

from .builder import IncrementType, VersionBuilder
from .identifiers import MAX_COMPONENT
from .partial import (
    LOWER_X,
    OMITTED,
    STAR,
    UPPER_X,
    PartialComponent,
    PartialVersion,
    partial,
)
from .prerelease import PreReleaseIdentifier
from .version import MAX_VALUE, MIN_VALUE, Version

__all__ = [
    "IncrementType",
    "LOWER_X",
    "MAX_COMPONENT",
    "MAX_VALUE",
    "MIN_VALUE",
    "OMITTED",
    "PartialComponent",
    "PartialVersion",
    "PreReleaseIdentifier",
    "STAR",
    "UPPER_X",
    "Version",
    "VersionBuilder",
    "partial",
]
