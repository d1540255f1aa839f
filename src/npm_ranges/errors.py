"""Exception hierarchy shared by the version and range modules."""

from __future__ import annotations


class SemverError(Exception):
    """Base class for every error raised by npm_ranges."""


class SemverValidationError(SemverError, ValueError):
    """Raised when a version, identifier or comparator cannot be constructed."""


class ComponentOverflowError(SemverError, OverflowError):
    """Raised when a version component would be incremented past the maximum."""


class ComponentKindError(SemverError, ValueError):
    """Raised when a partial component is read as the wrong kind of value."""


class InvalidOperandError(SemverError, TypeError):
    """Raised when a routine receives an operand of an unsupported type."""


MAJOR_NEGATIVE = "The major version component cannot be less than 0."
MINOR_NEGATIVE = "The minor version component cannot be less than 0."
PATCH_NEGATIVE = "The patch version component cannot be less than 0."
PRE_RELEASE_NEGATIVE = "The numeric pre-release identifier cannot be less than 0."

MAJOR_TOO_BIG = "The major version component cannot be greater than 2147483647."
MINOR_TOO_BIG = "The minor version component cannot be greater than 2147483647."
PATCH_TOO_BIG = "The patch version component cannot be greater than 2147483647."
PRE_RELEASE_TOO_BIG = "The numeric pre-release identifier cannot be greater than 2147483647."

PRE_RELEASE_LEADING_ZEROES = "The numeric pre-release identifier cannot contain leading zeroes."
PRE_RELEASE_EMPTY = "The pre-release identifier cannot be empty."
PRE_RELEASE_INVALID = "The pre-release identifier must only contain [A-Za-z0-9-] characters."
BUILD_METADATA_EMPTY = "The build metadata identifier cannot be empty."
BUILD_METADATA_INVALID = "The build metadata identifier must only contain [A-Za-z0-9-] characters."

MAJOR_OMITTED = "The major version component cannot be omitted."
PATCH_WITHOUT_MINOR = "The patch version component cannot be specified when the minor is omitted."
PRE_RELEASE_WITHOUT_PATCH = "Pre-release identifiers require a patch version component."
BUILD_METADATA_WITHOUT_PATCH = "Build metadata identifiers require a patch version component."
