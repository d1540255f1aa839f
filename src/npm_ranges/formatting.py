"""Two-phase text rendering for versions, comparators and ranges.

Every renderable type implements ``calculate_length()`` and
``build_string(builder)``. The length is measured first, a fixed-size
``TextBuilder`` is allocated for it, and the value then writes itself into the
buffer. ``format_buildable`` runs both phases and is what ``__str__`` uses.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol


class Buildable(Protocol):
    """Protocol implemented by every value that can render itself."""

    def calculate_length(self) -> int:
        ...

    def build_string(self, builder: TextBuilder) -> None:
        ...


class TextBuilder:
    """Fixed-capacity character buffer filled left to right."""

    __slots__ = ("_buffer", "_position")

    def __init__(self, length: int) -> None:
        if length < 0:
            raise ValueError("Buffer length cannot be negative")
        self._buffer: list[str] = [""] * length
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    def append(self, text: str) -> None:
        end = self._position + len(text)
        if end > len(self._buffer):
            raise ValueError(
                f"Text overflows the measured buffer ({end} > {len(self._buffer)})"
            )
        self._buffer[self._position:end] = text
        self._position = end

    def append_int(self, value: int) -> None:
        self.append(str(value))

    def append_joined(self, separator: str, items: Iterable[Buildable]) -> None:
        """Write each buildable item, separated by ``separator``."""
        first = True
        for item in items:
            if not first:
                self.append(separator)
            first = False
            item.build_string(self)

    def to_string(self) -> str:
        if self._position != len(self._buffer):
            raise ValueError(
                f"Buffer was measured at {len(self._buffer)} characters "
                f"but {self._position} were written"
            )
        return "".join(self._buffer)


def count_digits(value: int) -> int:
    """Return the number of decimal digits of a non-negative integer."""
    digits = 1
    while value >= 10:
        value //= 10
        digits += 1
    return digits


def joined_length(separator: str, items: Iterable[Buildable]) -> int:
    """Return the rendered length of ``items`` joined by ``separator``."""
    total = 0
    count = 0
    for item in items:
        total += item.calculate_length()
        count += 1
    if count > 1:
        total += len(separator) * (count - 1)
    return total


def format_buildable(value: Buildable) -> str:
    builder = TextBuilder(value.calculate_length())
    value.build_string(builder)
    return builder.to_string()
