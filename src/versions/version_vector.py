"""Dotted version parsing and ordering.

A version such as ``"1.0.3"`` is represented as the vector ``(1, 0, 3)``.
Ordering pads the shorter vector with zeros, so ``1.2`` and ``1.2.0`` compare
equal while remaining structurally distinct values.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import zip_longest
from typing import Iterator, Sequence

from core.constants import VERSION_SEPARATOR
from core.errors import ParseError


@dataclass(frozen=True)
class VersionVector:
    """Immutable sequence of non-negative version components.

    Attributes:
        components: Integer components in significance order.
    """

    components: tuple[int, ...]

    def __post_init__(self) -> None:
        components = tuple(self.components)
        for component in components:
            if isinstance(component, bool) or not isinstance(component, int) or component < 0:
                raise ParseError(
                    f"Invalid version component {component!r}: "
                    "expected a non-negative integer."
                )
        object.__setattr__(self, "components", components)

    def __str__(self) -> str:
        return VERSION_SEPARATOR.join(str(component) for component in self.components)

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[int]:
        return iter(self.components)

    def __lt__(self, other: VersionVector) -> bool:
        return compare_versions(self, other) < 0

    def __le__(self, other: VersionVector) -> bool:
        return compare_versions(self, other) <= 0

    def __gt__(self, other: VersionVector) -> bool:
        return compare_versions(self, other) > 0

    def __ge__(self, other: VersionVector) -> bool:
        return compare_versions(self, other) >= 0

    def starts_with(self, prefix: VersionVector) -> bool:
        """Return True when this vector begins with every component of prefix."""
        width = len(prefix.components)
        return len(self.components) >= width and self.components[:width] == prefix.components


def parse_version(text: str) -> VersionVector:
    """Parse a dotted version string.

    Args:
        text: Version string such as ``"12.04"``.

    Returns:
        Parsed version vector.

    Raises:
        ParseError: If the string is empty or any part is empty or non-numeric.
    """
    if not isinstance(text, str):
        raise ParseError(f"Invalid version {text!r}: expected a dotted string.")
    if not text:
        raise ParseError("Invalid version '': expected dotted integers such as '1.2.3'.")
    parts = text.split(VERSION_SEPARATOR)
    for part in parts:
        if not (part.isascii() and part.isdigit()):
            raise ParseError(
                f"Invalid version {text!r}: component {part!r} is not a non-negative "
                "integer. Use dotted integers such as '1.2.3'."
            )
    return VersionVector(tuple(int(part) for part in parts))


def as_version_vector(value: object) -> VersionVector | None:
    """Coerce a caller-supplied version into a vector.

    Accepts vectors, dotted strings, single integers, and integer sequences.
    None stays None so absent versions can flow through matching.

    Raises:
        ParseError: If the value cannot be read as a version.
    """
    if value is None or isinstance(value, VersionVector):
        return value
    if isinstance(value, str):
        return parse_version(value)
    if isinstance(value, bool):
        raise ParseError(f"Invalid version {value!r}: booleans are not versions.")
    if isinstance(value, int):
        return VersionVector((value,))
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return VersionVector(tuple(value))
    raise ParseError(
        f"Invalid version {value!r}: expected a dotted string, integer, "
        f"or integer sequence, got {type(value).__name__}."
    )


def compare_versions(left: VersionVector, right: VersionVector) -> int:
    """Compare two vectors with zero padding.

    Returns:
        -1, 0, or 1 as ``left`` sorts before, equal to, or after ``right``.
    """
    for left_part, right_part in zip_longest(left.components, right.components, fillvalue=0):
        if left_part != right_part:
            return -1 if left_part < right_part else 1
    return 0


def padded_pair(
    left: VersionVector, right: VersionVector
) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """Return both component tuples padded with zeros to a common length."""
    width = max(len(left.components), len(right.components))
    return (
        left.components + (0,) * (width - len(left.components)),
        right.components + (0,) * (width - len(right.components)),
    )
