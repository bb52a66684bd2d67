"""Typed dispatch keys and registry entries.

This module defines the composite criterion used by dispatch registries,
the two-field key used by static lookup maps, and the entry records that
bind them to handlers or values in registration order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from versions.version_spec import ANY_VERSION, VersionSpec, matches, parse_version_spec
from versions.version_vector import VersionVector

Handler = Callable[..., object]


@dataclass(frozen=True)
class Criterion:
    """Composite dispatch key.

    Attributes:
        family: Taxonomy tag the queried family must derive from.
        family_version: Constraint on the platform version.
        version: Constraint on the component version.
    """

    family: str
    family_version: VersionSpec = ANY_VERSION
    version: VersionSpec = ANY_VERSION

    def __post_init__(self) -> None:
        object.__setattr__(self, "family_version", parse_version_spec(self.family_version))
        object.__setattr__(self, "version", parse_version_spec(self.version))

    def __str__(self) -> str:
        return f"{self.family} {self.family_version} {self.version}"

    def version_matches(
        self, family_version: VersionVector | None, version: VersionVector | None
    ) -> bool:
        """Return True when both version constraints accept the query."""
        return matches(self.family_version, family_version) and matches(self.version, version)


@dataclass(frozen=True)
class PlatformKey:
    """Two-field key for static lookup maps."""

    family: str
    family_version: VersionSpec = ANY_VERSION

    def __post_init__(self) -> None:
        object.__setattr__(self, "family_version", parse_version_spec(self.family_version))

    def as_criterion(self) -> Criterion:
        """Widen the key to a criterion accepting any component version."""
        return Criterion(self.family, self.family_version, ANY_VERSION)


@dataclass(frozen=True)
class RegistryEntry:
    """One registered handler.

    Attributes:
        criterion: Dispatch key the handler serves.
        handler: Callable invoked with the query and any extra arguments.
        index: Registration order, used as the final tie-break.
    """

    criterion: Criterion
    handler: Handler
    index: int


@dataclass(frozen=True)
class LookupEntry:
    """One static value bound to a platform key."""

    key: PlatformKey
    value: object
    index: int

    @property
    def criterion(self) -> Criterion:
        """Criterion view of the key for shared selection logic."""
        return self.key.as_criterion()
