"""Dispatch exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class DispatchError(Exception):
    """Base exception for all platform-dispatch failures."""


class DispatchConfigError(DispatchError):
    """Raised for invalid runtime configuration."""


class ParseError(DispatchError):
    """Raised for malformed dotted version strings."""


class VersionSpecError(DispatchError):
    """Raised for malformed or inverted version specifications."""


class CycleError(DispatchError):
    """Raised when a taxonomy edge would create a cycle."""

    def __init__(self, child: str, parent: str) -> None:
        super().__init__(
            f"Taxonomy edge {child!r} -> {parent!r} would create a cycle. "
            f"{parent!r} already derives from {child!r}."
        )
        self.child = child
        self.parent = parent


class TaxonomySealedError(DispatchError):
    """Raised when a sealed taxonomy is mutated."""


class TaxonomyConfigError(DispatchError):
    """Raised for invalid taxonomy definition files."""


class RegistrySealedError(DispatchError):
    """Raised when a sealed registry is mutated."""


class DuplicateDefaultError(DispatchError):
    """Raised when a registry already holds a default handler."""


class LookupConfigError(DispatchError):
    """Raised for invalid lookup map definition files."""


class LookupKeyError(DispatchError):
    """Raised for lookup map keys that do not name a platform."""


class UnknownFamilyError(DispatchError):
    """Raised when criteria name families missing from the taxonomy."""


class DispatchNotFound(DispatchError):
    """Raised when no registry entry matches a query and no default exists."""

    def __init__(
        self,
        family: str,
        family_version: object,
        version: object,
        registry_name: str | None = None,
    ) -> None:
        label = registry_name or "dispatch"
        super().__init__(
            f"No {label} method for family {family!r} "
            f"family_version {_render(family_version)} version {_render(version)}. "
            "Register a matching criterion or a default handler."
        )
        self.family = family
        self.family_version = family_version
        self.version = version
        self.registry_name = registry_name


def _render(value: object) -> str:
    return "none" if value is None else str(value)
