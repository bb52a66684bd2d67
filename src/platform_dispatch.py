"""Public SDK surface for platform dispatch.

This module provides a stable import path for provisioning code.
It re-exports the registry, lookup map, taxonomy, and version models.
"""

from __future__ import annotations

from core.config import DispatchConfig
from core.errors import (
    CycleError,
    DispatchError,
    DispatchNotFound,
    DuplicateDefaultError,
    LookupKeyError,
    ParseError,
    RegistrySealedError,
    TaxonomySealedError,
    UnknownFamilyError,
    VersionSpecError,
)
from core.types import PlatformTarget
from dispatch.criteria import Criterion, PlatformKey, RegistryEntry
from dispatch.dispatch_registry import DispatchRegistry
from dispatch.lookup_loader import load_lookup_map
from dispatch.lookup_map import LookupMap, build
from dispatch.registry_validation import unknown_families, validate_families
from dispatch.target_dispatch import lookup_for_target, select_for_target
from taxonomy.platform_hierarchy import configured_taxonomy, platform_taxonomy
from taxonomy.taxonomy import Taxonomy
from taxonomy.taxonomy_loader import load_taxonomy
from versions.version_spec import (
    ANY_VERSION,
    AnyVersion,
    ExactVersion,
    VersionRange,
    VersionSpec,
    matches,
    parse_version_spec,
)
from versions.version_vector import VersionVector, as_version_vector, compare_versions, parse_version

__all__ = [
    "ANY_VERSION",
    "AnyVersion",
    "Criterion",
    "CycleError",
    "DispatchConfig",
    "DispatchError",
    "DispatchNotFound",
    "DispatchRegistry",
    "DuplicateDefaultError",
    "ExactVersion",
    "LookupKeyError",
    "LookupMap",
    "ParseError",
    "PlatformKey",
    "PlatformTarget",
    "RegistryEntry",
    "RegistrySealedError",
    "Taxonomy",
    "TaxonomySealedError",
    "UnknownFamilyError",
    "VersionRange",
    "VersionSpec",
    "VersionSpecError",
    "VersionVector",
    "as_version_vector",
    "build",
    "compare_versions",
    "configured_taxonomy",
    "load_lookup_map",
    "load_taxonomy",
    "lookup_for_target",
    "matches",
    "parse_version",
    "parse_version_spec",
    "platform_taxonomy",
    "select_for_target",
    "unknown_families",
    "validate_families",
]
