"""Dispatch against the current provisioning target.

Provisioning steps usually know the target platform rather than raw query
values. These helpers read the family and platform version from a target
descriptor and forward to the registry or lookup map.
"""

from __future__ import annotations

from core.types import PlatformTarget
from dispatch.dispatch_registry import DispatchRegistry
from dispatch.lookup_map import LookupMap
from taxonomy.taxonomy import Taxonomy


def select_for_target(
    registry: DispatchRegistry,
    taxonomy: Taxonomy,
    target: PlatformTarget,
    version: object,
    *args: object,
    **kwargs: object,
) -> object:
    """Invoke the registry handler matching ``target`` and ``version``."""
    return registry.select(
        taxonomy, target.family, target.family_version, version, *args, **kwargs
    )


def lookup_for_target(lookup_map: LookupMap, taxonomy: Taxonomy, target: PlatformTarget) -> object:
    """Return the lookup map value for ``target``, or None."""
    return lookup_map.lookup(taxonomy, target.family, target.family_version)
