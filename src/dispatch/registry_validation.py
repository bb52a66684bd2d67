"""Checks that registered criteria name families the taxonomy knows.

A criterion naming a misspelled family never matches anything except a
query for that exact misspelling, so setup code validates registries
against the taxonomy before sealing them.
"""

from __future__ import annotations

from typing import Protocol

from core.config import DispatchConfig
from core.errors import UnknownFamilyError
from core.logging_config import get_logger
from core.types import UnknownFamilyPolicy
from taxonomy.taxonomy import Taxonomy

_LOGGER = get_logger(__name__)


class FamilySource(Protocol):
    """Registry or lookup map exposing its criterion families."""

    def families(self) -> tuple[str, ...]: ...


def unknown_families(source: FamilySource, taxonomy: Taxonomy) -> tuple[str, ...]:
    """Criterion families absent from ``taxonomy.tags()``, in registration order."""
    known_tags = taxonomy.tags()
    return tuple(family for family in source.families() if family not in known_tags)


def validate_families(
    source: FamilySource,
    taxonomy: Taxonomy,
    policy: UnknownFamilyPolicy | None = None,
) -> tuple[str, ...]:
    """Apply the unknown-family policy to a registry or lookup map.

    Args:
        source: Registry or lookup map to check.
        taxonomy: Taxonomy the source will be queried with.
        policy: ``ignore``, ``warn``, or ``error``; read from the
            environment config when omitted.

    Returns:
        Unknown families found.

    Raises:
        UnknownFamilyError: If the policy is ``error`` and families are unknown.
    """
    active_policy = policy or DispatchConfig.from_env().unknown_family_policy
    missing = unknown_families(source, taxonomy)
    if not missing or active_policy == "ignore":
        return missing
    if active_policy == "error":
        raise UnknownFamilyError(
            f"Unknown families {', '.join(missing)}: not present in the taxonomy. "
            "Add taxonomy edges for them or fix the criterion family names."
        )
    _LOGGER.warning("unknown_families_detected", families=list(missing))
    return missing
