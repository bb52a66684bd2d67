"""Runtime configuration model for platform dispatch.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import cast

from core.constants import (
    DEFAULT_UNKNOWN_FAMILY_POLICY,
    SUPPORTED_UNKNOWN_FAMILY_POLICIES,
    TAXONOMY_PATH_ENV,
    UNKNOWN_FAMILY_POLICY_ENV,
)
from core.errors import DispatchConfigError
from core.types import UnknownFamilyPolicy


@dataclass(frozen=True)
class DispatchConfig:
    """Validated runtime configuration.

    Attributes:
        taxonomy_path: Optional YAML taxonomy file replacing the built-in
            platform hierarchy.
        unknown_family_policy: How registry validation treats criterion
            families that the taxonomy does not know.
    """

    taxonomy_path: Path | None = None
    unknown_family_policy: UnknownFamilyPolicy = cast(
        UnknownFamilyPolicy, DEFAULT_UNKNOWN_FAMILY_POLICY
    )

    @classmethod
    def from_env(cls) -> "DispatchConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            DispatchConfigError: If environment values are invalid.
        """
        raw_path = os.getenv(TAXONOMY_PATH_ENV, "").strip()
        raw_policy = os.getenv(UNKNOWN_FAMILY_POLICY_ENV, DEFAULT_UNKNOWN_FAMILY_POLICY)
        return cls(
            taxonomy_path=Path(raw_path).expanduser().resolve() if raw_path else None,
            unknown_family_policy=parse_unknown_family_policy(raw_policy),
        )


def parse_unknown_family_policy(raw_value: str) -> UnknownFamilyPolicy:
    """Parse the unknown-family policy value.

    Args:
        raw_value: Raw string from environment or caller.

    Returns:
        Normalized policy name.

    Raises:
        DispatchConfigError: If value is not a supported policy.
    """
    normalized_value = raw_value.strip().lower()
    if normalized_value in SUPPORTED_UNKNOWN_FAMILY_POLICIES:
        return cast(UnknownFamilyPolicy, normalized_value)
    supported_rows = ", ".join(SUPPORTED_UNKNOWN_FAMILY_POLICIES)
    raise DispatchConfigError(
        f"Invalid {UNKNOWN_FAMILY_POLICY_ENV} value: "
        f"expected one of {supported_rows}, got '{raw_value}'. "
        f"Set {UNKNOWN_FAMILY_POLICY_ENV} to a supported policy."
    )
