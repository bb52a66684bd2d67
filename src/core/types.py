"""Shared typed models.

This module defines small immutable models used by the versions, taxonomy,
and dispatch layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

UnknownFamilyPolicy = Literal["ignore", "warn", "error"]
RegistryState = Literal["building", "frozen"]
REGISTRY_STATE_TRANSITIONS: dict[RegistryState, tuple[RegistryState, ...]] = {
    "building": ("frozen",),
    "frozen": (),
}


@dataclass(frozen=True)
class PlatformTarget:
    """Facts about the platform a provisioning step runs against.

    Attributes:
        family: Platform family tag, for example ``ubuntu``.
        family_version: Platform version as a dotted string, a version
            vector, or None when unknown.
    """

    family: str
    family_version: object = None
