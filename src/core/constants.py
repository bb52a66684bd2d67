"""Core constants used across dispatch modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

VERSION_SEPARATOR = "."
ANY_VERSION_TOKEN = "*"
SUPPORTED_DOCUMENT_VERSION = 1
TAXONOMY_PATH_ENV = "PLATFORM_DISPATCH_TAXONOMY_PATH"
UNKNOWN_FAMILY_POLICY_ENV = "PLATFORM_DISPATCH_UNKNOWN_FAMILY_POLICY"
DEFAULT_UNKNOWN_FAMILY_POLICY = "warn"
SUPPORTED_UNKNOWN_FAMILY_POLICIES = ("ignore", "warn", "error")
DEFAULT_REGISTRY_NAME = "dispatch"
