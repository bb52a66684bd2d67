"""YAML lookup map loading.

Lookup map files bind platform keys to plain values::

    version: 1
    entries:
      - family: debian-base
        value: apt
      - family: ubuntu
        family_version: ["12.04", null]
        value: apt-get
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

from core.errors import DispatchError, LookupConfigError
from core.logging_config import get_logger
from core.yaml_document import (
    expect_mapping,
    expect_sequence,
    parse_document_version,
    read_yaml_document,
    validate_keys,
)
from dispatch.criteria import PlatformKey
from dispatch.lookup_map import LookupMap

_LOGGER = get_logger(__name__)


def load_lookup_map(lookup_path: str | Path) -> LookupMap:
    """Load and validate a YAML lookup map from disk.

    Args:
        lookup_path: File path to a YAML lookup map document.

    Returns:
        Lookup map preserving file order.

    Raises:
        LookupConfigError: If the file is missing or fails schema checks.
    """
    payload = read_yaml_document(lookup_path, LookupConfigError, "lookup map")
    root_mapping = expect_mapping(payload, "lookup map root", LookupConfigError)
    validate_keys(root_mapping, {"version", "entries"}, "lookup map root", LookupConfigError)
    parse_document_version(root_mapping, "lookup map", LookupConfigError)
    raw_entries = root_mapping.get("entries")
    if raw_entries is None:
        raise LookupConfigError(
            "Lookup map missing required field 'entries'. Add a list of family/value rows."
        )
    rows = expect_sequence(raw_entries, "lookup map entries", LookupConfigError)
    pairs = [_parse_entry(row, index) for index, row in enumerate(rows)]
    lookup_map = LookupMap.build(pairs)
    _LOGGER.info("lookup_map_loaded", path=str(lookup_path), entry_count=len(lookup_map))
    return lookup_map


def _parse_entry(row: object, row_index: int) -> tuple[PlatformKey, object]:
    context = f"lookup map entry #{row_index + 1}"
    row_mapping = expect_mapping(row, context, LookupConfigError)
    validate_keys(row_mapping, {"family", "family_version", "value"}, context, LookupConfigError)
    family = row_mapping.get("family")
    if not isinstance(family, str) or not family.strip():
        raise LookupConfigError(f"Invalid {context}: field 'family' must be a tag name.")
    if "value" not in row_mapping:
        raise LookupConfigError(f"Invalid {context}: field 'value' is required.")
    return _platform_key(family.strip(), row_mapping, context), row_mapping["value"]


def _platform_key(family: str, row_mapping: Mapping[str, object], context: str) -> PlatformKey:
    try:
        return PlatformKey(family, row_mapping.get("family_version"))
    except DispatchError as error:
        raise LookupConfigError(f"Invalid {context}: {error}") from error
