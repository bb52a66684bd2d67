"""Shared YAML document reading and field validation.

Taxonomy and lookup-map definition files share one envelope: a YAML
mapping with an integer ``version`` field. Each loader passes its own
error type so failures stay attributable to the subsystem.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Sequence, cast

import yaml

from core.constants import SUPPORTED_DOCUMENT_VERSION
from core.errors import DispatchError


def read_yaml_document(
    document_path: str | Path, error_type: type[DispatchError], label: str
) -> object:
    """Read one YAML document from disk.

    Args:
        document_path: File path to the YAML document.
        error_type: Error raised for every failure.
        label: Human-readable document kind used in messages.

    Returns:
        Parsed YAML payload.
    """
    document_file = Path(document_path).expanduser().resolve()
    if not document_file.exists():
        raise error_type(
            f"The {label} file does not exist at {document_file}. Provide a valid YAML file path."
        )
    try:
        payload = cast(object, yaml.safe_load(document_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise error_type(
            f"Failed to read {label} at {document_file}: {error}. Check file permissions and retry."
        ) from error
    except yaml.YAMLError as error:
        raise error_type(
            f"Failed to parse YAML {label} at {document_file}: {error}. Fix YAML syntax and retry."
        ) from error
    if payload is None:
        raise error_type(f"The {label} at {document_file} is empty. Define 'version' first.")
    return payload


def expect_mapping(
    value: object, context: str, error_type: type[DispatchError]
) -> Mapping[str, object]:
    """Return ``value`` as a string-keyed mapping."""
    if isinstance(value, Mapping):
        normalized_mapping = {}
        for key, payload in value.items():
            if not isinstance(key, str):
                raise error_type(
                    f"Invalid {context}: expected string keys, got {type(key).__name__}."
                )
            normalized_mapping[key] = payload
        return normalized_mapping
    raise error_type(f"Invalid {context}: expected object mapping, got {type(value).__name__}.")


def expect_sequence(
    value: object, context: str, error_type: type[DispatchError]
) -> Sequence[object]:
    """Return ``value`` as a non-string sequence."""
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return value
    raise error_type(f"Invalid {context}: expected list, got {type(value).__name__}.")


def parse_document_version(
    root_mapping: Mapping[str, object], label: str, error_type: type[DispatchError]
) -> int:
    """Validate the ``version`` field of a definition document."""
    raw_version = root_mapping.get("version")
    if not isinstance(raw_version, int) or isinstance(raw_version, bool):
        raise error_type(
            f"The {label} field 'version' must be an integer. "
            f"Set version: {SUPPORTED_DOCUMENT_VERSION}."
        )
    if raw_version != SUPPORTED_DOCUMENT_VERSION:
        raise error_type(
            f"Unsupported {label} version {raw_version}. Use version: {SUPPORTED_DOCUMENT_VERSION}."
        )
    return raw_version


def validate_keys(
    mapping: Mapping[str, object],
    allowed_keys: set[str],
    context: str,
    error_type: type[DispatchError],
) -> None:
    """Reject fields outside ``allowed_keys``."""
    unknown_keys = sorted(set(mapping) - allowed_keys)
    if unknown_keys:
        raise error_type(f"The {context} contains unknown fields: {', '.join(unknown_keys)}.")
