"""YAML taxonomy definition loading.

This module loads and validates taxonomy files of the form::

    version: 1
    edges:
      ubuntu: debian
      debian: [debian-base]

Each key is a child tag and each value names one parent or a list of parents.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

from core.errors import CycleError, TaxonomyConfigError
from core.logging_config import get_logger
from core.yaml_document import (
    expect_mapping,
    parse_document_version,
    read_yaml_document,
    validate_keys,
)
from taxonomy.taxonomy import Taxonomy

_LOGGER = get_logger(__name__)


def load_taxonomy(taxonomy_path: str | Path) -> Taxonomy:
    """Load and validate a YAML taxonomy from disk.

    Args:
        taxonomy_path: File path to a YAML taxonomy document.

    Returns:
        A sealed taxonomy holding every declared edge.

    Raises:
        TaxonomyConfigError: If the file is missing, malformed, or cyclic.
    """
    payload = read_yaml_document(taxonomy_path, TaxonomyConfigError, "taxonomy")
    root_mapping = expect_mapping(payload, "taxonomy root", TaxonomyConfigError)
    validate_keys(root_mapping, {"version", "edges"}, "taxonomy root", TaxonomyConfigError)
    parse_document_version(root_mapping, "taxonomy", TaxonomyConfigError)
    edges = _parse_edges(root_mapping)
    taxonomy = Taxonomy()
    try:
        taxonomy.add_edges(edges)
    except CycleError as error:
        raise TaxonomyConfigError(f"Invalid taxonomy at {taxonomy_path}: {error}") from error
    taxonomy.seal()
    _LOGGER.info("taxonomy_loaded", path=str(taxonomy_path), edge_count=len(edges))
    return taxonomy


def _parse_edges(root_mapping: Mapping[str, object]) -> tuple[tuple[str, str], ...]:
    raw_edges = root_mapping.get("edges")
    if raw_edges is None:
        raise TaxonomyConfigError("Taxonomy missing required field 'edges'.")
    edges_mapping = expect_mapping(raw_edges, "taxonomy edges", TaxonomyConfigError)
    edges = []
    for child, raw_parents in edges_mapping.items():
        parents = [raw_parents] if isinstance(raw_parents, str) else raw_parents
        if not isinstance(parents, list) or not parents:
            raise TaxonomyConfigError(
                f"Invalid parents for taxonomy tag '{child}': expected a tag or a non-empty list."
            )
        for parent in parents:
            if not isinstance(parent, str) or not parent.strip():
                raise TaxonomyConfigError(
                    f"Invalid parent {parent!r} for taxonomy tag '{child}': expected a tag name."
                )
            edges.append((child, parent.strip()))
    return tuple(edges)
