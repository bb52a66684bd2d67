"""Shared fixture path helpers for tests."""

from __future__ import annotations

from pathlib import Path


def fixture_path(relative_path: str) -> Path:
    """Resolve a YAML definition fixture relative to tests/fixtures.

    Args:
        relative_path: Path under fixtures root, e.g. ``taxonomy/valid_taxonomy.yaml``.

    Returns:
        Absolute fixture path.
    """
    tests_root = Path(__file__).resolve().parent
    return tests_root / "fixtures" / relative_path
