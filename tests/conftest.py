"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if str(_SRC_PATH) not in sys.path:
    sys.path.insert(0, str(_SRC_PATH))

from taxonomy.taxonomy import Taxonomy  # noqa: E402


@pytest.fixture
def distro_taxonomy() -> Taxonomy:
    """Sealed taxonomy: ubuntu -> debian -> linux and centos -> linux."""
    taxonomy = Taxonomy([("ubuntu", "debian"), ("debian", "linux"), ("centos", "linux")])
    taxonomy.seal()
    return taxonomy
