"""Unit tests for core config parsing."""

from __future__ import annotations

import os

import pytest

from core.config import DispatchConfig
from core.errors import DispatchConfigError


def test_from_env_reads_taxonomy_path(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve the taxonomy path from environment."""
    monkeypatch.setenv("PLATFORM_DISPATCH_TAXONOMY_PATH", "./platforms.yaml")

    config = DispatchConfig.from_env()

    assert config.taxonomy_path is not None and config.taxonomy_path.name == "platforms.yaml"


def test_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset variables should yield the built-in taxonomy and warn policy."""
    monkeypatch.delenv("PLATFORM_DISPATCH_TAXONOMY_PATH", raising=False)
    monkeypatch.delenv("PLATFORM_DISPATCH_UNKNOWN_FAMILY_POLICY", raising=False)

    config = DispatchConfig.from_env()

    assert config.taxonomy_path is None and config.unknown_family_policy == "warn"


def test_from_env_normalizes_policy_case(monkeypatch: pytest.MonkeyPatch) -> None:
    """Policy values should be case-insensitive."""
    monkeypatch.setenv("PLATFORM_DISPATCH_UNKNOWN_FAMILY_POLICY", " Error ")
    assert DispatchConfig.from_env().unknown_family_policy == "error"


def test_from_env_raises_for_invalid_policy(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for unsupported unknown-family policy."""
    monkeypatch.setenv("PLATFORM_DISPATCH_UNKNOWN_FAMILY_POLICY", "explode")

    with pytest.raises(DispatchConfigError):
        DispatchConfig.from_env()

    assert os.getenv("PLATFORM_DISPATCH_UNKNOWN_FAMILY_POLICY") == "explode"
