"""Shared pytest fixtures and configuration for the suiup test suite.

Guidelines
----------
* No internet access in any test: ``requests`` is mocked at the infra
  boundary and the background update check is replaced.
* Core tests must be pure — no side effects.
* Tests must not depend on the process environment.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from suiup.core.models import BinaryVersion


@pytest.fixture(autouse=True)
def update_checker(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Stop the default update checker from starting a real background check."""
    start = MagicMock(name="start_update_check")
    monkeypatch.setattr("suiup.infra.update_check.start_update_check", start)
    return start


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("GITHUB_TOKEN", "SUIUP_DISABLE_UPDATE_WARNINGS", "SUIUP_TOOLCHAIN"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def toolchain() -> MagicMock:
    """A toolchain double with canned read results."""
    fake = MagicMock(name="toolchain")
    fake.installed.return_value = [
        BinaryVersion("sui", "testnet", "1.39.3", False),
        BinaryVersion("mvr", "mainnet", "0.0.8", False),
    ]
    fake.defaults.return_value = [BinaryVersion("sui", "testnet", "1.39.3", False)]
    fake.default_bin_dir.return_value = Path("/home/user/.local/bin")
    fake.cleanup.return_value = []
    return fake
