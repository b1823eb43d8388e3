"""Tests for entry-point toolchain discovery (infra/toolchain_loader.py)."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from suiup.exceptions import ToolchainUnavailableError
from suiup.infra.toolchain_loader import ENTRY_POINT_GROUP, load_toolchain


def _entry_point(name: str, target: object) -> MagicMock:
    ep = MagicMock(name=f"ep-{name}")
    ep.name = name
    ep.value = f"{name}_pkg.toolchain:Toolchain"
    ep.load.return_value = target
    return ep


def _patch_entry_points(*eps: MagicMock):
    return patch("suiup.infra.toolchain_loader.entry_points", return_value=list(eps))


class TestLoadToolchain:
    def test_queries_the_group(self) -> None:
        instance = object()
        with _patch_entry_points(_entry_point("local", instance)) as mock_eps:
            load_toolchain()
        mock_eps.assert_called_once_with(group=ENTRY_POINT_GROUP)

    def test_nothing_registered(self) -> None:
        with _patch_entry_points():
            with pytest.raises(ToolchainUnavailableError, match="No suiup toolchain") as exc_info:
                load_toolchain()
        assert ENTRY_POINT_GROUP in (exc_info.value.hint or "")

    def test_first_by_name_when_unnamed(self) -> None:
        first, second = object(), object()
        with _patch_entry_points(
            _entry_point("zeta", second), _entry_point("alpha", first),
        ):
            assert load_toolchain() is first

    def test_named_selection(self) -> None:
        wanted = object()
        with _patch_entry_points(
            _entry_point("alpha", object()), _entry_point("local", wanted),
        ):
            assert load_toolchain("local") is wanted

    def test_unknown_name_lists_available(self) -> None:
        with _patch_entry_points(_entry_point("alpha", object()), _entry_point("beta", object())):
            with pytest.raises(ToolchainUnavailableError, match="Unknown toolchain") as exc_info:
                load_toolchain("gamma")
        assert exc_info.value.hint == "Available toolchains: alpha, beta"

    def test_factory_is_called(self) -> None:
        instance = object()
        factory = MagicMock(return_value=instance)
        with _patch_entry_points(_entry_point("local", factory)):
            assert load_toolchain() is instance
        factory.assert_called_once_with()

    def test_load_failure_is_wrapped(self) -> None:
        ep = _entry_point("broken", None)
        ep.load.side_effect = ImportError("missing module")
        with _patch_entry_points(ep):
            with pytest.raises(ToolchainUnavailableError, match="Failed to load toolchain broken"):
                load_toolchain()
