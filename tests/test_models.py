"""Tests for domain models (core/models.py).

Covers the binary identity round-trip, case-insensitive parsing, and
immutability of the value types.
"""

from __future__ import annotations

import pytest

from suiup.core.models import BinaryName, BinaryVersion, CommandMetadata
from suiup.exceptions import InvalidBinaryNameError


# ---------------------------------------------------------------------------
# BinaryName
# ---------------------------------------------------------------------------

class TestBinaryName:
    @pytest.mark.parametrize("binary", list(BinaryName))
    def test_canonical_string_round_trips(self, binary: BinaryName) -> None:
        assert BinaryName.parse(binary.canonical_string) is binary

    @pytest.mark.parametrize("binary", list(BinaryName))
    def test_upper_case_round_trips(self, binary: BinaryName) -> None:
        assert BinaryName.parse(binary.canonical_string.upper()) is binary

    @pytest.mark.parametrize("binary", list(BinaryName))
    def test_str_equals_canonical_string(self, binary: BinaryName) -> None:
        assert str(binary) == binary.canonical_string

    def test_mixed_case(self) -> None:
        assert BinaryName.parse("SuI") is BinaryName.SUI
        assert BinaryName.parse("Site-Builder") is BinaryName.WALRUS_SITES

    def test_canonical_strings(self) -> None:
        assert BinaryName.MVR.canonical_string == "mvr"
        assert BinaryName.SUI.canonical_string == "sui"
        assert BinaryName.WALRUS.canonical_string == "walrus"
        assert BinaryName.WALRUS_SITES.canonical_string == "site-builder"

    def test_repo_urls(self) -> None:
        assert BinaryName.MVR.repo_url == "https://github.com/MystenLabs/mvr"
        assert BinaryName.SUI.repo_url == "https://github.com/MystenLabs/sui"
        assert BinaryName.WALRUS.repo_url == "https://github.com/MystenLabs/walrus"
        assert (
            BinaryName.WALRUS_SITES.repo_url
            == "https://github.com/MystenLabs/walrus-sites"
        )

    def test_choices_lists_every_binary(self) -> None:
        assert BinaryName.choices() == ["mvr", "sui", "walrus", "site-builder"]

    @pytest.mark.parametrize("token", ["unknown", "", "walrus-sites", "sui ", "suiup"])
    def test_rejects_unknown(self, token: str) -> None:
        with pytest.raises(InvalidBinaryNameError) as exc_info:
            BinaryName.parse(token)
        assert exc_info.value.token == token


# ---------------------------------------------------------------------------
# CommandMetadata
# ---------------------------------------------------------------------------

class TestCommandMetadata:
    def test_fields_accessible(self) -> None:
        m = CommandMetadata(name=BinaryName.SUI, network="testnet", version="1.39.3")
        assert m.name is BinaryName.SUI
        assert m.network == "testnet"
        assert m.version == "1.39.3"

    def test_equality(self) -> None:
        a = CommandMetadata(BinaryName.MVR, "mainnet", None)
        b = CommandMetadata(BinaryName.MVR, "mainnet", None)
        assert a == b
        assert hash(a) == hash(b)

    def test_frozen(self) -> None:
        m = CommandMetadata(BinaryName.SUI, "testnet", None)
        with pytest.raises(AttributeError):
            m.network = "devnet"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# BinaryVersion
# ---------------------------------------------------------------------------

class TestBinaryVersion:
    def test_fields_accessible(self) -> None:
        row = BinaryVersion("sui", "testnet", "1.39.3", True)
        assert row.binary_name == "sui"
        assert row.network_release == "testnet"
        assert row.version == "1.39.3"
        assert row.debug is True

    def test_frozen(self) -> None:
        row = BinaryVersion("sui", "testnet", "1.39.3", False)
        with pytest.raises(AttributeError):
            row.debug = True  # type: ignore[misc]
