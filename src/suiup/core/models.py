"""Domain models for suiup.

:class:`BinaryName` is a closed enum of installable binaries; the rest are
frozen dataclasses with no behaviour beyond data access.  Nothing here
performs I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from suiup.exceptions import InvalidBinaryNameError


# ---------------------------------------------------------------------------
# Binary identity
# ---------------------------------------------------------------------------

_REPO_URLS: dict[str, str] = {
    "mvr": "https://github.com/MystenLabs/mvr",
    "sui": "https://github.com/MystenLabs/sui",
    "walrus": "https://github.com/MystenLabs/walrus",
    "site-builder": "https://github.com/MystenLabs/walrus-sites",
}


class BinaryName(Enum):
    """Installable binaries.  The enum value is the canonical string."""

    MVR = "mvr"
    SUI = "sui"
    WALRUS = "walrus"
    WALRUS_SITES = "site-builder"

    @classmethod
    def parse(cls, token: str) -> BinaryName:
        """Resolve *token* case-insensitively.

        Raises
        ------
        InvalidBinaryNameError
            If *token* is not one of the canonical strings.
        """
        try:
            return cls(token.lower())
        except ValueError:
            raise InvalidBinaryNameError(token) from None

    @classmethod
    def choices(cls) -> list[str]:
        """Canonical strings in declaration order (for argparse ``choices``)."""
        return [member.value for member in cls]

    @property
    def canonical_string(self) -> str:
        return self.value

    @property
    def repo_url(self) -> str:
        return _REPO_URLS[self.value]

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Resolved specifier
# ---------------------------------------------------------------------------

DEFAULT_NETWORK: str = "testnet"
"""Network assumed when a specifier does not name one."""

KNOWN_NETWORKS: tuple[str, ...] = ("testnet", "devnet", "mainnet")


@dataclass(frozen=True, slots=True)
class CommandMetadata:
    """A specifier resolved into ``{binary, network, version}``."""

    name: BinaryName
    """Binary to operate on."""

    network: str
    """Release network.  Always populated."""

    version: str | None
    """Pinned version, or ``None`` for the latest release of *network*."""


# ---------------------------------------------------------------------------
# Installed artifact row
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class BinaryVersion:
    """One installed artifact, as reported by the toolchain for display."""

    binary_name: str
    network_release: str
    """Network name, or branch name for nightly builds."""

    version: str
    debug: bool
