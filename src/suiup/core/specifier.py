"""Specifier parsing: free-form tokens into :class:`CommandMetadata`.

Every function here is pure and deterministic.

Accepted shapes (delimiter chosen by priority on the whole token)::

    sui                     -> sui, testnet, latest
    sui@testnet-1.39.3      -> sui, testnet, 1.39.3
    walrus==mainnet         -> walrus, mainnet, latest
    mvr=1.2.0               -> mvr, testnet, 1.2.0
    "sui devnet"            -> sui, devnet, latest
"""

from __future__ import annotations

from suiup.core.models import DEFAULT_NETWORK, KNOWN_NETWORKS, BinaryName, CommandMetadata
from suiup.exceptions import InvalidSpecifierFormatError

_NETWORK_PREFIXES: tuple[str, ...] = tuple(f"{network}-" for network in KNOWN_NETWORKS)


def _select_delimiter(token: str) -> str:
    """Pick the split delimiter: ``@`` > ``==`` > ``=`` > space."""
    if "@" in token:
        return "@"
    if "==" in token:
        return "=="
    if "=" in token:
        return "="
    # Loosest rule: breaks on any value containing a literal space.
    return " "


def parse_version_spec(spec: str | None) -> tuple[str, str | None]:
    """Split a version spec into ``(network, version)``.

    Never fails: anything without a recognised network prefix is treated
    as a bare version on the default network.
    """
    if spec is None:
        return DEFAULT_NETWORK, None
    if spec.startswith(_NETWORK_PREFIXES):
        network, version = spec.split("-", 1)
        return network, version
    if spec in KNOWN_NETWORKS:
        return spec, None
    return DEFAULT_NETWORK, spec


def parse_component_with_version(token: str) -> CommandMetadata:
    """Resolve a specifier such as ``sui@testnet-1.39.3``.

    Raises
    ------
    InvalidBinaryNameError
        If the binary part is not a known binary.
    InvalidSpecifierFormatError
        If the delimiter splits the token into anything but one or two parts.
    """
    parts = token.split(_select_delimiter(token))

    if len(parts) == 1:
        name = BinaryName.parse(parts[0])
        network, version = parse_version_spec(None)
    elif len(parts) == 2:
        name = BinaryName.parse(parts[0])
        network, version = parse_version_spec(parts[1])
    else:
        raise InvalidSpecifierFormatError(token)

    return CommandMetadata(name=name, network=network, version=version)
