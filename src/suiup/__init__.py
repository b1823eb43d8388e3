"""suiup — version manager for the Sui family of binaries.

Resolves specifiers like ``sui@testnet-1.39.3`` and routes them to an
installable toolchain.
"""

from suiup.version import __version__

__all__: list[str] = ["__version__"]
