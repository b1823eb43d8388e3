"""Protocols (interfaces) consumed by the router and handlers.

The toolchain owns downloading, extraction and on-disk layout; suiup only
resolves what to operate on and calls through these contracts.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Protocol

from suiup.core.models import BinaryName, BinaryVersion, CommandMetadata

ConfirmFn = Callable[[str], bool]
"""Asks the user a yes/no question; returns ``True`` to proceed."""


class Toolchain(Protocol):
    """Contract for the backend that installs and manages binaries.

    Any object with these methods satisfies the protocol structurally.
    Implementations should raise :class:`~suiup.exceptions.SuiupError`
    subclasses for user-facing failures.
    """

    def install(
        self,
        metadata: CommandMetadata,
        *,
        debug: bool,
        nightly: str | None,
        confirm: ConfirmFn,
        github_token: str | None,
    ) -> None:
        """Install the binary described by *metadata*."""
        ...  # pragma: no cover

    def remove(self, binary: BinaryName, *, github_token: str | None) -> None:
        """Remove every installed release of *binary*."""
        ...  # pragma: no cover

    def update(
        self,
        metadata: CommandMetadata,
        *,
        debug: bool,
        nightly: str | None,
        confirm: ConfirmFn,
        github_token: str | None,
    ) -> None:
        """Install the latest release of *metadata.network* if newer."""
        ...  # pragma: no cover

    def cleanup(
        self,
        *,
        remove_all: bool,
        days: int,
        dry_run: bool,
        github_token: str | None,
    ) -> Sequence[Path]:
        """Evict cached archives and return the paths removed (or that would be)."""
        ...  # pragma: no cover

    def installed(self) -> Sequence[BinaryVersion]:
        """Every installed artifact."""
        ...  # pragma: no cover

    def defaults(self) -> Sequence[BinaryVersion]:
        """Artifacts currently selected as the default for each binary."""
        ...  # pragma: no cover

    def set_default(
        self, metadata: CommandMetadata, *, debug: bool, nightly: str | None,
    ) -> None:
        ...  # pragma: no cover

    def switch(self, metadata: CommandMetadata) -> None:
        """Make an already-installed artifact the default."""
        ...  # pragma: no cover

    def default_bin_dir(self) -> Path:
        """Directory holding the default binaries."""
        ...  # pragma: no cover

    def self_update(self) -> None:
        ...  # pragma: no cover

    def self_uninstall(self) -> None:
        ...  # pragma: no cover


class UpdateChecker(Protocol):
    """Fire-and-forget check for a newer suiup release.

    Must return promptly, never raise, and be a no-op on repeat calls.
    """

    def __call__(self) -> None:
        ...  # pragma: no cover


ToolchainFactory = Callable[[], Toolchain]
"""Loads the toolchain on first use; ``list`` never calls it."""
