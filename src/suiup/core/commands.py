"""Parsed subcommands as a closed union of frozen dataclasses.

One class per subcommand; the router matches on the concrete type and
raises ``TypeError`` for anything outside :data:`Command`.  Specifier
strings are kept raw here and resolved by the handler that owns them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

from suiup.core.models import BinaryName


@dataclass(frozen=True, slots=True)
class DefaultCommand:
    action: Literal["get", "set"]
    specifier: str | None = None
    debug: bool = False
    nightly: str | None = None


@dataclass(frozen=True, slots=True)
class InstallCommand:
    specifier: str
    debug: bool = False
    nightly: str | None = None
    """Branch to build from, or ``None`` for a release install."""

    yes: bool = False


@dataclass(frozen=True, slots=True)
class RemoveCommand:
    binary: BinaryName


@dataclass(frozen=True, slots=True)
class ListCommand:
    pass


@dataclass(frozen=True, slots=True)
class SelfCommand:
    action: Literal["update", "uninstall"]


@dataclass(frozen=True, slots=True)
class ShowCommand:
    pass


@dataclass(frozen=True, slots=True)
class SwitchCommand:
    specifier: str


@dataclass(frozen=True, slots=True)
class UpdateCommand:
    specifier: str
    debug: bool = False
    nightly: str | None = None
    yes: bool = False


@dataclass(frozen=True, slots=True)
class WhichCommand:
    pass


@dataclass(frozen=True, slots=True)
class CleanupCommand:
    all: bool = False
    days: int = 30
    dry_run: bool = False


Command = Union[
    DefaultCommand,
    InstallCommand,
    RemoveCommand,
    ListCommand,
    SelfCommand,
    ShowCommand,
    SwitchCommand,
    UpdateCommand,
    WhichCommand,
    CleanupCommand,
]


def skips_update_check(command: Command) -> bool:
    """``self`` must not trigger the update check (it would recurse)."""
    return isinstance(command, SelfCommand)
