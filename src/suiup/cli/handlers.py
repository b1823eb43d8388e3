"""Subcommand handlers.

Each handler resolves its own arguments (specifiers, flags), delegates the
work to the :class:`~suiup.core.protocols.Toolchain`, and reports the
outcome through the console.  Handlers return an exit code.

The toolchain is loaded through *get_toolchain* only after arguments
resolve, so a bad specifier fails before any backend is touched.
"""

from __future__ import annotations

import logging

from suiup.cli import exit_codes
from suiup.cli.console import console, escape, output
from suiup.cli.prompts import confirmer
from suiup.cli.table import print_table
from suiup.core.commands import (
    CleanupCommand,
    DefaultCommand,
    InstallCommand,
    RemoveCommand,
    SelfCommand,
    SwitchCommand,
    UpdateCommand,
)
from suiup.core.models import BinaryName, CommandMetadata
from suiup.core.protocols import ToolchainFactory
from suiup.core.specifier import parse_component_with_version
from suiup.exceptions import SuiupError, UnsupportedOptionError
from suiup.infra.github_releases import latest_release_tag

logger = logging.getLogger(__name__)

LIST_TIMEOUT_S: float = 2.0
"""Per-repository timeout for `suiup list`, which queries GitHub four times."""


def _describe(metadata: CommandMetadata) -> str:
    version = metadata.version or "latest"
    return escape(f"{metadata.name} {metadata.network}-{version}")


def _resolve(specifier: str, *, debug: bool) -> CommandMetadata:
    """Parse *specifier* and reject ``--debug`` for anything but sui."""
    metadata = parse_component_with_version(specifier)
    if debug and metadata.name is not BinaryName.SUI:
        raise UnsupportedOptionError(
            f"--debug is not available for {metadata.name}.",
            hint="Debug builds are only published for sui.",
        )
    return metadata


# ---------------------------------------------------------------------------
# default
# ---------------------------------------------------------------------------

def handle_default(command: DefaultCommand, get_toolchain: ToolchainFactory) -> int:
    if command.action == "get":
        print_table(get_toolchain().defaults(), title="Default binaries")
        return exit_codes.SUCCESS

    if command.specifier is None:
        raise UnsupportedOptionError("`default set` requires a binary specifier.")
    metadata = _resolve(command.specifier, debug=command.debug)
    get_toolchain().set_default(metadata, debug=command.debug, nightly=command.nightly)
    console.print(f"[bold green]Default set:[/bold green] {_describe(metadata)}")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# install / update / remove
# ---------------------------------------------------------------------------

def handle_install(
    command: InstallCommand, get_toolchain: ToolchainFactory, github_token: str | None,
) -> int:
    metadata = _resolve(command.specifier, debug=command.debug)
    logger.debug("Installing %s", metadata)
    get_toolchain().install(
        metadata,
        debug=command.debug,
        nightly=command.nightly,
        confirm=confirmer(command.yes),
        github_token=github_token,
    )
    console.print(f"[bold green]Installed[/bold green] {_describe(metadata)}")
    return exit_codes.SUCCESS


def handle_update(
    command: UpdateCommand, get_toolchain: ToolchainFactory, github_token: str | None,
) -> int:
    metadata = _resolve(command.specifier, debug=command.debug)
    logger.debug("Updating %s", metadata)
    get_toolchain().update(
        metadata,
        debug=command.debug,
        nightly=command.nightly,
        confirm=confirmer(command.yes),
        github_token=github_token,
    )
    updated = escape(f"{metadata.name} ({metadata.network})")
    console.print(f"[bold green]Updated[/bold green] {updated}")
    return exit_codes.SUCCESS


def handle_remove(
    command: RemoveCommand, get_toolchain: ToolchainFactory, github_token: str | None,
) -> int:
    get_toolchain().remove(command.binary, github_token=github_token)
    console.print(f"[bold green]Removed[/bold green] {escape(command.binary)}")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------

def _latest_tag_or_placeholder(binary: BinaryName, github_token: str | None) -> str:
    repo = binary.repo_url.removeprefix("https://github.com/")
    try:
        return latest_release_tag(repo, github_token=github_token, timeout=LIST_TIMEOUT_S)
    except SuiupError as exc:
        logger.debug("No release info for %s: %s", binary, exc)
        return "unavailable"


def handle_list(github_token: str | None) -> int:
    """Print every installable binary with its repository and latest release."""
    rows = [
        (str(binary), binary.repo_url, _latest_tag_or_placeholder(binary, github_token))
        for binary in BinaryName
    ]

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        print("Available binaries to install:")
        for name, repo, tag in rows:
            print(f"  {name:<14} {tag:<24} {repo}")
        return exit_codes.SUCCESS

    table = Table(
        title="Available binaries to install",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Binary", style="bold")
    table.add_column("Latest release")
    table.add_column("Repository")
    for name, repo, tag in rows:
        table.add_row(name, escape(tag), repo)
    output.print(table)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# self
# ---------------------------------------------------------------------------

def handle_self(command: SelfCommand, get_toolchain: ToolchainFactory) -> int:
    if command.action == "update":
        get_toolchain().self_update()
        console.print("[bold green]suiup updated.[/bold green]")
    else:
        get_toolchain().self_uninstall()
        console.print("[bold green]suiup uninstalled.[/bold green]")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# show / switch / which
# ---------------------------------------------------------------------------

def handle_show(get_toolchain: ToolchainFactory) -> int:
    toolchain = get_toolchain()
    print_table(toolchain.defaults(), title="Default binaries")
    print_table(toolchain.installed(), title="Installed binaries")
    return exit_codes.SUCCESS


def handle_switch(command: SwitchCommand, get_toolchain: ToolchainFactory) -> int:
    metadata = parse_component_with_version(command.specifier)
    get_toolchain().switch(metadata)
    console.print(f"[bold green]Switched[/bold green] to {_describe(metadata)}")
    return exit_codes.SUCCESS


def handle_which(get_toolchain: ToolchainFactory) -> int:
    output.print(escape(get_toolchain().default_bin_dir()))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# cleanup
# ---------------------------------------------------------------------------

def handle_cleanup(
    command: CleanupCommand, get_toolchain: ToolchainFactory, github_token: str | None,
) -> int:
    removed = get_toolchain().cleanup(
        remove_all=command.all,
        days=command.days,
        dry_run=command.dry_run,
        github_token=github_token,
    )
    verb = "Would remove" if command.dry_run else "Removed"
    for path in removed:
        console.print(f"  {verb.lower()} {escape(path)}")
    console.print(f"[bold]{verb} {len(removed)} cached file(s).[/bold]")
    return exit_codes.SUCCESS
