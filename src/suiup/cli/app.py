"""CLI application entry point and command routing for suiup.

This module is the **sole error boundary** for the entire application.
It catches :class:`~suiup.exceptions.SuiupError`, ``KeyboardInterrupt``
and any unexpected ``Exception``, rendering user-friendly messages and
returning well-defined exit codes.

Routing
-------
``main`` parses argv into one of the :mod:`suiup.core.commands`
dataclasses and hands it to :func:`run_command`, which

1. starts the background update check, unless the command is ``self`` or
   update warnings are disabled (a failure to start it is logged, never raised);
2. dispatches to exactly one handler, passing the GitHub token only to
   handlers that talk to the network (install, remove, list, update,
   cleanup).
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Mapping

from suiup.cli import exit_codes, handlers
from suiup.cli.console import console, escape
from suiup.cli.log_setup import setup_logging
from suiup.core.commands import (
    CleanupCommand,
    Command,
    DefaultCommand,
    InstallCommand,
    ListCommand,
    RemoveCommand,
    SelfCommand,
    ShowCommand,
    SwitchCommand,
    UpdateCommand,
    WhichCommand,
    skips_update_check,
)
from suiup.core.config import GlobalOptions, resolve_global_options
from suiup.core.models import BinaryName
from suiup.core.protocols import Toolchain, ToolchainFactory, UpdateChecker
from suiup.exceptions import SuiupError
from suiup.version import __version__

logger = logging.getLogger(__name__)


_SPECIFIER_HELP = (
    "Binary to install with optional version "
    "(e.g. 'sui', 'sui@testnet-1.39.3', 'sui@testnet')"
)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _global_options() -> argparse.ArgumentParser:
    """Options accepted both before and after the subcommand.

    Defaults are suppressed so a subparser never overwrites a value given
    before the subcommand name.
    """
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "--github-token",
        default=argparse.SUPPRESS,
        help="GitHub API token for authenticated requests (helps avoid rate "
        "limits). Falls back to $GITHUB_TOKEN.",
    )
    parent.add_argument(
        "--disable-update-warnings",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Disable update warnings for suiup itself. "
        "Falls back to $SUIUP_DISABLE_UPDATE_WARNINGS.",
    )
    parent.add_argument(
        "--toolchain",
        default=argparse.SUPPRESS,
        help="Name of the toolchain backend to use. Falls back to $SUIUP_TOOLCHAIN.",
    )
    parent.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Enable debug logging.",
    )
    return parent


def _non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {raw!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError("must be zero or greater")
    return value


def _add_specifier(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("component", help=_SPECIFIER_HELP)
    parser.add_argument(
        "version",
        nargs="?",
        default=None,
        help="Optional network/version when not joined to the binary name.",
    )


def _add_build_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Install the debug build of the binary (only available for sui).",
    )
    parser.add_argument(
        "--nightly",
        nargs="?",
        const="main",
        default=None,
        metavar="BRANCH",
        help="Build from a branch in release mode; main when no branch is "
        "given. Requires Rust and cargo.",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser with all subcommands."""
    common = _global_options()
    parser = argparse.ArgumentParser(
        prog="suiup",
        description="Install and manage versions of sui, mvr, walrus and site-builder.",
        parents=[common],
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    default = sub.add_parser("default", parents=[common], help="Get or set the default binary.")
    default_sub = default.add_subparsers(dest="default_action", metavar="ACTION", required=True)
    default_sub.add_parser("get", parents=[common], help="Show the default binaries.")
    default_set = default_sub.add_parser("set", parents=[common], help="Set the default binary.")
    _add_specifier(default_set)
    _add_build_flags(default_set)

    install = sub.add_parser("install", parents=[common], help="Install a binary.")
    _add_specifier(install)
    _add_build_flags(install)
    install.add_argument("-y", "--yes", action="store_true", help="Accept defaults without prompting.")

    remove = sub.add_parser(
        "remove",
        parents=[common],
        help="Remove every installed release of a binary.",
    )
    remove.add_argument("binary", choices=BinaryName.choices())

    sub.add_parser(
        "list",
        parents=[common],
        help="List available binaries to install, with latest release tags fetched from GitHub.",
    )

    self_ = sub.add_parser("self", parents=[common], help="Manage suiup itself.")
    self_sub = self_.add_subparsers(dest="self_action", metavar="ACTION", required=True)
    self_sub.add_parser("update", parents=[common], help="Update suiup to the latest release.")
    self_sub.add_parser("uninstall", parents=[common], help="Uninstall suiup.")

    sub.add_parser("show", parents=[common], help="Show installed and default binaries.")

    switch = sub.add_parser(
        "switch",
        parents=[common],
        help="Switch the default to an installed binary (e.g. 'sui@testnet').",
    )
    switch.add_argument("specifier", help="Installed binary to switch to.")

    update = sub.add_parser("update", parents=[common], help="Update a binary to its latest release.")
    _add_specifier(update)
    _add_build_flags(update)
    update.add_argument("-y", "--yes", action="store_true", help="Accept defaults without prompting.")

    sub.add_parser("which", parents=[common], help="Show the default binaries directory.")

    cleanup = sub.add_parser("cleanup", parents=[common], help="Remove cached release archives.")
    age = cleanup.add_mutually_exclusive_group()
    age.add_argument("--all", action="store_true", help="Remove all cache files.")
    age.add_argument(
        "-d",
        "--days",
        type=_non_negative_int,
        default=30,
        help="Days to keep files in cache (default: 30).",
    )
    cleanup.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Show what would be removed without removing anything.",
    )

    return parser


def _join_specifier(args: argparse.Namespace) -> str:
    """Rejoin a two-argument specifier (``sui testnet``) with a space."""
    if args.version is None:
        return args.component
    return f"{args.component} {args.version}"


def _build_command(args: argparse.Namespace) -> Command:
    """Translate parsed arguments into a :data:`Command` value."""
    name: str = args.command
    if name == "default":
        if args.default_action == "get":
            return DefaultCommand(action="get")
        return DefaultCommand(
            action="set",
            specifier=_join_specifier(args),
            debug=args.debug,
            nightly=args.nightly,
        )
    if name == "install":
        return InstallCommand(
            specifier=_join_specifier(args),
            debug=args.debug,
            nightly=args.nightly,
            yes=args.yes,
        )
    if name == "remove":
        return RemoveCommand(binary=BinaryName.parse(args.binary))
    if name == "list":
        return ListCommand()
    if name == "self":
        return SelfCommand(action=args.self_action)
    if name == "show":
        return ShowCommand()
    if name == "switch":
        return SwitchCommand(specifier=args.specifier)
    if name == "update":
        return UpdateCommand(
            specifier=_join_specifier(args),
            debug=args.debug,
            nightly=args.nightly,
            yes=args.yes,
        )
    if name == "which":
        return WhichCommand()
    if name == "cleanup":
        return CleanupCommand(all=args.all, days=args.days, dry_run=args.dry_run)
    raise ValueError(f"Unknown command: {name}")


# ---------------------------------------------------------------------------
# Update check wiring
# ---------------------------------------------------------------------------

def _print_update_notice(current: str, latest: str) -> None:
    versions = escape(f"{current} -> {latest}")
    console.print(
        f"[yellow]A new version of suiup is available:[/yellow] {versions}\n"
        "  Run [bold]suiup self update[/bold] to upgrade."
    )


def check_for_updates() -> None:
    """Default :class:`UpdateChecker`: background GitHub release check."""
    from suiup.infra.update_check import start_update_check

    start_update_check(_print_update_notice)


# ---------------------------------------------------------------------------
# Router
# ---------------------------------------------------------------------------

def _toolchain_factory(
    toolchain: Toolchain | None, name: str | None,
) -> ToolchainFactory:
    """Use the injected *toolchain*, else load the named entry point lazily."""
    if toolchain is not None:
        return lambda: toolchain

    def load() -> Toolchain:
        from suiup.infra.toolchain_loader import load_toolchain

        return load_toolchain(name)

    return load


def run_command(
    command: Command,
    options: GlobalOptions,
    *,
    toolchain_factory: ToolchainFactory,
    update_checker: UpdateChecker,
) -> int:
    """Fire the update check (unless excluded) and dispatch *command*."""
    if not skips_update_check(command) and not options.disable_update_warnings:
        try:
            update_checker()
        except Exception:  # noqa: BLE001
            logger.debug("Could not start the update check", exc_info=True)

    token = options.github_token

    if isinstance(command, DefaultCommand):
        return handlers.handle_default(command, toolchain_factory)
    if isinstance(command, InstallCommand):
        return handlers.handle_install(command, toolchain_factory, token)
    if isinstance(command, RemoveCommand):
        return handlers.handle_remove(command, toolchain_factory, token)
    if isinstance(command, ListCommand):
        return handlers.handle_list(token)
    if isinstance(command, SelfCommand):
        return handlers.handle_self(command, toolchain_factory)
    if isinstance(command, ShowCommand):
        return handlers.handle_show(toolchain_factory)
    if isinstance(command, SwitchCommand):
        return handlers.handle_switch(command, toolchain_factory)
    if isinstance(command, UpdateCommand):
        return handlers.handle_update(command, toolchain_factory, token)
    if isinstance(command, WhichCommand):
        return handlers.handle_which(toolchain_factory)
    if isinstance(command, CleanupCommand):
        return handlers.handle_cleanup(command, toolchain_factory, token)
    raise TypeError(f"Unhandled command type: {type(command).__name__}")


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    toolchain: Toolchain | None = None,
    update_checker: UpdateChecker | None = None,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Run the suiup CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    toolchain:
        Backend to use instead of the entry-point lookup.
    update_checker:
        Replacement for the background GitHub release check.
    environ:
        Environment used for option fallbacks.  Defaults to ``os.environ``.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    options = resolve_global_options(
        github_token=getattr(args, "github_token", None),
        disable_update_warnings=getattr(args, "disable_update_warnings", False),
        verbose=getattr(args, "verbose", False),
        toolchain=getattr(args, "toolchain", None),
        environ=os.environ if environ is None else environ,
    )
    setup_logging(options.verbose)

    command = _build_command(args)

    return run_command(
        command,
        options,
        toolchain_factory=_toolchain_factory(toolchain, options.toolchain),
        update_checker=update_checker or check_for_updates,
    )


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except SuiupError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(exc)}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
