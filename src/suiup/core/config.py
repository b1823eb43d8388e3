"""Process-wide options resolved once at startup.

Precedence is explicit flag > environment variable > default.  The result
is immutable and handed to the router; nothing deeper reads the
environment.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from suiup.exceptions import ConfigurationError

GITHUB_TOKEN_ENV: str = "GITHUB_TOKEN"
DISABLE_UPDATE_WARNINGS_ENV: str = "SUIUP_DISABLE_UPDATE_WARNINGS"
TOOLCHAIN_ENV: str = "SUIUP_TOOLCHAIN"

_TRUTHY: frozenset[str] = frozenset({"1", "true", "yes", "on", "y", "t"})
_FALSY: frozenset[str] = frozenset({"0", "false", "no", "off", "n", "f", ""})


@dataclass(frozen=True, slots=True)
class GlobalOptions:
    """Options shared by every subcommand."""

    github_token: str | None = None
    """GitHub API token for authenticated requests (avoids rate limits)."""

    disable_update_warnings: bool = False
    """Skip the background check for a newer suiup release."""

    verbose: bool = False

    toolchain: str | None = None
    """Entry-point name of the toolchain backend, or ``None`` for the first found."""


def parse_bool(name: str, raw: str) -> bool:
    """Interpret an environment boolean the way ``clap`` does."""
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigurationError(
        f"Invalid value for {name}: {raw!r}",
        hint="Use one of: true, false, 1, 0, yes, no, on, off.",
    )


def resolve_global_options(
    *,
    github_token: str | None,
    disable_update_warnings: bool,
    verbose: bool = False,
    toolchain: str | None = None,
    environ: Mapping[str, str],
) -> GlobalOptions:
    """Merge parsed flags with *environ*.

    *disable_update_warnings* is a store-true flag, so ``False`` means
    "not passed" and the environment decides.  Empty environment strings
    count as unset.
    """
    token = github_token
    if token is None:
        token = environ.get(GITHUB_TOKEN_ENV) or None

    backend = toolchain
    if backend is None:
        backend = environ.get(TOOLCHAIN_ENV) or None

    disable = disable_update_warnings
    if not disable and DISABLE_UPDATE_WARNINGS_ENV in environ:
        disable = parse_bool(
            DISABLE_UPDATE_WARNINGS_ENV, environ[DISABLE_UPDATE_WARNINGS_ENV],
        )

    return GlobalOptions(
        github_token=token,
        disable_update_warnings=disable,
        verbose=verbose,
        toolchain=backend,
    )
