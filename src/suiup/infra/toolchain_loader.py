"""Discovery of the toolchain backend through package entry points.

Backends register an object (or a zero-argument factory) under the
``suiup.toolchains`` entry-point group::

    [project.entry-points."suiup.toolchains"]
    local = "suiup_local.toolchain:LocalToolchain"
"""

from __future__ import annotations

import logging
from importlib.metadata import EntryPoint, entry_points

from suiup.core.protocols import Toolchain
from suiup.exceptions import ToolchainUnavailableError

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP: str = "suiup.toolchains"

_INSTALL_HINT = (
    "Install a package that registers a '" + ENTRY_POINT_GROUP + "' entry point."
)


def _discover() -> list[EntryPoint]:
    return sorted(entry_points(group=ENTRY_POINT_GROUP), key=lambda ep: ep.name)


def load_toolchain(name: str | None = None) -> Toolchain:
    """Load the toolchain called *name*, or the first registered one.

    Raises
    ------
    ToolchainUnavailableError
        If nothing is registered, *name* is unknown, or loading fails.
    """
    candidates = _discover()
    if not candidates:
        raise ToolchainUnavailableError(
            "No suiup toolchain is installed.",
            hint=_INSTALL_HINT,
        )

    if name is None:
        selected = candidates[0]
    else:
        matches = [ep for ep in candidates if ep.name == name]
        if not matches:
            available = ", ".join(ep.name for ep in candidates)
            raise ToolchainUnavailableError(
                f"Unknown toolchain: {name}",
                hint=f"Available toolchains: {available}",
            )
        selected = matches[0]

    logger.debug("Loading toolchain %s from %s", selected.name, selected.value)
    try:
        target = selected.load()
        return target() if callable(target) else target
    except Exception as exc:
        raise ToolchainUnavailableError(
            f"Failed to load toolchain {selected.name}: {exc}",
        ) from exc
