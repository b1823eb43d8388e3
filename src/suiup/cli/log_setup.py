"""Root logger configuration for the CLI process."""

from __future__ import annotations

import logging
import sys


def _build_handler() -> logging.Handler:
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        return handler

    from suiup.cli.console import get_rich_console

    return RichHandler(console=get_rich_console(), show_path=False, show_time=False)


def setup_logging(verbose: bool = False) -> None:
    """Log at DEBUG when *verbose*, else WARNING, to stderr.

    A no-op when the root logger already has handlers.
    """
    if logging.getLogger().handlers:
        return
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[_build_handler()],
    )
