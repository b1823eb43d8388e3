"""Interactive yes/no confirmation backed by questionary.

The toolchain receives a ``confirm`` callable from here; with ``--yes``
it gets one that never prompts.
"""

from __future__ import annotations

from typing import Any

from suiup.core.protocols import ConfirmFn
from suiup.exceptions import EnvironmentError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
            hint="Or pass --yes to accept defaults without prompting.",
        ) from exc
    return questionary


def ask_confirmation(question: str) -> bool:
    """Ask *question*, defaulting to yes.

    Raises
    ------
    KeyboardInterrupt
        If the user cancels the prompt (Ctrl+C / Esc).
    """
    questionary = _import_questionary()
    answer: bool | None = questionary.confirm(question, default=True).ask()
    if answer is None:
        raise KeyboardInterrupt
    return answer


def _accept(_question: str) -> bool:
    return True


def confirmer(yes: bool) -> ConfirmFn:
    """Return the confirm callable for a command run with or without ``--yes``."""
    return _accept if yes else ask_confirmation
