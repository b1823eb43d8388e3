"""Background check for a newer suiup release.

The check runs on a daemon thread so it never delays the command the user
asked for, and the process may exit before it finishes.  Failures are
logged at DEBUG level and dropped.  Only the first call per process starts
a thread.

No user-facing output here: the caller supplies a *notify* callback.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from packaging.version import InvalidVersion, Version

from suiup.infra.github_releases import latest_release_tag
from suiup.version import __version__

logger = logging.getLogger(__name__)

NotifyFn = Callable[[str, str], None]
"""Called with ``(current_version, latest_version)`` when an update exists."""

FetchFn = Callable[[], str]

_lock = threading.Lock()
_started = False


def _normalise(tag: str) -> Version:
    return Version(tag.strip().lstrip("vV"))


def is_newer(latest_tag: str, current: str) -> bool:
    """Whether *latest_tag* (e.g. ``v0.2.0``) is newer than *current*.

    Unparseable versions compare as "not newer".
    """
    try:
        return _normalise(latest_tag) > _normalise(current)
    except InvalidVersion:
        logger.debug("Cannot compare versions %r and %r", latest_tag, current)
        return False


def check_for_updates(
    notify: NotifyFn,
    *,
    current_version: str = __version__,
    fetch: FetchFn = latest_release_tag,
) -> str | None:
    """Run the check synchronously.

    Returns the newer tag when *notify* was called, else ``None``.
    Exceptions from *fetch* propagate; :func:`start_update_check` is the
    layer that swallows them.
    """
    latest = fetch()
    if not is_newer(latest, current_version):
        logger.debug("suiup %s is up to date (latest %s)", current_version, latest)
        return None
    notify(current_version, latest.lstrip("vV"))
    return latest


def _run_quietly(notify: NotifyFn, fetch: FetchFn) -> None:
    try:
        check_for_updates(notify, fetch=fetch)
    except Exception:  # noqa: BLE001
        logger.debug("Update check failed", exc_info=True)


def start_update_check(
    notify: NotifyFn,
    *,
    fetch: FetchFn = latest_release_tag,
) -> threading.Thread | None:
    """Start the check on a daemon thread, once per process.

    Returns the started thread, or ``None`` if a check already started.
    """
    global _started

    with _lock:
        if _started:
            return None
        _started = True

    thread = threading.Thread(
        target=_run_quietly,
        args=(notify, fetch),
        daemon=True,
        name="suiup-update-check",
    )
    thread.start()
    return thread
