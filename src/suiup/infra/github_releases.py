"""GitHub releases lookup backed by ``requests``.

This module is the **only** place in the codebase that talks to the
GitHub API.  ``requests`` exceptions are caught here and re-raised as
:class:`~suiup.exceptions.UpdateCheckError`.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from suiup.exceptions import UpdateCheckError

logger = logging.getLogger(__name__)

GITHUB_API: str = "https://api.github.com"
SUIUP_REPO: str = "MystenLabs/suiup"
REQUEST_TIMEOUT_S: float = 5.0


def _headers(github_token: str | None) -> dict[str, str]:
    headers = {
        "Accept": "application/vnd.github+json",
        "User-Agent": "suiup",
    }
    if github_token:
        headers["Authorization"] = f"Bearer {github_token}"
    return headers


def get_latest_release(
    repo: str,
    *,
    github_token: str | None = None,
    timeout: float = REQUEST_TIMEOUT_S,
) -> dict[str, Any]:
    """Return the latest-release JSON for ``owner/name`` *repo*.

    Raises
    ------
    UpdateCheckError
        On any transport error, non-2xx response, or malformed payload.
    """
    url = f"{GITHUB_API}/repos/{repo}/releases/latest"
    logger.debug("Fetching latest release from %s", url)
    try:
        response = requests.get(url, headers=_headers(github_token), timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except requests.RequestException as exc:
        raise UpdateCheckError(f"Could not fetch {url}: {exc}") from exc
    except ValueError as exc:
        raise UpdateCheckError(f"Malformed release payload from {url}") from exc

    if not isinstance(payload, dict):
        raise UpdateCheckError(f"Malformed release payload from {url}")
    return payload


def latest_release_tag(
    repo: str = SUIUP_REPO,
    *,
    github_token: str | None = None,
    timeout: float = REQUEST_TIMEOUT_S,
) -> str:
    """Return the ``tag_name`` of *repo*'s latest release."""
    release = get_latest_release(repo, github_token=github_token, timeout=timeout)
    tag = release.get("tag_name")
    if not isinstance(tag, str) or not tag:
        raise UpdateCheckError(f"Latest release of {repo} has no tag name")
    return tag
