"""Infrastructure layer — GitHub API access and backend discovery.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Third-party exceptions are re-raised as ``SuiupError`` subclasses.
"""

from suiup.infra.github_releases import get_latest_release, latest_release_tag
from suiup.infra.toolchain_loader import load_toolchain
from suiup.infra.update_check import check_for_updates, is_newer, start_update_check

__all__: list[str] = [
    "check_for_updates",
    "get_latest_release",
    "is_newer",
    "latest_release_tag",
    "load_toolchain",
    "start_update_check",
]
