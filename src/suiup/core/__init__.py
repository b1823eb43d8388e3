"""Core layer — pure specifier resolution, options and command types.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from suiup.core.config import GlobalOptions, resolve_global_options
from suiup.core.models import BinaryName, BinaryVersion, CommandMetadata
from suiup.core.protocols import Toolchain, UpdateChecker
from suiup.core.specifier import parse_component_with_version, parse_version_spec

__all__: list[str] = [
    "BinaryName",
    "BinaryVersion",
    "CommandMetadata",
    "GlobalOptions",
    "Toolchain",
    "UpdateChecker",
    "parse_component_with_version",
    "parse_version_spec",
    "resolve_global_options",
]
