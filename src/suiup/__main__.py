"""Allow ``python -m suiup`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m suiup`` behaves identically to the ``suiup`` console script.
"""

from __future__ import annotations

from suiup.cli.app import cli

if __name__ == "__main__":
    cli()
