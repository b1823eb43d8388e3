"""Tabular display of installed binaries.

Renders :class:`~suiup.core.models.BinaryVersion` rows with a Rich table,
falling back to fixed-width text when Rich is not installed.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from suiup.cli.console import escape, output
from suiup.core.models import BinaryVersion

HEADERS: tuple[str, ...] = ("Binary", "Release/Branch", "Version", "Debug")


def _rows(binaries: Sequence[BinaryVersion]) -> list[tuple[str, str, str, str]]:
    """Sort by binary name and flatten to display strings."""
    ordered = sorted(binaries, key=lambda b: b.binary_name)
    return [
        (
            b.binary_name,
            b.network_release,
            b.version,
            "Yes" if b.debug else "No",
        )
        for b in ordered
    ]


def _print_plain_table(
    rows: list[tuple[str, str, str, str]], title: str | None,
) -> None:
    widths = [
        max([len(HEADERS[i])] + [len(row[i]) for row in rows])
        for i in range(len(HEADERS))
    ]
    if title:
        print(title, file=sys.stdout)
    print("  ".join(h.ljust(w) for h, w in zip(HEADERS, widths)).rstrip(), file=sys.stdout)
    print("  ".join("─" * w for w in widths), file=sys.stdout)
    for row in rows:
        print("  ".join(c.ljust(w) for c, w in zip(row, widths)).rstrip(), file=sys.stdout)


def print_table(binaries: Sequence[BinaryVersion], *, title: str | None = None) -> None:
    """Print *binaries* sorted by name with a Yes/No debug column."""
    rows = _rows(binaries)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_table(rows, title)
        return

    table = Table(
        title=title,
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    for header in HEADERS:
        table.add_column(header)
    for row in rows:
        table.add_row(*(escape(cell) for cell in row))
    output.print(table)
