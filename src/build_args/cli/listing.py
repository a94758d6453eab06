"""``build-args list`` — render the parsed build arguments as a table.

Uses a Rich table when Rich is installed and a fixed-width plain-text
table on stderr otherwise.  No parsing or conversion happens here.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from build_args.cli.console import console
from build_args.core.models import ArgumentEntry


def _print_plain_table(
    entries: Sequence[ArgumentEntry],
    positionals: Sequence[str],
) -> None:
    """Render the argument table without Rich."""
    print("\nbuild arguments", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'Name':<20} {'Value':<35}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for entry in entries:
        print(f"{entry.name:<20} {entry.raw:<35}", file=sys.stderr)
    if positionals:
        print(f"\npositional: {' '.join(positionals)}", file=sys.stderr)
    print(file=sys.stderr)


def render_arguments(
    entries: Sequence[ArgumentEntry],
    positionals: Sequence[str] = (),
) -> None:
    """Show *entries* (and any positional tokens) to the user."""
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_table(entries, positionals)
        return

    table = Table(
        title="build arguments",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Name", style="bold", min_width=12)
    table.add_column("Value", min_width=20)

    for entry in entries:
        table.add_row(entry.name, entry.raw)

    console.print()
    console.print(table)
    if positionals:
        console.print(f"[dim]positional:[/dim] {' '.join(positionals)}")
    if not entries:
        console.print("[yellow]No named arguments were supplied.[/yellow]")
    console.print()
