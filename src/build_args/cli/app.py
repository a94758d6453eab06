"""CLI application entry point and command routing for build-args.

This module is the **sole error boundary** for the entire application.
It catches :class:`~build_args.exceptions.BuildArgsError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Usage
-----
Everything after the first ``--`` is the build runner's own command
line and is handed to :func:`~build_args.infra.split_build_arguments`
untouched::

    build-args list -- build.py -configuration=Release -loopCount=5
    build-args has verbose -- -verbose
    build-args get loopCount --type int --default 1 -- -loopCount=5
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Any

from build_args.cli import exit_codes
from build_args.cli.console import configure_logging, console
from build_args.exceptions import BuildArgsError
from build_args.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Sub-commands:
    * ``build-args list``            — table of all named arguments
    * ``build-args has NAME``        — exit 0 if present, 1 otherwise
    * ``build-args get NAME``        — print the (converted) value
    """
    parser = argparse.ArgumentParser(
        prog="build-args",
        description="Inspect the arguments supplied to a build run.",
        epilog="Pass the build command line after '--'.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )

    commands = parser.add_subparsers(dest="command")

    commands.add_parser("list", help="Show every named build argument.")

    has_parser = commands.add_parser("has", help="Check whether an argument was supplied.")
    has_parser.add_argument("name", help="Argument name (case-insensitive).")

    get_parser = commands.add_parser("get", help="Print an argument's value.")
    get_parser.add_argument("name", help="Argument name (case-insensitive).")
    get_parser.add_argument(
        "-t",
        "--type",
        dest="type_tag",
        default="str",
        help="Target type tag: str, int, float, decimal, bool, date, datetime, time, path.",
    )
    get_parser.add_argument(
        "-d",
        "--default",
        default=None,
        help="Value printed verbatim when the argument is missing.",
    )
    return parser


def _split_argv(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split at the first ``--`` into (own options, build command line)."""
    tokens = list(argv)
    if "--" in tokens:
        marker = tokens.index("--")
        return tokens[:marker], tokens[marker + 1:]
    return tokens, []


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_list(build_argv: Sequence[str]) -> int:
    from build_args.cli.listing import render_arguments
    from build_args.infra.argument_parser import split_build_arguments
    from build_args.infra.argument_store import InMemoryArgumentStore

    entries, positionals = split_build_arguments(build_argv)
    store = InMemoryArgumentStore(entries)
    render_arguments(store.entries(), positionals)
    return exit_codes.SUCCESS


def _handle_has(name: str, build_argv: Sequence[str]) -> int:
    from build_args.core.accessor import ArgumentAccessor
    from build_args.infra.argument_parser import store_from_argv

    accessor = ArgumentAccessor(store_from_argv(build_argv))
    if accessor.has_argument(name):
        return exit_codes.SUCCESS
    return exit_codes.GENERAL_ERROR


def _handle_get(
    name: str,
    type_tag: str,
    default: str | None,
    build_argv: Sequence[str],
) -> int:
    """Print the converted value of *name* on stdout.

    A missing argument with ``--default`` prints the default verbatim.
    """
    from build_args.core.accessor import NO_DEFAULT, ArgumentAccessor
    from build_args.infra.argument_parser import store_from_argv

    accessor = ArgumentAccessor(store_from_argv(build_argv))
    value = accessor.argument(
        name,
        type_tag,
        default if default is not None else NO_DEFAULT,
    )
    sys.stdout.write(f"{_format_value(value)}\n")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the build-args CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    own_argv, build_argv = _split_argv(sys.argv[1:] if argv is None else argv)
    parser = _build_parser()
    args = parser.parse_args(own_argv)
    configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.command == "list":
        return _handle_list(build_argv)

    if args.command == "has":
        return _handle_has(args.name, build_argv)

    return _handle_get(args.name, args.type_tag, args.default, build_argv)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except BuildArgsError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
