"""Infrastructure: build runner command-line argument syntax.

Recognised token forms
----------------------
* ``-name=value`` / ``--name=value`` — value after the first ``=``;
  one pair of matching surrounding quotes is stripped.
* ``-name value`` — the next token is the value unless it starts
  with ``-``.  Negative numbers therefore need the ``=`` form.
* ``-name`` — a bare flag, stored as ``"true"``.

Anything else is a positional token (typically the build script path).
"""

from __future__ import annotations

from collections.abc import Sequence

from build_args.core.models import ArgumentEntry
from build_args.exceptions import ArgumentSyntaxError
from build_args.infra.argument_store import InMemoryArgumentStore

FLAG_VALUE: str = "true"
"""Raw value recorded for a bare ``-name`` flag."""


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def _is_option(token: str) -> bool:
    return token.startswith("-")


def split_build_arguments(
    argv: Sequence[str],
) -> tuple[tuple[ArgumentEntry, ...], tuple[str, ...]]:
    """Split *argv* into named argument entries and positional tokens.

    Raises
    ------
    ArgumentSyntaxError
        If an option token has an empty name (``-``, ``--``, ``-=x``).
    """
    entries: list[ArgumentEntry] = []
    positionals: list[str] = []
    index = 0
    while index < len(argv):
        token = argv[index]
        index += 1

        if not _is_option(token):
            positionals.append(token)
            continue

        body = token.lstrip("-")
        name, sep, value = body.partition("=")
        name = name.strip()
        if not name:
            raise ArgumentSyntaxError(
                f"Missing argument name in {token!r}.",
                hint="Use -name=value, -name value or -name.",
            )

        if sep:
            entries.append(ArgumentEntry(name=name, raw=_strip_quotes(value)))
        elif index < len(argv) and not _is_option(argv[index]):
            entries.append(ArgumentEntry(name=name, raw=argv[index]))
            index += 1
        else:
            entries.append(ArgumentEntry(name=name, raw=FLAG_VALUE))

    return tuple(entries), tuple(positionals)


def parse_build_arguments(argv: Sequence[str]) -> tuple[ArgumentEntry, ...]:
    """Return only the named argument entries of *argv*, in order."""
    entries, _ = split_build_arguments(argv)
    return entries


def store_from_argv(argv: Sequence[str]) -> InMemoryArgumentStore:
    """Parse *argv* and build a case-insensitive argument store from it."""
    return InMemoryArgumentStore(parse_build_arguments(argv))
