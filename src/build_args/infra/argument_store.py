"""Infrastructure: in-memory argument store.

A reference implementation of
:class:`~build_args.core.protocols.ArgumentStore` for build runners and
tests.  Names are matched case-insensitively; when a name is supplied
more than once the last value wins.

The store is read-only after construction and therefore safe to share
between concurrent readers.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from build_args.core.models import ArgumentEntry


def _key(name: str) -> str:
    return name.casefold()


class InMemoryArgumentStore:
    """Case-insensitive name → raw string lookup.

    Parameters
    ----------
    arguments:
        Either a mapping of name to raw value, or an iterable of
        :class:`ArgumentEntry` in command-line order.  ``None`` gives
        an empty store.
    """

    def __init__(
        self,
        arguments: Mapping[str, str] | Iterable[ArgumentEntry] | None = None,
    ) -> None:
        self._entries: dict[str, ArgumentEntry] = {}
        if arguments is None:
            return
        if isinstance(arguments, Mapping):
            items: Iterable[ArgumentEntry] = (
                ArgumentEntry(name=str(name), raw=str(raw))
                for name, raw in arguments.items()
            )
        else:
            items = arguments
        for entry in items:
            # Re-insert so the surviving entry sits at its last position.
            self._entries.pop(_key(entry.name), None)
            self._entries[_key(entry.name)] = entry

    # ------------------------------------------------------------------
    # ArgumentStore protocol
    # ------------------------------------------------------------------

    def has_argument(self, name: str) -> bool:
        return _key(name) in self._entries

    def get_argument(self, name: str) -> str | None:
        entry = self._entries.get(_key(name))
        return entry.raw if entry is not None else None

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def entries(self) -> tuple[ArgumentEntry, ...]:
        """Return the surviving entries with their original spelling."""
        return tuple(self._entries.values())

    def as_dict(self) -> dict[str, str]:
        return {entry.name: entry.raw for entry in self._entries.values()}

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has_argument(name)

    def __iter__(self) -> Iterator[str]:
        return (entry.name for entry in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"InMemoryArgumentStore({self.as_dict()!r})"
