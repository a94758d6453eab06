"""Protocols (interfaces) consumed by the core layer.

These define the contracts that argument stores and converters must
satisfy.  Core code depends ONLY on these protocols — never on concrete
implementations — so a build runner can hand in its own store.
"""

from __future__ import annotations

from typing import Protocol, TypeVar

T_co = TypeVar("T_co", covariant=True)


class ArgumentStore(Protocol):
    """Contract for the name → raw string argument lookup of a build run.

    Any object that implements :meth:`has_argument` and
    :meth:`get_argument` satisfies this protocol structurally (no
    explicit inheritance required).  The case policy for names is
    defined by the implementation.
    """

    def has_argument(self, name: str) -> bool:
        """Return whether *name* was supplied."""
        ...  # pragma: no cover

    def get_argument(self, name: str) -> str | None:
        """Return the raw value for *name*, or ``None`` when absent."""
        ...  # pragma: no cover


class Converter(Protocol[T_co]):
    """Contract for a single-type converter.

    Implementations parse a culture-invariant textual representation
    and must raise :class:`~build_args.exceptions.ConversionError` on
    malformed input.
    """

    def convert_from_invariant_string(self, raw: str) -> T_co:
        """Convert *raw* to the converter's target type.

        Raises
        ------
        ConversionError
            When *raw* does not match the expected representation.
        """
        ...  # pragma: no cover
