"""Invariant string → value converters and the type converter registry.

Every parser in this module reads a fixed, locale-independent textual
representation: ASCII digits only, ``.`` as the decimal separator,
ISO 8601 for dates.  The host locale never changes the outcome.

Converters are selected **solely** by the requested target type (or a
registered string tag naming it).  Parse callables signal malformed
input with ``ValueError``, ``TypeError`` or ``ArithmeticError``; the
registry translates those into
:class:`~build_args.exceptions.ConversionError`.
"""

from __future__ import annotations

import datetime
import enum
import logging
import re
from collections.abc import Callable, Iterable
from decimal import Decimal
from pathlib import Path
from typing import Any, Generic, TypeVar

from build_args.core.models import ConversionRequest
from build_args.core.protocols import Converter
from build_args.exceptions import ConversionError, describe_type

logger = logging.getLogger(__name__)

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Invariant grammars
# ---------------------------------------------------------------------------

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_HEX_RE = re.compile(r"(?:0[xX]|#)([0-9a-fA-F]+)")
_REAL_RE = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)
_SPECIAL_REALS: dict[str, str] = {
    "nan": "NaN",
    "infinity": "Infinity",
    "+infinity": "Infinity",
    "-infinity": "-Infinity",
}
_BOOLEANS: dict[str, bool] = {"true": True, "false": False}


# ---------------------------------------------------------------------------
# Built-in parse functions (pure)
# ---------------------------------------------------------------------------

def parse_str(raw: str) -> str:
    """Return *raw* unchanged."""
    return raw


def parse_int(raw: str) -> int:
    """Parse a decimal or ``0x`` / ``#`` prefixed hexadecimal integer.

    Surrounding whitespace and a leading sign are allowed on decimal
    values.  Digit group separators and non-ASCII digits are rejected.
    """
    text = raw.strip()
    if _INTEGER_RE.fullmatch(text):
        return int(text, 10)
    hex_match = _HEX_RE.fullmatch(text)
    if hex_match:
        return int(hex_match.group(1), 16)
    raise ValueError("expected an integer such as 42 or 0x2A")


def _normalise_real(raw: str) -> str:
    text = raw.strip()
    special = _SPECIAL_REALS.get(text.lower())
    if special is not None:
        return special
    if not _REAL_RE.fullmatch(text):
        raise ValueError("expected a number with '.' as decimal separator")
    return text


def parse_float(raw: str) -> float:
    """Parse an invariant floating point literal (``3.14``, ``1e-3``, ``NaN``)."""
    return float(_normalise_real(raw))


def parse_decimal(raw: str) -> Decimal:
    """Parse an invariant decimal literal, preserving its exact digits."""
    return Decimal(_normalise_real(raw))


def parse_bool(raw: str) -> bool:
    """Parse ``true`` / ``false`` case-insensitively."""
    value = _BOOLEANS.get(raw.strip().lower())
    if value is None:
        raise ValueError("expected 'true' or 'false'")
    return value


def parse_date(raw: str) -> datetime.date:
    """Parse an ISO 8601 calendar date (``2024-03-01``)."""
    return datetime.date.fromisoformat(raw.strip())


def parse_datetime(raw: str) -> datetime.datetime:
    """Parse an ISO 8601 date and time (``2024-03-01T12:30:00``)."""
    return datetime.datetime.fromisoformat(raw.strip())


def parse_time(raw: str) -> datetime.time:
    """Parse an ISO 8601 time of day (``12:30`` or ``12:30:15.5``)."""
    return datetime.time.fromisoformat(raw.strip())


def parse_path(raw: str) -> Path:
    """Wrap *raw* in a :class:`~pathlib.Path`; empty values are rejected."""
    if not raw:
        raise ValueError("path must not be empty")
    return Path(raw)


# ---------------------------------------------------------------------------
# Converter adapters
# ---------------------------------------------------------------------------

class ParseConverter(Generic[T]):
    """Adapt a plain ``Callable[[str], T]`` to the :class:`Converter` protocol.

    ``ValueError``, ``TypeError`` and ``ArithmeticError`` (for example
    ``decimal.InvalidOperation`` or ``OverflowError``) raised by *parse*
    are re-raised as
    :class:`ConversionError` carrying the raw value and target type.
    """

    __slots__ = ("_parse", "_target_type")

    def __init__(self, target_type: Any, parse: Callable[[str], T]) -> None:
        self._target_type = target_type
        self._parse = parse

    def convert_from_invariant_string(self, raw: str) -> T:
        try:
            return self._parse(raw)
        except ConversionError:
            raise
        except (ValueError, TypeError, ArithmeticError) as exc:
            raise ConversionError(raw, self._target_type, reason=str(exc)) from exc

    def __repr__(self) -> str:
        return f"ParseConverter({describe_type(self._target_type)})"


class EnumConverter(Generic[T]):
    """Resolve an :class:`enum.Enum` member by name, then by integer value.

    Name matching ignores case.
    """

    __slots__ = ("_enum_type",)

    def __init__(self, enum_type: type[T]) -> None:
        self._enum_type = enum_type

    def convert_from_invariant_string(self, raw: str) -> T:
        text = raw.strip()
        wanted = text.casefold()
        for name, member in self._enum_type.__members__.items():  # type: ignore[attr-defined]
            if name.casefold() == wanted:
                return member
        if _INTEGER_RE.fullmatch(text):
            try:
                return self._enum_type(int(text))  # type: ignore[call-arg]
            except (ValueError, TypeError):
                pass
        names = ", ".join(self._enum_type.__members__)  # type: ignore[attr-defined]
        raise ConversionError(
            raw,
            self._enum_type,
            reason="no matching member",
            hint=f"Expected one of: {names}",
        )


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class TypeConverterRegistry:
    """Explicit mapping from target type (or string tag) to converter.

    Lookups are exact on the type object; ``Enum`` subclasses without
    an explicit registration get an :class:`EnumConverter` on demand.
    Registration is expected to happen during build-script setup,
    before the registry is shared between threads.
    """

    def __init__(self) -> None:
        self._converters: dict[Any, Converter[Any]] = {}
        self._aliases: dict[str, Any] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(
        self,
        target_type: Any,
        parse: Callable[[str], Any],
        *,
        aliases: Iterable[str] = (),
    ) -> None:
        """Register a parse callable for *target_type*.

        Replaces any existing converter for the same type.  Each alias
        becomes a case-insensitive string tag resolving to *target_type*.
        """
        self.register_converter(
            target_type, ParseConverter(target_type, parse), aliases=aliases,
        )

    def register_converter(
        self,
        target_type: Any,
        converter: Converter[Any],
        *,
        aliases: Iterable[str] = (),
    ) -> None:
        """Register a ready-made :class:`Converter` for *target_type*."""
        if target_type in self._converters:
            logger.debug("Replacing converter for %s", describe_type(target_type))
        else:
            logger.debug("Registering converter for %s", describe_type(target_type))
        self._converters[target_type] = converter
        for alias in aliases:
            self._aliases[alias.casefold()] = target_type

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def resolve(self, target: Any) -> Any:
        """Map a string tag to its registered type; types pass through."""
        if isinstance(target, str):
            return self._aliases.get(target.casefold())
        return target

    def get_converter(self, target: Any) -> Converter[Any] | None:
        """Return the converter for *target*, or ``None`` if there is none."""
        target_type = self.resolve(target)
        if target_type is None:
            return None
        try:
            converter = self._converters.get(target_type)
        except TypeError:
            # Unhashable descriptors such as ``[int]`` never name a type.
            return None
        if converter is not None:
            return converter
        if isinstance(target_type, type) and issubclass(target_type, enum.Enum):
            return EnumConverter(target_type)
        return None

    def convert(self, request: ConversionRequest) -> Any:
        """Apply the converter for ``request.target_type`` to ``request.raw``.

        Raises
        ------
        ConversionError
            If no converter is registered, or the raw value is malformed.
        """
        converter = self.get_converter(request.target_type)
        if converter is None:
            raise ConversionError(
                request.raw,
                request.target_type,
                reason="no converter is registered for this type",
                hint="Register one with TypeConverterRegistry.register().",
            )
        return converter.convert_from_invariant_string(request.raw)

    def tags(self) -> list[str]:
        """Return the registered string tags, sorted."""
        return sorted(self._aliases)

    def copy(self) -> TypeConverterRegistry:
        """Return an independent registry with the same registrations."""
        clone = TypeConverterRegistry()
        clone._converters = dict(self._converters)
        clone._aliases = dict(self._aliases)
        return clone

    def __contains__(self, target: object) -> bool:
        return self.get_converter(target) is not None


# ---------------------------------------------------------------------------
# Default registry
# ---------------------------------------------------------------------------

def build_default_registry() -> TypeConverterRegistry:
    """Create a registry holding the built-in invariant parsers."""
    registry = TypeConverterRegistry()
    registry.register(str, parse_str, aliases=("str", "string"))
    registry.register(int, parse_int, aliases=("int", "integer"))
    registry.register(float, parse_float, aliases=("float", "double"))
    registry.register(Decimal, parse_decimal, aliases=("decimal",))
    registry.register(bool, parse_bool, aliases=("bool", "boolean"))
    registry.register(datetime.date, parse_date, aliases=("date",))
    registry.register(datetime.datetime, parse_datetime, aliases=("datetime",))
    registry.register(datetime.time, parse_time, aliases=("time",))
    registry.register(Path, parse_path, aliases=("path",))
    return registry


default_registry: TypeConverterRegistry = build_default_registry()
"""Process-wide registry used when callers do not supply their own."""


def convert(raw: str, target_type: Any, registry: TypeConverterRegistry | None = None) -> Any:
    """Convert *raw* to *target_type* using *registry* (default registry if ``None``)."""
    active = registry if registry is not None else default_registry
    return active.convert(ConversionRequest(raw=raw, target_type=target_type))
