"""Core layer — argument lookup and invariant type conversion.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* Stores are consumed through :mod:`build_args.core.protocols` only.
"""

from build_args.core.accessor import NO_DEFAULT, ArgumentAccessor, argument, has_argument
from build_args.core.converters import (
    EnumConverter,
    ParseConverter,
    TypeConverterRegistry,
    build_default_registry,
    convert,
    default_registry,
)
from build_args.core.models import ArgumentEntry, ConversionRequest
from build_args.core.protocols import ArgumentStore, Converter

__all__: list[str] = [
    "NO_DEFAULT",
    "ArgumentAccessor",
    "ArgumentEntry",
    "ArgumentStore",
    "ConversionRequest",
    "Converter",
    "EnumConverter",
    "ParseConverter",
    "TypeConverterRegistry",
    "argument",
    "build_default_registry",
    "convert",
    "default_registry",
    "has_argument",
]
