"""Domain models for build-args.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They are created per call or per parsed
token and are never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


# ---------------------------------------------------------------------------
# Conversion request
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ConversionRequest:
    """A raw string paired with the type it should become."""

    raw: str
    """The raw argument value exactly as the store returned it."""

    target_type: Any
    """A type object (``int``, ``Decimal``, an ``Enum`` subclass …) or a
    registered string tag such as ``"int"``."""


# ---------------------------------------------------------------------------
# Parsed command-line argument
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ArgumentEntry:
    """A single ``name``/``raw`` pair parsed from the build command line."""

    name: str
    """Argument name as written, without leading dashes."""

    raw: str
    """Raw string value.  Bare flags carry ``"true"``."""
