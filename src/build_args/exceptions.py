"""Custom exception hierarchy for build-args.

All exceptions raised by the accessor, the converters and the
command-line parser inherit from :class:`BuildArgsError`.  Raw
``ValueError`` / ``TypeError`` coming out of a parse callable must
NEVER escape the registry — they are re-raised as
:class:`ConversionError` with the original chained.

Hierarchy
---------
BuildArgsError
├── InvalidInputError
├── MissingArgumentError
├── ConversionError
├── ArgumentSyntaxError
└── EnvironmentError
"""

from __future__ import annotations

from typing import Any


class BuildArgsError(Exception):
    """Base exception for all build-args errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Accessor --------------------------------------------------------------

class InvalidInputError(BuildArgsError):
    """Raised when the argument store reference is missing."""


class MissingArgumentError(BuildArgsError):
    """Raised when a required argument was not supplied to the build."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Argument '{name}' was not set.",
            hint=f"Pass it on the command line as -{name}=<value>.",
        )
        self.name: str = name


# --- Conversion ------------------------------------------------------------

def describe_type(target: Any) -> str:
    """Return a short human-readable name for a target type or tag."""
    if isinstance(target, str):
        return target
    return getattr(target, "__name__", repr(target))


class ConversionError(BuildArgsError):
    """Raised when a raw argument value cannot become the requested type.

    Also raised when no converter is registered for the type at all.
    """

    def __init__(
        self,
        raw_value: str,
        target_type: Any,
        *,
        reason: str | None = None,
        hint: str | None = None,
    ) -> None:
        message = f"Cannot convert {raw_value!r} to {describe_type(target_type)}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, hint=hint)
        self.raw_value: str = raw_value
        self.target_type: Any = target_type


# --- Command-line syntax ---------------------------------------------------

class ArgumentSyntaxError(BuildArgsError):
    """Raised when a build-argument token cannot be parsed."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(BuildArgsError):
    """Raised when an optional runtime dependency is not available."""
