"""Typed access to the arguments of a build run.

Two equivalent surfaces are offered:

* :class:`ArgumentAccessor` wraps a store once; the store is a required
  constructor argument, so its methods never re-check it.
* :func:`has_argument` / :func:`argument` take the store explicitly on
  every call and reject ``None`` with :class:`InvalidInputError`.

Guarantees
----------
* Stateless — nothing is cached or mutated between calls.
* Defaults are returned as-is; they never go through a converter.
* Errors propagate to the caller; nothing is logged or swallowed here.
"""

from __future__ import annotations

from typing import Any, Final

from build_args.core.converters import TypeConverterRegistry, default_registry
from build_args.core.models import ConversionRequest
from build_args.core.protocols import ArgumentStore
from build_args.exceptions import InvalidInputError, MissingArgumentError


class _NoDefault:
    """Sentinel type marking "no default supplied" (``None`` is a valid default)."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<no default>"


NO_DEFAULT: Final = _NoDefault()


class ArgumentAccessor:
    """Query a build run's arguments with optional defaults and conversion.

    Parameters
    ----------
    store:
        Any object satisfying the :class:`ArgumentStore` protocol.
    registry:
        Converter registry; the process-wide default when omitted.

    Raises
    ------
    InvalidInputError
        If *store* is ``None``.
    """

    def __init__(
        self,
        store: ArgumentStore,
        registry: TypeConverterRegistry | None = None,
    ) -> None:
        if store is None:
            raise InvalidInputError(
                "An argument store is required.",
                hint="Pass the build run's argument store to ArgumentAccessor().",
            )
        self._store: ArgumentStore = store
        self._registry: TypeConverterRegistry = (
            registry if registry is not None else default_registry
        )

    @property
    def store(self) -> ArgumentStore:
        return self._store

    @property
    def registry(self) -> TypeConverterRegistry:
        return self._registry

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def has_argument(self, name: str) -> bool:
        """Return whether *name* was supplied to the build."""
        return self._store.has_argument(name)

    def argument(
        self,
        name: str,
        target_type: Any = str,
        default: Any = NO_DEFAULT,
    ) -> Any:
        """Return argument *name* converted to *target_type*.

        When the argument is absent and *default* was given, *default*
        is returned unchanged.

        Raises
        ------
        MissingArgumentError
            If the argument is absent and no default was given.
        ConversionError
            If the raw value cannot be converted, or no converter exists
            for *target_type*.
        """
        raw = self._store.get_argument(name)
        if raw is None:
            if default is NO_DEFAULT:
                raise MissingArgumentError(name)
            return default
        return self._registry.convert(
            ConversionRequest(raw=raw, target_type=target_type),
        )


# ---------------------------------------------------------------------------
# Free-function surface
# ---------------------------------------------------------------------------

def _require_store(store: ArgumentStore | None) -> ArgumentStore:
    if store is None:
        raise InvalidInputError(
            "An argument store is required.",
            hint="Pass the build run's argument store as the first argument.",
        )
    return store


def has_argument(store: ArgumentStore | None, name: str) -> bool:
    """Return whether *name* exists in *store*.

    Raises
    ------
    InvalidInputError
        If *store* is ``None``.
    """
    return _require_store(store).has_argument(name)


def argument(
    store: ArgumentStore | None,
    name: str,
    target_type: Any = str,
    default: Any = NO_DEFAULT,
    *,
    registry: TypeConverterRegistry | None = None,
) -> Any:
    """Return argument *name* from *store* converted to *target_type*.

    See :meth:`ArgumentAccessor.argument` for the default and error
    semantics.  Additionally raises :class:`InvalidInputError` if
    *store* is ``None``.
    """
    accessor = ArgumentAccessor(_require_store(store), registry)
    return accessor.argument(name, target_type, default)
