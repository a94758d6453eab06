"""Infrastructure layer — concrete argument stores and command-line parsing.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Concrete stores must satisfy :class:`~build_args.core.protocols.ArgumentStore`.
"""

from build_args.infra.argument_parser import (
    parse_build_arguments,
    split_build_arguments,
    store_from_argv,
)
from build_args.infra.argument_store import InMemoryArgumentStore

__all__: list[str] = [
    "InMemoryArgumentStore",
    "parse_build_arguments",
    "split_build_arguments",
    "store_from_argv",
]
