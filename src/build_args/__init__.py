"""build-args — typed access to the arguments supplied to a build run.

Build scripts query named ``-name=value`` arguments, optionally with a
default and a conversion from the raw string to a target type.
"""

from build_args.core.accessor import ArgumentAccessor, argument, has_argument
from build_args.version import __version__

__all__: list[str] = [
    "ArgumentAccessor",
    "__version__",
    "argument",
    "has_argument",
]
