"""Allow ``python -m build_args`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m build_args`` behaves identically to the ``build-args``
console script.
"""

from __future__ import annotations

from build_args.cli.app import cli

if __name__ == "__main__":
    cli()
