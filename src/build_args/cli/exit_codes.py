"""Process exit statuses returned by ``build-args``.

``has`` reuses :data:`GENERAL_ERROR` for "argument not supplied", so
shell build scripts can test presence with a plain ``if``.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The command ran; for ``has``, the argument was supplied."""

GENERAL_ERROR: int = 1
"""A BuildArgsError was reported, or ``has`` found no such argument."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""

UNEXPECTED_ERROR: int = 2
"""Any other exception reached the ``cli()`` boundary."""
