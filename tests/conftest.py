"""Shared pytest fixtures and configuration for the build-args test suite.

Guidelines
----------
* No network access and no reliance on the host's command line.
* Stores are built in-memory; the accessor only sees the protocol.
* Core tests must be pure — no side effects on the default registry.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from build_args.infra.argument_store import InMemoryArgumentStore


@pytest.fixture
def sample_store() -> InMemoryArgumentStore:
    """The store a build run started with ``-myArgument="is specified" -loopCount=5``."""
    return InMemoryArgumentStore({"myArgument": "is specified", "loopCount": "5"})


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop handlers the CLI installs so they never outlive a test's capture."""
    yield
    package_logger = logging.getLogger("build_args")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
