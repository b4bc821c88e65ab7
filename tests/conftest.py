"""Shared pytest fixtures and configuration for the integer-collector test suite.

Guidelines
----------
* No real terminal interaction — questionary is mocked at the prompt boundary.
* No real delays — every sleep is replaced by a mock.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def fake_sleep() -> MagicMock:
    """Stand-in for ``time.sleep``; inspect ``call_args_list`` for delays."""
    return MagicMock(return_value=None)


@pytest.fixture(autouse=True)
def _restore_package_logger() -> Iterator[None]:
    """Undo handler, level and propagation changes made by ``configure_logging``."""
    package_logger = logging.getLogger("integer_collector")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate
