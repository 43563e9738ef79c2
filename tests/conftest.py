"""Global pytest configuration.

Sample graph fixtures for the algorithm tests live in
``tests/lib/algorithms/conftest.py``.
"""

from __future__ import annotations

import logging

import pytest

from algograph.logging import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def _restore_log_level():
    """Undo log level changes made by a test."""
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = root_logger.level
    handler_levels = [handler.level for handler in root_logger.handlers]
    yield
    root_logger.setLevel(level)
    for handler, handler_level in zip(root_logger.handlers, handler_levels):
        handler.setLevel(handler_level)
