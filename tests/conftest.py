"""Shared pytest fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler and level changes made by setup_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
