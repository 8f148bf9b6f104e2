"""Root test configuration: logging cleanup between tests"""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_root_logging():
    """Drop handlers installed by CLI commands so later tests don't log to closed streams."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if not handler.__class__.__module__.startswith("_pytest"):
            root.removeHandler(handler)
