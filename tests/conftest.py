import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_logging():
    """The CLI configures structlog globally; undo it between tests."""
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()
