import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo logging configuration done by CLI tests."""
    yield
    structlog.reset_defaults()
