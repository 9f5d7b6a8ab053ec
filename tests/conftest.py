import pytest
import structlog
from structlog.testing import capture_logs

from bitcalc.vm import Machine


@pytest.fixture(scope="session")
def machine():
    """Shared evaluator for entire test suite. The stack is reset on every run."""
    return Machine()


@pytest.fixture(autouse=True)
def captured_logs():
    """Capture structlog output rather than printing it, and undo any logging configuration."""
    structlog.reset_defaults()
    with capture_logs() as logs:
        yield logs
    structlog.reset_defaults()
