"""
pytest integration for the cli module.

Registered through the ``pytest11`` entry point, so installing the package
is enough to make the ``cli`` fixture available.
"""

import pytest

from .cli import Cli
from .config import is_debug_enabled


@pytest.fixture(scope='session')
def cli_session():
    """Single Cli instance shared by the whole test session."""
    return Cli(debug=is_debug_enabled())


@pytest.fixture
def cli(cli_session):
    """Cli with the previous test's output and exit code cleared."""
    cli_session.reset()
    yield cli_session
