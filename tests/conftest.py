import pytest

from cli_module import Cli


@pytest.fixture
def fresh_cli():
    """Cli that is not shared with the session fixture."""
    return Cli()
