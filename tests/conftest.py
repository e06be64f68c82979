import pytest
from typer.testing import CliRunner

from smp.executor import CommandExecutor, MockCommandExecutor


@pytest.fixture
def cli_runner():
    """Reusable Typer CLI runner."""
    return CliRunner()


@pytest.fixture
def executor():
    return CommandExecutor()


@pytest.fixture
def mock_executor():
    return MockCommandExecutor()
