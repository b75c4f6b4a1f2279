"""Fixtures for CLI command unit tests."""

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner():
    """Provide Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def repo_args(tmp_path):
    """Global options pointing the CLI at an empty repository root."""
    return ["--repo-root", str(tmp_path)]
