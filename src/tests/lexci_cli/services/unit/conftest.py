"""Fixtures for CI service unit tests."""

from pathlib import Path

import pytest

from lexci_cli.services.ci import ExecutionConfig, resolve_execution_config
from lexci_cli.services.command_executor import CommandExecutor


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    """Provide a repository root with the three subproject directories."""
    for name in ("lexical-core", "lexical-capi", "lexical-derive"):
        (tmp_path / name).mkdir()
    return tmp_path


@pytest.fixture
def recording_executor() -> CommandExecutor:
    """Provide a dry-run executor whose history records every command."""
    return CommandExecutor(dry_run=True)


@pytest.fixture
def local_config() -> ExecutionConfig:
    """Config for a plain local run with no signals set."""
    return resolve_execution_config({})
