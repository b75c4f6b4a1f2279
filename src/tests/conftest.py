"""Root pytest configuration and shared fixtures for the lexical-ci test suite."""

import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from lexci_cli.core.constants import CISignals, EnvVars  # noqa: E402
from lexci_logging import configure_logger  # noqa: E402

LOGGING_PACKAGES = ("lexci_cli", "lexci_common", "lexci_logging")


@pytest.fixture(autouse=True)
def clean_signals(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove CI signals and CLI variables inherited from the outer environment.

    Tests run under CI themselves, where ``CI`` and friends are usually set.
    """
    cli_vars = (EnvVars.LOG_LEVEL, EnvVars.LOG_FILE, EnvVars.REPO_ROOT)
    for name in (*CISignals.ALL, *cli_vars):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_package_loggers() -> Generator[None, None, None]:
    """Put package loggers back on the test profile after each test.

    CLI invocations reconfigure them with ``propagate=False``, which would hide
    records from ``caplog`` in later tests.
    """
    for name in LOGGING_PACKAGES:
        configure_logger(name, profile="test")
    yield
    for name in LOGGING_PACKAGES:
        configure_logger(name, profile="test")
