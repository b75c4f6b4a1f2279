"""Base service class for CLI services."""

from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

from lexci_logging import get_cli_logger

if TYPE_CHECKING:
    from lexci_cli.services.command_executor import CommandExecutor

logger = get_cli_logger(__name__)


class BaseService:
    """Base service class providing repository context and command execution.

    Parameters
    ----------
    repo_root : Path
        Repository root directory
    command_executor : CommandExecutor | None, optional
        Command executor instance for running commands
    """

    def __init__(
        self,
        repo_root: Path,
        command_executor: Optional["CommandExecutor"] = None,
    ) -> None:
        self.repo_root = repo_root
        self._command_executor = command_executor
        self._logger = get_cli_logger(self.__class__.__module__)
        self._initialize_service()

    def _initialize_service(self) -> None:
        """Initialize service-specific resources.

        Subclasses should override to perform their initialization.
        """

    @property
    def command_executor(self) -> "CommandExecutor":
        """Get command executor instance, creating if necessary."""
        if self._command_executor is None:
            from lexci_cli.services.command_executor import CommandExecutor

            self._command_executor = CommandExecutor()
        return self._command_executor

    def log_debug(self, message: str, *args: Any) -> None:
        """Log a debug message with service context."""
        self._logger.debug("[%s] " + message, self.__class__.__name__, *args)

    def log_info(self, message: str, *args: Any) -> None:
        """Log an info message with service context."""
        self._logger.info("[%s] " + message, self.__class__.__name__, *args)

    def log_warning(self, message: str, *args: Any) -> None:
        """Log a warning message with service context."""
        self._logger.warning("[%s] " + message, self.__class__.__name__, *args)
