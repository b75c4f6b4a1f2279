"""Base orchestrator class for managing services."""

from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, TypeVar

from lexci_cli.managers.base.manager import BaseManager
from lexci_cli.managers.base.service import BaseService
from lexci_logging import get_cli_logger

if TYPE_CHECKING:
    from lexci_cli.services.command_executor import CommandExecutor

logger = get_cli_logger(__name__)

S = TypeVar("S", bound=BaseService)


class BaseOrchestrator(BaseManager):
    """Base orchestrator coordinating services that share one executor."""

    def __init__(
        self,
        repo_root: Path | None = None,
        command_executor: Optional["CommandExecutor"] = None,
    ) -> None:
        """Initialize the base orchestrator.

        Parameters
        ----------
        repo_root : Path | None, optional
            Repository root directory
        command_executor : CommandExecutor | None, optional
            Command executor instance
        """
        self._command_executor = command_executor
        self._services: dict[type[BaseService], BaseService] = {}
        super().__init__(repo_root=repo_root)

    def _initialize(self) -> None:
        self._register_services()

    def _register_services(self) -> None:
        """Register services for this orchestrator.

        Subclasses should override to register their specific services.
        """

    @property
    def command_executor(self) -> "CommandExecutor":
        """Get command executor instance, creating if necessary."""
        if self._command_executor is None:
            from lexci_cli.services.command_executor import CommandExecutor

            self._command_executor = CommandExecutor()
        return self._command_executor

    def register_service(
        self,
        service_class: type[S],
        **kwargs: Any,
    ) -> S:
        """Register a service with the orchestrator.

        Parameters
        ----------
        service_class : Type[S]
            Service class to instantiate
        **kwargs : Any
            Additional arguments for service initialization

        Returns
        -------
        S
            Instantiated service
        """
        if service_class in self._services:
            return self._services[service_class]  # type: ignore[return-value]

        service = service_class(
            repo_root=self.repo_root,
            command_executor=self.command_executor,
            **kwargs,
        )
        self._services[service_class] = service
        logger.debug(
            "Registered service %s in %s",
            service_class.__name__,
            self.__class__.__name__,
        )
        return service

    def get_service(self, service_class: type[S]) -> S:
        """Get a registered service.

        Raises
        ------
        ValueError
            If service is not registered
        """
        if service_class not in self._services:
            msg = (
                f"Service {service_class.__name__} not registered in "
                f"{self.__class__.__name__}"
            )
            raise ValueError(msg)
        return self._services[service_class]  # type: ignore[return-value]
