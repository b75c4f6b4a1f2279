"""Base manager class."""

from pathlib import Path

from lexci_common.repo import detect_repo_root
from lexci_logging import get_cli_logger

logger = get_cli_logger(__name__)


class BaseManager:
    """Base manager holding the repository root.

    Subclasses override :meth:`_initialize` for their own setup.
    """

    def __init__(self, repo_root: Path | None = None) -> None:
        """Initialize the base manager.

        Parameters
        ----------
        repo_root : Path | None, optional
            Repository root directory. If not provided, will be auto-detected.
        """
        if repo_root is None:
            repo_root = detect_repo_root()

        self.repo_root = repo_root
        self._initialize()

        logger.debug(
            "%s initialized with repo_root: %s",
            self.__class__.__name__,
            self.repo_root,
        )

    def _initialize(self) -> None:
        """Initialize manager-specific resources."""
