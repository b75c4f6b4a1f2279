"""Path constants for lexical-ci."""

from pathlib import Path


class ProjectPaths:
    """Standard paths relative to the repository root."""

    LEXCI_CONFIG = Path(".lexci.yaml")
