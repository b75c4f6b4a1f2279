"""Repository root detection."""

from __future__ import annotations

import os
from pathlib import Path

REPO_MARKERS = (".lexci.yaml", ".git")
REPO_ROOT_ENV_VAR = "LEXCI_REPO_ROOT"


def detect_repo_root(start: Path | None = None) -> Path:
    """Find the repository root.

    Resolution order:

    1. ``LEXCI_REPO_ROOT`` when set
    2. The nearest ancestor of ``start`` (default: cwd) holding one of
       :data:`REPO_MARKERS`
    3. ``start`` itself

    Parameters
    ----------
    start : Path | None
        Directory to search upward from

    Returns
    -------
    Path
        Resolved repository root
    """
    override = os.environ.get(REPO_ROOT_ENV_VAR)
    if override:
        return Path(override).resolve()

    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if any((candidate / marker).exists() for marker in REPO_MARKERS):
            return candidate
    return current
