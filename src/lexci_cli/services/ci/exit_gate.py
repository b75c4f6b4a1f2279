"""Deployment-tag short circuit.

Tagged pushes are release passes; the verification matrix already ran on the
commit, so the whole orchestration is skipped with success.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from lexci_cli.core.constants import CISignals
from lexci_common.env import is_present, read_str
from lexci_logging import get_cli_logger

logger = get_cli_logger(__name__)


@dataclass(frozen=True)
class GateDecision:
    """Outcome of the exit gate."""

    skip: bool
    tag: str | None = None

    @property
    def reason(self) -> str:
        if not self.skip:
            return "no deployment tag"
        return f"deployment tag {self.tag!r} present"


def evaluate_exit_gate(env: Mapping[str, str] | None = None) -> GateDecision:
    """Decide whether this invocation is a deploy pass that must do nothing.

    Parameters
    ----------
    env : Mapping[str, str] | None
        Environment snapshot; defaults to ``os.environ``

    Returns
    -------
    GateDecision
        ``skip=True`` when ``TRAVIS_TAG`` is non-empty
    """
    if is_present(CISignals.DEPLOY_TAG, env):
        tag = read_str(CISignals.DEPLOY_TAG, env=env)
        logger.info("Deployment tag %s present, skipping test matrix", tag)
        return GateDecision(skip=True, tag=tag)
    return GateDecision(skip=False)
