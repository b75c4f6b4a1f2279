"""Top-level orchestration of a CI run.

Control flow: exit gate, configuration, feature matrix, subproject sequence.
A failing command raises :class:`~lexci_common.errors.CommandFailedError`,
which is left to propagate to the CLI boundary.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from lexci_cli.core.project_config import ProjectSettings, load_project_settings
from lexci_cli.managers.base.orchestrator import BaseOrchestrator
from lexci_cli.services.ci import (
    ExecutionConfig,
    FeatureMatrix,
    GateDecision,
    PhaseExecutorService,
    SubprojectSequencerService,
    build_feature_matrix,
    evaluate_exit_gate,
    resolve_execution_config,
)
from lexci_logging import get_cli_logger

if TYPE_CHECKING:
    from lexci_cli.core.output import OutputStrategy
    from lexci_cli.services.command_executor import CommandExecutor

logger = get_cli_logger(__name__)


@dataclass(frozen=True)
class RunResult:
    """Summary of a completed (or skipped) run."""

    gate: GateDecision
    config: ExecutionConfig | None = None
    matrix: FeatureMatrix | None = None
    commands_issued: int = 0

    @property
    def skipped(self) -> bool:
        return self.gate.skip


class MatrixOrchestrator(BaseOrchestrator):
    """Coordinate the exit gate, config resolution and the phase services.

    Parameters
    ----------
    repo_root : Path | None
        Repository root directory
    command_executor : CommandExecutor | None
        Executor shared by all services
    env : dict[str, str] | None
        Environment snapshot to resolve signals from; defaults to ``os.environ``
    settings : ProjectSettings | None
        Tool and layout settings; loaded from ``.lexci.yaml`` when omitted
    output : OutputStrategy | None
        Console output for progress headings
    run_core_bench : bool
        Reinstate the core benchmark dry-run
    """

    def __init__(
        self,
        repo_root: Path | None = None,
        command_executor: Optional["CommandExecutor"] = None,
        env: dict[str, str] | None = None,
        settings: ProjectSettings | None = None,
        output: Optional["OutputStrategy"] = None,
        run_core_bench: bool = False,
    ) -> None:
        self.env = dict(os.environ) if env is None else dict(env)
        self._settings = settings
        self.output = output
        self.run_core_bench = run_core_bench
        super().__init__(repo_root, command_executor)

    @property
    def settings(self) -> ProjectSettings:
        if self._settings is None:
            self._settings = load_project_settings(self.repo_root)
        return self._settings

    def _register_services(self) -> None:
        phases = self.register_service(PhaseExecutorService)
        self.register_service(
            SubprojectSequencerService,
            phase_executor=phases,
            settings=self.settings,
            output=self.output,
            run_core_bench=self.run_core_bench,
        )

    def check_gate(self) -> GateDecision:
        """Evaluate the deployment-tag gate."""
        return evaluate_exit_gate(self.env)

    def resolve_config(self) -> ExecutionConfig:
        """Resolve the execution config from the environment snapshot."""
        return resolve_execution_config(self.env, self.settings)

    def run(self) -> RunResult:
        """Run the whole matrix.

        Returns
        -------
        RunResult
            Gate decision, resolved config and command count

        Raises
        ------
        CommandFailedError
            On the first command that exits non-zero
        """
        gate = self.check_gate()
        if gate.skip:
            return RunResult(gate=gate)

        config = self.resolve_config()
        matrix = build_feature_matrix(config)
        logger.info(
            "Running matrix with %s core feature sets using %s",
            len(matrix.core),
            config.build_tool,
        )

        sequencer = self.get_service(SubprojectSequencerService)
        issued = sequencer.run(config, matrix)
        return RunResult(
            gate=gate,
            config=config,
            matrix=matrix,
            commands_issued=issued,
        )
