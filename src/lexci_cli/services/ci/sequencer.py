"""Order the phases across the three subprojects."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional

from lexci_cli.core.constants import Icons
from lexci_cli.core.project_config import ProjectSettings
from lexci_cli.managers.base.service import BaseService
from lexci_cli.services.ci.models import (
    ExecutionConfig,
    FeatureMatrix,
    Phase,
    Subproject,
    SubprojectKind,
)
from lexci_cli.services.ci.phase_executor import PhaseExecutorService

if TYPE_CHECKING:
    from lexci_cli.core.output import OutputStrategy
    from lexci_cli.services.command_executor import CommandExecutor


def workspace_subprojects(
    settings: ProjectSettings | None = None,
) -> dict[SubprojectKind, Subproject]:
    """Subproject layout in execution order."""
    settings = settings or ProjectSettings()
    return {
        SubprojectKind.CORE: Subproject(
            kind=SubprojectKind.CORE,
            path=settings.core_dir,
            phases=(Phase.BUILD, Phase.TEST, Phase.BENCH),
        ),
        SubprojectKind.BINDINGS: Subproject(
            kind=SubprojectKind.BINDINGS,
            path=settings.bindings_dir,
            phases=(Phase.FFI_TEST,),
            skippable=True,
        ),
        SubprojectKind.CODEGEN: Subproject(
            kind=SubprojectKind.CODEGEN,
            path=settings.codegen_dir,
            phases=(Phase.DERIVE_TEST,),
            skippable=True,
        ),
    }


class SubprojectSequencerService(BaseService):
    """Drive core, bindings and codegen in a fixed order.

    Each subproject's directory is passed explicitly to every command; nothing
    changes the process working directory.

    Parameters
    ----------
    repo_root : Path
        Repository root the subproject paths are relative to
    command_executor : CommandExecutor | None
        Shared command executor
    phase_executor : PhaseExecutorService | None
        Phase runner; created on the same executor when omitted
    settings : ProjectSettings | None
        Subproject directories and FFI entry point
    output : OutputStrategy | None
        Console output for subproject headings
    run_core_bench : bool
        Reinstate the core benchmark dry-run, which is skipped by default
    """

    def __init__(
        self,
        repo_root: Path,
        command_executor: Optional["CommandExecutor"] = None,
        phase_executor: PhaseExecutorService | None = None,
        settings: ProjectSettings | None = None,
        output: Optional["OutputStrategy"] = None,
        run_core_bench: bool = False,
    ) -> None:
        self.settings = settings or ProjectSettings()
        self.output = output
        self.run_core_bench = run_core_bench
        super().__init__(repo_root, command_executor)
        self.phases = phase_executor or PhaseExecutorService(
            repo_root,
            self.command_executor,
        )
        self.subprojects = workspace_subprojects(self.settings)

    def subproject_dir(self, kind: SubprojectKind) -> Path:
        """Absolute directory of a subproject."""
        return self.repo_root / self.subprojects[kind].path

    def _enter(self, subproject: Subproject) -> Path:
        cwd = self.subproject_dir(subproject.kind)
        self.log_info("Entering %s subproject at %s", subproject.kind.value, cwd)
        if self.output is not None:
            label = f"{subproject.path} ({subproject.kind.value})"
            if subproject.skippable:
                label += ", optional"
            icon = Icons.TEST if subproject.skippable else Icons.BUILD
            self.output.subsection(label, icon)
        return cwd

    def _run_phase(
        self,
        phase: Phase,
        subproject: Subproject,
        config: ExecutionConfig,
        matrix: FeatureMatrix,
        cwd: Path,
    ) -> int:
        kind = subproject.kind
        feature_list = matrix.for_family(kind)

        if phase is Phase.BUILD:
            return self.phases.run_build(config, cwd, kind)
        if phase is Phase.TEST:
            return self.phases.run_test(config, feature_list, cwd, kind)
        if phase is Phase.BENCH:
            if not self.run_core_bench:
                self.log_debug("Bench dry-run not reinstated, skipping")
                return 0
            return self.phases.run_bench(config, feature_list, cwd, kind)
        if phase is Phase.FFI_TEST:
            return self.phases.run_ffi_tests(
                config,
                cwd,
                entry_point=self.settings.ffi_entry_point,
            )
        return self.phases.run_derive_tests(config, cwd)

    def run(self, config: ExecutionConfig, matrix: FeatureMatrix) -> int:
        """Run each subproject's phases in order.

        Returns
        -------
        int
            Number of commands issued
        """
        issued = 0
        for subproject in self.subprojects.values():
            cwd = self._enter(subproject)
            for phase in subproject.phases:
                issued += self._run_phase(phase, subproject, config, matrix, cwd)
        return issued
