"""Run build, test and bench phases as ordered build tool invocations."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from lexci_cli.core.constants import CargoArgs, Defaults, SpecialRounding
from lexci_cli.managers.base.service import BaseService
from lexci_cli.services.ci.commands import build_tool_argv
from lexci_cli.services.ci.models import (
    ExecutionConfig,
    FeatureSet,
    Phase,
    SubprojectKind,
    TestInvocation,
)


class PhaseExecutorService(BaseService):
    """Issue the subprocess calls for each phase.

    Every method blocks until its commands finish. A non-zero exit raises
    :class:`~lexci_common.errors.CommandFailedError` from the executor and no
    further commands run. Each method returns the number of commands issued.
    """

    def _invoke(
        self,
        config: ExecutionConfig,
        invocation: TestInvocation,
        cwd: Path,
    ) -> None:
        argv = build_tool_argv(config, invocation)
        self.command_executor.execute(argv, cwd=cwd)

    def run_build(
        self,
        config: ExecutionConfig,
        cwd: Path,
        subproject: SubprojectKind = SubprojectKind.CORE,
    ) -> int:
        """Build in debug, then release profile."""
        for release in (False, True):
            self._invoke(
                config,
                TestInvocation(subproject, Phase.BUILD, release=release),
                cwd,
            )
        return 2

    def run_test(
        self,
        config: ExecutionConfig,
        feature_list: Sequence[FeatureSet],
        cwd: Path,
        subproject: SubprojectKind = SubprojectKind.CORE,
    ) -> int:
        """Run the test phase.

        Order: debug and release runs with the required features, one isolated
        run per feature set, then the serial rounding group on hosted builds.
        """
        if config.tests_disabled:
            self.log_info("Tests disabled, skipping test phase")
            return 0

        issued = 0
        for release in (False, True):
            self._invoke(
                config,
                TestInvocation(subproject, Phase.TEST, release=release),
                cwd,
            )
            issued += 1

        for feature_set in feature_list:
            self._invoke(
                config,
                TestInvocation(
                    subproject,
                    Phase.TEST,
                    feature_set=feature_set,
                    isolated=True,
                ),
                cwd,
            )
            issued += 1

        if not config.freestanding_mode:
            self._invoke(
                config,
                TestInvocation(
                    subproject,
                    Phase.TEST,
                    feature_set=FeatureSet(SpecialRounding.FEATURES),
                    test_filter=(
                        SpecialRounding.TEST_NAME,
                        CargoArgs.SEPARATOR,
                        CargoArgs.IGNORED,
                        CargoArgs.SINGLE_THREAD,
                    ),
                ),
                cwd,
            )
            issued += 1

        return issued

    def run_bench(
        self,
        config: ExecutionConfig,
        feature_list: Sequence[FeatureSet],
        cwd: Path,
        subproject: SubprojectKind = SubprojectKind.CORE,
    ) -> int:
        """Compile benchmarks without running them.

        ``feature_list`` is accepted for symmetry with :meth:`run_test`; the
        dry-run compiles with the required features only.
        """
        if config.tests_disabled or config.benches_disabled:
            self.log_info("Tests or benches disabled, skipping bench phase")
            return 0

        self._invoke(config, TestInvocation(subproject, Phase.BENCH), cwd)
        return 1

    def run_ffi_tests(
        self,
        config: ExecutionConfig,
        cwd: Path,
        entry_point: str = Defaults.FFI_ENTRY_POINT,
    ) -> int:
        """Run the scripted foreign-binding harness with the resolved interpreter."""
        if config.tests_disabled or not config.ffi_tests_enabled:
            self.log_info("FFI tests not enabled, skipping")
            return 0

        self.command_executor.execute([config.script_interpreter, entry_point], cwd=cwd)
        return 1

    def run_derive_tests(self, config: ExecutionConfig, cwd: Path) -> int:
        """Run the code-generation tests with the native tool.

        The derive crate depends on its siblings by relative path, which the
        cross-compiling wrapper cannot mount, so cross is never used here.
        """
        if config.tests_disabled or not config.derive_tests_enabled:
            self.log_info("Derive tests not enabled, skipping")
            return 0

        self.command_executor.execute([config.native_tool, CargoArgs.TEST], cwd=cwd)
        return 1
