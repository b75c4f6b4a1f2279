"""Unit tests for MatrixOrchestrator."""

import subprocess
from unittest.mock import patch

import pytest

from lexci_cli.managers import MatrixOrchestrator, RunResult
from lexci_cli.services.ci import PhaseExecutorService, SubprojectSequencerService
from lexci_cli.services.command_executor import CommandExecutor
from lexci_common.errors import CommandFailedError


@pytest.fixture
def executor():
    return CommandExecutor(dry_run=True)


@pytest.mark.unit
class TestMatrixOrchestrator:
    """Test the top-level run."""

    def test_tag_skips_everything(self, tmp_path, executor):
        """Test a deployment tag skips config resolution and all commands."""
        orchestrator = MatrixOrchestrator(
            tmp_path,
            executor,
            env={"TRAVIS_TAG": "v0.7.0", "CI": "1"},
        )

        with patch(
            "lexci_cli.managers.matrix_orchestrator.resolve_execution_config",
        ) as mock_resolve:
            result = orchestrator.run()

        assert isinstance(result, RunResult)
        assert result.skipped is True
        assert result.config is None
        assert result.commands_issued == 0
        assert executor.history == []
        mock_resolve.assert_not_called()

    def test_default_run(self, tmp_path, executor):
        """Test a local run with no signals."""
        result = MatrixOrchestrator(tmp_path, executor, env={}).run()

        assert result.skipped is False
        assert result.config.build_tool == "cargo"
        assert len(result.matrix.core) == 15
        assert result.commands_issued == len(executor.history) == 20

    def test_all_opt_ins(self, tmp_path, executor):
        """Test FFI and derive runs are appended after core."""
        env = {"ENABLE_FFI_TESTS": "1", "ENABLE_DERIVE_TESTS": "1"}
        result = MatrixOrchestrator(tmp_path, executor, env=env).run()

        assert result.commands_issued == 22
        assert executor.history[-1].cwd == tmp_path / "lexical-derive"

    def test_bench_reinstated(self, tmp_path, executor):
        """Test the core bench can be reinstated by the caller."""
        result = MatrixOrchestrator(
            tmp_path,
            executor,
            env={},
            run_core_bench=True,
        ).run()

        assert result.commands_issued == 21

    def test_settings_loaded_from_project_file(self, tmp_path, executor):
        """Test .lexci.yaml overrides reach the commands."""
        (tmp_path / ".lexci.yaml").write_text(
            "tools:\n  native: cargo-nightly\nsubprojects:\n  core: core\n",
        )

        MatrixOrchestrator(tmp_path, executor, env={}).run()

        first = executor.history[0]
        assert first.argv[0] == "cargo-nightly"
        assert first.cwd == tmp_path / "core"

    @patch("subprocess.run")
    def test_failure_propagates(self, mock_run, tmp_path):
        """Test the first failure propagates with its exit code."""
        mock_run.return_value = subprocess.CompletedProcess([], 4, "", "")
        orchestrator = MatrixOrchestrator(
            tmp_path,
            CommandExecutor(),
            env={},
        )

        with pytest.raises(CommandFailedError) as exc_info:
            orchestrator.run()

        assert exc_info.value.returncode == 4
        assert mock_run.call_count == 1

    def test_services_registered(self, tmp_path, executor):
        """Test both services share the orchestrator's executor."""
        orchestrator = MatrixOrchestrator(tmp_path, executor, env={})

        phases = orchestrator.get_service(PhaseExecutorService)
        sequencer = orchestrator.get_service(SubprojectSequencerService)

        assert phases.command_executor is executor
        assert sequencer.phases is phases

    def test_unregistered_service(self, tmp_path, executor):
        """Test asking for an unknown service raises."""
        orchestrator = MatrixOrchestrator(tmp_path, executor, env={})

        with pytest.raises(ValueError, match="not registered"):
            orchestrator.get_service(CommandExecutor)  # type: ignore[type-var]

    def test_env_defaults_to_process_environment(self, tmp_path, monkeypatch):
        """Test os.environ is snapshotted when no env is given."""
        monkeypatch.setenv("NO_STD", "1")
        orchestrator = MatrixOrchestrator(tmp_path, CommandExecutor(dry_run=True))

        assert orchestrator.resolve_config().freestanding_mode is True
