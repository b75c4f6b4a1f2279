"""Test-matrix services: configuration, feature expansion and phase sequencing."""

from lexci_cli.services.ci.config_resolver import resolve_execution_config
from lexci_cli.services.ci.exit_gate import GateDecision, evaluate_exit_gate
from lexci_cli.services.ci.feature_matrix import build_feature_matrix
from lexci_cli.services.ci.models import (
    ExecutionConfig,
    FeatureMatrix,
    FeatureSet,
    Phase,
    Subproject,
    SubprojectKind,
    TestInvocation,
)
from lexci_cli.services.ci.phase_executor import PhaseExecutorService
from lexci_cli.services.ci.sequencer import (
    SubprojectSequencerService,
    workspace_subprojects,
)

__all__ = [
    "ExecutionConfig",
    "FeatureMatrix",
    "FeatureSet",
    "GateDecision",
    "Phase",
    "PhaseExecutorService",
    "Subproject",
    "SubprojectKind",
    "SubprojectSequencerService",
    "TestInvocation",
    "build_feature_matrix",
    "evaluate_exit_gate",
    "resolve_execution_config",
    "workspace_subprojects",
]
