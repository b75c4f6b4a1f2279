"""Resolve the run configuration from environment signals.

This is the only place the orchestrator reads CI signals. Every signal is a
presence flag with a defined default, so resolution cannot fail.
"""

from __future__ import annotations

from collections.abc import Mapping

from lexci_cli.core.constants import CISignals, Features
from lexci_cli.core.project_config import ProjectSettings
from lexci_cli.services.ci.models import ExecutionConfig
from lexci_common.env import is_present, read_str
from lexci_logging import get_cli_logger

logger = get_cli_logger(__name__)


def resolve_execution_config(
    env: Mapping[str, str] | None = None,
    settings: ProjectSettings | None = None,
) -> ExecutionConfig:
    """Build an :class:`ExecutionConfig` from an environment snapshot.

    Parameters
    ----------
    env : Mapping[str, str] | None
        Environment snapshot; defaults to ``os.environ``
    settings : ProjectSettings | None
        Tool and interpreter names; defaults to the built-in names

    Returns
    -------
    ExecutionConfig
        The resolved, immutable configuration
    """
    settings = settings or ProjectSettings()

    def flag(name: str) -> bool:
        return is_present(name, env)

    is_ci = flag(CISignals.CI)
    cross_disabled = flag(CISignals.DISABLE_CROSS)

    target_triple = None
    if is_ci and not cross_disabled:
        target_triple = read_str(CISignals.TARGET, env=env) or None
        if target_triple is None:
            logger.warning(
                "Cross-compiling under CI but %s is empty; no --target will be passed",
                CISignals.TARGET,
            )

    interpreter = settings.ci_interpreter if is_ci else settings.local_interpreter

    freestanding = flag(CISignals.NO_STD)
    property_tests = not flag(CISignals.DISABLE_PROPERTY_TESTS)
    libm = flag(CISignals.ENABLE_LIBM)

    required: list[str] = []
    if property_tests:
        required.append(Features.PROPERTY_TESTS)
    if libm:
        required.append(Features.LIBM)
    if not freestanding:
        required.append(Features.STD)

    config = ExecutionConfig(
        is_ci=is_ci,
        cross_compile_disabled=cross_disabled,
        target_triple=target_triple,
        script_interpreter=interpreter,
        freestanding_mode=freestanding,
        default_features_disabled=freestanding,
        doc_example_tests_disabled=freestanding or flag(CISignals.DISABLE_DOCTESTS),
        property_tests_enabled=property_tests,
        libm_enabled=libm,
        required_features=tuple(required),
        tests_disabled=flag(CISignals.DISABLE_TESTS),
        benches_disabled=flag(CISignals.DISABLE_BENCHES),
        ffi_tests_enabled=flag(CISignals.ENABLE_FFI_TESTS),
        derive_tests_enabled=flag(CISignals.ENABLE_DERIVE_TESTS),
        feature_matrix_disabled=flag(CISignals.NO_FEATURES),
        native_tool=settings.native_tool,
        cross_tool=settings.cross_tool,
    )
    logger.debug("Resolved execution config: %s", config.as_dict())
    return config
