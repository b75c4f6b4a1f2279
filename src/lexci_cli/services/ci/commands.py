"""Assemble build tool command lines from invocations."""

from __future__ import annotations

from lexci_cli.core.constants import CargoArgs
from lexci_cli.services.ci.models import ExecutionConfig, Phase, TestInvocation

_SUBCOMMANDS = {
    Phase.BUILD: CargoArgs.BUILD,
    Phase.TEST: CargoArgs.TEST,
    Phase.BENCH: CargoArgs.BENCH,
}


def feature_args(features: tuple[str, ...] | list[str]) -> list[str]:
    """One ``--features=`` argument per feature."""
    return [f"{CargoArgs.FEATURES_PREFIX}{feature}" for feature in features]


def target_args(config: ExecutionConfig) -> list[str]:
    """``--target <triple>`` when cross-compiling to a known triple."""
    if config.uses_cross and config.target_triple:
        return [CargoArgs.TARGET, config.target_triple]
    return []


def build_tool_argv(config: ExecutionConfig, invocation: TestInvocation) -> list[str]:
    """Render an invocation as an argv list for the build tool.

    Argument order is: subcommand, target, default-feature switch, required
    features, the invocation's feature set, doc-test toggle, release switch,
    bench flags, then the test filter.

    Raises
    ------
    ValueError
        If the phase is not a build tool phase
    """
    if invocation.phase not in _SUBCOMMANDS:
        msg = f"Phase {invocation.phase.value} is not run through the build tool"
        raise ValueError(msg)

    argv = [config.build_tool, _SUBCOMMANDS[invocation.phase]]
    argv.extend(target_args(config))

    if invocation.isolated or config.default_features_disabled:
        argv.append(CargoArgs.NO_DEFAULT_FEATURES)

    argv.extend(feature_args(config.required_features))

    if invocation.feature_set is not None:
        argv.append(f"{CargoArgs.FEATURES_PREFIX}{invocation.feature_set.flag_string}")

    if (
        invocation.phase is Phase.TEST
        and config.doc_example_tests_disabled
        and not invocation.test_filter
    ):
        argv.append(CargoArgs.TESTS_ONLY)

    if invocation.release:
        argv.append(CargoArgs.RELEASE)

    if invocation.phase is Phase.BENCH:
        argv.extend([CargoArgs.VERBOSE, CargoArgs.NO_RUN])

    argv.extend(invocation.test_filter)
    return argv
