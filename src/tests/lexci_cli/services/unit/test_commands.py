"""Unit tests for build tool command line assembly."""

import pytest

from lexci_cli.services.ci import (
    FeatureSet,
    Phase,
    SubprojectKind,
    TestInvocation,
    resolve_execution_config,
)
from lexci_cli.services.ci.commands import build_tool_argv, feature_args, target_args

CORE = SubprojectKind.CORE


@pytest.mark.unit
class TestBuildArgv:
    """Test build phase command lines."""

    def test_debug_build(self, local_config):
        """Test the plain debug build."""
        argv = build_tool_argv(local_config, TestInvocation(CORE, Phase.BUILD))
        assert argv == ["cargo", "build", "--features=property_tests", "--features=std"]

    def test_release_build(self, local_config):
        """Test that release mode appends --release last."""
        argv = build_tool_argv(
            local_config,
            TestInvocation(CORE, Phase.BUILD, release=True),
        )
        assert argv[-1] == "--release"

    def test_cross_build_passes_target(self):
        """Test that cross builds carry --target right after the subcommand."""
        config = resolve_execution_config({"CI": "1", "TARGET": "i686-linux-android"})
        argv = build_tool_argv(config, TestInvocation(CORE, Phase.BUILD))

        assert argv[:4] == ["cross", "build", "--target", "i686-linux-android"]

    def test_freestanding_build(self):
        """Test that NO_STD builds disable default features."""
        config = resolve_execution_config({"NO_STD": "1"})
        argv = build_tool_argv(config, TestInvocation(CORE, Phase.BUILD))

        assert argv == [
            "cargo",
            "build",
            "--no-default-features",
            "--features=property_tests",
        ]


@pytest.mark.unit
class TestTestArgv:
    """Test test phase command lines."""

    def test_default_test_run(self, local_config):
        """Test the default run with required features."""
        argv = build_tool_argv(local_config, TestInvocation(CORE, Phase.TEST))
        assert argv == ["cargo", "test", "--features=property_tests", "--features=std"]

    def test_doc_tests_disabled_adds_tests_toggle(self):
        """Test that --tests precedes --release when doc tests are off."""
        config = resolve_execution_config({"DISABLE_DOCTESTS": "1"})
        argv = build_tool_argv(
            config,
            TestInvocation(CORE, Phase.TEST, release=True),
        )
        assert argv[-2:] == ["--tests", "--release"]

    def test_isolated_feature_set(self, local_config):
        """Test a per-entry run with defaults off."""
        invocation = TestInvocation(
            CORE,
            Phase.TEST,
            feature_set=FeatureSet.of("rounding", "radix"),
            isolated=True,
        )
        argv = build_tool_argv(local_config, invocation)

        assert argv == [
            "cargo",
            "test",
            "--no-default-features",
            "--features=property_tests",
            "--features=std",
            "--features=rounding,radix",
        ]

    def test_special_rounding_run(self):
        """Test the serial ignored group never takes the doc-test toggle."""
        config = resolve_execution_config({"DISABLE_DOCTESTS": "1", "ENABLE_LIBM": "1"})
        invocation = TestInvocation(
            CORE,
            Phase.TEST,
            feature_set=FeatureSet.of("correct", "rounding", "radix"),
            test_filter=("special_rounding", "--", "--ignored", "--test-threads=1"),
        )
        argv = build_tool_argv(config, invocation)

        assert argv == [
            "cargo",
            "test",
            "--features=property_tests",
            "--features=libm",
            "--features=std",
            "--features=correct,rounding,radix",
            "special_rounding",
            "--",
            "--ignored",
            "--test-threads=1",
        ]


@pytest.mark.unit
class TestBenchArgv:
    """Test bench phase command lines."""

    def test_bench_compiles_without_running(self, local_config):
        """Test that the bench run ends with --verbose --no-run."""
        argv = build_tool_argv(local_config, TestInvocation(CORE, Phase.BENCH))

        assert argv == [
            "cargo",
            "bench",
            "--features=property_tests",
            "--features=std",
            "--verbose",
            "--no-run",
        ]

    def test_doc_toggle_never_applies_to_bench(self):
        """Test that DISABLE_DOCTESTS does not reach the bench command."""
        config = resolve_execution_config({"DISABLE_DOCTESTS": "1"})
        argv = build_tool_argv(config, TestInvocation(CORE, Phase.BENCH))
        assert "--tests" not in argv


@pytest.mark.unit
class TestHelpers:
    """Test argument helpers."""

    @pytest.mark.parametrize("phase", [Phase.FFI_TEST, Phase.DERIVE_TEST])
    def test_rejects_non_build_tool_phases(self, local_config, phase):
        """Test that scripted phases cannot be rendered as build tool calls."""
        with pytest.raises(ValueError, match="not run through the build tool"):
            build_tool_argv(local_config, TestInvocation(CORE, phase))

    def test_feature_args(self):
        """Test one --features= argument per feature."""
        assert feature_args(("a", "b")) == ["--features=a", "--features=b"]
        assert feature_args(()) == []

    def test_target_args_without_triple(self):
        """Test that an empty TARGET under CI yields no --target."""
        config = resolve_execution_config({"CI": "1"})
        assert target_args(config) == []
