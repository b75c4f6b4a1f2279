"""Unit tests for feature matrix expansion."""

import pytest

from lexci_cli.services.ci import (
    ExecutionConfig,
    FeatureSet,
    SubprojectKind,
    build_feature_matrix,
    resolve_execution_config,
)
from lexci_cli.services.ci.feature_matrix import core_feature_sets, expand_base_entry

HOSTED_CORE = [
    "rounding",
    "rounding,radix",
    "rounding,unchecked_index",
    "trim_floats",
    "trim_floats,radix",
    "trim_floats,unchecked_index",
    "grisu3",
    "ryu",
    "format",
    "correct",
    "correct,radix",
    "correct,unchecked_index",
    "table",
    "table,radix",
    "table,unchecked_index",
]
FREESTANDING_CORE = ["table", "table,radix", "table,unchecked_index"]


def flag_strings(feature_sets):
    return [fs.flag_string for fs in feature_sets]


@pytest.mark.unit
class TestCoreFamily:
    """Test the core feature-set list."""

    def test_hosted_list_order(self):
        """Test the hosted list, entry by entry."""
        matrix = build_feature_matrix(resolve_execution_config({}))
        assert flag_strings(matrix.core) == HOSTED_CORE

    def test_freestanding_list(self):
        """Test that NO_STD keeps only the table entries."""
        matrix = build_feature_matrix(resolve_execution_config({"NO_STD": "1"}))
        assert flag_strings(matrix.core) == FREESTANDING_CORE

    @pytest.mark.parametrize(
        "env",
        [{"NO_FEATURES": "1"}, {"NO_FEATURES": "1", "NO_STD": "1"}],
    )
    def test_no_features_empties_every_family(self, env):
        """Test that NO_FEATURES yields empty lists regardless of mode."""
        matrix = build_feature_matrix(resolve_execution_config(env))

        assert matrix.core == ()
        assert matrix.bindings == ()
        assert matrix.codegen == ()

    def test_other_signals_do_not_change_the_list(self):
        """Test that tool and test switches leave the list alone."""
        env = {"CI": "1", "TARGET": "t", "ENABLE_LIBM": "1", "DISABLE_TESTS": "1"}
        matrix = build_feature_matrix(resolve_execution_config(env))
        assert flag_strings(matrix.core) == HOSTED_CORE

    def test_core_feature_sets_sizes(self):
        """Test the fixed list sizes for both modes."""
        assert len(core_feature_sets(freestanding=False)) == 15
        assert len(core_feature_sets(freestanding=True)) == 3


@pytest.mark.unit
class TestDownstreamFamilies:
    """Test the bindings and codegen families."""

    def test_downstream_lists_are_empty(self):
        """Test that bindings and codegen carry no matrix."""
        matrix = build_feature_matrix(ExecutionConfig())

        assert matrix.for_family(SubprojectKind.BINDINGS) == ()
        assert matrix.for_family(SubprojectKind.CODEGEN) == ()
        assert matrix.for_family(SubprojectKind.CORE) == matrix.core


@pytest.mark.unit
class TestExpandBaseEntry:
    """Test single base entry expansion."""

    def test_paired_entry(self):
        """Test a base entry with radix and unchecked-index variants."""
        assert expand_base_entry("correct", paired=True) == [
            FeatureSet(("correct",)),
            FeatureSet(("correct", "radix")),
            FeatureSet(("correct", "unchecked_index")),
        ]

    def test_singleton_entry(self):
        """Test a base entry without variants."""
        assert expand_base_entry("ryu", paired=False) == [FeatureSet(("ryu",))]

    def test_feature_set_renders_comma_joined(self):
        """Test the --features= rendering of a feature set."""
        feature_set = FeatureSet.of("trim_floats", "radix")

        assert feature_set.flag_string == "trim_floats,radix"
        assert str(feature_set) == "trim_floats,radix"
