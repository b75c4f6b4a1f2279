"""Data model for the test matrix."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from lexci_cli.core.constants import Features


class Phase(str, Enum):
    """Categories of verification action."""

    BUILD = "build"
    TEST = "test"
    BENCH = "bench"
    FFI_TEST = "ffi-test"
    DERIVE_TEST = "derive-test"


class SubprojectKind(str, Enum):
    """The three independently buildable modules of the workspace."""

    CORE = "core"
    BINDINGS = "bindings"
    CODEGEN = "codegen"


@dataclass(frozen=True)
class Subproject:
    """A workspace member and the phases that apply to it.

    Parameters
    ----------
    kind : SubprojectKind
        Which subproject this is
    path : str
        Directory relative to the repository root
    phases : tuple[Phase, ...]
        Applicable phases, in execution order
    skippable : bool
        Whether all of its phases are opt-in
    """

    kind: SubprojectKind
    path: str
    phases: tuple[Phase, ...]
    skippable: bool = False


@dataclass(frozen=True)
class ExecutionConfig:
    """Immutable run configuration resolved once from the environment."""

    is_ci: bool = False
    cross_compile_disabled: bool = False
    target_triple: str | None = None
    script_interpreter: str = "python3"
    freestanding_mode: bool = False
    default_features_disabled: bool = False
    doc_example_tests_disabled: bool = False
    property_tests_enabled: bool = True
    libm_enabled: bool = False
    required_features: tuple[str, ...] = (Features.PROPERTY_TESTS, Features.STD)
    tests_disabled: bool = False
    benches_disabled: bool = False
    ffi_tests_enabled: bool = False
    derive_tests_enabled: bool = False
    feature_matrix_disabled: bool = False
    native_tool: str = "cargo"
    cross_tool: str = "cross"

    @property
    def uses_cross(self) -> bool:
        """Whether commands go through the cross-compiling wrapper."""
        return self.is_ci and not self.cross_compile_disabled

    @property
    def build_tool(self) -> str:
        """Build tool for the core phases."""
        return self.cross_tool if self.uses_cross else self.native_tool

    def as_dict(self) -> dict[str, object]:
        """Flatten to a plain mapping, including derived properties."""
        return {
            "is_ci": self.is_ci,
            "cross_compile_disabled": self.cross_compile_disabled,
            "build_tool": self.build_tool,
            "target_triple": self.target_triple,
            "script_interpreter": self.script_interpreter,
            "freestanding_mode": self.freestanding_mode,
            "default_features_disabled": self.default_features_disabled,
            "doc_example_tests_disabled": self.doc_example_tests_disabled,
            "property_tests_enabled": self.property_tests_enabled,
            "libm_enabled": self.libm_enabled,
            "required_features": list(self.required_features),
            "tests_disabled": self.tests_disabled,
            "benches_disabled": self.benches_disabled,
            "ffi_tests_enabled": self.ffi_tests_enabled,
            "derive_tests_enabled": self.derive_tests_enabled,
            "feature_matrix_disabled": self.feature_matrix_disabled,
        }


@dataclass(frozen=True)
class FeatureSet:
    """Feature flags tested together as one isolated invocation."""

    flags: tuple[str, ...]

    @classmethod
    def of(cls, *flags: str) -> FeatureSet:
        return cls(tuple(flags))

    @property
    def flag_string(self) -> str:
        """Comma-joined flags, as passed to ``--features=``."""
        return ",".join(self.flags)

    def __str__(self) -> str:
        return self.flag_string


@dataclass(frozen=True)
class FeatureMatrix:
    """Ordered feature-set lists, one per subproject family."""

    core: tuple[FeatureSet, ...] = ()
    bindings: tuple[FeatureSet, ...] = ()
    codegen: tuple[FeatureSet, ...] = ()

    def for_family(self, kind: SubprojectKind) -> tuple[FeatureSet, ...]:
        """Get the list for one subproject family."""
        return {
            SubprojectKind.CORE: self.core,
            SubprojectKind.BINDINGS: self.bindings,
            SubprojectKind.CODEGEN: self.codegen,
        }[kind]


@dataclass(frozen=True)
class TestInvocation:
    """One build tool call: the atomic unit of work.

    ``isolated`` runs with default features off so only ``feature_set`` and the
    required features are active. ``test_filter`` selects a named test group and
    passes harness arguments; it replaces the doc-test toggle.
    """

    __test__ = False  # not a pytest class

    subproject: SubprojectKind
    phase: Phase
    feature_set: FeatureSet | None = None
    release: bool = False
    isolated: bool = False
    test_filter: tuple[str, ...] = field(default=())
