"""Constants and enums for the lexical-ci CLI."""

from enum import Enum


class LogLevel(str, Enum):
    """Supported log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


ALL_LOG_LEVELS = list(LogLevel)


class ExitCode:
    """Exit codes for CLI operations."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    NOT_FOUND = 127  # shell "command not found"


class Icons:
    """Unicode icons for CLI output."""

    SUCCESS = "✅"
    ERROR = "❌"
    INFO = "📄"

    BUILD = "🔨"
    TEST = "🧪"
    SKIPPED = "⏭️"
    LIST = "📋"
    CONFIG = "🔧"


class EnvVars:
    """Environment variables read by the CLI itself."""

    LOG_LEVEL = "LEXCI_LOG_LEVEL"
    LOG_FILE = "LEXCI_LOG_FILE"
    REPO_ROOT = "LEXCI_REPO_ROOT"


class CISignals:
    """Environment signals that drive the test matrix.

    Each signal is tested for presence only: any non-empty value counts as set.
    """

    CI = "CI"
    DISABLE_CROSS = "DISABLE_CROSS"
    TARGET = "TARGET"
    NO_STD = "NO_STD"
    DISABLE_PROPERTY_TESTS = "DISABLE_PROPERTY_TESTS"
    ENABLE_LIBM = "ENABLE_LIBM"
    DISABLE_DOCTESTS = "DISABLE_DOCTESTS"
    NO_FEATURES = "NO_FEATURES"
    DISABLE_TESTS = "DISABLE_TESTS"
    DISABLE_BENCHES = "DISABLE_BENCHES"
    ENABLE_FFI_TESTS = "ENABLE_FFI_TESTS"
    ENABLE_DERIVE_TESTS = "ENABLE_DERIVE_TESTS"
    DEPLOY_TAG = "TRAVIS_TAG"

    ALL: tuple[str, ...] = (
        CI,
        DISABLE_CROSS,
        TARGET,
        NO_STD,
        DISABLE_PROPERTY_TESTS,
        ENABLE_LIBM,
        DISABLE_DOCTESTS,
        NO_FEATURES,
        DISABLE_TESTS,
        DISABLE_BENCHES,
        ENABLE_FFI_TESTS,
        ENABLE_DERIVE_TESTS,
        DEPLOY_TAG,
    )


class Features:
    """Cargo feature names used by the matrix."""

    STD = "std"
    PROPERTY_TESTS = "property_tests"
    LIBM = "libm"

    RADIX = "radix"
    UNCHECKED_INDEX = "unchecked_index"

    ROUNDING = "rounding"
    TRIM_FLOATS = "trim_floats"
    GRISU3 = "grisu3"
    RYU = "ryu"
    FORMAT = "format"
    CORRECT = "correct"
    TABLE = "table"


class CargoArgs:
    """Build tool argument spellings."""

    BUILD = "build"
    TEST = "test"
    BENCH = "bench"

    TARGET = "--target"
    NO_DEFAULT_FEATURES = "--no-default-features"
    FEATURES_PREFIX = "--features="
    RELEASE = "--release"
    TESTS_ONLY = "--tests"
    VERBOSE = "--verbose"
    NO_RUN = "--no-run"
    SEPARATOR = "--"
    IGNORED = "--ignored"
    SINGLE_THREAD = "--test-threads=1"


class SpecialRounding:
    """Serial, normally-ignored rounding test group run on hosted builds."""

    TEST_NAME = "special_rounding"
    FEATURES = ("correct", "rounding", "radix")


class Defaults:
    """Default tool names and paths, overridable from ``.lexci.yaml``."""

    NATIVE_TOOL = "cargo"
    CROSS_TOOL = "cross"
    LOCAL_INTERPRETER = "python3"
    CI_INTERPRETER = "python3.6"
    FFI_ENTRY_POINT = "runtests.py"

    CORE_DIR = "lexical-core"
    BINDINGS_DIR = "lexical-capi"
    CODEGEN_DIR = "lexical-derive"
