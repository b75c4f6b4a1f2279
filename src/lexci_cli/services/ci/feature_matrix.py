"""Expand the execution config into per-family feature-set lists."""

from __future__ import annotations

from lexci_cli.core.constants import Features
from lexci_cli.services.ci.models import ExecutionConfig, FeatureMatrix, FeatureSet
from lexci_logging import get_cli_logger

logger = get_cli_logger(__name__)

# (base feature, paired with radix/unchecked_index variants)
HOSTED_BASE_ENTRIES: tuple[tuple[str, bool], ...] = (
    (Features.ROUNDING, True),
    (Features.TRIM_FLOATS, True),
    (Features.GRISU3, False),
    (Features.RYU, False),
    (Features.FORMAT, False),
    (Features.CORRECT, True),
)
SHARED_BASE_ENTRIES: tuple[tuple[str, bool], ...] = (
    (Features.TABLE, True),
)
VARIANTS = (Features.RADIX, Features.UNCHECKED_INDEX)


def expand_base_entry(base: str, paired: bool) -> list[FeatureSet]:
    """Expand one base entry into ``base``, ``base,radix``, ``base,unchecked_index``.

    Unpaired entries expand to just ``base``.
    """
    sets = [FeatureSet.of(base)]
    if paired:
        sets.extend(FeatureSet.of(base, variant) for variant in VARIANTS)
    return sets


def core_feature_sets(freestanding: bool) -> tuple[FeatureSet, ...]:
    """Fixed, ordered core list for the given runtime mode."""
    entries = SHARED_BASE_ENTRIES
    if not freestanding:
        entries = HOSTED_BASE_ENTRIES + SHARED_BASE_ENTRIES
    sets: list[FeatureSet] = []
    for base, paired in entries:
        sets.extend(expand_base_entry(base, paired))
    return tuple(sets)


def build_feature_matrix(config: ExecutionConfig) -> FeatureMatrix:
    """Build the feature matrix for a run.

    Downstream families (bindings, codegen) carry no matrix. The core list is
    empty when the matrix is disabled.
    """
    if config.feature_matrix_disabled:
        logger.debug("Feature matrix disabled, all families empty")
        return FeatureMatrix()

    core = core_feature_sets(config.freestanding_mode)
    logger.debug(
        "Core feature matrix (%s entries): %s",
        len(core),
        [fs.flag_string for fs in core],
    )
    return FeatureMatrix(core=core)
