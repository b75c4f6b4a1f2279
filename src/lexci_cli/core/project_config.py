"""Project YAML configuration loading.

A repository may carry a ``.lexci.yaml`` file that overrides tool names,
interpreter names and subproject directories. Missing keys fall back to
:func:`default_config`.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from lexci_cli.core.constants import Defaults
from lexci_cli.core.paths import ProjectPaths
from lexci_cli.core.yaml import YamlOperationError, safe_read_yaml
from lexci_logging import get_cli_logger

logger = get_cli_logger(__name__)


@dataclass(frozen=True)
class ProjectSettings:
    """Tool and layout settings resolved from configuration files."""

    native_tool: str = Defaults.NATIVE_TOOL
    cross_tool: str = Defaults.CROSS_TOOL
    local_interpreter: str = Defaults.LOCAL_INTERPRETER
    ci_interpreter: str = Defaults.CI_INTERPRETER
    ffi_entry_point: str = Defaults.FFI_ENTRY_POINT
    core_dir: str = Defaults.CORE_DIR
    bindings_dir: str = Defaults.BINDINGS_DIR
    codegen_dir: str = Defaults.CODEGEN_DIR


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge two dictionaries in place and return ``base``.

    Values from ``override`` take precedence. Nested dicts are merged
    recursively; other values are replaced.
    """
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def default_config() -> dict[str, Any]:
    """Return the default configuration structure."""
    return {
        "tools": {
            "native": Defaults.NATIVE_TOOL,
            "cross": Defaults.CROSS_TOOL,
        },
        "interpreters": {
            "local": Defaults.LOCAL_INTERPRETER,
            "ci": Defaults.CI_INTERPRETER,
        },
        "subprojects": {
            "core": Defaults.CORE_DIR,
            "bindings": Defaults.BINDINGS_DIR,
            "codegen": Defaults.CODEGEN_DIR,
        },
        "ffi": {
            "entry_point": Defaults.FFI_ENTRY_POINT,
        },
    }


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML mapping, returning an empty dict when missing or invalid."""
    try:
        if not path.exists():
            return {}
        data = safe_read_yaml(path) or {}
        return data if isinstance(data, dict) else {}
    except YamlOperationError as e:
        logger.warning("Ignoring project config: %s", e)
        return {}


def get_project_config_path(repo_root: Path) -> Path:
    """Get path to the project-level configuration file."""
    return repo_root / ProjectPaths.LEXCI_CONFIG


def load_merged_config(repo_root: Path) -> dict[str, Any]:
    """Load defaults merged with the project YAML file."""
    cfg = default_config()
    project_cfg = load_yaml(get_project_config_path(repo_root))
    if project_cfg:
        deep_merge(cfg, project_cfg)
    return cfg


def _section(cfg: dict[str, Any], name: str) -> dict[str, Any]:
    """Get a config section, ignoring anything that is not a mapping."""
    section = cfg.get(name)
    if isinstance(section, dict):
        return section
    if section is not None:
        logger.warning(
            "Ignoring '%s' in project config: expected a mapping, got %s",
            name,
            type(section).__name__,
        )
    return {}


def _setting(section: dict[str, Any], key: str, default: str) -> str:
    """Get a scalar setting; empty, null or nested values use ``default``."""
    value = section.get(key)
    if value is None or value == "" or isinstance(value, (dict, list)):
        return default
    return str(value)


def load_project_settings(repo_root: Path) -> ProjectSettings:
    """Load :class:`ProjectSettings` for a repository."""
    cfg = load_merged_config(repo_root)
    tools = _section(cfg, "tools")
    interpreters = _section(cfg, "interpreters")
    subprojects = _section(cfg, "subprojects")
    ffi = _section(cfg, "ffi")

    return ProjectSettings(
        native_tool=_setting(tools, "native", Defaults.NATIVE_TOOL),
        cross_tool=_setting(tools, "cross", Defaults.CROSS_TOOL),
        local_interpreter=_setting(interpreters, "local", Defaults.LOCAL_INTERPRETER),
        ci_interpreter=_setting(interpreters, "ci", Defaults.CI_INTERPRETER),
        ffi_entry_point=_setting(ffi, "entry_point", Defaults.FFI_ENTRY_POINT),
        core_dir=_setting(subprojects, "core", Defaults.CORE_DIR),
        bindings_dir=_setting(subprojects, "bindings", Defaults.BINDINGS_DIR),
        codegen_dir=_setting(subprojects, "codegen", Defaults.CODEGEN_DIR),
    )
