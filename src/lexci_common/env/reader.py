"""Typed readers for environment variables.

Every reader accepts an optional mapping so callers holding a snapshot of the
environment can resolve against it instead of ``os.environ``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

_TRUE_VALUES = {"1", "true", "yes", "on", "y", "t"}
_FALSE_VALUES = {"0", "false", "no", "off", "n", "f"}


def _source(env: Mapping[str, str] | None) -> Mapping[str, str]:
    return os.environ if env is None else env


def read_str(
    name: str,
    default: str | None = None,
    env: Mapping[str, str] | None = None,
) -> str | None:
    """Read a string variable, returning ``default`` when unset."""
    return _source(env).get(name, default)


def read_bool(
    name: str,
    default: bool = False,
    env: Mapping[str, str] | None = None,
) -> bool:
    """Read a boolean variable.

    Recognised spellings are ``1/true/yes/on/y/t`` and ``0/false/no/off/n/f``
    (case-insensitive). Anything else yields ``default``.
    """
    value = _source(env).get(name)
    if value is None:
        return default

    value_lower = value.lower().strip()
    if value_lower in _TRUE_VALUES:
        return True
    if value_lower in _FALSE_VALUES:
        return False
    return default


def is_present(name: str, env: Mapping[str, str] | None = None) -> bool:
    """Check whether a variable is set to a non-empty value.

    Unlike :func:`read_bool`, the content is ignored: ``CI=false`` counts as
    present. This matches how CI providers and shell scripts test flags.
    """
    return bool(_source(env).get(name))
