"""Environment utilities for envperm."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from ..errors import EnvPermError


def is_debug_mode() -> bool:
    """Check if debug mode is enabled.
    
    Returns:
        True if ENVPERM_DEBUG is set to a truthy value
    """
    val = os.environ.get("ENVPERM_DEBUG", "").lower()
    return val in ("1", "true", "yes", "on")


def get_home_dir() -> Path:
    """Get user home directory.
    
    Returns:
        Path to home directory

    Raises:
        EnvPermError: If no home directory can be determined
    """
    # An empty HOME would resolve to the filesystem root.
    if os.name != "nt" and os.environ.get("HOME") == "":
        raise EnvPermError("No home directory")
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise EnvPermError("No home directory") from e


def get_global_envperm_dir() -> Path:
    """Get global envperm directory (~/.envperm).
    
    Returns:
        Path to global envperm config directory
    """
    return get_home_dir() / ".envperm"


def read_env_value(name: str, environ: Mapping[str, str] | None = None) -> str | None:
    """Read a variable from the process environment as text.

    Returns None when the variable is not present.

    Raises:
        EnvPermError: If the value holds bytes that are not valid UTF-8
    """
    env = os.environ if environ is None else environ
    value = env.get(name)
    if value is None:
        return None

    # Undecodable bytes come through os.environ as lone surrogates.
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raw = value.encode("utf-8", "surrogateescape")
        raise EnvPermError(
            f"Could not read environment variable {name}. Reason: Non unicode value {raw!r}"
        ) from e
    return value
