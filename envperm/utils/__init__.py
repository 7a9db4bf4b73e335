"""Utility modules for envperm."""

from .fs import open_append, safe_json_load
from .env import get_home_dir, get_global_envperm_dir, is_debug_mode, read_env_value
from .log import log_debug

__all__ = [
    "open_append",
    "safe_json_load",
    "get_home_dir",
    "get_global_envperm_dir",
    "is_debug_mode",
    "read_env_value",
    "log_debug",
]
