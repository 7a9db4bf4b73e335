"""envperm - permanently set environment variables.

Appends export lines to the user's shell profile on POSIX systems and
calls the native persistent-variable command (setx) on Windows.
"""

from .errors import EnvPermError
from .persister import append, check_or_set, select_store, set

__version__ = "0.1.0"

__all__ = [
    "EnvPermError",
    "append",
    "check_or_set",
    "select_store",
    "set",
]
