from __future__ import annotations

import sys

from .env import is_debug_mode


def log_debug(message: str) -> None:
    """Log debug message to stderr.
    
    Only outputs if ENVPERM_DEBUG is set.
    """
    if is_debug_mode():
        print(f"[envperm] {message}", file=sys.stderr)
