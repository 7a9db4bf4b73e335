"""File system utilities for envperm.

Provides append-mode opening and safe JSON loading.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import IO, Any


def open_append(file_path: Path | str, create: bool = False) -> IO[str]:
    """Open a file for appending text.
    
    Args:
        file_path: Path to open
        create: Create the file if it does not exist
        
    Returns:
        Text file object positioned at end of file

    Raises:
        OSError: If the file is missing (and create is False) or unwritable
    """
    flags = os.O_WRONLY | os.O_APPEND
    if create:
        flags |= os.O_CREAT
    fd = os.open(file_path, flags, 0o644)
    try:
        return os.fdopen(fd, "a", encoding="utf-8")
    except Exception:
        os.close(fd)
        raise


def safe_json_load(file_path: Path | str, default: Any = None) -> Any:
    """Safely load JSON file with fallback.
    
    Args:
        file_path: Path to JSON file
        default: Default value if file doesn't exist or is invalid
        
    Returns:
        Parsed JSON or default value
    """
    try:
        with open(file_path) as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError):
        return default if default is not None else {}
