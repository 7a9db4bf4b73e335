"""Shell profile store.

Appends export lines to the first profile found under the home directory:
~/.bash_profile, ~/.bash_login, ~/.profile, creating ~/.bash_profile if
none of them can be opened. Existing profile content is never read.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Any

from ..errors import EnvPermError
from ..utils.env import get_home_dir
from ..utils.fs import open_append
from ..utils.log import log_debug


PROFILE_CANDIDATES = (".bash_profile", ".bash_login", ".profile")


def find_profile(home: Path) -> tuple[Path, IO[str]]:
    """Open the profile that should receive new exports.
    
    Args:
        home: Home directory to search
        
    Returns:
        (path, file object opened in append mode)

    Raises:
        EnvPermError: If even the creating open fails
    """
    for name in PROFILE_CANDIDATES:
        candidate = home / name
        try:
            return candidate, open_append(candidate)
        except FileNotFoundError:
            continue
        except OSError as e:
            log_debug(f"Skipping {candidate}: {e}")

    fallback = home / PROFILE_CANDIDATES[0]
    try:
        return fallback, open_append(fallback, create=True)
    except OSError as e:
        raise EnvPermError(f"Could not open profile {fallback}: {e}") from e


class ProfileStore:
    """Persists variables as export lines in a shell profile."""

    def __init__(self, home: Path | None = None):
        """Initialize profile store.
        
        Args:
            home: Home directory override (resolved per call when None)
        """
        self.home = home

    def set(self, name: str, value: Any) -> None:
        """Write `export NAME=VALUE`. The value is not quoted."""
        self._write(f"\nexport {name}={value}\n")

    def append(self, name: str, value: Any) -> None:
        """Write `export NAME="VALUE:$NAME"`, prefixing the shell's current value."""
        self._write(f'\nexport {name}="{value}:${name}"\n')

    def _write(self, text: str) -> None:
        home = self.home if self.home is not None else get_home_dir()
        path, profile = find_profile(home)
        log_debug(f"Writing to {path}: {text.strip()}")
        try:
            with profile:
                profile.write(text)
                profile.flush()
        except OSError as e:
            raise EnvPermError(f"Could not write to {path}: {e}") from e
