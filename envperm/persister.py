"""Entry points for persisting environment variables.

    # export DUMMY=1, unless DUMMY is already set
    envperm.check_or_set("DUMMY", 1)
    # export PATH="$HOME/some/cool/bin:$PATH"
    envperm.append("PATH", "$HOME/some/cool/bin")
    # export DUMMY="/something" (quotes are written as given)
    envperm.set("DUMMY", '"/something"')
"""

from __future__ import annotations

import os
from typing import Any, Mapping

from .config import Backend, ConfigLoader
from .stores import NativeStore, ProfileStore, VariableStore
from .utils.log import log_debug


def select_store(backend: Backend | None = None, os_name: str | None = None) -> VariableStore:
    """Pick the store for this platform.
    
    Args:
        backend: Forced backend (defaults to configuration)
        os_name: OS family as in os.name (defaults to the running OS)
        
    Returns:
        NativeStore on Windows, ProfileStore elsewhere, unless a backend is forced
    """
    config = ConfigLoader().config
    if backend is None:
        backend = config.backend
    if backend == Backend.AUTO:
        family = os.name if os_name is None else os_name
        backend = Backend.NATIVE if family == "nt" else Backend.PROFILE

    log_debug(f"Using {backend.value} store")
    if backend == Backend.NATIVE:
        return NativeStore(command=config.native_command)
    return ProfileStore()


def check_or_set(
    name: str,
    value: Any,
    store: VariableStore | None = None,
    environ: Mapping[str, str] | None = None,
) -> None:
    """Set a variable only if it is not already in the environment.

    If it is set nothing happens; otherwise it is persisted like `set`.
    """
    env = os.environ if environ is None else environ
    if str(name) in env:
        log_debug(f"{name} is already set")
        return
    set(name, value, store=store)


def set(name: str, value: Any, store: VariableStore | None = None) -> None:
    """Persist a variable without checking if it exists.

    Calling this for a variable that is already persisted adds a second
    assignment. Prefer `check_or_set` unless it is known to be missing.
    """
    (store or select_store()).set(str(name), value)


def append(name: str, value: Any, store: VariableStore | None = None) -> None:
    """Prefix a value onto a variable, e.g. to extend PATH."""
    (store or select_store()).append(str(name), value)
