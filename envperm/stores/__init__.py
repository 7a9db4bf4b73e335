"""Variable stores: shell profile files and the native persistent store."""

from .types import VariableStore
from .profile import PROFILE_CANDIDATES, ProfileStore, find_profile
from .native import NativeStore

__all__ = [
    "VariableStore",
    "PROFILE_CANDIDATES",
    "ProfileStore",
    "find_profile",
    "NativeStore",
]
