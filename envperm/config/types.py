"""Configuration schemas for envperm."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


DEFAULT_NATIVE_COMMAND = "setx"


class Backend(str, Enum):
    """Where variables are persisted."""
    AUTO = "auto"        # pick by OS family
    PROFILE = "profile"  # ~/.bash_profile and friends
    NATIVE = "native"    # setx


def coerce_backend(val: object, default: Backend = Backend.AUTO) -> Backend:
    if isinstance(val, str) and val.strip().lower() in {b.value for b in Backend}:
        return Backend(val.strip().lower())
    return default


@dataclass
class EnvPermConfig:
    """Main envperm configuration."""
    backend: Backend = Backend.AUTO
    native_command: str = DEFAULT_NATIVE_COMMAND

    @classmethod
    def from_dict(cls, data: dict) -> EnvPermConfig:
        """Create EnvPermConfig from dictionary."""
        command = data.get("nativeCommand", DEFAULT_NATIVE_COMMAND)
        if not isinstance(command, str) or not command.strip():
            command = DEFAULT_NATIVE_COMMAND
        return cls(
            backend=coerce_backend(data.get("backend")),
            native_command=command.strip(),
        )
