"""Configuration management for envperm."""

from .types import Backend, EnvPermConfig
from .loader import ConfigLoader

__all__ = [
    "Backend",
    "EnvPermConfig",
    "ConfigLoader",
]
