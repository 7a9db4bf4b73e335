"""Configuration loader for envperm.

Handles loading configuration from the global config file and the environment.
"""

from __future__ import annotations

import os
from typing import Any, Mapping

from ..errors import EnvPermError
from ..utils.env import get_global_envperm_dir
from ..utils.fs import safe_json_load
from .types import EnvPermConfig, coerce_backend


class ConfigLoader:
    """Loads and manages envperm configuration."""
    
    def __init__(self, environ: Mapping[str, str] | None = None):
        """Initialize config loader.
        
        Args:
            environ: Environment to read overrides from (defaults to os.environ)
        """
        self.environ = os.environ if environ is None else environ
        self._config: EnvPermConfig | None = None
    
    @property
    def config(self) -> EnvPermConfig:
        """Get loaded configuration, loading if necessary."""
        if self._config is None:
            self._config = self.load()
        return self._config
    
    def load(self) -> EnvPermConfig:
        """Load configuration from all sources.
        
        Priority (highest to lowest):
        1. ENVPERM_BACKEND environment variable
        2. Global config (~/.envperm/config.json), skipped without a home directory
        3. Default values
        
        Returns:
            Merged EnvPermConfig
        """
        data: dict[str, Any] = {}

        try:
            global_config_path = get_global_envperm_dir() / "config.json"
        except EnvPermError:
            global_config_path = None
        if global_config_path is not None and global_config_path.exists():
            global_data = safe_json_load(global_config_path, {})
            if isinstance(global_data, dict):
                data.update(global_data)

        config = EnvPermConfig.from_dict(data)

        env_backend = self.environ.get("ENVPERM_BACKEND")
        if env_backend:
            config.backend = coerce_backend(env_backend, config.backend)

        return config
    
    def reload(self) -> EnvPermConfig:
        """Force reload configuration."""
        self._config = None
        return self.config
