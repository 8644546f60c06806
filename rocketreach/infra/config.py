"""
Configuration Manager
---------------------
Client settings from an optional YAML file with environment overrides.

Rules:
- The API key comes from the environment or a config file, never from code
- Environment variables win over file values
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union
import logging
import os

import yaml

from ..core.errors import ConfigurationError

ENV_PREFIX = "ROCKETREACH"
DEFAULT_BASE_URL = "https://api.rocketreach.co/api/v2"


@dataclass(frozen=True)
class Settings:
    """Resolved client settings."""
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 30.0
    log_level: str = "INFO"

    def __repr__(self) -> str:
        # api_key deliberately left out
        return (
            f"Settings(base_url={self.base_url!r}, "
            f"timeout_seconds={self.timeout_seconds}, log_level={self.log_level!r})"
        )


class ConfigManager:
    """
    Loads configuration from YAML with environment variable overrides.

    Keys use dot notation ('rocketreach.api_key'); the matching environment
    variable is the key upper-cased with dots turned into underscores
    ('ROCKETREACH_API_KEY').
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        self._config_path = Path(config_path) if config_path else None
        self._config: Dict[str, Any] = {}
        self._logger = logging.getLogger("rocketreach.infra.config")

        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from file."""
        if self._config_path is None:
            return
        if not self._config_path.exists():
            raise ConfigurationError(f"Config file not found: {self._config_path}")

        with open(self._config_path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ConfigurationError(f"Config file must contain a mapping: {self._config_path}")

        self._config = loaded
        self._logger.info(f"Loaded config from {self._config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value; the environment overrides the file."""
        env_value = os.getenv(key.upper().replace(".", "_"))
        if env_value is not None:
            return env_value

        value: Any = self._config
        for part in key.split("."):
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get an entire configuration section."""
        return self._config.get(section) or {}


def load_settings(config_path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Resolve Settings from the environment and an optional YAML file.

    The file is read from its 'rocketreach:' section:

        rocketreach:
          api_key: ...
          base_url: https://api.rocketreach.co/api/v2
          timeout_seconds: 30
          log_level: INFO
    """
    config = ConfigManager(config_path)
    section = ENV_PREFIX.lower()

    api_key = config.get(f"{section}.api_key")
    if not api_key:
        raise ConfigurationError(
            f"API key not configured: set {ENV_PREFIX}_API_KEY or {section}.api_key"
        )

    # Either environment spelling wins over either file key
    timeout = os.getenv(f"{ENV_PREFIX}_TIMEOUT_SECONDS") or os.getenv(f"{ENV_PREFIX}_TIMEOUT")
    if timeout is None:
        timeout = config.get(f"{section}.timeout_seconds")
    if timeout is None:
        timeout = config.get(f"{section}.timeout", 30.0)
    try:
        timeout_seconds = float(timeout)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Invalid timeout: {timeout!r}") from None

    return Settings(
        api_key=str(api_key),
        base_url=str(config.get(f"{section}.base_url", DEFAULT_BASE_URL)),
        timeout_seconds=timeout_seconds,
        log_level=str(config.get(f"{section}.log_level", "INFO")).upper(),
    )
