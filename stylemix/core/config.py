"""
Configuration Manager with Environment Variables Support

Usage:
    from stylemix.core.config import config

    base = config.get_int("STYLEMIX_BASE_FONT_SIZE")
    template_dir = config.get_path("STYLEMIX_TEMPLATE_DIR")
"""
import os
import json
import logging
from typing import Any, Dict, Optional
from pathlib import Path

from dotenv import load_dotenv

from .singleton import SingletonMeta
from ..config.settings import DEFAULT_SETTINGS
from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class Config(metaclass=SingletonMeta):
    """
    Unified configuration manager that supports:
    - Environment variables (.env)
    - JSON configuration file
    - Library defaults (config/settings.py)
    - Type conversion
    """

    def __init__(self, env_file: Optional[Path] = None, config_file: Optional[Path] = None):
        self._env_loaded = False
        self._config_cache: Dict[str, Any] = {}
        self._env_file = Path(env_file) if env_file else Path(".env")
        self._config_file_path = (
            Path(config_file) if config_file
            else Path(os.getenv("STYLEMIX_CONFIG_FILE", DEFAULT_SETTINGS["STYLEMIX_CONFIG_FILE"]))
        )

        self._load_env()
        self._load_json_config()

    def _load_env(self):
        """Load environment variables from .env file"""
        if self._env_file.exists():
            load_dotenv(self._env_file)
            self._env_loaded = True
            logger.info(f"Environment variables loaded from {self._env_file}")
        else:
            logger.debug(".env file not found, using system environment only")

    def _load_json_config(self):
        """Load configuration from JSON file"""
        if not self._config_file_path.exists():
            logger.debug(f"Config file not found: {self._config_file_path}")
            self._config_cache = {}
            return

        try:
            with open(self._config_file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Failed to load config file {self._config_file_path}", detail=str(e)
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config file {self._config_file_path} must contain a JSON object"
            )
        self._config_cache = data
        logger.info(f"Configuration loaded from {self._config_file_path}")

    def get(
            self,
            key: str,
            default: Any = None,
            required: bool = False,
            from_env: bool = True
    ) -> Any:
        """
        Get configuration value.

        Priority order:
        1. Environment variable (if from_env=True)
        2. JSON config file
        3. Explicit default
        4. Library default

        Raises:
            ConfigurationError: If required=True and key not found
        """
        if from_env:
            env_value = os.getenv(key)
            if env_value is not None:
                return env_value

        if key in self._config_cache:
            return self._config_cache[key]

        if default is not None:
            return default

        if key in DEFAULT_SETTINGS:
            return DEFAULT_SETTINGS[key]

        if required:
            raise ConfigurationError(
                f"Required configuration '{key}' not found. "
                f"Set it in .env or {self._config_file_path}"
            )

        return None

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get boolean configuration value"""
        value = self.get(key, default)

        if isinstance(value, bool):
            return value

        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes", "on")

        return bool(value)

    def get_int(self, key: str, default: int = 0) -> int:
        """Get integer configuration value"""
        value = self.get(key)
        if value is None:
            return default

        try:
            return int(value)
        except (ValueError, TypeError):
            logger.warning(f"Invalid int value for '{key}': {value}, using default")
            return default

    def get_float(self, key: str, default: float = 0.0) -> float:
        """Get float configuration value"""
        value = self.get(key)
        if value is None:
            return default

        try:
            return float(value)
        except (ValueError, TypeError):
            logger.warning(f"Invalid float value for '{key}': {value}, using default")
            return default

    def get_path(self, key: str, default: str = None) -> Optional[Path]:
        """Get Path configuration value; empty values give None"""
        value = self.get(key, default)
        return Path(value) if value else None

    def set(self, key: str, value: Any):
        """Override a value for the lifetime of this process."""
        self._config_cache[key] = value

    def all(self) -> Dict[str, Any]:
        """Every recognised key with its resolved value"""
        return {key: self.get(key) for key in DEFAULT_SETTINGS}

    def reload(self):
        """Reload configuration from files"""
        self._load_env()
        self._load_json_config()
        logger.info("Configuration reloaded")


def get_config() -> Config:
    """The process-wide Config instance."""
    return Config.get_instance()


def get_log_level() -> str:
    """Get logging level"""
    return str(get_config().get("LOG_LEVEL")).upper()


def get_base_font_size() -> float:
    """Root font size in pixels, used for rem conversion."""
    return get_config().get_float("STYLEMIX_BASE_FONT_SIZE", 16.0)
