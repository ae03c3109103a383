"""Configuration loader with multi-source support."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Generic, Optional, Type, TypeVar, get_args

import platformdirs
import toml
from pydantic import BaseModel

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=BaseModel)


class ConfigLoader(Generic[T]):
    """Loads configuration from multiple sources with priority.

    Priority (lowest to highest): defaults file, system config, user config,
    environment variables.
    """

    def __init__(self, config_class: Type[T], app_name: str = "mintprep") -> None:
        self.app_name = app_name
        self.config_class = config_class
        self._config: Optional[T] = None

    def load(self, defaults_path: Optional[Path] = None) -> T:
        """Load configuration from all sources.

        Args:
            defaults_path: Optional path to a defaults TOML file

        Returns:
            Validated configuration object
        """
        config_dict = self._load_defaults(defaults_path)

        system_config = self._load_system_config()
        if system_config:
            config_dict = self._deep_merge(config_dict, system_config)

        user_config = self._load_user_config()
        if user_config:
            config_dict = self._deep_merge(config_dict, user_config)

        config_dict = self._apply_env_overrides(config_dict)

        self._config = self.config_class(**config_dict)
        return self._config

    def _load_defaults(self, defaults_path: Optional[Path] = None) -> Dict[str, Any]:
        """Load default configuration shipped with app."""
        if defaults_path and defaults_path.exists():
            logger.debug(f"Loading defaults: {{'path': {str(defaults_path)!r}}}")
            return toml.load(defaults_path)

        cwd_defaults = Path.cwd() / "config" / "defaults.toml"
        if cwd_defaults.exists():
            return toml.load(cwd_defaults)

        return {}

    def _load_system_config(self) -> Optional[Dict[str, Any]]:
        """Load system-wide configuration."""
        if os.name == "nt":  # Windows
            system_path = (
                Path(os.environ.get("PROGRAMDATA", "C:\\ProgramData"))
                / self.app_name
                / "config.toml"
            )
        else:
            system_path = Path(f"/etc/{self.app_name}/config.toml")

        if system_path.exists():
            return toml.load(system_path)

        return None

    def _load_user_config(self) -> Optional[Dict[str, Any]]:
        """Load user-specific configuration."""
        user_config_dir = platformdirs.user_config_dir(appname=self.app_name, appauthor=False)
        user_config_path = Path(user_config_dir) / "config.toml"

        if user_config_path.exists():
            logger.debug(f"Loading user config: {{'path': {str(user_config_path)!r}}}")
            return toml.load(user_config_path)

        return None

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Override config with environment variables.

        Format: MINTPREP_<SECTION>_<KEY>, where KEY may itself contain
        underscores (MINTPREP_ASSETS_MEDIA_EXTENSIONS -> assets.media_extensions).
        """
        prefix = f"{self.app_name.upper().replace('-', '_')}_"

        for env_key, env_value in os.environ.items():
            if not env_key.startswith(prefix):
                continue

            section, _, key = env_key[len(prefix):].lower().partition("_")
            if not section or not key:
                logger.warning(f"Ignoring malformed config variable: {{'name': {env_key!r}}}")
                continue

            current = config.setdefault(section, {})
            if isinstance(current.get(key), str) or self._is_string_field(section, key):
                # Let pydantic coerce; "2024" stays a directory name, not an int
                value = env_value
            else:
                value = self._convert_env_value(env_value)
            if isinstance(current.get(key), list) and not isinstance(value, list):
                value = [value]
            current[key] = value

        return config

    def _is_string_field(self, section: str, key: str) -> bool:
        """True if config_class declares section.key as a str (or optional str)."""
        section_field = self.config_class.model_fields.get(section)
        if section_field is None:
            return False
        section_type = section_field.annotation
        if not (isinstance(section_type, type) and issubclass(section_type, BaseModel)):
            return False
        field = section_type.model_fields.get(key)
        if field is None:
            return False
        annotation = field.annotation
        return annotation is str or str in get_args(annotation)

    def _convert_env_value(self, value: str) -> Any:
        """Convert string environment variable to appropriate type."""
        if value.lower() in ("true", "yes"):
            return True
        if value.lower() in ("false", "no"):
            return False

        try:
            if "." in value:
                return float(value)
            return int(value)
        except ValueError:
            pass

        # List (comma-separated)
        if "," in value:
            return [v.strip() for v in value.split(",")]

        return value

    @property
    def config(self) -> T:
        """Get loaded configuration."""
        if self._config is None:
            self._config = self.load()
        return self._config
