"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration with environment variable and `.env` override
support, resolved once into an immutable `Settings` object.

Features:
    - Optional YAML file (`config/config.yaml`, `ui:` section)
    - `.env` file support via python-dotenv (never overrides real env vars)
    - Environment variable override (BASE_URL overrides ui.base_url)
    - Aggregate reporting of every missing required key

Settings are built at process start and passed explicitly to the bootstrap,
browser manager and page objects. Components never read configuration.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple
from urllib.parse import urlparse

import yaml
from dotenv import dotenv_values
from loguru import logger

from .exceptions import ConfigurationError


PROJECT_ROOT = Path(__file__).resolve().parents[3]

# Default configuration file paths
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "config.yaml"
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
DEFAULT_STORAGE_STATE_PATH = PROJECT_ROOT / "storageState.json"

DEFAULT_AUTH_URL_PATTERN = "**/jira/**"
SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")

# setting name -> (environment variable, YAML dot path)
REQUIRED_SETTINGS: Dict[str, Tuple[str, str]] = {
    "base_url": ("BASE_URL", "ui.base_url"),
    "username": ("USERNAME", "ui.username"),
    "password": ("PASSWORD", "ui.password"),
}


class ConfigLoader:
    """
    Configuration loader with YAML and environment variable support.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (BASE_URL)
        2. YAML configuration file
        3. Default values

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("ui.headless", True, env_key="HEADLESS")
        True
    """

    def __init__(
        self,
        config_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file.
                        Uses DEFAULT_CONFIG_PATH if not specified.
            environ: Environment mapping. Uses os.environ if not specified.
        """
        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._environ: Mapping[str, str] = os.environ if environ is None else environ
        self._config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self._config_path.exists():
            logger.debug(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            self._config = {}
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}
            logger.debug(f"Loaded configuration from: {self._config_path}")
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

    def get(self, key: str, default: Any = None, env_key: Optional[str] = None) -> Any:
        """
        Get configuration value by dot-notation path.

        First checks the environment, then YAML config, then default.

        Args:
            key: Dot-notation path (e.g., "ui.base_url")
            default: Default value if key not found
            env_key: Environment variable name. Derived from `key` if omitted
                     (ui.base_url -> UI_BASE_URL).

        Returns:
            Configuration value or default
        """
        env_key = env_key or key.upper().replace(".", "_")
        env_value = self._environ.get(env_key)
        if env_value is not None:
            return self._convert_type(env_value, default)

        value: Any = self._config
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                value = None

            if value is None:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get entire configuration section, or an empty dict."""
        return self._config.get(section, {}) or {}

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    def _convert_type(self, value: str, reference: Any) -> Any:
        """
        Convert string value to match reference type.

        Used for environment variables which are always strings.
        """
        if reference is None:
            return value

        if isinstance(reference, bool):
            return value.lower() in ("true", "1", "yes", "on")
        if isinstance(reference, int):
            try:
                return int(value)
            except ValueError:
                return value

        return value


@dataclass(frozen=True)
class Settings:
    """
    Resolved run configuration.

    Attributes:
        base_url: Login surface / application entry URL
        username: Account used by the session bootstrap
        password: Account password (never shown in repr or logs)
        storage_state_path: Where the session artifact is written and read
        auth_url_pattern: Glob the URL must match once logged in
        headless: Launch browsers headless
        browser_type: 'chromium', 'firefox' or 'webkit'
    """
    base_url: str
    username: str
    password: str = field(repr=False)
    storage_state_path: Path = DEFAULT_STORAGE_STATE_PATH
    auth_url_pattern: str = DEFAULT_AUTH_URL_PATTERN
    headless: bool = True
    browser_type: str = "chromium"

    @classmethod
    def load(
        cls,
        config_path: Optional[Path] = None,
        env_file: Optional[Path] = DEFAULT_ENV_FILE,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "Settings":
        """
        Resolve settings from environment, `.env` and YAML.

        Args:
            config_path: YAML configuration file
            env_file: `.env` file; values there never override the environment
            environ: Environment mapping (os.environ when omitted)

        Returns:
            Settings instance

        Raises:
            ConfigurationError: When required keys are missing or malformed
        """
        environ = dict(os.environ if environ is None else environ)
        if env_file and Path(env_file).exists():
            file_values = {
                k: v for k, v in dotenv_values(env_file).items() if v is not None
            }
            environ = {**file_values, **environ}
            logger.debug(f"Loaded .env values from: {env_file}")

        loader = ConfigLoader(config_path=config_path, environ=environ)
        return cls.from_loader(loader)

    @classmethod
    def from_loader(cls, loader: ConfigLoader) -> "Settings":
        """Build settings from an existing ConfigLoader."""
        values: Dict[str, str] = {}
        missing = []
        for name, (env_key, yaml_key) in REQUIRED_SETTINGS.items():
            value = loader.get(yaml_key, env_key=env_key)
            if value is None or not str(value).strip():
                missing.append(env_key)
            else:
                values[name] = str(value).strip()

        if missing:
            raise ConfigurationError(
                f"Missing required configuration: {', '.join(missing)}. "
                f"Set them in the environment or in your .env file.",
                missing_keys=missing,
            )

        parsed = urlparse(values["base_url"])
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigurationError(
                f"BASE_URL must be an http(s) URL, got: {values['base_url']!r}"
            )

        browser_type = str(
            loader.get("ui.browser", "chromium", env_key="BROWSER")
        ).lower()
        if browser_type not in SUPPORTED_BROWSERS:
            raise ConfigurationError(
                f"Unsupported browser {browser_type!r}. "
                f"Expected one of: {', '.join(SUPPORTED_BROWSERS)}"
            )

        storage_state = loader.get(
            "ui.storage_state_path", None, env_key="STORAGE_STATE_PATH"
        )

        return cls(
            base_url=values["base_url"],
            username=values["username"],
            password=values["password"],
            storage_state_path=Path(storage_state) if storage_state else DEFAULT_STORAGE_STATE_PATH,
            auth_url_pattern=loader.get(
                "ui.auth_url_pattern", DEFAULT_AUTH_URL_PATTERN, env_key="AUTH_URL_PATTERN"
            ),
            headless=loader.get("ui.headless", True, env_key="HEADLESS"),
            browser_type=browser_type,
        )


__all__ = [
    "ConfigLoader",
    "Settings",
    "REQUIRED_SETTINGS",
    "DEFAULT_STORAGE_STATE_PATH",
]
