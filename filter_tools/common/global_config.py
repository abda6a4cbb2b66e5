"""
================================================================================
Global Configuration for Automation Tools
================================================================================

Centralized logging setup and tool-level configuration lookup.

Features:
    - YAML-based configuration loading (config/config.yaml)
    - Environment variable support (LOG_LEVEL, LOGGING__FILE, ...)
    - Centralized Loguru logging configuration

Run credentials are NOT read here; they are resolved into `Settings` by
`filtersuites.ui_testing.framework.config_loader`.

Author: Automation Team
License: MIT
================================================================================
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import yaml
from loguru import logger

# Global configuration storage
_config: Dict[str, Any] = {}
_logger_initialized: bool = False

CONFIG_DIR = Path(__file__).resolve().parents[2] / "config"

DEFAULT_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def init_logger(level: str = None, format_str: str = None, log_file: str = None) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        format_str: Custom log format string. Defaults to config value.
        log_file: Optional file path. Defaults to `logging.file` config value.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    log_level = (level or get_config("logging.level", "INFO")).upper()
    log_format = format_str or get_config("logging.format", DEFAULT_LOG_FORMAT)

    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level,
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    log_file = log_file or get_config("logging.file", None)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level,
            format=log_format,
            rotation=get_config("logging.rotation", "10 MB"),
            retention=get_config("logging.retention", "7 days"),
            compression="zip",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def _ensure_config_loaded() -> None:
    if not _config:
        _load_config()


def _load_config() -> None:
    """
    Loads configuration from YAML and environment variables.

    Loading order:
        1. Defaults
        2. config/config.yaml
        3. Environment variables (LOG_LEVEL, and SECTION__KEY style overrides)
    """
    global _config

    _config = _get_defaults()

    config_path = CONFIG_DIR / "config.yaml"
    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            _config = _deep_merge(_config, yaml.safe_load(f) or {})
        logger.debug(f"Loaded configuration from {config_path}")

    _apply_env_overrides()


def _get_defaults() -> Dict[str, Any]:
    return {
        "logging": {
            "level": "INFO",
            "format": DEFAULT_LOG_FORMAT,
        },
        "reports": {
            "dir": "reports",
        },
    }


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """Deep merges two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _apply_env_overrides() -> None:
    """
    Environment variable naming convention:
        - LOG_LEVEL overrides logging.level
        - Double underscore separates nested keys: LOGGING__FILE=logs/run.log
        - Only known sections (top-level mappings of the config) are overridden
    """
    if "LOG_LEVEL" in os.environ:
        _set_nested(_config, ["logging", "level"], os.environ["LOG_LEVEL"])

    sections = {name for name, value in _config.items() if isinstance(value, dict)}
    for key, value in os.environ.items():
        if "__" not in key or key.startswith("__"):
            continue
        parts = [p.lower() for p in key.split("__")]
        if parts[0] not in sections or not all(parts):
            continue
        if not _set_nested(_config, parts, value):
            logger.warning(f"Ignoring {key}: {'.'.join(parts[:-1])} is not a config section")


def _set_nested(d: Dict, keys: list, value: Any) -> bool:
    """Set d[k1][k2]...=value; False when the path runs through a non-mapping."""
    for key in keys[:-1]:
        d = d.setdefault(key, {})
        if not isinstance(d, dict):
            return False
    d[keys[-1]] = value
    return True


def get_config(key: str, default: Any = None) -> Any:
    """
    Retrieves a configuration value using a dot-separated key path.

    Examples:
        >>> get_config("logging.level", "INFO")
        'DEBUG'
    """
    _ensure_config_loaded()

    value: Any = _config
    for k in key.split("."):
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return default

    return value


def reload_config() -> None:
    """Reloads the configuration and re-initializes the logger."""
    global _config, _logger_initialized
    _config = {}
    _logger_initialized = False
    _load_config()
    init_logger()
    logger.info("Configuration reloaded.")


__all__ = [
    "init_logger",
    "get_config",
    "reload_config",
]
