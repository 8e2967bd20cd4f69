"""
================================================================================
Global Configuration for Test Tools
================================================================================

This module provides centralized configuration management for the console
and browser test harnesses, including logging setup and configuration file
loading.

Features:
    - YAML-based configuration loading
    - Environment-specific overlays (config/{ENV}.yaml)
    - Environment variable support
    - Centralized Loguru logging configuration

Author: Automation Team
License: MIT
================================================================================
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from loguru import logger

# Global configuration storage
_config: Dict[str, Any] = {}
_logger_initialized: bool = False

DEFAULT_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


class ConfigurationError(Exception):
    """Raised when configuration loading fails."""
    pass


def init_logger(level: str = None, format_str: str = None) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Console harness output is captured from ``sys.stdout``, so every sink
    configured here writes to stderr or a file.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        format_str: Custom log format string. Defaults to config value.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    _ensure_config_loaded()

    log_level = level or get_config("logging.level", "INFO")
    log_format = format_str or get_config("logging.format", DEFAULT_LOG_FORMAT)

    # Remove default logger and add configured one
    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level.upper(),
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )

    log_file = get_config("logging.file", None)
    if log_file:
        log_dir = Path(log_file).parent
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level.upper(),
            format=log_format.replace("{level: <8}", "{level}"),
            rotation=get_config("logging.rotation", "10 MB"),
            retention=get_config("logging.retention", "7 days"),
            compression="zip",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def _ensure_config_loaded() -> None:
    if not _config:
        _load_config()


def _candidate_config_dirs() -> List[Path]:
    return [
        Path("config"),
        Path(__file__).parent.parent.parent / "config",
    ]


def _load_config(config_dir: Optional[Path] = None) -> None:
    """
    Loads configuration from YAML files and environment variables.

    Configuration loading order:
        1. Default configuration file (config/config.yaml)
        2. Environment-specific configuration (config/{ENV}.yaml)
        3. Environment variables (override YAML settings)
    """
    global _config

    if config_dir is None:
        for dir_path in _candidate_config_dirs():
            if dir_path.exists():
                config_dir = dir_path
                break

    _config = _get_defaults()

    if config_dir is None or not Path(config_dir).exists():
        logger.warning("No configuration directory found. Using defaults.")
        _apply_env_overrides()
        return

    config_dir = Path(config_dir)

    default_config_path = config_dir / "config.yaml"
    if default_config_path.exists():
        _config = _deep_merge(_config, _read_yaml(default_config_path))
        logger.debug(f"Loaded configuration from {default_config_path}")

    # Environment-specific overlay (optional)
    env = os.getenv("ENVIRONMENT", os.getenv("ENV", "dev"))
    env_config_path = config_dir / f"{env}.yaml"
    if env_config_path.exists():
        _config = _deep_merge(_config, _read_yaml(env_config_path))
        logger.debug(f"Merged environment config: {env_config_path}")

    _apply_env_overrides()


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file {path}: {e}") from e


def _get_defaults() -> Dict[str, Any]:
    """
    Returns default configuration values.
    """
    return {
        "logging": {
            "level": "INFO",
            "format": DEFAULT_LOG_FORMAT,
        },
        "ui": {
            "base_url": "http://localhost:3000",
            "timeout_seconds": 5.0,
            "poll_interval_seconds": 0.25,
        },
    }


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merges two dictionaries, with override taking precedence.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _apply_env_overrides() -> None:
    """
    Applies environment variable overrides to the configuration.

    Environment variable naming convention:
        - Use double underscore to separate nested keys
        - Example: UI__TIMEOUT_SECONDS=10 overrides ui.timeout_seconds
    """
    for key, value in os.environ.items():
        if "__" in key and not key.startswith("__"):
            parts = [p.lower() for p in key.split("__")]
            _set_nested(_config, parts, value)


def _set_nested(d: Dict, keys: list, value: Any) -> None:
    for key in keys[:-1]:
        existing = d.get(key)
        if not isinstance(existing, dict):
            existing = d[key] = {}
        d = existing
    d[keys[-1]] = value


def get_config(key: str, default: Any = None) -> Any:
    """
    Retrieves a configuration value using a dot-separated key path.

    Args:
        key: Dot-separated key path (e.g., "logging.level", "ui.timeout_seconds").
        default: Default value to return if key is not found.

    Returns:
        The configuration value, or the default if not found.

    Examples:
        >>> get_config("logging.level", "INFO")
        "DEBUG"
        >>> get_config("ui.timeout_seconds", 5)
        5.0
    """
    _ensure_config_loaded()

    value = _config
    for k in key.split("."):
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return default

    return value


def get_float_config(key: str, default: float) -> float:
    """
    Retrieves a numeric configuration value.

    Environment overrides always arrive as strings, so the value is coerced.
    """
    value = get_config(key, default)
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Configuration value {key}={value!r} is not a number") from e


def set_config(key: str, value: Any) -> None:
    """
    Sets a configuration value at runtime.

    Args:
        key: Dot-separated key path.
        value: Value to set.
    """
    _ensure_config_loaded()
    _set_nested(_config, key.split("."), value)


def reload_config(config_dir: Optional[Path] = None) -> None:
    """
    Reloads the configuration from files.

    Args:
        config_dir: Directory holding config.yaml. Searched for when omitted.
    """
    global _config, _logger_initialized
    _config = {}
    _logger_initialized = False
    _load_config(config_dir)
    logger.info("Configuration reloaded.")
