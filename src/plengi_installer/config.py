"""Configuration loading and auto-discovery."""
import copy
import os
from pathlib import Path
from typing import Any, Dict, Optional

try:  # Python 3.11+
    import tomllib
except ImportError:  # pragma: no cover - fallback for older environments
    import tomli as tomllib

from plengi_installer.exceptions import ConfigError


DEFAULTS = {
    "sdk": {
        "module": "Plengi",
        "init_call": "Plengi.initialize",
        "success_case": ".SUCCESS",
    },
    "project": {
        "bundle_suffixes": [".xcodeproj", ".xcworkspace"],
        "skip_dirs": [".git", ".build"],
    },
    "entry_point": {
        "delegate_file": "AppDelegate.swift",
        "delegate_keyword": "func application",
        "launch_options": "didFinishLaunchingWithOptions",
        "root_marker": "@main",
        "root_type_keyword": "struct",
        "root_type_fragment": "App",
        "source_suffix": ".swift",
    },
    "editing": {
        "preserve_line_endings": True,
        "default_indent": "    ",
    },
}


def load_config() -> Optional[Dict[str, Any]]:
    """
    Load configuration from file.

    Priority:
    1. PLENGI_CONFIG environment variable
    2. ./plengi.toml (project config)
    3. ~/.config/plengi/config.toml (user config)

    Returns:
        Configuration dict or None if no config found
    """
    config_paths = []

    env_config = os.environ.get("PLENGI_CONFIG")
    if env_config:
        config_paths.append(Path(env_config))

    config_paths.append(Path("plengi.toml"))
    config_paths.append(Path.home() / ".config" / "plengi" / "config.toml")

    for path in config_paths:
        if path.exists():
            try:
                with open(path, "rb") as f:
                    return tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    return None


def get_config_value(key: str, default: Any = None) -> Any:
    """
    Get a configuration value by dot-notation key.

    Example:
        get_config_value("sdk.module", "Plengi")
        get_config_value("project.skip_dirs", [".git"])
    """
    config = load_config()
    if config is None:
        return default

    parts = key.split(".")
    value = config

    for part in parts:
        if isinstance(value, dict) and part in value:
            value = value[part]
        else:
            return default

    return value


def _deep_merge(base: Dict, override: Dict) -> Dict:
    result = copy.deepcopy(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def validate_settings(settings: Dict[str, Any]) -> None:
    """
    Validate merged settings.

    Raises:
        ConfigError: If a value is missing or malformed.
    """
    for key in ("module", "init_call"):
        value = settings["sdk"].get(key)
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"sdk.{key} must be a non-empty string")

    suffixes = settings["project"].get("bundle_suffixes")
    if not isinstance(suffixes, list) or not suffixes:
        raise ConfigError("project.bundle_suffixes must be a non-empty list of strings")
    for suffix in suffixes:
        if not isinstance(suffix, str) or not suffix.startswith("."):
            raise ConfigError(f"Bundle suffix '{suffix}' must start with a dot (e.g., '.xcodeproj')")

    skip_dirs = settings["project"].get("skip_dirs")
    if not isinstance(skip_dirs, list) or not all(isinstance(d, str) and d.strip() for d in skip_dirs):
        raise ConfigError("project.skip_dirs must be a list of non-empty strings")

    for key, value in settings["entry_point"].items():
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"entry_point.{key} must be a non-empty string")


def get_settings(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Return DEFAULTS merged with the discovered config file and explicit overrides.
    """
    settings = _deep_merge(DEFAULTS, load_config() or {})
    if overrides:
        settings = _deep_merge(settings, overrides)
    validate_settings(settings)
    return settings
