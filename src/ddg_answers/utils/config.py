"""Centralized configuration loading.

Lookup order when no explicit path is given:
1. ``configs/config.yaml`` under the current working directory
2. the default ``configs/config.yaml`` shipped inside the package
"""

import logging
from pathlib import Path
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)

_config_cache: Optional[dict] = None
_CONFIG_FILENAME = Path("configs") / "config.yaml"
_PACKAGED_CONFIG = Path(__file__).resolve().parent.parent / _CONFIG_FILENAME

DEFAULT_APP_NAME = "ddg_answers"
DEFAULT_TIMEOUT = 10.0


def find_config_path() -> Path:
    """Return the project config if present, else the packaged default."""
    local = Path.cwd() / _CONFIG_FILENAME
    if local.is_file():
        return local
    # Fallback: defaults installed with the package
    return _PACKAGED_CONFIG


def _read_yaml(path: Path) -> dict:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config from {path}: {e}")
        return {}

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning(
            f"Failed to load config from {path}: expected a mapping, "
            f"got {type(data).__name__}"
        )
        return {}
    return data


def load_config(config_path: Optional[str] = None, *, use_cache: bool = True) -> dict:
    """Load and cache the YAML configuration.

    Args:
        config_path: Override path. If None, uses ``find_config_path()``.
        use_cache: If True (default), returns cached result on subsequent calls.

    Unreadable files and files whose root is not a mapping load as ``{}``.
    """
    global _config_cache
    if use_cache and _config_cache is not None and config_path is None:
        return _config_cache

    path = Path(config_path) if config_path else find_config_path()

    if not path.exists():
        logger.debug(f"Config file not found: {path}")
        result = {}
    else:
        result = _read_yaml(path)

    if config_path is None:
        _config_cache = result
    return result


def _flag(section: dict, key: str) -> bool:
    value = section.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        logger.warning(f"Ignoring ddg.{key}={value!r}: expected true or false")
        return False
    return value


def _timeout(section: dict) -> float:
    value: Any = section.get("timeout")
    if value is None:
        return DEFAULT_TIMEOUT
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        logger.warning(f"Ignoring ddg.timeout={value!r}: expected a number")
        return DEFAULT_TIMEOUT
    return float(value)


def get_ddg_settings(config: Optional[dict] = None) -> dict:
    """Return the ``ddg:`` section with defaults filled in.

    Values of the wrong type are logged and replaced by their defaults.
    """
    if config is None:
        config = load_config()
    section = config.get("ddg")
    if section is None:
        section = {}
    elif not isinstance(section, dict):
        logger.warning(
            f"Ignoring ddg section: expected a mapping, got {type(section).__name__}"
        )
        section = {}

    app_name = section.get("app_name")
    endpoint = section.get("endpoint")
    return {
        "app_name": app_name if isinstance(app_name, str) and app_name else DEFAULT_APP_NAME,
        "endpoint": endpoint if isinstance(endpoint, str) and endpoint else None,
        "timeout": _timeout(section),
        "no_html": _flag(section, "no_html"),
        "skip_disambig": _flag(section, "skip_disambig"),
    }


def clear_config_cache():
    """Clear the cached config (useful for testing)."""
    global _config_cache
    _config_cache = None
