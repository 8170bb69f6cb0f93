"""Configuration and logging helpers."""

from ddg_answers.utils.config import load_config, clear_config_cache, get_ddg_settings
from ddg_answers.utils.observability import timed

__all__ = [
    "load_config",
    "clear_config_cache",
    "get_ddg_settings",
    "timed",
]
