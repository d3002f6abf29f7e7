"""
Core module for text color decisions.
This module holds the package-wide configuration and the profiling helper
used by the decision engine.
"""

import os
import time
import logging
from typing import Dict, Any

logger = logging.getLogger(__name__)


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes")


def _env_float(name: str, default: float) -> float:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={value!r}, using {default}")
        return default


# Global configuration settings with defaults
CONFIG: Dict[str, Any] = {
    # Decision settings
    "default_container_color": os.environ.get("TEXT_CONTRAST_CONTAINER_COLOR", "white"),
    "brightness_threshold": _env_float("TEXT_CONTRAST_THRESHOLD", 0.5),
    "dark_text_color": "#000",
    "light_text_color": "#fff",

    # Cache settings
    "cache_key_separator": "-",

    # Performance settings
    "enable_profiling": _env_flag("TEXT_CONTRAST_PROFILE"),
}


def configure(settings: Dict[str, Any]) -> None:
    """
    Update the core module configuration with custom settings.

    Args:
        settings: Dictionary of configuration settings to update

    Raises:
        KeyError: If a setting name is not a known configuration key
        ValueError: If the brightness threshold is not a number
    """
    unknown = [key for key in settings if key not in CONFIG]
    if unknown:
        raise KeyError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

    if "brightness_threshold" in settings:
        try:
            settings = dict(settings, brightness_threshold=float(settings["brightness_threshold"]))
        except (TypeError, ValueError):
            raise ValueError(
                f"brightness_threshold must be a number, got {settings['brightness_threshold']!r}"
            )

    CONFIG.update(settings)
    logger.info(f"Core configuration updated: {', '.join(settings.keys())}")


# Context manager for performance profiling
class Profiler:
    """Simple context manager for code profiling."""
    def __init__(self, name: str, enabled: bool = None):
        self.name = name
        self.enabled = CONFIG["enable_profiling"] if enabled is None else enabled
        self.start_time = None
        self.duration = None

    def __enter__(self):
        if not self.enabled:
            return self

        self.start_time = time.perf_counter()
        logger.debug(f"Profiling started: {self.name}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if not self.enabled or self.start_time is None:
            return

        self.duration = time.perf_counter() - self.start_time
        logger.debug(f"Profiling completed: {self.name} - {self.duration:.6f}s")


__all__ = [
    "CONFIG",
    "configure",
    "Profiler",
]
