"""
Configuration management: models and loading.

Handles:
- BrowserConfig: validation, sorting, filtering and logging options
- YAML loading with an environment variable override for the file path

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_browser_config, resolve_config_path
from infrastructure.config.models import (
    BrowserConfig,
    FilteringConfig,
    LoggingConfig,
    SortingConfig,
    ValidationConfig,
)

__all__ = [
    # Main config (most commonly used)
    "BrowserConfig",
    "load_browser_config",
    "resolve_config_path",
    # Sections
    "ValidationConfig",
    "SortingConfig",
    "FilteringConfig",
    "LoggingConfig",
]
