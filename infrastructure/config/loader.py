"""Configuration loading from YAML files."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from infrastructure.config.models import BrowserConfig
from infrastructure.constants import BROWSER_CONFIG_FILE, CONFIG_ENV_VAR

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict (an empty file yields an empty dict)."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def resolve_config_path(explicit: Path | None = None) -> tuple[Path, bool]:
    """
    Pick the browser config file.

    Precedence: explicit path, then $TAXONOMY_BROWSER_CONFIG, then configs/browser.yaml.

    Returns:
        Tuple of (path, required) where required is False only for the conventional default
    """
    if explicit is not None:
        return explicit, True

    env_value = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if env_value:
        return Path(env_value), True

    return BROWSER_CONFIG_FILE, False


def load_browser_config(path: Path | None = None) -> BrowserConfig:
    """
    Load browser.yaml and construct a validated BrowserConfig.

    A missing default file yields the default configuration; a missing file that
    was asked for explicitly (argument or environment) is an error.

    Raises:
        FileNotFoundError: If an explicitly requested config file does not exist
        ValueError: If the YAML is not a mapping or has invalid values
    """
    config_path, required = resolve_config_path(path)

    if not config_path.exists() and not required:
        logger.debug("No config file at %s; using defaults.", config_path)
        return BrowserConfig()

    data = _load_yaml(config_path)
    cfg = BrowserConfig(**data)
    logger.debug("Loaded browser config from %s", config_path)
    return cfg
