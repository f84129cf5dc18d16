"""Configuration file loading (YAML or JSON)."""
from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

import yaml

from .constants import Constants

logger = logging.getLogger(__name__)


def find_config_file(directory: Optional[str] = None) -> Optional[str]:
    """Return the first default config file present in ``directory`` (cwd by default)."""
    base = directory or os.getcwd()
    for name in Constants.DEFAULT_CONFIG_FILES:
        candidate = os.path.join(base, name)
        if os.path.isfile(candidate):
            return candidate
    return None


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load match options from a config file.

    Args:
        config_path: Path to a YAML/YML or JSON file. When omitted, the
            default ``.browsergate.yml`` locations are tried.

    Returns:
        dict: The ``browsergate`` section if present, else the whole mapping;
        empty when the file is missing or invalid.
    """
    path = config_path or find_config_file()
    if not path:
        return {}

    if not os.path.isfile(path):
        logger.warning("Config file not found: %s", path)
        return {}

    try:
        with open(path, "r", encoding="utf-8") as fh:
            if path.lower().endswith(".json"):
                data = json.load(fh)
            else:
                data = yaml.safe_load(fh)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error("Failed to load config %s: %s", path, e)
        return {}

    if not isinstance(data, dict):
        return {}
    section = data.get(Constants.CONFIG_SECTION, data)
    return section if isinstance(section, dict) else {}
