"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from documark.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "output_root": "./Generated",
    "format": "markdown",
    "code_language": "cs",
    "ignored_method_names": ["Equals", "ToString", "GetHashCode", "Finalize"],
    "ignored_references": ["netstandard"],
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if not path:
        return config

    p = Path(path)
    if not p.exists():
        logger.warning("Config file not found, using defaults: %s", p)
        return config
    user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    return deep_merge(config, user_config)
