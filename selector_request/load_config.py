"""Logic for loading and merging configuration files."""

import copy
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from selector_request.deep_merge import deep_merge

BASE_URL_ENV = "SELECTOR_REQUEST_BASE_URL"
OUTPUT_FORMATS = ("json", "text")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_CONFIG: dict[str, Any] = {
    "base_url": None,
    "log_level": "WARNING",
    "output": {
        "format": "json",
        "indent": None,
    },
}


def load_config(
    path: str | None = None, environ: Mapping[str, str] | None = None
) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    ``SELECTOR_REQUEST_BASE_URL`` in the environment overrides ``base_url``.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                raise ValueError(f"Config file must contain a mapping: {path}")
            config = deep_merge(config, user_config)

    env = os.environ if environ is None else environ
    if env.get(BASE_URL_ENV):
        config["base_url"] = env[BASE_URL_ENV]

    if not isinstance(config["output"], dict):
        raise ValueError(f"Config 'output' must be a mapping: {config['output']!r}")
    config["log_level"] = check_log_level(config["log_level"])
    if config["output"]["format"] not in OUTPUT_FORMATS:
        raise ValueError(f"Unknown output format: {config['output']['format']!r}")
    return config


def check_log_level(level: object) -> int | str:
    """Return a numeric or upper-cased named logging level, or raise ValueError."""
    if isinstance(level, int) and not isinstance(level, bool):
        return level
    if isinstance(level, str) and level.upper() in LOG_LEVELS:
        return level.upper()
    raise ValueError(f"Unknown log level: {level!r}")
