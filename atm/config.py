"""YAML configuration for the ATM.

Example::

    atm:
      seed_path: data/accounts.json
      log_level: INFO
      log_format: text
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

import yaml

from atm.logging_config import get_logger

logger = get_logger("config")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("text", "json")


@dataclass(frozen=True)
class AtmConfig:
    seed_path: Path = Path("data/accounts.json")
    log_level: str = "INFO"
    log_format: str = "text"


def default_config() -> AtmConfig:
    return AtmConfig()


def load_config(config_path: Union[str, Path]) -> AtmConfig:
    """Load and validate configuration from a YAML file.

    A relative ``seed_path`` is resolved against the directory holding the
    config file.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If a config value is invalid.
    """
    config_path = Path(config_path)
    if not config_path.exists():
        msg = f"Config file not found: {config_path}"
        raise FileNotFoundError(msg)

    with open(config_path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"{config_path}: top level must be a mapping")
    section = raw.get("atm", {}) or {}
    if not isinstance(section, dict):
        raise ValueError(f"{config_path}: 'atm' must be a mapping")

    config = _build_config(section, config_path.parent)
    logger.debug("Loaded config from %s: %s", config_path, config)
    return config


def _build_config(section: dict[str, Any], base_dir: Path) -> AtmConfig:
    defaults = default_config()

    seed_path = section.get("seed_path", str(defaults.seed_path))
    if not isinstance(seed_path, str) or not seed_path:
        raise ValueError(f"seed_path must be a non-empty string, got {seed_path!r}")
    seed = Path(seed_path)
    if not seed.is_absolute():
        seed = base_dir / seed

    log_level = str(section.get("log_level", defaults.log_level)).upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

    log_format = str(section.get("log_format", defaults.log_format)).lower()
    if log_format not in LOG_FORMATS:
        raise ValueError(f"log_format must be one of {', '.join(LOG_FORMATS)}, got {log_format!r}")

    return AtmConfig(seed_path=seed, log_level=log_level, log_format=log_format)
