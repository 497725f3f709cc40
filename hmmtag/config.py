"""
Configuration for hmmtag.

Settings are layered, later sources winning:
  - dataclass defaults
  - Config file: ~/.hmmtag/config.json
  - Environment variables: HMMTAG_UNSEEN_SCORE, HMMTAG_PARTITIONS
  - Explicit overrides (command line)

The config directory can be moved with HMMTAG_CONFIG_DIR or XDG_DATA_HOME.
"""

from __future__ import annotations

import json
import logging
import math
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

START_TAG = "#"
DEFAULT_UNSEEN_OBSERVATION_SCORE = -100.0

_ENV_OVERRIDES = {
    "HMMTAG_UNSEEN_SCORE": ("unseen_observation_score", float),
    "HMMTAG_PARTITIONS": ("num_partitions", int),
}


@dataclass(frozen=True)
class HMMTaggerConfig:
    """Configuration for the HMM tagger and its front ends."""
    unseen_observation_score: float = DEFAULT_UNSEEN_OBSERVATION_SCORE  # log score for a word never seen under a tag
    start_tag: str = START_TAG
    quit_command: str = "QUIT"  # console input that ends the session
    num_partitions: int = 5  # cross-validation folds
    random_partition: bool = False  # random fold assignment instead of line number modulo
    seed: Optional[int] = None
    debug: bool = False

    def __post_init__(self) -> None:
        score = self.unseen_observation_score
        if (isinstance(score, bool) or not isinstance(score, (int, float))
                or not math.isfinite(score) or score >= 0):
            raise ConfigurationError(
                f"unseen_observation_score must be a finite negative number, got {score!r}"
            )
        partitions = self.num_partitions
        if isinstance(partitions, bool) or not isinstance(partitions, int) or partitions < 2:
            raise ConfigurationError(f"num_partitions must be an integer of at least 2, got {partitions!r}")
        for name in ("start_tag", "quit_command"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ConfigurationError(f"{name} must be a non-empty string, got {value!r}")
        for name in ("random_partition", "debug"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigurationError(f"{name} must be true or false, got {value!r}")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ConfigurationError(f"seed must be an integer, got {self.seed!r}")


def get_config_dir() -> Path:
    """
    Get the hmmtag configuration directory (not created).

    Checks in order:
    1. HMMTAG_CONFIG_DIR environment variable
    2. XDG_DATA_HOME environment variable (if set)
    3. ~/.hmmtag/
    """
    if "HMMTAG_CONFIG_DIR" in os.environ:
        return Path(os.environ["HMMTAG_CONFIG_DIR"])
    if "XDG_DATA_HOME" in os.environ:
        return Path(os.environ["XDG_DATA_HOME"]) / "hmmtag"
    return Path.home() / ".hmmtag"


def get_config_file() -> Path:
    """Get the path to the hmmtag configuration file."""
    return get_config_dir() / "config.json"


def read_config(config_file: Optional[Path] = None) -> Dict[str, Any]:
    """
    Read the hmmtag configuration file.

    Returns:
        Dictionary with configuration values (empty dict if the file doesn't exist)
    """
    config_file = config_file or get_config_file()
    if not config_file.exists():
        return {}
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Config file {config_file} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {config_file} must contain a JSON object")
    return data


def _coerce(key: str, value: Any, target: type) -> Any:
    if isinstance(value, bool):
        raise ConfigurationError(f"Invalid value for {key}: {value!r}")
    try:
        return target(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid value for {key}: {value!r}") from exc


def load_config(
    overrides: Optional[Dict[str, Any]] = None,
    config_file: Optional[Path] = None,
    environ: Optional[Dict[str, str]] = None,
) -> HMMTaggerConfig:
    """Build a config from defaults, the config file, the environment and overrides."""
    environ = os.environ if environ is None else environ
    known = {f.name for f in fields(HMMTaggerConfig)}
    values: Dict[str, Any] = {}

    for key, value in read_config(config_file).items():
        if key in known:
            values[key] = value
        else:
            logger.debug("Ignoring unknown config key '%s'", key)

    for env_name, (key, target) in _ENV_OVERRIDES.items():
        if env_name in environ:
            values[key] = _coerce(env_name, environ[env_name], target)

    for key, value in (overrides or {}).items():
        if value is None:
            continue
        if key not in known:
            raise ConfigurationError(f"Unknown configuration option '{key}'")
        values[key] = value

    if "unseen_observation_score" in values:
        values["unseen_observation_score"] = _coerce(
            "unseen_observation_score", values["unseen_observation_score"], float
        )
    if "num_partitions" in values:
        values["num_partitions"] = _coerce("num_partitions", values["num_partitions"], int)

    config = replace(HMMTaggerConfig(), **values)
    logger.debug("Loaded configuration: %s", config)
    return config
