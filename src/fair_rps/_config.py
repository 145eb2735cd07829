# Area: Shared
"""
fair_rps._config - Game configuration
=====================================

Loads settings from an optional JSON file, then lets environment
variables (including a local .env file) override them.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

from ._shared.logging_config import parse_level
from .errors import ConfigError

logger = logging.getLogger("fair_rps.config")

TRUE_VALUES = ("true", "1", "yes", "on")
FALSE_VALUES = ("false", "0", "no", "off")

ENV_MAPPINGS = {
    "FAIR_RPS_MOVES": "moves",
    "FAIR_RPS_LOG_FILE": "log_file",
    "FAIR_RPS_LOG_LEVEL": "log_level",
    "FAIR_RPS_COLOR": "color",
}


class GameConfig(BaseModel):
    """Validated settings for one run of the game."""

    model_config = ConfigDict(frozen=True)

    moves: List[str] = []
    log_file: Optional[str] = None
    log_level: str = "WARNING"
    color: bool = True

    @field_validator("moves", mode="before")
    @classmethod
    def _split_moves(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [part for part in value.split(",") if part]
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        parse_level(value)
        return value.upper()

    @field_validator("color", mode="before")
    @classmethod
    def _parse_flag(cls, value: Any) -> Any:
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in TRUE_VALUES:
                return True
            if lowered in FALSE_VALUES:
                return False
            raise ValueError(f"expected one of {TRUE_VALUES + FALSE_VALUES}, got {value!r}")
        return value


def load_config(config_path: Optional[str] = None, dotenv: bool = True) -> Dict[str, Any]:
    """
    Load config from file or environment.

    Raises:
        ConfigError: If the file exists but is unreadable, is not valid
            JSON, or does not hold a JSON object
    """
    config: Dict[str, Any] = {}

    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    if config_path:
        path = Path(config_path)
        if path.exists():
            try:
                with open(path, encoding="utf-8") as f:
                    config = json.load(f)
            except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
                raise ConfigError(str(path), str(e)) from e
            if not isinstance(config, dict):
                raise ConfigError(
                    str(path), f"expected a JSON object, got {type(config).__name__}"
                )
        else:
            logger.warning(f"Config file not found: {path}")

    # Override with environment variables
    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            config[config_key] = os.environ[env_key]

    # https://no-color.org: any non-empty value disables color
    if os.environ.get("NO_COLOR"):
        config["color"] = False

    return config
