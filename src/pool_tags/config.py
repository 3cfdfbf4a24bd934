import os
import json
from typing import Any, Dict, Optional
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigError

DEFAULT_CONFIG_PATH = Path("config") / "config.json"


class Settings(BaseModel):
    """
    Runtime settings for the CLI.
    JSON file values are overridden by environment variables.
    """
    http_timeout: float = Field(default=15.0, gt=0)
    log_level: str = "INFO"


def _read_json(path: Path) -> Dict[str, Any]:
    if not path.exists():
        logger.debug(f"Config file not found at {path}. Using defaults.")
        return {}
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must hold a JSON object")
    logger.debug(f"Loaded config from {path}")
    return data


def load_settings(path: Optional[str] = None) -> Settings:
    load_dotenv()
    values = _read_json(Path(path) if path else DEFAULT_CONFIG_PATH)

    if os.getenv("POOL_TAGS_HTTP_TIMEOUT"):
        values["http_timeout"] = os.environ["POOL_TAGS_HTTP_TIMEOUT"]
    if os.getenv("LOG_LEVEL"):
        values["log_level"] = os.environ["LOG_LEVEL"]
    if os.getenv("DEBUG", "false").lower() == "true":
        values["log_level"] = "DEBUG"

    values["log_level"] = str(values.get("log_level", "INFO")).upper()
    try:
        return Settings(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e
