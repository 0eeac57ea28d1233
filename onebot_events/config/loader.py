"""Load and save the JSON config file."""

import json
import re
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import ValidationError

from onebot_events.config.schema import Config


def get_config_path() -> Path:
    """Default config location."""
    return Path.home() / ".onebot_events" / "config.json"


def camel_to_snake(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


def snake_to_camel(name: str) -> str:
    first, *rest = name.split("_")
    return first + "".join(part.title() for part in rest)


def convert_keys(data: Any) -> Any:
    """Recursively convert camelCase dict keys to snake_case."""
    if isinstance(data, dict):
        return {camel_to_snake(k): convert_keys(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_keys(item) for item in data]
    return data


def convert_to_camel(data: Any) -> Any:
    """Recursively convert snake_case dict keys to camelCase."""
    if isinstance(data, dict):
        return {snake_to_camel(k): convert_to_camel(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_to_camel(item) for item in data]
    return data


def load_config(config_path: Path | None = None) -> Config:
    """Load config from disk, falling back to defaults.

    A missing file gives the defaults silently; an unreadable or invalid
    file is logged and also gives the defaults.
    """
    path = config_path or get_config_path()
    if not path.exists():
        return Config()

    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
        return Config.model_validate(convert_keys(raw))
    except (json.JSONDecodeError, ValidationError, OSError) as e:
        logger.warning(f"Failed to load config from {path}: {e}")
        return Config()


def save_config(config: Config, config_path: Path | None = None) -> Path:
    """Write *config* as camelCase JSON and return the path written."""
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(convert_to_camel(config.model_dump()), f, indent=2)
    return path
