"""Configuration loading utilities."""

import json
from pathlib import Path
from typing import Any

from loguru import logger

from nanorelay.config.schema import RelayConfig


def get_nanorelay_home() -> Path:
    """Get the nanorelay home directory (~/.nanorelay)."""
    return Path.home() / ".nanorelay"


def get_config_path() -> Path:
    """Get the default configuration file path (~/.nanorelay/config.json)."""
    return get_nanorelay_home() / "config.json"


def load_config(config_path: Path | None = None) -> RelayConfig:
    """
    Load relay configuration from file or create default.

    Args:
        config_path: Optional explicit path to config file.

    Returns:
        Loaded configuration object (defaults if the file is missing or invalid).
    """
    path = config_path or get_config_path()

    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            return RelayConfig.model_validate(convert_keys(data))
        except (json.JSONDecodeError, ValueError, OSError) as e:
            logger.warning(f"Failed to load relay config from {path}: {e}; using defaults")

    return RelayConfig()


def save_config(config: RelayConfig, config_path: Path | None = None) -> None:
    """
    Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Optional explicit path. Uses ~/.nanorelay/config.json if not provided.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    # Convert to camelCase format
    data = convert_to_camel(config.model_dump())

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


# ---------------------------------------------------------------------------
# Key conversion helpers
# ---------------------------------------------------------------------------


def convert_keys(data: Any) -> Any:
    """Convert camelCase keys to snake_case for Pydantic."""
    if isinstance(data, dict):
        return {camel_to_snake(k): convert_keys(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_keys(item) for item in data]
    return data


def convert_to_camel(data: Any) -> Any:
    """Convert snake_case keys to camelCase."""
    if isinstance(data, dict):
        return {snake_to_camel(k): convert_to_camel(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_to_camel(item) for item in data]
    return data


def camel_to_snake(name: str) -> str:
    """Convert camelCase to snake_case."""
    result = []
    for i, char in enumerate(name):
        if char.isupper() and i > 0:
            result.append("_")
        result.append(char.lower())
    return "".join(result)


def snake_to_camel(name: str) -> str:
    """Convert snake_case to camelCase."""
    components = name.split("_")
    return components[0] + "".join(x.title() for x in components[1:])
