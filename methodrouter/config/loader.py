"""Settings loading utilities."""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from methodrouter.config.schema import RouterSettings
from methodrouter.utils.exceptions import ConfigError


def get_config_path() -> Path:
    """Get the default settings file path."""
    return Path.home() / ".methodrouter" / "config.json"


def load_settings(config_path: Path | None = None) -> RouterSettings:
    """
    Load settings from file or fall back to defaults.

    Keys may be camelCase or snake_case. Values from the file win over
    ``METHODROUTER_*`` environment variables; fields absent from the file
    still pick up the environment.

    Args:
        config_path: Optional path to settings file. Uses default if not provided.

    Returns:
        Loaded settings object.

    Raises:
        ConfigError: The file exists but is not valid JSON or holds invalid values.
    """
    path = config_path or get_config_path()

    if not path.exists():
        return RouterSettings()

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Failed to parse settings file {path}: {e}", path=str(path)) from e

    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {path} must contain a JSON object", path=str(path))

    try:
        return RouterSettings(**convert_keys(data))
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {path}: {e}", path=str(path)) from e


def save_settings(settings: RouterSettings, config_path: Path | None = None) -> Path:
    """
    Save settings to file with camelCase keys.

    Returns:
        The path written.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = convert_to_camel(settings.model_dump(mode="json"))
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    return path


def convert_keys(data: Any) -> Any:
    """Convert camelCase keys to snake_case."""
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
