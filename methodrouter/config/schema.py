"""Settings schema using Pydantic.

Persisted to ~/.methodrouter/config.json; every field can be overridden with a
``METHODROUTER_`` environment variable.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RouterSettings(BaseSettings):
    """Root settings for methodrouter."""

    model_config = SettingsConfigDict(env_prefix="METHODROUTER_", extra="ignore")

    log_level: str = "INFO"
    log_faults: bool = True  # Log handler faults that are mapped to UNKNOWN_ERROR
    log_file: Path | None = None  # Optional rotating log file
    # pydantic JSON-Schema mode used for catalog descriptors
    schema_mode: Literal["validation", "serialization"] = "validation"
    include_schema_uri: bool = Field(default=True, description="Add a $schema key to each descriptor")
