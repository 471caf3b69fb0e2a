"""Client configuration.

Settings come from, lowest to highest precedence:
1. Defaults
2. Environment variables with the CLIBRO_ prefix
3. A YAML config file (`--config`), either flat or under a `clibro:` key
4. CLI flags

Example:
    ```bash
    export CLIBRO_CLIENT_NAME=dashboard
    export CLIBRO_CHANNEL=lobby
    ```

    ```yaml
    clibro:
      client_name: dashboard
      channel: lobby
      log_level: info
    ```
"""

import logging
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from clibro.exceptions import ConfigurationError

LogLevel = Literal["debug", "info", "warning", "error", "critical"]


class ClibroSettings(BaseSettings):
    """Client settings with environment variable support."""

    client_name: str = Field(
        default="clibro",
        min_length=1,
        description="Name this client announces as sender of emitted events",
    )
    channel: str = Field(
        default="clibro",
        min_length=1,
        description="Channel joined on the bus",
    )
    log_level: LogLevel = Field(
        default="warning",
        description="Level for internal diagnostics",
    )
    prompt: str = Field(
        default="clibro$",
        description="Interactive shell prompt",
    )

    model_config = SettingsConfigDict(
        env_prefix="CLIBRO_",
        case_sensitive=False,
        extra="ignore",
    )


def load_settings(
    config_path: Path | None = None,
    **overrides: Any,
) -> ClibroSettings:
    """Load settings from the environment, an optional YAML file and overrides.

    Overrides that are None are ignored, so CLI options can be passed through
    unconditionally.

    Raises:
        ConfigurationError: If the file is missing, is not valid YAML, or holds
            invalid values
    """
    file_values: dict[str, Any] = {}
    if config_path is not None:
        file_values = _read_config_file(config_path)

    values = {**file_values, **{k: v for k, v in overrides.items() if v is not None}}

    try:
        return ClibroSettings(**values)
    except PydanticValidationError as e:
        raise ConfigurationError(
            str(e), str(config_path) if config_path is not None else None
        ) from e


def _read_config_file(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        raise ConfigurationError("file not found", str(config_path))

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"not valid YAML: {e}", str(config_path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError("expected a mapping", str(config_path))

    section = data.get("clibro", data)
    if not isinstance(section, dict):
        raise ConfigurationError("'clibro' section must be a mapping", str(config_path))
    return section


def configure_logging(level: str) -> None:
    """Set up stdlib logging for internal diagnostics."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
