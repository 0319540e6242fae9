"""Configuration loader for the findings viewer.

Configuration precedence (highest to lowest):
1. Explicit overrides (CLI options)
2. Environment variables (FINDINGDECK_*)
3. findingdeck.yaml / findingdeck.yml
4. Built-in defaults
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from findingdeck.config.validator import flatten_pydantic_errors
from findingdeck.lib.errors import ConfigError, FileNotFoundError
from findingdeck.models.config import ViewerConfig

logger = logging.getLogger(__name__)

CONFIG_FILE_NAMES = ("findingdeck.yaml", "findingdeck.yml")

# Environment variable to field name mapping
ENV_VAR_MAP = {
    "corpus_source": "FINDINGDECK_CORPUS_SOURCE",
    "load_timeout": "FINDINGDECK_LOAD_TIMEOUT",
    "tab_count": "FINDINGDECK_TAB_COUNT",
}


def _parse_env_value(field_name: str, value: str) -> Any:
    """Parse an environment variable value to the field's type.

    Raises:
        ValueError: If value cannot be parsed
    """
    if field_name == "load_timeout":
        return float(value)
    if field_name == "tab_count":
        return int(value)
    return value


def _env_overrides(env_vars: os._Environ[str] | dict[str, str]) -> dict[str, Any]:
    """Collect parseable FINDINGDECK_* values; unparseable ones are logged."""
    overrides: dict[str, Any] = {}
    for field_name, env_var_name in ENV_VAR_MAP.items():
        if env_var_name not in env_vars:
            continue
        try:
            overrides[field_name] = _parse_env_value(field_name, env_vars[env_var_name])
        except ValueError:
            logger.warning(
                f"Ignoring {env_var_name}={env_vars[env_var_name]!r}: not a number"
            )
    return overrides


class ConfigLoader:
    """Load and validate ``ViewerConfig`` from YAML and the environment."""

    def __init__(self, search_dir: str | Path | None = None) -> None:
        """Initialize the loader.

        Args:
            search_dir: Directory searched for findingdeck.yaml when no
                explicit path is given. Defaults to the working directory.
        """
        self.search_dir = Path(search_dir) if search_dir else Path.cwd()

    def find_config_file(self) -> Path | None:
        """Return the first config file in the search directory, if any."""
        for name in CONFIG_FILE_NAMES:
            candidate = self.search_dir / name
            if candidate.is_file():
                return candidate
        return None

    def parse_yaml(self, file_path: str | Path) -> dict[str, Any]:
        """Parse a YAML file into a dictionary.

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigError: If YAML parsing fails or the top level is not a mapping
        """
        path = Path(file_path)
        try:
            with open(path, encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except OSError as e:
            raise FileNotFoundError(
                str(file_path),
                f"Configuration file not found at {file_path}. "
                f"Please ensure the file exists at this path.",
            ) from e
        except yaml.YAMLError as e:
            raise ConfigError(
                "yaml_parse",
                f"Failed to parse YAML file {file_path}: {str(e)}",
            ) from e

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigError(
                "yaml_parse",
                f"Expected a mapping at the top of {file_path}, "
                f"got {type(content).__name__}",
            )
        return content

    def load(
        self,
        file_path: str | Path | None = None,
        overrides: dict[str, Any] | None = None,
        env_vars: dict[str, str] | None = None,
    ) -> ViewerConfig:
        """Load the viewer configuration.

        Args:
            file_path: Explicit config file. When omitted, findingdeck.yaml
                in the search directory is used if present.
            overrides: Highest-precedence values; None entries are ignored
            env_vars: Environment mapping (defaults to os.environ)

        Returns:
            Validated ViewerConfig

        Raises:
            FileNotFoundError: If an explicit file does not exist
            ConfigError: If parsing or validation fails
        """
        path = Path(file_path) if file_path else self.find_config_file()
        data: dict[str, Any] = {}
        if path is not None:
            logger.debug(f"Loading viewer configuration from {path}")
            data = self.parse_yaml(path)

        data.update(_env_overrides(os.environ if env_vars is None else env_vars))
        data.update({k: v for k, v in (overrides or {}).items() if v is not None})

        try:
            return ViewerConfig(**data)
        except PydanticValidationError as e:
            error_text = "\n".join(flatten_pydantic_errors(e))
            raise ConfigError(
                "viewer_validation",
                f"Invalid configuration:\n{error_text}",
            ) from e
