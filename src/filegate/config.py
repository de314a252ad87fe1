"""Configuration for Filegate."""

import json
import os
import unicodedata
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from filegate.exceptions import ConfigError

ENV_PREFIX = "FILEGATE_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class FilegateConfig:
    """Settings for the file request service."""

    base_path: str = "./data"
    extension: str = "txt"
    expose_rejection_reason: bool = False
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "FilegateConfig":
        """Create config from FILEGATE_* environment variables."""
        values: dict[str, str] = {}
        for f in fields(cls):
            env_value = os.environ.get(f"{ENV_PREFIX}{f.name.upper()}")
            if env_value is not None:
                values[f.name] = env_value
        return cls(**_coerce(values, source="environment"))

    @classmethod
    def from_file(cls, path: Path) -> "FilegateConfig":
        """Load config from a YAML or JSON file."""
        path = Path(path)
        try:
            text = path.read_text()
        except OSError as e:
            raise ConfigError(str(path), f"cannot read file ({e.strerror})") from e

        try:
            if path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(text)
            else:
                data = json.loads(text)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigError(str(path), "file is not valid YAML or JSON") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(str(path), "top level must be a mapping")
        return cls(**_coerce(data, source=str(path)))

    @classmethod
    def load(cls, config_path: Path | None = None, **overrides: Any) -> "FilegateConfig":
        """
        Load config with hierarchy: defaults < file < env < overrides.

        Overrides whose value is None are ignored so CLI flags that were not
        given do not mask lower layers.
        """
        config = cls.from_file(config_path) if config_path is not None else cls()

        env_config = cls.from_env()
        env_values = {
            f.name: getattr(env_config, f.name)
            for f in fields(cls)
            if f"{ENV_PREFIX}{f.name.upper()}" in os.environ
        }
        config = replace(config, **env_values)

        explicit = {key: value for key, value in overrides.items() if value is not None}
        return replace(config, **_coerce(explicit, source="arguments"))


def _coerce(values: dict[str, Any], source: str) -> dict[str, Any]:
    """Validate keys and convert raw values to the field types."""
    known = {f.name: f.type for f in fields(FilegateConfig)}
    result: dict[str, Any] = {}
    for key, value in values.items():
        if key not in known:
            raise ConfigError(source, f"unknown setting '{key}'")
        field_type = known[key]
        if field_type in (bool, "bool"):
            result[key] = _to_bool(key, value, source)
        elif field_type in (int, "int"):
            try:
                result[key] = int(value)
            except (TypeError, ValueError) as e:
                raise ConfigError(source, f"'{key}' must be an integer") from e
        else:
            if value is None:
                raise ConfigError(source, f"'{key}' must not be empty")
            result[key] = str(value)
    if "extension" in result:
        _check_extension(result["extension"], source)
    return result


def _check_extension(extension: str, source: str) -> None:
    # The extension becomes a path suffix, so it must stay a single component.
    if any(c in "/\\" or unicodedata.category(c) == "Cc" for c in extension):
        raise ConfigError(source, "'extension' must not contain path separators")


def _to_bool(key: str, value: Any, source: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigError(source, f"'{key}' must be a boolean")
