"""Application settings loaded from a sectioned TOML file."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import tomlkit
from pydantic import BaseModel, field_validator
from pydantic import ValidationError as PydanticValidationError

from shared.constants import (
    CONFIG_DEFAULT_PATH,
    CONFIG_ENV_VAR,
    LOG_LEVEL_DEFAULT,
    TRANSFORMER_CACHE_SIZE_DEFAULT,
)
from shared.exceptions import ValidationError

logger = logging.getLogger(__name__)

# {section_name: {flat_field_name: short_name_in_toml}}
SECTION_MAP: dict[str, dict[str, str]] = {
    'logging': {
        'log_level': 'level',
        'log_file': 'file',
    },
    'projection': {
        'cache_transformers': 'cache_transformers',
        'transformer_cache_size': 'cache_size',
    },
}


class AppSettings(BaseModel):
    model_config = {
        'extra': 'forbid',
    }

    log_level: str = LOG_LEVEL_DEFAULT
    log_file: str | None = None
    cache_transformers: bool = True
    transformer_cache_size: int = TRANSFORMER_CACHE_SIZE_DEFAULT

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            msg = f'Unknown log level "{v}"'
            raise ValueError(msg)
        return level

    @field_validator('transformer_cache_size')
    @classmethod
    def validate_cache_size(cls, v: int) -> int:
        if v < 1:
            msg = 'Transformer cache size must be at least 1'
            raise ValueError(msg)
        return v


def sectioned_to_flat(data: dict[str, Any]) -> dict[str, Any]:
    """Flatten ``{section: {short: value}}`` into AppSettings field names."""
    flat: dict[str, Any] = {}
    for section, values in data.items():
        fields = SECTION_MAP.get(section)
        if fields is None or not isinstance(values, dict):
            msg = f'Unknown config section [{section}]'
            raise ValidationError(msg)
        reverse = {short: name for name, short in fields.items()}
        for short, value in values.items():
            if short not in reverse:
                msg = f'Unknown config key "{short}" in [{section}]'
                raise ValidationError(msg)
            flat[reverse[short]] = value
    return flat


def resolve_config_path(explicit: str | Path | None = None) -> Path | None:
    """
    Pick the config file: explicit path, then env variable, then default.

    The default location is only used when the file exists.
    """
    if explicit:
        return Path(explicit)
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    default = Path(CONFIG_DEFAULT_PATH).expanduser()
    return default if default.is_file() else None


def load_settings(path: str | Path | None = None) -> AppSettings:
    """
    Load settings from TOML, or return defaults when no file applies.

    Raises:
        FileNotFoundError: explicit or env-configured file does not exist
        ValidationError: unknown keys or invalid values

    """
    config_path = resolve_config_path(path)
    if config_path is None:
        return AppSettings()
    if not config_path.is_file():
        msg = f'Config file not found: {config_path}'
        raise FileNotFoundError(msg)
    text = config_path.read_text(encoding='utf-8')
    data = tomlkit.parse(text).unwrap()
    try:
        settings = AppSettings.model_validate(sectioned_to_flat(data))
    except PydanticValidationError as e:
        msg = f'Invalid config {config_path}: {e.errors()[0]["msg"]}'
        raise ValidationError(msg) from e
    logger.debug('Loaded settings from %s: %s', config_path, settings)
    return settings
