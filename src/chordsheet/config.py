"""
Configuration for the chordsheet command line

Settings live in a small YAML file:

    transpose:
      min: -11
      max: 11
    display:
      mode: inline      # inline, overlay or lyrics
    meta:
      format: text      # text, json or yaml

Lookup order: --config PATH, $CHORDSHEET_CONFIG, ./chordsheet.yaml.
Missing files fall back to the defaults; unknown keys are ignored.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from .transpose import MAX_TRANSPOSE, MIN_TRANSPOSE


CONFIG_ENV_VAR = 'CHORDSHEET_CONFIG'
DEFAULT_CONFIG_FILE = 'chordsheet.yaml'

DISPLAY_MODES = ('inline', 'overlay', 'lyrics')
META_FORMATS = ('text', 'json', 'yaml')


class ConfigError(ValueError):
    """Raised for a config file that can't be read or has bad values"""


@dataclass
class Config:
    transpose_min: int = MIN_TRANSPOSE
    transpose_max: int = MAX_TRANSPOSE
    display_mode: str = 'inline'
    meta_format: str = 'text'

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> 'Config':
        """Build a Config from parsed YAML, validating what is set."""
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError('Config must be a mapping')

        config = cls()

        transpose = _section(data, 'transpose')
        if 'min' in transpose:
            config.transpose_min = _integer(transpose['min'], 'transpose.min')
        if 'max' in transpose:
            config.transpose_max = _integer(transpose['max'], 'transpose.max')
        if config.transpose_min > config.transpose_max:
            raise ConfigError(
                f"transpose.min ({config.transpose_min}) is greater than "
                f"transpose.max ({config.transpose_max})"
            )

        display = _section(data, 'display')
        if 'mode' in display:
            config.display_mode = _choice(display['mode'], DISPLAY_MODES, 'display.mode')

        meta = _section(data, 'meta')
        if 'format' in meta:
            config.meta_format = _choice(meta['format'], META_FORMATS, 'meta.format')

        return config

    @classmethod
    def from_yaml(cls, yaml_str: str) -> 'Config':
        try:
            data = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML: {e}") from e
        return cls.from_dict(data)

    def to_yaml(self) -> str:
        data = {
            'transpose': {'min': self.transpose_min, 'max': self.transpose_max},
            'display': {'mode': self.display_mode},
            'meta': {'format': self.meta_format},
        }
        return yaml.safe_dump(data, sort_keys=False)


def _section(data: dict, name: str) -> dict:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"'{name}' must be a mapping")
    return section


def _integer(value, name: str) -> int:
    # bool is an int subclass; 'yes' should not read as 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    return value


def _choice(value, choices: tuple, name: str) -> str:
    if value not in choices:
        raise ConfigError(f"{name} must be one of {', '.join(choices)}; got {value!r}")
    return value


def find_config_file(explicit: Optional[str] = None) -> Optional[Path]:
    """Resolve which config file to read, if any.

    An explicit path is returned even if it doesn't exist so the caller
    can report it; the fallbacks are only used when present.
    """
    if explicit:
        return Path(explicit)

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    local = Path(DEFAULT_CONFIG_FILE)
    if local.is_file():
        return local
    return None


def load_config(path: Optional[str] = None) -> Config:
    config_path = find_config_file(path)
    if config_path is None:
        return Config()

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            content = f.read()
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    return Config.from_yaml(content)
