"""
Configuration from a YAML file.

    closure:
      strategy: graph      # or: direct
    keys:
      max_keys: 100        # stop after this many keys (omit for all)
    logging:
      level: INFO
      format: detailed     # or: simple
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .closure import DEFAULT_STRATEGY, check_strategy
from .errors import ConfigError

CONFIG_ENV_VAR = 'FDKEYS_CONFIG'
LOG_FORMATS = ('simple', 'detailed')


@dataclass
class Config:
    strategy: str = DEFAULT_STRATEGY
    max_keys: Optional[int] = None
    log_level: str = 'WARNING'
    log_format: str = 'simple'


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = raw.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError('Section ' + repr(name) + ' must be a mapping')
    return section


def config_from_dict(raw: Dict[str, Any]) -> Config:
    """ Build a Config from a parsed YAML document, filling in defaults.
    Raise ConfigError for an invalid value. """
    if not isinstance(raw, dict):
        raise ConfigError('Configuration must be a mapping')
    config = Config()

    closure = _section(raw, 'closure')
    if 'strategy' in closure:
        config.strategy = check_strategy(closure['strategy'])

    keys = _section(raw, 'keys')
    max_keys = keys.get('max_keys')
    if max_keys is not None:
        if not isinstance(max_keys, int) or isinstance(max_keys, bool) or max_keys < 1:
            raise ConfigError('keys.max_keys must be a positive integer, got ' + repr(max_keys))
        config.max_keys = max_keys

    logging_section = _section(raw, 'logging')
    if 'level' in logging_section:
        config.log_level = str(logging_section['level']).upper()
    if 'format' in logging_section:
        if logging_section['format'] not in LOG_FORMATS:
            raise ConfigError('logging.format must be one of ' + ', '.join(LOG_FORMATS))
        config.log_format = logging_section['format']

    return config


def load_config(path: Optional[Union[str, Path]] = None) -> Config:
    """ Load the configuration in path, or in the file named by FDKEYS_CONFIG
    when path is None. Without either, return the defaults.
    Raise ConfigError when the file cannot be read or parsed. """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
        if not path:
            return Config()

    config_file = Path(path)
    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError('Cannot read config file ' + str(config_file) + ': ' + str(e)) from e
    except UnicodeDecodeError as e:
        raise ConfigError('Config file ' + str(config_file) + ' is not valid UTF-8') from e
    except yaml.YAMLError as e:
        raise ConfigError('Invalid YAML in ' + str(config_file) + ': ' + str(e)) from e

    return config_from_dict(raw or {})
