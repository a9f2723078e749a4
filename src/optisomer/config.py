# -*- coding: ascii -*-
"""
Run configuration: defaults, YAML loading and environment toggles.

Precedence for every setting is CLI flag > environment > YAML file > defaults.
"""

import copy
import logging
import os
from typing import Any, Dict, Optional

import yaml

from .configuration import MAX_CENTERS, WARN_CENTERS
from .dedupe import KEY_POLICIES

LOG = logging.getLogger(__name__)

FORMULAS_ENV = 'OPTISOMER_FORMULAS'

DEFAULT_CONFIG: Dict[str, Any] = {
    'centers': 4,
    'dedup': {
        'key_policy': 'text',
    },
    'limits': {
        'max_centers': MAX_CENTERS,
        'warn_centers': WARN_CENTERS,
    },
    'output': {
        'formulas': False,
        'table': None,
        'smiles': False,
    },
}


def formulas_env() -> Optional[bool]:
    """Tri-state read of the formulas toggle: None when the variable is unset."""
    value = os.environ.get(FORMULAS_ENV)
    if value is None or value.strip() == '':
        return None
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def deep_merge(defaults: Dict[str, Any], user_config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep merge user configuration with defaults, preserving user values.

    Args:
        defaults: Default configuration dictionary
        user_config: User configuration dictionary

    Returns:
        Merged configuration with user values taking precedence
    """
    result = copy.deepcopy(defaults)

    def _merge_recursive(d, u):
        for k, v in u.items():
            if isinstance(v, dict) and isinstance(d.get(k), dict):
                _merge_recursive(d[k], v)
            else:
                d[k] = v

    _merge_recursive(result, user_config)
    return result


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Check value types and ranges of a merged configuration."""
    for section in ('dedup', 'limits', 'output'):
        if not isinstance(config.get(section), dict):
            raise ValueError(f"{section} must be a mapping, got {config.get(section)!r}")

    centers = config.get('centers')
    if isinstance(centers, bool) or not isinstance(centers, int):
        raise ValueError(f"centers must be an integer, got {centers!r}")

    policy = config['dedup'].get('key_policy')
    if policy not in KEY_POLICIES:
        raise ValueError(f"dedup.key_policy must be one of {', '.join(KEY_POLICIES)}, got {policy!r}")

    for key in ('max_centers', 'warn_centers'):
        value = config['limits'].get(key)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"limits.{key} must be a non-negative integer, got {value!r}")

    table = config['output'].get('table')
    if table is not None and not str(table).endswith(('.csv', '.parquet')):
        raise ValueError(f"output.table must end with .csv or .parquet, got {table!r}")
    return config


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load a YAML configuration and merge it over DEFAULT_CONFIG.

    Args:
        config_path: Path to the YAML file, or None for defaults only

    Raises:
        FileNotFoundError: config_path does not exist
        ValueError: the file is not a YAML mapping or holds invalid values
    """
    if config_path is None:
        return copy.deepcopy(DEFAULT_CONFIG)

    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config {config_path} must contain a mapping, got {type(data).__name__}")

    LOG.debug(f"Loaded config from {config_path}: {data}")
    return validate_config(deep_merge(DEFAULT_CONFIG, data))
