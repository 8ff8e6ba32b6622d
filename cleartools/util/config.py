"""
Configuration utilities for ClearTools.
Provides environment and file based configuration loading used by the
parsing options and the secret providers.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml


DEFAULT_ENV_PREFIX = "CLEARTOOLS_"


def parse_bool(value: Any) -> bool:
    """Interpret common textual flags ('true', '1', 'yes', 'on') as booleans."""
    if isinstance(value, str):
        return value.strip().lower() in ('true', '1', 'yes', 'on')
    return bool(value)


def get_config_value(key: str, default: Any = None,
                     cast_type: Optional[type] = None,
                     env_prefix: str = DEFAULT_ENV_PREFIX) -> Any:
    """
    Get configuration value from environment or return default.
    Optionally cast to specified type.
    """
    env_key = f"{env_prefix}{key.upper()}"
    value = os.environ.get(env_key, default)

    if value is None or cast_type is None:
        return value

    try:
        if cast_type == bool:
            return parse_bool(value)
        return cast_type(value)
    except (ValueError, TypeError):
        return default


def get_bool_config(key: str, default: bool = False,
                    env_prefix: str = DEFAULT_ENV_PREFIX) -> bool:
    """Boolean flag from the environment, e.g. CLEARTOOLS_ENABLE_ESCAPING=no."""
    return get_config_value(key, default, bool, env_prefix)


def load_config_file(file_path: str) -> Dict[str, Any]:
    """Load configuration from a file (JSON or YAML)."""
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    file_ext = Path(file_path).suffix.lower()

    with open(file_path, 'r', encoding='utf-8') as f:
        if file_ext in ['.json']:
            data = json.load(f)
        elif file_ext in ['.yaml', '.yml']:
            data = yaml.safe_load(f)
        else:
            raise ValueError(f"Unsupported configuration file format: {file_ext}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must contain a mapping: {file_path}")
    return data


def get_nested_value(config: Mapping[str, Any], path: str,
                     separator: str = ":") -> Optional[Any]:
    """
    Look up a value by a separated path, e.g. 'ConnectionStrings:MyDatabase'.

    A flat key equal to the whole path takes precedence over nested lookup.
    Returns None when any segment is missing.
    """
    if path in config:
        return config[path]

    current: Any = config
    for segment in path.split(separator):
        if not isinstance(current, Mapping) or segment not in current:
            return None
        current = current[segment]

    return current
