# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Utility package providing configuration helpers for ClearTools.

This package includes:
- Prefixed environment lookups with typed casting
- JSON/YAML configuration file loading and nested key lookup
"""

from .config import (
    DEFAULT_ENV_PREFIX, parse_bool, get_config_value, get_bool_config,
    load_config_file, get_nested_value
)

__all__ = [
    'DEFAULT_ENV_PREFIX', 'parse_bool', 'get_config_value',
    'get_bool_config', 'load_config_file', 'get_nested_value'
]
