# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Package providers supplies raw connection strings from configuration sources.

This package includes:
- The SecretProvider interface
- Environment variable, mapping, JSON/YAML file and secrets directory sources
- A chained provider for layered lookups
- load_connection_string, which fetches and parses in one step
"""

from .types import SecretProvider
from .sources import (
    EnvironmentSecretProvider,
    MappingSecretProvider,
    FileSecretProvider,
    SecretsDirectoryProvider,
    ChainedSecretProvider,
)
from .loader import load_connection_string

__all__ = [
    'SecretProvider',
    'EnvironmentSecretProvider',
    'MappingSecretProvider',
    'FileSecretProvider',
    'SecretsDirectoryProvider',
    'ChainedSecretProvider',
    'load_connection_string',
]
