"""
Secret provider implementations: environment variables, in-memory
mappings, JSON/YAML configuration files and secrets directories.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

import logging
import os
from pathlib import Path
from typing import Any, List, Mapping, Optional

from .types import SecretProvider
from ..util.config import get_nested_value, load_config_file


logger = logging.getLogger(__name__)


def _as_text(value: Any) -> Optional[str]:
    """Scalars become strings; missing values and sections become None."""
    if value is None or isinstance(value, (Mapping, list)):
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class EnvironmentSecretProvider(SecretProvider):
    """
    Reads values from environment variables.

    A key such as 'ConnectionStrings:MyDatabase' is looked up as
    PREFIX + 'ConnectionStrings:MyDatabase', then with ':' replaced by '__'
    and '.' by '_', then the upper-cased form of that.
    """

    def __init__(self, prefix: str = ""):
        self.prefix = prefix

    def _candidates(self, key: str) -> List[str]:
        mapped = key.replace(":", "__").replace(".", "_")
        names = [self.prefix + key, self.prefix + mapped, (self.prefix + mapped).upper()]
        return list(dict.fromkeys(names))

    def get_secret(self, key: str) -> Optional[str]:
        for name in self._candidates(key):
            value = os.environ.get(name)
            if value is not None:
                logger.debug("Resolved '%s' from environment variable %s", key, name)
                return value
        return None


class MappingSecretProvider(SecretProvider):
    """Looks values up in an in-memory (possibly nested) mapping."""

    def __init__(self, mapping: Mapping[str, Any], separator: str = ":"):
        self.mapping = mapping
        self.separator = separator

    def get_secret(self, key: str) -> Optional[str]:
        return _as_text(get_nested_value(self.mapping, key, self.separator))


class FileSecretProvider(MappingSecretProvider):
    """
    Looks values up in a JSON or YAML configuration file.

    The file is read once, when the provider is created.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file format is unsupported
    """

    def __init__(self, path: str, separator: str = ":"):
        self.path = str(path)
        super().__init__(load_config_file(self.path), separator)
        logger.debug("Loaded configuration file %s", self.path)


class SecretsDirectoryProvider(SecretProvider):
    """
    Reads one secret per file from a directory (Docker secrets pattern).

    'ConnectionStrings:MyDatabase' is read from a file with that name or
    from 'ConnectionStrings__MyDatabase'. Surrounding whitespace is stripped.
    """

    def __init__(self, directory: str = "/run/secrets"):
        self.directory = Path(directory)

    def get_secret(self, key: str) -> Optional[str]:
        for name in dict.fromkeys([key, key.replace(":", "__")]):
            secret_file = self.directory / name
            if not secret_file.is_file():
                continue
            try:
                value = secret_file.read_text(encoding="utf-8").strip()
            except OSError as e:
                logger.warning("Failed to read %s: %s", secret_file, e)
                continue
            logger.debug("Resolved '%s' from %s", key, secret_file)
            return value
        return None


class ChainedSecretProvider(SecretProvider):
    """Asks each provider in order; the first non-empty value wins."""

    def __init__(self, *providers: SecretProvider):
        self.providers = list(providers)

    def get_secret(self, key: str) -> Optional[str]:
        fallback: Optional[str] = None
        for provider in self.providers:
            value = provider.get_secret(key)
            if value is None:
                continue
            if value.strip():
                return value
            if fallback is None:
                fallback = value
        return fallback
