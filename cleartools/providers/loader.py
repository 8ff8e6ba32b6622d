"""
Loading typed connection strings from secret providers.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

import logging
from typing import Optional, Type, Union

from .types import SecretProvider
from ..core.base import ConnectionStringBase
from ..core.config import ParsingOptions
from ..store.factory import ConnectionStringFactory
from ..types.errors import ConfigurationError


logger = logging.getLogger(__name__)


def load_connection_string(
    record_type: Union[str, Type[ConnectionStringBase]],
    provider: SecretProvider,
    key: str,
    options: Optional[ParsingOptions] = None,
) -> ConnectionStringBase:
    """
    Fetch the raw value stored under key and parse it.

    Args:
        record_type: ConnectionStringBase subclass or registered type name
        provider: Source of the raw connection string
        key: Configuration key, e.g. 'ConnectionStrings:MyDatabase'
        options: Parsing options

    Returns:
        Parsed connection string record

    Raises:
        TypeError: If provider or key is None
        ConfigurationError: If the key is missing or empty, or the type
            name is not registered
        ParseError: If the value is not a valid connection string
    """
    if provider is None:
        raise TypeError("provider cannot be None")
    if key is None:
        raise TypeError("key cannot be None")

    if isinstance(record_type, str):
        record_type = ConnectionStringFactory.get_type(record_type)

    raw = provider.get_secret(key)
    if raw is None or not raw.strip():
        raise ConfigurationError(
            f"Configuration key '{key}' was not found or is empty.",
            config_key=key,
        )

    record = record_type.parse(raw, options)
    logger.info("Loaded connection string '%s' as %s", key, record_type.__name__)
    return record
