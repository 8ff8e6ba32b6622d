"""
Factory for creating connection string records by type name.
Provides a centralized registry of connection string types.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

import logging
from typing import Dict, List, Optional, Type

from ..builtin import (
    AppConfigurationConnectionString,
    BlobStorageConnectionString,
    CosmosDbConnectionString,
    KeyVaultConnectionString,
    MongoDbConnectionString,
    PostgreSqlConnectionString,
    RabbitMqConnectionString,
    RedisConnectionString,
    ServiceBusConnectionString,
    SqlServerConnectionString,
)
from ..core.base import ConnectionStringBase
from ..core.config import ParsingOptions
from ..types.errors import ConfigurationError


logger = logging.getLogger(__name__)


# Registry of available connection string types
_CONNECTION_STRING_TYPES: Dict[str, Type[ConnectionStringBase]] = {
    'sqlserver': SqlServerConnectionString,
    'postgresql': PostgreSqlConnectionString,
    'mongodb': MongoDbConnectionString,
    'redis': RedisConnectionString,
    'rabbitmq': RabbitMqConnectionString,
    'servicebus': ServiceBusConnectionString,
    'cosmosdb': CosmosDbConnectionString,
    'blobstorage': BlobStorageConnectionString,
    'keyvault': KeyVaultConnectionString,
    'appconfiguration': AppConfigurationConnectionString,
}


class ConnectionStringFactory:
    """Factory for creating connection string records."""

    @staticmethod
    def get_type(name: str) -> Type[ConnectionStringBase]:
        """
        Look up a registered connection string type.

        Raises:
            ConfigurationError: If no type is registered under name
        """
        implementation = _CONNECTION_STRING_TYPES.get(name.strip().lower())
        if not implementation:
            raise ConfigurationError(
                f"Unsupported connection string type: {name}",
                config_key="type",
                config_value=name,
            )
        return implementation

    @staticmethod
    def create(name: str, raw: str,
               options: Optional[ParsingOptions] = None) -> ConnectionStringBase:
        """
        Parse a raw connection string as the type registered under name.

        Args:
            name: Registered type name ('postgresql', 'redis', etc.)
            raw: Raw connection string
            options: Parsing options

        Returns:
            Parsed connection string record

        Raises:
            ConfigurationError: If name is not registered
            ParseError: If the connection string is invalid
        """
        return ConnectionStringFactory.get_type(name).parse(raw, options)

    @staticmethod
    def register_type(name: str, implementation: Type[ConnectionStringBase]) -> None:
        """
        Register a new connection string type.

        Args:
            name: Name to register the type under
            implementation: ConnectionStringBase subclass
        """
        if not (isinstance(implementation, type) and issubclass(implementation, ConnectionStringBase)):
            raise ConfigurationError(
                f"{implementation!r} is not a ConnectionStringBase subclass",
                config_key="type",
                config_value=name,
            )
        key = name.strip().lower()
        if key in _CONNECTION_STRING_TYPES:
            logger.warning("Replacing connection string type registered as '%s'", key)
        _CONNECTION_STRING_TYPES[key] = implementation

    @staticmethod
    def unregister_type(name: str) -> None:
        """Remove a registered type; unknown names are ignored."""
        _CONNECTION_STRING_TYPES.pop(name.strip().lower(), None)

    @staticmethod
    def get_available_types() -> List[str]:
        """Get list of available connection string types."""
        return sorted(_CONNECTION_STRING_TYPES.keys())


def create_connection_string(name: str, raw: str,
                             options: Optional[ParsingOptions] = None) -> ConnectionStringBase:
    """
    Convenience function to parse a connection string by type name.

    Args:
        name: Registered type name
        raw: Raw connection string
        options: Parsing options

    Returns:
        Parsed connection string record
    """
    return ConnectionStringFactory.create(name, raw, options)
