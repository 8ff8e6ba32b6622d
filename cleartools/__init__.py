# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
ClearTools Python Package

Strongly-typed connection string parsing and serialization.
"""

__version__ = "0.1.0"

from .core.config import KeyComparison, ParsingOptions
from .core.types import FieldDescriptor, ValueKind
from .core.engine import parse, parse_pairs, format_record
from .core.base import ConnectionStringBase, connection_key
from .types.errors import (
    ClearToolsError,
    ParseError,
    FormatError,
    ConversionError,
    MissingRequiredKeyError,
    MissingRequiredValueError,
    DescriptorError,
    ConfigurationError,
)
from .builtin import (
    SqlServerConnectionString,
    PostgreSqlConnectionString,
    MongoDbConnectionString,
    RedisConnectionString,
    RabbitMqConnectionString,
    ServiceBusConnectionString,
    CosmosDbConnectionString,
    BlobStorageConnectionString,
    KeyVaultConnectionString,
    AppConfigurationConnectionString,
)
from .store import ConnectionStringFactory, create_connection_string
from .providers import (
    SecretProvider,
    EnvironmentSecretProvider,
    MappingSecretProvider,
    FileSecretProvider,
    SecretsDirectoryProvider,
    ChainedSecretProvider,
    load_connection_string,
)

__all__ = [
    "KeyComparison",
    "ParsingOptions",
    "FieldDescriptor",
    "ValueKind",
    "parse",
    "parse_pairs",
    "format_record",
    "ConnectionStringBase",
    "connection_key",
    "ClearToolsError",
    "ParseError",
    "FormatError",
    "ConversionError",
    "MissingRequiredKeyError",
    "MissingRequiredValueError",
    "DescriptorError",
    "ConfigurationError",
    "SqlServerConnectionString",
    "PostgreSqlConnectionString",
    "MongoDbConnectionString",
    "RedisConnectionString",
    "RabbitMqConnectionString",
    "ServiceBusConnectionString",
    "CosmosDbConnectionString",
    "BlobStorageConnectionString",
    "KeyVaultConnectionString",
    "AppConfigurationConnectionString",
    "ConnectionStringFactory",
    "create_connection_string",
    "SecretProvider",
    "EnvironmentSecretProvider",
    "MappingSecretProvider",
    "FileSecretProvider",
    "SecretsDirectoryProvider",
    "ChainedSecretProvider",
    "load_connection_string",
]
