# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Built-in connection string types.

Databases and brokers: SQL Server, PostgreSQL, MongoDB, Redis, RabbitMQ.
Azure services: Service Bus, Cosmos DB, Blob Storage, Key Vault, App Configuration.
"""

from .databases import (
    SqlServerConnectionString,
    PostgreSqlConnectionString,
    MongoDbConnectionString,
    RedisConnectionString,
    RabbitMqConnectionString,
)
from .azure import (
    ServiceBusConnectionString,
    CosmosDbConnectionString,
    BlobStorageConnectionString,
    KeyVaultConnectionString,
    AppConfigurationConnectionString,
)

__all__ = [
    'SqlServerConnectionString',
    'PostgreSqlConnectionString',
    'MongoDbConnectionString',
    'RedisConnectionString',
    'RabbitMqConnectionString',
    'ServiceBusConnectionString',
    'CosmosDbConnectionString',
    'BlobStorageConnectionString',
    'KeyVaultConnectionString',
    'AppConfigurationConnectionString',
]
