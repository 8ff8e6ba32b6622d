"""
Built-in connection strings for databases, caches and message brokers.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

from dataclasses import dataclass
from typing import Optional

from ..core.base import ConnectionStringBase, connection_key


@dataclass
class SqlServerConnectionString(ConnectionStringBase):
    """SQL Server connection string, e.g. 'Server=localhost;Database=MyDb;User Id=sa;Password=...'"""
    server: Optional[str] = connection_key("Server", required=True)
    database: Optional[str] = connection_key("Database", required=True)
    user_id: Optional[str] = connection_key("User Id")
    password: Optional[str] = connection_key("Password")
    integrated_security: Optional[bool] = connection_key("Integrated Security")
    encrypt: Optional[bool] = connection_key("Encrypt")
    trust_server_certificate: Optional[bool] = connection_key("TrustServerCertificate")
    connection_timeout: Optional[int] = connection_key("Connection Timeout")
    application_name: Optional[str] = connection_key("Application Name")


@dataclass
class PostgreSqlConnectionString(ConnectionStringBase):
    """PostgreSQL (Npgsql style) connection string"""
    host: Optional[str] = connection_key("Host", required=True)
    port: Optional[int] = connection_key("Port")
    database: Optional[str] = connection_key("Database", required=True)
    username: Optional[str] = connection_key("Username")
    password: Optional[str] = connection_key("Password")
    timeout: Optional[int] = connection_key("Timeout")
    command_timeout: Optional[int] = connection_key("CommandTimeout")
    ssl_mode: Optional[str] = connection_key("SslMode")
    pooling: Optional[bool] = connection_key("Pooling")
    min_pool_size: Optional[int] = connection_key("MinPoolSize")
    max_pool_size: Optional[int] = connection_key("MaxPoolSize")


@dataclass
class MongoDbConnectionString(ConnectionStringBase):
    """MongoDB connection settings in key=value form"""
    host: Optional[str] = connection_key("Host", required=True)
    port: Optional[int] = connection_key("Port")
    database: Optional[str] = connection_key("Database")
    username: Optional[str] = connection_key("Username")
    password: Optional[str] = connection_key("Password")
    auth_source: Optional[str] = connection_key("AuthSource")
    replica_set: Optional[str] = connection_key("ReplicaSet")
    tls: Optional[bool] = connection_key("Tls")


@dataclass
class RedisConnectionString(ConnectionStringBase):
    """Redis connection settings in key=value form"""
    host: Optional[str] = connection_key("Host", required=True)
    port: Optional[int] = connection_key("Port")
    password: Optional[str] = connection_key("Password")
    ssl: Optional[bool] = connection_key("Ssl")
    database: Optional[int] = connection_key("Database")
    connect_timeout: Optional[int] = connection_key("ConnectTimeout")
    sync_timeout: Optional[int] = connection_key("SyncTimeout")
    abort_on_connect_fail: Optional[bool] = connection_key("AbortOnConnectFail")
    client_name: Optional[str] = connection_key("ClientName")


@dataclass
class RabbitMqConnectionString(ConnectionStringBase):
    """RabbitMQ connection settings in key=value form"""
    host: Optional[str] = connection_key("Host", required=True)
    port: Optional[int] = connection_key("Port")
    virtual_host: Optional[str] = connection_key("VirtualHost")
    username: Optional[str] = connection_key("Username")
    password: Optional[str] = connection_key("Password")
    requested_connection_timeout: Optional[int] = connection_key("RequestedConnectionTimeout")
    requested_heartbeat: Optional[int] = connection_key("RequestedHeartbeat")
    ssl: Optional[bool] = connection_key("Ssl")
