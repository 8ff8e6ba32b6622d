"""
Built-in connection strings for Azure services.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

Only the string format is modelled here; no Azure SDK is involved.
"""

from dataclasses import dataclass
from typing import Optional

from ..core.base import ConnectionStringBase, connection_key


@dataclass
class ServiceBusConnectionString(ConnectionStringBase):
    """Azure Service Bus connection string"""
    endpoint: Optional[str] = connection_key("Endpoint", required=True)
    shared_access_key_name: Optional[str] = connection_key("SharedAccessKeyName")
    shared_access_key: Optional[str] = connection_key("SharedAccessKey")
    shared_access_signature: Optional[str] = connection_key("SharedAccessSignature")
    entity_path: Optional[str] = connection_key("EntityPath")


@dataclass
class CosmosDbConnectionString(ConnectionStringBase):
    """Azure Cosmos DB connection string"""
    account_endpoint: Optional[str] = connection_key("AccountEndpoint", required=True)
    account_key: Optional[str] = connection_key("AccountKey", required=True)
    database: Optional[str] = connection_key("Database")


@dataclass
class BlobStorageConnectionString(ConnectionStringBase):
    """Azure Storage account connection string"""
    default_endpoints_protocol: Optional[str] = connection_key("DefaultEndpointsProtocol")
    account_name: Optional[str] = connection_key("AccountName", required=True)
    account_key: Optional[str] = connection_key("AccountKey")
    shared_access_signature: Optional[str] = connection_key("SharedAccessSignature")
    endpoint_suffix: Optional[str] = connection_key("EndpointSuffix")
    blob_endpoint: Optional[str] = connection_key("BlobEndpoint")


@dataclass
class KeyVaultConnectionString(ConnectionStringBase):
    """Key Vault location and service principal credentials"""
    vault_uri: Optional[str] = connection_key("VaultUri", required=True)
    tenant_id: Optional[str] = connection_key("TenantId")
    client_id: Optional[str] = connection_key("ClientId")
    client_secret: Optional[str] = connection_key("ClientSecret")


@dataclass
class AppConfigurationConnectionString(ConnectionStringBase):
    """Azure App Configuration connection string"""
    endpoint: Optional[str] = connection_key("Endpoint", required=True)
    id: Optional[str] = connection_key("Id", required=True)
    secret: Optional[str] = connection_key("Secret", required=True)
