# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Package store provides the registry of connection string types.

This package implements:
- Name -> type registration for built-in and custom connection strings
- A factory that parses raw strings as a registered type
"""

from .factory import (
    # Registry and factory
    ConnectionStringFactory,
    create_connection_string
)

__all__ = [
    # Factory
    'ConnectionStringFactory',
    'create_connection_string'
]
