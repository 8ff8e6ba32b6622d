# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Package types provides the shared error definitions for ClearTools.

This package contains the error hierarchy used across the other packages:
- Error codes
- Parse-side errors (conversion, missing required keys)
- Format-side errors (missing required values)
- Metadata and configuration errors
"""

from .errors import (
    ErrorCode,
    ClearToolsError,
    ParseError,
    FormatError,
    ConversionError,
    MissingRequiredKeyError,
    MissingRequiredValueError,
    DescriptorError,
    ConfigurationError,
)

__all__ = [
    'ErrorCode',
    'ClearToolsError',
    'ParseError',
    'FormatError',
    'ConversionError',
    'MissingRequiredKeyError',
    'MissingRequiredValueError',
    'DescriptorError',
    'ConfigurationError',
]
