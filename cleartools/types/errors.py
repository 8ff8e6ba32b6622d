# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Error types and error codes for ClearTools.
Provides structured error handling for parsing, formatting and configuration.
"""

from enum import Enum
from typing import Dict, Any, List, Optional, Sequence, Tuple


class ErrorCode(str, Enum):
    """Standard error codes used across ClearTools."""
    CONVERSION_FAILED = "conversion_failed"
    MISSING_REQUIRED_KEY = "missing_required_key"
    MISSING_REQUIRED_VALUE = "missing_required_value"
    INVALID_DESCRIPTOR = "invalid_descriptor"
    CONFIGURATION_ERROR = "configuration_error"
    INTERNAL_ERROR = "internal_error"

    def __str__(self) -> str:
        return self.value


# Error code constants for easy import
CONVERSION_FAILED = ErrorCode.CONVERSION_FAILED
MISSING_REQUIRED_KEY = ErrorCode.MISSING_REQUIRED_KEY
MISSING_REQUIRED_VALUE = ErrorCode.MISSING_REQUIRED_VALUE
INVALID_DESCRIPTOR = ErrorCode.INVALID_DESCRIPTOR
CONFIGURATION_ERROR = ErrorCode.CONFIGURATION_ERROR
INTERNAL_ERROR = ErrorCode.INTERNAL_ERROR


class ClearToolsError(Exception):
    """Base exception for all ClearTools errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            'error': self.error_code.value,
            'message': self.message,
            'details': self.details
        }

        if self.cause:
            result['cause'] = str(self.cause)

        return result

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"


class ParseError(ClearToolsError):
    """Base class for errors raised while parsing a connection string."""


class FormatError(ClearToolsError):
    """Base class for errors raised while serializing a record."""


class ConversionError(ParseError):
    """Raised when a present value cannot be converted to its field's kind."""

    def __init__(
        self,
        external_key: str,
        field_name: str,
        value_kind: str,
        raw_value: str,
        cause: Optional[Exception] = None
    ):
        message = (
            f"Failed to convert value '{raw_value}' for field '{field_name}' "
            f"(key: '{external_key}') to {value_kind}."
        )
        super().__init__(
            message,
            CONVERSION_FAILED,
            {
                'external_key': external_key,
                'field': field_name,
                'value_kind': value_kind,
                'raw_value': raw_value,
            },
            cause
        )
        self.external_key = external_key
        self.field_name = field_name
        self.value_kind = value_kind
        self.raw_value = raw_value


class MissingRequiredKeyError(ParseError):
    """Raised when a required key is absent from the parsed input.

    ``external_key`` and ``field_name`` name the first missing field in
    declaration order; ``missing`` holds every missing ``(key, field)`` pair.
    """

    def __init__(self, missing: Sequence[Tuple[str, str]]):
        if not missing:
            raise ValueError("missing must name at least one field")
        external_key, field_name = missing[0]
        message = (
            f"Required key '{external_key}' for field '{field_name}' "
            f"is missing from the connection string."
        )
        if len(missing) > 1:
            others = ", ".join(f"'{key}'" for key, _ in missing[1:])
            message += f" Also missing: {others}."
        super().__init__(
            message,
            MISSING_REQUIRED_KEY,
            {
                'external_key': external_key,
                'field': field_name,
                'missing': [key for key, _ in missing],
            }
        )
        self.external_key = external_key
        self.field_name = field_name
        self.missing: List[Tuple[str, str]] = list(missing)


class MissingRequiredValueError(FormatError):
    """Raised when required fields hold empty values at format time."""

    def __init__(self, missing: Sequence[Tuple[str, str]]):
        described = ", ".join(f"{name} (key: '{key}')" for key, name in missing)
        message = (
            "Cannot serialize connection string: required fields are missing "
            f"or have empty values: {described}"
        )
        super().__init__(
            message,
            MISSING_REQUIRED_VALUE,
            {'fields': [name for _, name in missing]}
        )
        self.fields: List[str] = [name for _, name in missing]
        self.external_keys: List[str] = [key for key, _ in missing]


class DescriptorError(ClearToolsError):
    """Raised when field metadata is invalid."""

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, INVALID_DESCRIPTOR, details)
        self.field_name = field_name

        if field_name:
            self.details['field'] = field_name


class ConfigurationError(ClearToolsError):
    """Raised when there's a configuration error."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, CONFIGURATION_ERROR, details)
        self.config_key = config_key
        self.config_value = config_value

        if config_key:
            self.details['config_key'] = config_key
        if config_value is not None:
            self.details['config_value'] = str(config_value)
