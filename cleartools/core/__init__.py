# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Core module initialization
"""

from .config import KeyComparison, ParsingOptions
from .types import FieldDescriptor, ValueKind
from .engine import parse, parse_pairs, format_record, split_tokens, escape_value, unescape_value
from .base import ConnectionStringBase, connection_key, get_descriptors, derive_descriptors

__all__ = [
    "KeyComparison",
    "ParsingOptions",
    "FieldDescriptor",
    "ValueKind",
    "parse",
    "parse_pairs",
    "format_record",
    "split_tokens",
    "escape_value",
    "unescape_value",
    "ConnectionStringBase",
    "connection_key",
    "get_descriptors",
    "derive_descriptors",
]
