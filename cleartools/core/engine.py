"""
Connection string engine: parses delimited key=value strings into field
values and serializes field values back, driven by field descriptors.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

Both operations are pure: no I/O, no shared state, no logging.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .config import ParsingOptions
from .types import FieldDescriptor
from ..types.errors import (
    ConversionError,
    DescriptorError,
    MissingRequiredKeyError,
    MissingRequiredValueError,
)

ESCAPE_CHAR = "\\"


def split_tokens(raw: str, delimiter: str, enable_escaping: bool) -> List[str]:
    """
    Split ``raw`` on ``delimiter``.

    With escaping enabled a backslash directly followed by the delimiter
    yields a literal delimiter inside the current token (the backslash is
    dropped). Without escaping the split is naive.
    """
    if not enable_escaping:
        return raw.split(delimiter)

    tokens: List[str] = []
    current: List[str] = []
    escaped = ESCAPE_CHAR + delimiter
    i = 0

    while i < len(raw):
        if raw.startswith(escaped, i):
            current.append(delimiter)
            i += len(escaped)
        elif raw.startswith(delimiter, i):
            tokens.append("".join(current))
            current = []
            i += len(delimiter)
        else:
            current.append(raw[i])
            i += 1

    tokens.append("".join(current))
    return tokens


def escape_value(value: str, delimiter: str) -> str:
    """Prefix every delimiter occurrence in ``value`` with a backslash."""
    return value.replace(delimiter, ESCAPE_CHAR + delimiter)


def unescape_value(value: str, delimiter: str) -> str:
    """Restore escaped delimiters in ``value``."""
    return value.replace(ESCAPE_CHAR + delimiter, delimiter)


def parse_pairs(raw: str, options: Optional[ParsingOptions] = None) -> Dict[str, str]:
    """
    Parse ``raw`` into a key -> value mapping.

    Keys in the result are normalized for ``options.key_comparison``; the
    last occurrence of a key wins. Tokens without '=' or with an empty key
    are skipped.
    """
    options = options or ParsingOptions()
    pairs: Dict[str, str] = {}

    if raw is None or not raw.strip():
        return pairs

    for token in split_tokens(raw, options.delimiter, options.enable_escaping):
        if not token.strip():
            continue

        equals_index = token.find("=")
        if equals_index <= 0:
            continue

        key = token[:equals_index].strip()
        if not key:
            continue

        value = token[equals_index + 1:].strip()
        if options.enable_escaping:
            value = unescape_value(value, options.delimiter)

        pairs[options.key_comparison.normalize(key)] = value

    return pairs


def _check_keys(descriptors: Sequence[FieldDescriptor], delimiter: str) -> None:
    for descriptor in descriptors:
        if delimiter in descriptor.external_key:
            raise DescriptorError(
                f"Key name {descriptor.external_key!r} must not contain the "
                f"delimiter {delimiter!r}.",
                field_name=descriptor.name,
            )


def parse(raw: str, descriptors: Sequence[FieldDescriptor],
          options: Optional[ParsingOptions] = None) -> Dict[str, Any]:
    """
    Parse a connection string into a mapping of field name -> value.

    Every descriptor gets an entry: the converted value when its key is
    present, otherwise the descriptor's zero value.

    Raises:
        TypeError: If raw is None
        ConversionError: If a present value cannot be converted; raised
            immediately, before any required-key check
        MissingRequiredKeyError: If any required key is absent
        DescriptorError: If a key name contains the delimiter
    """
    if raw is None:
        raise TypeError("connection string cannot be None")

    options = options or ParsingOptions()
    _check_keys(descriptors, options.delimiter)
    pairs = parse_pairs(raw, options)
    record: Dict[str, Any] = {}
    missing: List[Tuple[str, str]] = []

    for descriptor in descriptors:
        lookup_key = options.key_comparison.normalize(descriptor.external_key)

        if lookup_key not in pairs:
            record[descriptor.name] = descriptor.zero_value
            if descriptor.required:
                missing.append((descriptor.external_key, descriptor.name))
            continue

        raw_value = pairs[lookup_key]
        try:
            record[descriptor.name] = descriptor.value_kind.convert(raw_value)
        except ValueError as e:
            raise ConversionError(
                external_key=descriptor.external_key,
                field_name=descriptor.name,
                value_kind=descriptor.value_kind.value,
                raw_value=raw_value,
                cause=e,
            ) from e

    if missing:
        raise MissingRequiredKeyError(missing)

    return record


def _read_field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def format_record(record: Any, descriptors: Sequence[FieldDescriptor],
                  options: Optional[ParsingOptions] = None) -> str:
    """
    Serialize a record (a mapping or an object with one attribute per
    field) back to connection string form, in descriptor order.

    Empty fields are omitted.

    Raises:
        MissingRequiredValueError: Listing every required field whose
            value is None or an empty string
        DescriptorError: If a key name contains the delimiter
    """
    options = options or ParsingOptions()
    _check_keys(descriptors, options.delimiter)

    missing = [
        (descriptor.external_key, descriptor.name)
        for descriptor in descriptors
        if descriptor.required and _is_empty(_read_field(record, descriptor.name))
    ]
    if missing:
        raise MissingRequiredValueError(missing)

    parts: List[str] = []
    for descriptor in descriptors:
        value = _read_field(record, descriptor.name)
        if value is None:
            continue

        text = descriptor.value_kind.render(value)
        if not text:
            continue

        if options.enable_escaping:
            text = escape_value(text, options.delimiter)
        parts.append(f"{descriptor.external_key}={text}")

    return options.delimiter.join(parts)
