"""
Core types and data structures for ClearTools connection strings.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from ..types.errors import DescriptorError


_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")
_NON_FINITE_PATTERN = re.compile(r"[+-]?(inf|infinity|nan)", re.IGNORECASE)


class ValueKind(str, Enum):
    """Semantic type a raw connection string value converts to"""
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"

    @property
    def zero_value(self) -> Any:
        """Value a field takes when its key is absent"""
        return _ZERO_VALUES[self]

    def convert(self, raw: str) -> Any:
        """
        Convert a raw string to this kind.

        Numbers are parsed locale-invariantly (ASCII digits only); floats
        also accept 'inf', 'infinity' and 'nan' in any case. Booleans accept
        'true'/'false' in any case.

        Raises:
            ValueError: If the text is not valid for this kind
        """
        if self is ValueKind.STRING:
            return raw

        text = raw.strip()
        if self is ValueKind.INTEGER:
            if not _INTEGER_PATTERN.fullmatch(text):
                raise ValueError(f"invalid integer literal: {raw!r}")
            return int(text)
        if self is ValueKind.FLOAT:
            if not (_FLOAT_PATTERN.fullmatch(text) or _NON_FINITE_PATTERN.fullmatch(text)):
                raise ValueError(f"invalid float literal: {raw!r}")
            return float(text)

        lowered = text.lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
        raise ValueError(f"invalid boolean literal: {raw!r}")

    def render(self, value: Any) -> str:
        """Render an in-memory value as connection string text"""
        if self is ValueKind.BOOLEAN and isinstance(value, bool):
            return "true" if value else "false"
        if self is ValueKind.FLOAT and isinstance(value, float):
            return repr(value)
        return str(value)

    @classmethod
    def from_type(cls, python_type: type) -> "ValueKind":
        """Map a Python type to a value kind (bool is checked before int)"""
        if python_type is bool:
            return cls.BOOLEAN
        if python_type is int:
            return cls.INTEGER
        if python_type is float:
            return cls.FLOAT
        if python_type is str:
            return cls.STRING
        raise DescriptorError(f"Unsupported field type: {python_type!r}")


_ZERO_VALUES: Dict[ValueKind, Any] = {
    ValueKind.STRING: "",
    ValueKind.INTEGER: 0,
    ValueKind.FLOAT: 0.0,
    ValueKind.BOOLEAN: False,
}


@dataclass(frozen=True)
class FieldDescriptor:
    """Static metadata describing one connection string field"""
    name: str
    external_key: Optional[str] = None
    required: bool = False
    value_kind: ValueKind = ValueKind.STRING
    nullable: bool = False

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise DescriptorError("Field name cannot be empty")
        if self.external_key is None:
            object.__setattr__(self, "external_key", self.name)
        elif not self.external_key.strip():
            raise DescriptorError(
                "Key name cannot be null or whitespace.", field_name=self.name
            )
        # parsed keys are trimmed and end at the first '='
        if self.external_key != self.external_key.strip() or "=" in self.external_key:
            raise DescriptorError(
                f"Key name {self.external_key!r} must not contain '=' or "
                "leading/trailing whitespace.",
                field_name=self.name,
            )
        if not isinstance(self.value_kind, ValueKind):
            try:
                object.__setattr__(self, "value_kind", ValueKind(self.value_kind))
            except ValueError:
                raise DescriptorError(
                    f"Unknown value kind: {self.value_kind!r}", field_name=self.name
                )

    @property
    def zero_value(self) -> Any:
        """Value used when the key is absent from the input"""
        return None if self.nullable else self.value_kind.zero_value
