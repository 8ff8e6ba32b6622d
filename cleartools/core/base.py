"""
Declarative connection string records.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

A connection string type is a dataclass deriving from ConnectionStringBase
whose mapped fields are declared with connection_key():

    @dataclass
    class MyConnectionString(ConnectionStringBase):
        server: Optional[str] = connection_key("Server", required=True)
        port: int = connection_key("Port", default=1433)

    conn = MyConnectionString.parse("Server=localhost;Port=5432")
    conn.server       # "localhost"
    conn.to_string()  # "Server=localhost;Port=5432"

Field descriptors are derived once per class from the dataclass fields and
their annotations, then cached.
"""

import dataclasses
import logging
import threading
import types
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from .config import ParsingOptions
from .engine import format_record, parse as parse_record
from .types import FieldDescriptor, ValueKind
from ..types.errors import DescriptorError


logger = logging.getLogger(__name__)

METADATA_KEY = "cleartools.connection_string"

T = TypeVar("T", bound="ConnectionStringBase")

_UNION_TYPE = getattr(types, "UnionType", None)

_descriptor_cache: Dict[type, Tuple[FieldDescriptor, ...]] = {}
_descriptor_lock = threading.Lock()


def connection_key(key: Optional[str] = None, *, required: bool = False,
                   default: Any = None) -> Any:
    """
    Declare a dataclass field mapped to a connection string key.

    Args:
        key: External key name; defaults to the field name
        required: Whether the key must be present when parsing and the
            value non-empty when serializing
        default: Default value for direct construction

    Raises:
        DescriptorError: If key is given but blank
    """
    if key is not None and not key.strip():
        raise DescriptorError("Key name cannot be null or whitespace.")
    return field(default=default, metadata={METADATA_KEY: {'key': key, 'required': required}})


def _resolve_annotation(hint: Any, field_name: str) -> Tuple[ValueKind, bool]:
    """Return (value kind, nullable) for a field annotation."""
    origin = get_origin(hint)
    is_union = origin is Union or (_UNION_TYPE is not None and isinstance(hint, _UNION_TYPE))

    if is_union:
        args = get_args(hint)
        non_none = [arg for arg in args if arg is not type(None)]
        if len(non_none) != 1 or len(args) != 2:
            raise DescriptorError(
                f"Unsupported union annotation {hint!r}; use Optional[T]",
                field_name=field_name,
            )
        try:
            return ValueKind.from_type(non_none[0]), True
        except DescriptorError as e:
            raise DescriptorError(e.message, field_name=field_name) from e

    try:
        return ValueKind.from_type(hint), False
    except DescriptorError as e:
        raise DescriptorError(e.message, field_name=field_name) from e


def derive_descriptors(record_type: type) -> Tuple[FieldDescriptor, ...]:
    """
    Build field descriptors for a dataclass, in declaration order.

    Only fields declared with connection_key() are mapped.

    Raises:
        DescriptorError: If the type is not a dataclass or a mapped field
            has an unsupported annotation
    """
    # subclasses inherit __dataclass_fields__, so is_dataclass() alone
    # accepts a class whose own @dataclass decorator is missing
    if not dataclasses.is_dataclass(record_type) or "__dataclass_fields__" not in vars(record_type):
        raise DescriptorError(
            f"{record_type.__name__} is not a dataclass; decorate it with @dataclass"
        )

    hints = get_type_hints(record_type)
    descriptors = []

    for f in dataclasses.fields(record_type):
        mapping = f.metadata.get(METADATA_KEY)
        if mapping is None:
            continue

        value_kind, nullable = _resolve_annotation(hints.get(f.name, f.type), f.name)
        descriptors.append(FieldDescriptor(
            name=f.name,
            external_key=mapping['key'],
            required=mapping['required'],
            value_kind=value_kind,
            nullable=nullable,
        ))

    return tuple(descriptors)


def get_descriptors(record_type: type) -> Tuple[FieldDescriptor, ...]:
    """Return the cached descriptors for ``record_type``, deriving them once."""
    cached = _descriptor_cache.get(record_type)
    if cached is not None:
        return cached

    with _descriptor_lock:
        cached = _descriptor_cache.get(record_type)
        if cached is None:
            cached = derive_descriptors(record_type)
            _descriptor_cache[record_type] = cached
            logger.debug(
                "Derived %d field descriptors for %s",
                len(cached), record_type.__name__,
            )
        return cached


@dataclass
class ConnectionStringBase:
    """
    Base class for strongly-typed connection strings.

    Subclasses must be dataclasses; every field not declared with
    connection_key() needs a default so parse() can build instances.
    """

    _options: ParsingOptions = field(
        default_factory=ParsingOptions, init=False, repr=False, compare=False
    )

    @classmethod
    def descriptors(cls) -> Tuple[FieldDescriptor, ...]:
        """Field descriptors of this connection string type"""
        return get_descriptors(cls)

    @classmethod
    def parse(cls: Type[T], raw: str, options: Optional[ParsingOptions] = None) -> T:
        """
        Create a new instance from a raw connection string.

        Raises:
            TypeError: If raw is None
            ConversionError: If a value cannot be converted
            MissingRequiredKeyError: If a required key is absent
        """
        options = options or ParsingOptions()
        values = parse_record(raw, cls.descriptors(), options)
        instance = cls(**values)
        instance._options = options
        return instance

    @property
    def options(self) -> ParsingOptions:
        """Options used to parse this instance and to serialize it by default"""
        return self._options

    def initialize(self, raw: str, options: Optional[ParsingOptions] = None) -> None:
        """
        Re-populate this instance from a raw connection string.

        The instance is left untouched when parsing fails. Options, when
        given, replace the instance's current options.
        """
        effective = options or self._options
        values = parse_record(raw, self.descriptors(), effective)
        for name, value in values.items():
            setattr(self, name, value)
        self._options = effective

    def to_string(self, options: Optional[ParsingOptions] = None) -> str:
        """
        Serialize back to connection string form.

        Raises:
            MissingRequiredValueError: If required fields are empty
        """
        return format_record(self, self.descriptors(), options or self._options)

    def to_dict(self) -> Dict[str, Any]:
        """Field name -> value for every mapped field."""
        return {d.name: getattr(self, d.name) for d in self.descriptors()}

    def __str__(self) -> str:
        return self.to_string()
