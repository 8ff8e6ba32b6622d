"""
Configuration module for ClearTools connection string parsing.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping

from ..types.errors import ConfigurationError
from ..util.config import DEFAULT_ENV_PREFIX, get_bool_config, get_config_value, parse_bool


class KeyComparison(str, Enum):
    """How external keys are matched against parsed keys"""
    CASE_SENSITIVE = "case_sensitive"
    CASE_INSENSITIVE = "case_insensitive"

    def normalize(self, key: str) -> str:
        """Return the form of ``key`` used for dictionary lookups."""
        if self is KeyComparison.CASE_INSENSITIVE:
            return key.casefold()
        return key

    @classmethod
    def from_value(cls, value: Any) -> "KeyComparison":
        """Accept an enum member or its textual name/value, e.g. 'ordinal'."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower().replace("-", "_")
        aliases = {
            "ordinal": cls.CASE_SENSITIVE,
            "sensitive": cls.CASE_SENSITIVE,
            "ordinal_ignore_case": cls.CASE_INSENSITIVE,
            "ignore_case": cls.CASE_INSENSITIVE,
            "insensitive": cls.CASE_INSENSITIVE,
        }
        if text in aliases:
            return aliases[text]
        try:
            return cls(text)
        except ValueError:
            raise ConfigurationError(
                f"Unknown key comparison: {value}",
                config_key="key_comparison",
                config_value=value,
            )


@dataclass(frozen=True)
class ParsingOptions:
    """Options for parsing and serializing connection strings"""
    delimiter: str = ";"
    enable_escaping: bool = True
    key_comparison: KeyComparison = KeyComparison.CASE_INSENSITIVE

    def __post_init__(self):
        if not isinstance(self.delimiter, str) or not self.delimiter.strip():
            raise ConfigurationError(
                "delimiter must be a non-empty, non-whitespace string",
                config_key="delimiter",
                config_value=self.delimiter,
            )
        if "=" in self.delimiter:
            raise ConfigurationError(
                "delimiter must not contain '='",
                config_key="delimiter",
                config_value=self.delimiter,
            )
        if not isinstance(self.key_comparison, KeyComparison):
            object.__setattr__(
                self, "key_comparison", KeyComparison.from_value(self.key_comparison)
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ParsingOptions":
        """Create options from a mapping; unknown keys are ignored"""
        defaults = cls()
        return cls(
            delimiter=data.get("delimiter", defaults.delimiter),
            enable_escaping=parse_bool(data.get("enable_escaping", defaults.enable_escaping)),
            key_comparison=KeyComparison.from_value(
                data.get("key_comparison", defaults.key_comparison)
            ),
        )

    @classmethod
    def from_env(cls, prefix: str = DEFAULT_ENV_PREFIX) -> "ParsingOptions":
        """Create options from environment variables"""
        defaults = cls()
        return cls(
            delimiter=get_config_value("delimiter", defaults.delimiter, str, prefix),
            enable_escaping=get_bool_config("enable_escaping", defaults.enable_escaping, prefix),
            key_comparison=KeyComparison.from_value(
                get_config_value("key_comparison", defaults.key_comparison.value, str, prefix)
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "delimiter": self.delimiter,
            "enable_escaping": self.enable_escaping,
            "key_comparison": self.key_comparison.value,
        }
