"""
Tests for the connection string engine: tokenizing, parsing and formatting.
"""

import math

import pytest

from cleartools.core.config import KeyComparison, ParsingOptions
from cleartools.core.engine import format_record, parse, parse_pairs, split_tokens
from cleartools.core.types import FieldDescriptor, ValueKind
from cleartools.types.errors import (
    ConversionError,
    DescriptorError,
    MissingRequiredKeyError,
    MissingRequiredValueError,
    ParseError,
    FormatError,
)


@pytest.fixture
def descriptors():
    """Server (required), Port (integer) and Database fields."""
    return [
        FieldDescriptor("Server", required=True),
        FieldDescriptor("Port", value_kind=ValueKind.INTEGER),
        FieldDescriptor("Database"),
    ]


@pytest.fixture
def optional_descriptors():
    """Two optional string fields."""
    return [FieldDescriptor("Key1"), FieldDescriptor("Key2")]


class TestSplitTokens:
    """Test delimiter splitting and escape handling."""

    def test_escaped_delimiter_stays_in_token(self):
        """Test that a backslash before the delimiter yields a literal delimiter."""
        assert split_tokens(r"a=my\;x;b=2", ";", True) == ["a=my;x", "b=2"]

    def test_naive_split_without_escaping(self):
        """Test that escaping disabled splits on every delimiter."""
        assert split_tokens(r"a=my\;x;b=2", ";", False) == ["a=my\\", "x", "b=2"]

    def test_multi_character_delimiter(self):
        """Test escaping with a delimiter longer than one character."""
        assert split_tokens(r"A=1||B=x\||y", "||", True) == ["A=1", "B=x||y"]

    def test_backslash_not_before_delimiter_is_kept(self):
        """Test that other backslashes pass through untouched."""
        assert split_tokens(r"Path=C:\data;X=1", ";", True) == [r"Path=C:\data", "X=1"]


class TestParse:
    """Test parsing into field values."""

    def test_basic_connection_string(self, descriptors):
        """Test the canonical three-field example."""
        record = parse("Server=localhost;Port=5432;Database=mydb", descriptors)

        assert record == {"Server": "localhost", "Port": 5432, "Database": "mydb"}

    def test_missing_optional_fields_get_zero_values(self, descriptors):
        """Test that absent keys leave the kind's zero value."""
        record = parse("Server=localhost", descriptors)

        assert record["Port"] == 0
        assert record["Database"] == ""

    def test_nullable_field_defaults_to_none(self):
        """Test that nullable descriptors use None as zero value."""
        record = parse("", [FieldDescriptor("Port", value_kind=ValueKind.INTEGER, nullable=True)])

        assert record == {"Port": None}

    def test_missing_required_key(self, descriptors):
        """Test that a missing required key raises."""
        with pytest.raises(MissingRequiredKeyError) as exc_info:
            parse("Port=5432;Database=mydb", descriptors)

        assert exc_info.value.external_key == "Server"
        assert exc_info.value.field_name == "Server"
        assert "Required key 'Server'" in str(exc_info.value)
        assert isinstance(exc_info.value, ParseError)

    def test_all_missing_required_keys_are_reported(self):
        """Test that required keys are checked after every field resolves."""
        descriptors = [
            FieldDescriptor("Server", required=True),
            FieldDescriptor("Port", value_kind=ValueKind.INTEGER),
            FieldDescriptor("Database", required=True),
        ]

        with pytest.raises(MissingRequiredKeyError) as exc_info:
            parse("Port=1", descriptors)

        assert exc_info.value.external_key == "Server"
        assert exc_info.value.missing == [("Server", "Server"), ("Database", "Database")]

    def test_empty_string_with_required_field(self, descriptors):
        """Test that empty input fails when a field is required."""
        with pytest.raises(MissingRequiredKeyError):
            parse("", descriptors)

    def test_empty_string_with_only_optional_fields(self, optional_descriptors):
        """Test that empty or blank input succeeds when nothing is required."""
        assert parse("", optional_descriptors) == {"Key1": "", "Key2": ""}
        assert parse("   ", optional_descriptors) == {"Key1": "", "Key2": ""}

    def test_escaped_delimiters_in_values(self, descriptors):
        """Test that escaped delimiters become part of the value."""
        record = parse(r"Server=my\;server;Database=my\;database", descriptors)

        assert record["Server"] == "my;server"
        assert record["Database"] == "my;database"

    def test_disabled_escaping_treats_backslash_as_literal(self, descriptors):
        """Test that the backslash is kept and the value is cut at the delimiter."""
        options = ParsingOptions(enable_escaping=False)
        record = parse(r"Server=my\;server;Database=test", descriptors, options)

        assert record["Server"] == "my\\"
        assert record["Database"] == "test"

    def test_case_insensitive_keys_by_default(self, descriptors):
        """Test default case-insensitive key matching."""
        record = parse("server=localhost;PORT=5432;DaTaBaSe=mydb", descriptors)

        assert record == {"Server": "localhost", "Port": 5432, "Database": "mydb"}

    def test_case_sensitive_keys(self, descriptors):
        """Test that case-sensitive matching rejects a differently cased key."""
        options = ParsingOptions(key_comparison=KeyComparison.CASE_SENSITIVE)

        with pytest.raises(MissingRequiredKeyError) as exc_info:
            parse("server=localhost", descriptors, options)

        assert exc_info.value.external_key == "Server"

    def test_duplicate_keys_last_wins(self, descriptors):
        """Test that the last occurrence of a key wins."""
        record = parse("Server=first;Server=second;Port=5432", descriptors)

        assert record["Server"] == "second"

    def test_whitespace_is_trimmed(self, descriptors):
        """Test trimming around keys and values."""
        record = parse(" Server = localhost ; Port = 5432 ", descriptors)

        assert record["Server"] == "localhost"
        assert record["Port"] == 5432

    def test_token_without_equals_is_ignored(self, descriptors):
        """Test that a bare key is dropped rather than treated as present."""
        record = parse("Server=localhost;InvalidKey;Port=5432", descriptors)

        assert record["Server"] == "localhost"
        assert record["Port"] == 5432

    def test_bare_required_key_is_not_present(self, descriptors):
        """Test that 'Server' without '=' does not satisfy the required check."""
        with pytest.raises(MissingRequiredKeyError):
            parse("Server;Port=5432", descriptors)

    def test_empty_value_counts_as_present(self, descriptors):
        """Test that 'Server=' satisfies the required check with an empty string."""
        record = parse("Server=;Database=mydb", descriptors)

        assert record["Server"] == ""
        assert record["Database"] == "mydb"

    def test_empty_key_is_ignored(self, optional_descriptors):
        """Test that tokens starting with '=' or with a blank key are dropped."""
        record = parse("=value; =other;Key1=a", optional_descriptors)

        assert record == {"Key1": "a", "Key2": ""}

    def test_value_may_contain_equals(self):
        """Test that only the first '=' separates key and value."""
        record = parse("SharedAccessKey=abc==;Other=x", [FieldDescriptor("SharedAccessKey")])

        assert record["SharedAccessKey"] == "abc=="

    def test_custom_delimiter(self, descriptors):
        """Test parsing with a custom delimiter."""
        options = ParsingOptions(delimiter="|")
        record = parse("Server=localhost|Port=5432|Database=mydb", descriptors, options)

        assert record == {"Server": "localhost", "Port": 5432, "Database": "mydb"}

    def test_none_input_raises_type_error(self, descriptors):
        """Test that None is rejected."""
        with pytest.raises(TypeError):
            parse(None, descriptors)


class TestConversion:
    """Test value conversion per kind."""

    def test_invalid_integer(self, descriptors):
        """Test that a non-numeric integer value raises ConversionError."""
        with pytest.raises(ConversionError) as exc_info:
            parse("Server=localhost;Port=not-a-number", descriptors)

        error = exc_info.value
        assert error.external_key == "Port"
        assert error.field_name == "Port"
        assert error.value_kind == "integer"
        assert error.raw_value == "not-a-number"
        assert "Failed to convert value 'not-a-number'" in str(error)

    def test_conversion_error_precedes_required_check(self, descriptors):
        """Test that a conversion failure aborts before required keys are checked."""
        with pytest.raises(ConversionError):
            parse("Port=not-a-number", descriptors)

    def test_empty_integer_value_fails(self, descriptors):
        """Test that 'Port=' cannot convert to an integer."""
        with pytest.raises(ConversionError):
            parse("Server=x;Port=", descriptors)

    def test_signed_integer(self, descriptors):
        """Test that a leading sign is accepted."""
        assert parse("Server=x;Port=-1", descriptors)["Port"] == -1

    def test_integer_rejects_underscores(self, descriptors):
        """Test that Python-only literal forms are rejected."""
        with pytest.raises(ConversionError):
            parse("Server=x;Port=1_000", descriptors)

    def test_boolean_values(self):
        """Test true/false parsing in any case."""
        descriptors = [FieldDescriptor("Encrypt", value_kind=ValueKind.BOOLEAN)]

        assert parse("Encrypt=TRUE", descriptors)["Encrypt"] is True
        assert parse("Encrypt=false", descriptors)["Encrypt"] is False

    def test_invalid_boolean(self):
        """Test that non true/false text fails."""
        descriptors = [FieldDescriptor("Encrypt", value_kind=ValueKind.BOOLEAN)]

        with pytest.raises(ConversionError) as exc_info:
            parse("Encrypt=yes", descriptors)

        assert exc_info.value.value_kind == "boolean"

    def test_float_values(self):
        """Test float parsing."""
        descriptors = [FieldDescriptor("Ratio", value_kind=ValueKind.FLOAT)]

        assert parse("Ratio=0.25", descriptors)["Ratio"] == 0.25
        assert parse("Ratio=1e3", descriptors)["Ratio"] == 1000.0

        with pytest.raises(ConversionError):
            parse("Ratio=1,5", descriptors)

    @pytest.mark.parametrize("text", ["inf", "-Infinity", "+INF"])
    def test_infinite_float_values(self, text):
        """Test that infinities are accepted in any case."""
        descriptors = [FieldDescriptor("Ratio", value_kind=ValueKind.FLOAT)]

        assert math.isinf(parse(f"Ratio={text}", descriptors)["Ratio"])

    def test_nan_float_value(self):
        """Test that NaN is accepted."""
        descriptors = [FieldDescriptor("Ratio", value_kind=ValueKind.FLOAT)]

        assert math.isnan(parse("Ratio=NaN", descriptors)["Ratio"])


class TestParsePairs:
    """Test the raw key/value mapping."""

    def test_keys_are_normalized(self):
        """Test that case-insensitive mappings use folded keys."""
        assert parse_pairs("Server=a;SERVER=b") == {"server": "b"}

    def test_case_sensitive_keys_are_kept(self):
        """Test that case-sensitive mappings keep both spellings."""
        options = ParsingOptions(key_comparison=KeyComparison.CASE_SENSITIVE)

        assert parse_pairs("Server=a;SERVER=b", options) == {"Server": "a", "SERVER": "b"}


class TestFormatRecord:
    """Test serialization."""

    def test_basic_format(self, descriptors):
        """Test the canonical three-field example."""
        record = {"Server": "localhost", "Port": 5432, "Database": "mydb"}

        assert format_record(record, descriptors) == "Server=localhost;Port=5432;Database=mydb"

    def test_declaration_order_is_used(self, descriptors):
        """Test that output follows descriptor order, not record order."""
        record = {"Database": "mydb", "Port": 1, "Server": "s"}

        assert format_record(record, descriptors) == "Server=s;Port=1;Database=mydb"

    def test_empty_optional_fields_are_omitted(self, descriptors):
        """Test that None and empty strings are skipped."""
        record = {"Server": "localhost", "Port": None, "Database": ""}

        assert format_record(record, descriptors) == "Server=localhost"

    def test_missing_required_values_are_aggregated(self):
        """Test that every empty required field is reported at once."""
        descriptors = [
            FieldDescriptor("Server", required=True),
            FieldDescriptor("Port", value_kind=ValueKind.INTEGER),
            FieldDescriptor("Database", required=True),
        ]

        with pytest.raises(MissingRequiredValueError) as exc_info:
            format_record({"Server": None, "Port": 1, "Database": ""}, descriptors)

        assert exc_info.value.fields == ["Server", "Database"]
        assert isinstance(exc_info.value, FormatError)
        assert "Server (key: 'Server')" in str(exc_info.value)

    def test_delimiter_in_value_is_escaped(self, descriptors):
        """Test escaping of delimiters on output."""
        record = {"Server": "my;server", "Port": 1, "Database": ""}

        assert format_record(record, descriptors) == r"Server=my\;server;Port=1"

    def test_no_escaping_when_disabled(self, descriptors):
        """Test that escaping can be disabled for output."""
        options = ParsingOptions(enable_escaping=False)
        record = {"Server": "my;server"}

        assert format_record(record, descriptors, options) == "Server=my;server"

    def test_objects_are_read_by_attribute(self, descriptors):
        """Test formatting of plain objects."""
        class Settings:
            Server = "localhost"
            Port = 5432
            Database = None

        assert format_record(Settings(), descriptors) == "Server=localhost;Port=5432"

    def test_boolean_rendering(self):
        """Test that booleans render as lowercase text."""
        descriptors = [FieldDescriptor("Ssl", value_kind=ValueKind.BOOLEAN)]

        assert format_record({"Ssl": True}, descriptors) == "Ssl=true"


class TestRoundTrip:
    """Test that format then parse gives back the record."""

    def test_default_options(self, descriptors):
        """Test round trip with default options."""
        record = {"Server": "my;server", "Port": 5432, "Database": "data;base"}
        text = format_record(record, descriptors)

        assert parse(text, descriptors) == record

    def test_custom_delimiter(self, descriptors):
        """Test round trip with a custom delimiter and values containing it."""
        options = ParsingOptions(delimiter="|")
        record = {"Server": "a|b", "Port": 0, "Database": ""}
        text = format_record(record, descriptors, options)

        assert text == r"Server=a\|b|Port=0"
        assert parse(text, descriptors, options) == record

    def test_multi_character_delimiter(self, descriptors):
        """Test round trip with a two-character delimiter."""
        options = ParsingOptions(delimiter="&&")
        record = {"Server": "x&&y", "Port": 7, "Database": "db"}

        assert parse(format_record(record, descriptors, options), descriptors, options) == record

    def test_backslash_before_delimiter_does_not_survive(self, descriptors):
        """Test that a trailing backslash before a delimiter is lost on reparse."""
        record = {"Server": r"a\;b", "Port": 1, "Database": "db"}
        text = format_record(record, descriptors)

        assert text == r"Server=a\\;b;Port=1;Database=db"
        assert parse(text, descriptors)["Server"] == "a;b"

    def test_infinite_float(self):
        """Test round trip of non-finite floats."""
        descriptors = [FieldDescriptor("Ratio", value_kind=ValueKind.FLOAT)]
        text = format_record({"Ratio": float("-inf")}, descriptors)

        assert text == "Ratio=-inf"
        assert parse(text, descriptors) == {"Ratio": float("-inf")}

    def test_partial_delimiter_at_value_end_is_lost(self, descriptors):
        """Test that a value ending in part of a multi-character delimiter is cut short."""
        options = ParsingOptions(delimiter="||")
        record = {"Server": "a|", "Port": 1, "Database": ""}
        text = format_record(record, descriptors, options)

        assert text == "Server=a|||Port=1"
        assert parse(text, descriptors, options) == {"Server": "a", "Port": 0, "Database": ""}


class TestKeyValidation:
    """Test external key checks."""

    @pytest.mark.parametrize("key", ["Server=", " Server", "Server "])
    def test_unmatchable_keys_are_rejected(self, key):
        """Test that keys parsing could never produce are invalid."""
        with pytest.raises(DescriptorError) as exc_info:
            FieldDescriptor("server", external_key=key)

        assert exc_info.value.field_name == "server"

    def test_inner_whitespace_is_allowed(self):
        """Test keys such as 'User Id'."""
        assert FieldDescriptor("user_id", external_key="User Id").external_key == "User Id"

    def test_key_containing_delimiter(self):
        """Test that keys containing the delimiter are rejected on parse and format."""
        descriptors = [FieldDescriptor("host", external_key="Host|Name")]
        options = ParsingOptions(delimiter="|")

        with pytest.raises(DescriptorError):
            parse("Host=x", descriptors, options)
        with pytest.raises(DescriptorError):
            format_record({"host": "x"}, descriptors, options)

        assert parse("Host|Name=x", descriptors) == {"host": "x"}
