"""Decode parsed query-string multimaps into typed records."""

from __future__ import annotations

from querybind.core.config import DecoderSettings
from querybind.core.exceptions import (
    ConversionError,
    MalformedBooleanError,
    MissingValueError,
    MultipleValuesError,
    QueryBindError,
    QueryDecodeError,
    RequiredFieldsError,
    UnknownParameterError,
    UnsupportedTypeError,
)
from querybind.core.protocols import StringParser, StringsParser, TextParser, ValuesParser
from querybind.decoding import QueryDecoder, ScalarRegistry, create_decoder, decode
from querybind.models.declarations import DERIVE, SKIP, embedded, query_field, skip_field

__all__ = [
    "DERIVE",
    "SKIP",
    "ConversionError",
    "DecoderSettings",
    "MalformedBooleanError",
    "MissingValueError",
    "MultipleValuesError",
    "QueryBindError",
    "QueryDecodeError",
    "QueryDecoder",
    "RequiredFieldsError",
    "ScalarRegistry",
    "StringParser",
    "StringsParser",
    "TextParser",
    "UnknownParameterError",
    "UnsupportedTypeError",
    "ValuesParser",
    "create_decoder",
    "decode",
    "embedded",
    "query_field",
    "skip_field",
]
