"""Field value decoder -- one field's raw value list to its typed value."""

from __future__ import annotations

from typing import Any

from querybind.core.exceptions import (
    ConversionError,
    MalformedBooleanError,
    MissingValueError,
    MultipleValuesError,
)
from querybind.decoding.scalars import DEFAULT_REGISTRY, ScalarRegistry, class_hook, decode_scalar
from querybind.models.descriptor import FieldDescriptor, FieldKind, list_element_type


def single_value(key: str, values: list[str]) -> str:
    if not values:
        raise MissingValueError(key)
    if len(values) != 1:
        raise MultipleValuesError(key)
    return values[0]


def decode_flag(key: str, values: list[str]) -> bool:
    if len(values) != 1 or values[0] != "":
        raise MalformedBooleanError(key)
    return True


def decode_list(
    key: str,
    element_type: Any,
    values: list[str],
    *,
    separator: str = ",",
    registry: ScalarRegistry = DEFAULT_REGISTRY,
) -> list[Any]:
    """Split the single raw value on ``separator`` and decode every element.

    There is no escaping, and an empty raw value still yields one element
    (the decoded empty string), never an empty list.
    """
    raw = single_value(key, values)
    return [
        decode_scalar(f"{key}[{i}]", element_type, part, registry=registry)
        for i, part in enumerate(raw.split(separator))
    ]


def decode_field(
    field: FieldDescriptor,
    values: list[str],
    *,
    separator: str = ",",
    registry: ScalarRegistry = DEFAULT_REGISTRY,
) -> Any:
    """Decode the values found under ``field.key`` into the field's type."""
    key = field.key
    if field.kind is FieldKind.CUSTOM:
        parse_strings = class_hook(key, field.annotation, "parse_strings")
        try:
            return parse_strings(list(values))
        except Exception as exc:
            raise ConversionError(key, str(exc)) from exc

    if field.kind is FieldKind.FLAG:
        return decode_flag(key, values)

    if field.kind is FieldKind.LIST:
        return decode_list(
            key, list_element_type(field.annotation), values,
            separator=separator, registry=registry,
        )

    # integer, string and anything else: exactly one value
    return decode_scalar(key, field.annotation, single_value(key, values), registry=registry)
