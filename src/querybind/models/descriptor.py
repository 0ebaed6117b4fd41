"""Field descriptors -- the per-field view the walker decodes against.

Descriptors are computed from a record's static declarations each time a
record is walked: dataclass ``field(metadata=...)`` or pydantic
``Field(json_schema_extra=...)``.
"""

from __future__ import annotations

import dataclasses
import types
import typing
from collections.abc import Mapping
from enum import StrEnum
from typing import Any, Optional, Union

from pydantic import BaseModel

from querybind.core.exceptions import RequiredFieldsError
from querybind.core.protocols import StringsParser
from querybind.models.declarations import DERIVE, EMBED_KEY, SKIP, TAG_KEY
from querybind.utils.naming import camel_to_snake


class FieldKind(StrEnum):
    STRING = "string"
    INTEGER = "integer"
    FLAG = "flag"
    LIST = "list"
    CUSTOM = "custom"  # type parses its raw value list itself
    EMBEDDED = "embedded"
    SKIPPED = "skipped"
    OTHER = "other"  # single value, resolved by the scalar decoder


class FieldDescriptor(BaseModel):
    """Resolved view of one declared record field."""

    model_config = {"frozen": True}

    name: str
    kind: FieldKind
    key: Optional[str] = None  # None for skipped and embedded fields
    annotation: Any = None  # declared type, Optional[...] unwrapped
    optional: bool = False


def is_record_type(tp: Any) -> bool:
    """True for dataclass types and pydantic model classes."""
    if not isinstance(tp, type):
        return False
    return dataclasses.is_dataclass(tp) or issubclass(tp, BaseModel)


def is_record(obj: Any) -> bool:
    return is_record_type(type(obj))


def required_fields(tp: type) -> list[str]:
    """Names of the record fields that have no default."""
    if issubclass(tp, BaseModel):
        return [name for name, info in tp.model_fields.items() if info.is_required()]
    return [
        f.name for f in dataclasses.fields(tp)
        if f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
    ]


def allocate_record(tp: type, key: Optional[str] = None) -> Any:
    """Fresh empty instance of a record type, built from its defaults.

    Raises:
        RequiredFieldsError: Some field has no default to start from.
    """
    missing = required_fields(tp)
    if missing:
        raise RequiredFieldsError(type_name(tp), missing, key=key)
    if issubclass(tp, BaseModel):
        return tp.model_construct()
    return tp()


def type_name(tp: Any) -> str:
    if isinstance(tp, type):
        if tp.__module__ == "builtins":
            return tp.__qualname__
        return f"{tp.__module__}.{tp.__qualname__}"
    return repr(tp)


def unwrap_optional(tp: Any) -> tuple[Any, bool]:
    """Strip ``None`` from a union; return the remaining type and whether it was optional."""
    if typing.get_origin(tp) not in (Union, types.UnionType):
        return tp, False
    args = typing.get_args(tp)
    if type(None) not in args:
        return tp, False
    rest = tuple(a for a in args if a is not type(None))
    if len(rest) == 1:
        return rest[0], True
    return Union[rest], True


def list_element_type(tp: Any) -> Any:
    """Element type of ``list[X]``, or None when the list is unparameterized."""
    args = typing.get_args(tp)
    return args[0] if args else None


def classify(tp: Any) -> FieldKind:
    if isinstance(tp, type) and isinstance(tp, StringsParser):
        return FieldKind.CUSTOM
    if tp is list or typing.get_origin(tp) is list:
        return FieldKind.LIST
    if not isinstance(tp, type):
        return FieldKind.OTHER
    if issubclass(tp, bool):
        return FieldKind.FLAG
    if issubclass(tp, int):
        return FieldKind.INTEGER
    if issubclass(tp, str):
        return FieldKind.STRING
    return FieldKind.OTHER


def _declared_fields(record_type: type) -> list[tuple[str, Any, Mapping[str, Any]]]:
    if issubclass(record_type, BaseModel):
        declared = []
        for name, info in record_type.model_fields.items():
            extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
            declared.append((name, info.annotation, extra))
        return declared

    hints = typing.get_type_hints(record_type)
    return [(f.name, hints.get(f.name, f.type), f.metadata) for f in dataclasses.fields(record_type)]


def describe_field(name: str, annotation: Any, metadata: Mapping[str, Any]) -> FieldDescriptor:
    tp, optional = unwrap_optional(annotation)
    tag = metadata.get(TAG_KEY)

    if tag is not None:
        if tag in ("", SKIP):
            return FieldDescriptor(name=name, kind=FieldKind.SKIPPED, annotation=tp, optional=optional)
        key = camel_to_snake(name) if tag == DERIVE else tag
    elif metadata.get(EMBED_KEY):
        return FieldDescriptor(name=name, kind=FieldKind.EMBEDDED, annotation=tp, optional=optional)
    else:
        key = camel_to_snake(name)

    return FieldDescriptor(name=name, kind=classify(tp), key=key, annotation=tp, optional=optional)


def describe_record(record_type: type) -> list[FieldDescriptor]:
    """Descriptors for every declared field of a record type, in declaration order."""
    return [describe_field(*declared) for declared in _declared_fields(record_type)]
