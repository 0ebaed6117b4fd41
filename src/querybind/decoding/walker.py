"""Struct walker -- maps a record's declared fields onto query keys."""

from __future__ import annotations

import logging
from typing import Any

from querybind.core.exceptions import UnsupportedTypeError
from querybind.core.types import KnownKeys, Multimap
from querybind.decoding.fields import decode_field
from querybind.decoding.scalars import DEFAULT_REGISTRY, ScalarRegistry
from querybind.models.descriptor import (
    FieldDescriptor,
    FieldKind,
    allocate_record,
    describe_record,
    is_record_type,
    type_name,
)

logger = logging.getLogger(__name__)


def ensure_embedded(record: Any, field: FieldDescriptor) -> Any:
    """Return the embedded sub-record, allocating it first when unset."""
    if not is_record_type(field.annotation):
        raise UnsupportedTypeError(type_name(field.annotation), key=field.name)
    sub = getattr(record, field.name)
    if sub is None:
        sub = allocate_record(field.annotation, key=field.name)
        setattr(record, field.name, sub)
    return sub


def walk_record(
    known_keys: KnownKeys,
    values: Multimap,
    record: Any,
    *,
    separator: str = ",",
    registry: ScalarRegistry = DEFAULT_REGISTRY,
) -> None:
    """Decode every declared field of ``record`` found in ``values``, in place.

    Each consumed key is added to ``known_keys``. Embedded sub-records share
    the same key scope and are walked recursively. The first error aborts the
    walk; fields assigned before it keep their new values.
    """
    for field in describe_record(type(record)):
        if field.kind is FieldKind.SKIPPED:
            continue

        if field.kind is FieldKind.EMBEDDED:
            sub = ensure_embedded(record, field)
            logger.debug("Walking embedded %s.%s", type(record).__name__, field.name)
            walk_record(known_keys, values, sub, separator=separator, registry=registry)
            continue

        known_keys.add(field.key)
        if field.key in values:
            value = decode_field(field, values[field.key], separator=separator, registry=registry)
            setattr(record, field.name, value)
