"""Field declaration helpers for dataclass records.

Pydantic records declare the same metadata through
``Field(json_schema_extra={"query": "..."})`` and
``Field(json_schema_extra={"embedded": True})``.
"""

from __future__ import annotations

import dataclasses
from typing import Any

SKIP = "-"  # field is never read from the query
DERIVE = "*"  # key derived from the field name

TAG_KEY = "query"
EMBED_KEY = "embedded"


def query_field(key: str = DERIVE, **kwargs: Any) -> Any:
    """Dataclass field with an explicit query key.

    Example:
        page_size: int = query_field("limit", default=20)
    """
    metadata = {**kwargs.pop("metadata", {}), TAG_KEY: key}
    return dataclasses.field(metadata=metadata, **kwargs)


def skip_field(**kwargs: Any) -> Any:
    """Dataclass field ignored by the decoder."""
    return query_field(SKIP, **kwargs)


def embedded(record_type: type | None = None, **kwargs: Any) -> Any:
    """Dataclass field whose sub-record keys are exposed at the parent's scope.

    With ``record_type`` the sub-record is built eagerly as the default;
    without it the field defaults to ``None`` and is allocated on first decode.
    """
    metadata = {**kwargs.pop("metadata", {}), EMBED_KEY: True}
    if record_type is not None:
        kwargs.setdefault("default_factory", record_type)
    elif "default_factory" not in kwargs:
        kwargs.setdefault("default", None)
    return dataclasses.field(metadata=metadata, **kwargs)
