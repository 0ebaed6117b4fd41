"""Shared test doubles -- record types covering every declaration shape and hook."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any, Optional

from pydantic import BaseModel, Field

from querybind.core.types import Multimap
from querybind.models.declarations import DERIVE, embedded, query_field, skip_field


# ---------------------------------------------------------------------------
# Plain records
# ---------------------------------------------------------------------------

@dataclass
class Paging:
    page: int = 0
    page_size: int = query_field("limit", default=20)


@dataclass
class SearchParams:
    name: str = ""
    tags: list[str] = field(default_factory=list)
    verbose: bool = False
    count: int = skip_field(default=0)
    internal_note: str = query_field("", default="")
    userID: Optional[int] = None
    alias: str = query_field("q", default="")
    sortOrder: str = query_field(DERIVE, default="")
    paging: Paging = embedded(Paging)


@dataclass
class Typed:
    timeout: timedelta = timedelta(0)
    id: Optional[uuid.UUID] = None
    ids: list[int] = field(default_factory=list)
    big: int = 0


@dataclass
class Cursor:
    after: str = ""


@dataclass
class LazyEmbed:
    """Embedded sub-record left unset until the first decode."""

    cursor: Optional[Cursor] = embedded()
    filter: str = ""


@dataclass
class Ratio:
    ratio: float = 0.0


@dataclass
class NamespacedPaging:
    paging: Paging = field(default_factory=Paging)


@dataclass
class TaggedEmbed:
    paging: Paging = embedded(Paging, metadata={"query": "pg"})


@dataclass
class RequiredName:
    """No default for ``name``: cannot be allocated empty."""

    name: str
    limit: int = 0


@dataclass
class EmbedsRequired:
    inner: Optional[RequiredName] = embedded()
    filter: str = ""


# ---------------------------------------------------------------------------
# Field-level hooks
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Point:
    x: int
    y: int

    @classmethod
    def parse_string(cls, raw: str) -> Point:
        x, sep, y = raw.partition(":")
        if not sep:
            raise ValueError("point must look like x:y")
        return cls(int(x), int(y))


@dataclass(frozen=True)
class Span:
    low: int
    high: int

    @classmethod
    def parse_strings(cls, values: list[str]) -> Span:
        if len(values) != 2:
            raise ValueError("span needs exactly two values")
        low, high = (int(v) for v in values)
        return cls(low, high)


@dataclass(frozen=True)
class Pair:
    """Indexes past the end on input without a colon."""

    right: str

    @classmethod
    def parse_string(cls, raw: str) -> Pair:
        return cls(raw.split(":")[1])


@dataclass(frozen=True)
class Bounds:
    """Looks its values up by name; unknown names raise KeyError."""

    low: int
    high: int

    _NAMED = {"min": -(2**63), "max": 2**63 - 1}

    @classmethod
    def parse_strings(cls, values: list[str]) -> Bounds:
        low, high = (cls._NAMED[v] for v in values)
        return cls(low, high)


@dataclass
class Hooked:
    at: Optional[Point] = None
    points: list[Point] = field(default_factory=list)
    span: Optional[Span] = None
    day: Optional[date] = None


@dataclass
class Fragile:
    pair: Optional[Pair] = None
    bounds: Optional[Bounds] = None


# ---------------------------------------------------------------------------
# Record-level hook
# ---------------------------------------------------------------------------

class RawValues:
    """Not a dataclass: takes the whole multimap itself."""

    def __init__(self) -> None:
        self.seen: Multimap | None = None

    def parse_values(self, values: Multimap) -> None:
        if "explode" in values:
            raise ValueError("explode requested")
        self.seen = values


# ---------------------------------------------------------------------------
# Pydantic records
# ---------------------------------------------------------------------------

class PydanticSearch(BaseModel):
    name: str = ""
    limit: int = Field(default=10, json_schema_extra={"query": "n"})
    secret: str = Field(default="", json_schema_extra={"query": "-"})
    cursor: Optional[Cursor] = Field(default=None, json_schema_extra={"embedded": True})
    labels: list[str] = Field(default_factory=list)
    debug: bool = False


class PydanticRequired(BaseModel):
    name: str
    limit: int = 0


class PydanticEmbedsRequired(BaseModel):
    inner: Optional[PydanticRequired] = Field(default=None, json_schema_extra={"embedded": True})


def snapshot(record: Any) -> dict[str, Any]:
    """Shallow attribute copy for before/after comparisons."""
    return dict(vars(record))
