"""Tests for field descriptors and declaration helpers."""

from __future__ import annotations

import uuid
from dataclasses import fields, make_dataclass
from datetime import timedelta
from typing import Optional, Union

import pytest

from querybind.core.exceptions import RequiredFieldsError
from querybind.models.declarations import SKIP, embedded, query_field, skip_field
from querybind.models.descriptor import (
    FieldKind,
    allocate_record,
    classify,
    describe_record,
    is_record_type,
    required_fields,
    type_name,
    unwrap_optional,
)
from tests.fakes import (
    Cursor,
    Paging,
    PydanticRequired,
    PydanticSearch,
    RequiredName,
    SearchParams,
    Span,
)


class TestDescribeRecord:
    def test_dataclass_descriptors_in_declaration_order(self):
        descriptors = describe_record(SearchParams)
        assert [d.name for d in descriptors] == [
            "name", "tags", "verbose", "count", "internal_note",
            "userID", "alias", "sortOrder", "paging",
        ]

    def test_dataclass_keys_and_kinds(self):
        by_name = {d.name: d for d in describe_record(SearchParams)}
        assert (by_name["name"].key, by_name["name"].kind) == ("name", FieldKind.STRING)
        assert by_name["tags"].kind is FieldKind.LIST
        assert by_name["verbose"].kind is FieldKind.FLAG
        assert by_name["count"].kind is FieldKind.SKIPPED
        assert by_name["count"].key is None
        assert by_name["internal_note"].kind is FieldKind.SKIPPED
        assert (by_name["userID"].key, by_name["userID"].kind) == ("user_id", FieldKind.INTEGER)
        assert by_name["userID"].optional is True
        assert by_name["alias"].key == "q"
        assert by_name["sortOrder"].key == "sort_order"
        assert by_name["paging"].kind is FieldKind.EMBEDDED
        assert by_name["paging"].annotation is Paging

    def test_pydantic_descriptors(self):
        by_name = {d.name: d for d in describe_record(PydanticSearch)}
        assert by_name["limit"].key == "n"
        assert by_name["secret"].kind is FieldKind.SKIPPED
        assert by_name["cursor"].kind is FieldKind.EMBEDDED
        assert by_name["cursor"].annotation is Cursor
        assert by_name["labels"].kind is FieldKind.LIST
        assert by_name["debug"].kind is FieldKind.FLAG


class TestClassify:
    def test_kinds(self):
        assert classify(str) is FieldKind.STRING
        assert classify(int) is FieldKind.INTEGER
        assert classify(bool) is FieldKind.FLAG
        assert classify(list[int]) is FieldKind.LIST
        assert classify(Span) is FieldKind.CUSTOM
        assert classify(timedelta) is FieldKind.OTHER
        assert classify(uuid.UUID) is FieldKind.OTHER
        assert classify(Union[int, str]) is FieldKind.OTHER


class TestUnwrapOptional:
    def test_optional(self):
        assert unwrap_optional(Optional[int]) == (int, True)

    def test_pipe_union(self):
        assert unwrap_optional(int | None) == (int, True)

    def test_plain_type(self):
        assert unwrap_optional(int) == (int, False)

    def test_union_without_none(self):
        assert unwrap_optional(Union[int, str]) == (Union[int, str], False)

    def test_wider_optional_union(self):
        assert unwrap_optional(Union[int, str, None]) == (Union[int, str], True)


class TestRecords:
    def test_record_types(self):
        assert is_record_type(Paging)
        assert is_record_type(PydanticSearch)
        assert not is_record_type(int)
        assert not is_record_type(Paging())

    def test_allocate_dataclass(self):
        assert allocate_record(Paging) == Paging(page=0, page_size=20)

    def test_allocate_pydantic_uses_defaults(self):
        record = allocate_record(PydanticSearch)
        assert record.limit == 10
        assert record.cursor is None

    def test_required_fields(self):
        assert required_fields(RequiredName) == ["name"]
        assert required_fields(PydanticRequired) == ["name"]
        assert required_fields(Paging) == []
        assert required_fields(PydanticSearch) == []

    def test_allocate_with_required_fields_names_key(self):
        with pytest.raises(RequiredFieldsError) as exc_info:
            allocate_record(RequiredName, key="inner")
        assert exc_info.value.key == "inner"
        assert exc_info.value.fields == ["name"]

    def test_type_names(self):
        assert type_name(float) == "float"
        assert type_name(uuid.UUID) == "uuid.UUID"


class TestDeclarations:
    def test_query_field_metadata(self):
        Record = make_dataclass("Record", [
            ("a", int, query_field("alpha", default=0)),
            ("b", int, skip_field(default=0)),
            ("c", Optional[Paging], embedded()),
        ])
        meta = {f.name: dict(f.metadata) for f in fields(Record)}
        assert meta["a"] == {"query": "alpha"}
        assert meta["b"] == {"query": SKIP}
        assert meta["c"] == {"embedded": True}
        assert Record().c is None

    def test_embedded_with_type_builds_default(self):
        Record = make_dataclass("Record", [("p", Paging, embedded(Paging))])
        assert Record().p == Paging()
