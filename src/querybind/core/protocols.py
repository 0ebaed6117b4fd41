"""Protocol interfaces for querybind decoding hooks.

A record or field type opts into custom decoding by implementing one of these
Protocols -- structural typing, no inheritance required, checked with
isinstance() at decode time.

Field-level hooks are classmethods checked against the field's declared type;
they return the new field value. A plain instance method passes the
isinstance() check but is rejected at decode time with UnsupportedTypeError.
The record-level hook is an instance method that mutates the record in place.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from querybind.core.types import Multimap


# ---------------------------------------------------------------------------
# Record level
# ---------------------------------------------------------------------------

@runtime_checkable
class ValuesParser(Protocol):
    """Record consumes the whole multimap itself, bypassing field walking."""

    def parse_values(self, values: Multimap) -> None: ...


# ---------------------------------------------------------------------------
# Field level: multi-value
# ---------------------------------------------------------------------------

@runtime_checkable
class StringsParser(Protocol):
    """Field type parses the raw value list of its key.

    ``parse_strings`` must be a classmethod: it is called on the type.
    """

    def parse_strings(self, values: list[str]) -> Any: ...


# ---------------------------------------------------------------------------
# Field level: single value
# ---------------------------------------------------------------------------

@runtime_checkable
class StringParser(Protocol):
    """Field type parses one raw string.

    ``parse_string`` must be a classmethod: it is called on the type.
    """

    def parse_string(self, raw: str) -> Any: ...


@runtime_checkable
class TextParser(Protocol):
    """Standard text deserialization (date, datetime, time and look-alikes).

    Like ``date.fromisoformat``, the hook is a classmethod.
    """

    def fromisoformat(self, raw: str) -> Any: ...
