"""Scalar decoder -- one raw string to one typed value."""

from __future__ import annotations

import inspect
import re
import types
import uuid
from datetime import timedelta
from typing import Any, NamedTuple

from querybind.core.exceptions import ConversionError, UnsupportedTypeError
from querybind.core.protocols import StringParser, TextParser
from querybind.core.types import ScalarParser
from querybind.models.descriptor import type_name
from querybind.utils.durations import parse_duration

_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)
_CANONICAL_UUID = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"
_UUID = re.compile(
    rf"(?:urn:uuid:)?({_CANONICAL_UUID})|\{{({_CANONICAL_UUID})\}}|([0-9a-f]{{32}})",
    re.ASCII | re.IGNORECASE,
)
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def parse_uuid(raw: str) -> uuid.UUID:
    """Parse the canonical, braced, ``urn:uuid:`` and 32-hex-digit UUID forms."""
    match = _UUID.fullmatch(raw)
    if match is None:
        raise ValueError(f"invalid UUID {raw!r}")
    return uuid.UUID(match.group(match.lastindex))


class RegisteredScalar(NamedTuple):
    parser: ScalarParser
    message: str  # reported when the parser raises ValueError


class ScalarRegistry:
    """Special scalar types dispatched by exact type identity.

    Applications extend their own copy; the module-level default stays as built.

    Example:
        registry = ScalarRegistry.default()
        registry.register(Decimal, Decimal, "must be a decimal")
        decoder = QueryDecoder(registry=registry)
    """

    def __init__(self, entries: dict[type, RegisteredScalar] | None = None) -> None:
        self._entries: dict[type, RegisteredScalar] = dict(entries or {})

    @classmethod
    def default(cls) -> ScalarRegistry:
        return cls({
            timedelta: RegisteredScalar(parse_duration, "must be a time duration"),
            uuid.UUID: RegisteredScalar(parse_uuid, "must be a UUID"),
        })

    def register(self, tp: type, parser: ScalarParser, message: str) -> None:
        self._entries[tp] = RegisteredScalar(parser, message)

    def lookup(self, tp: Any) -> RegisteredScalar | None:
        try:
            return self._entries.get(tp)
        except TypeError:  # unhashable annotation
            return None

    def __contains__(self, tp: object) -> bool:
        return self.lookup(tp) is not None


DEFAULT_REGISTRY = ScalarRegistry.default()


def class_hook(key: str, tp: type, name: str) -> Any:
    """Return hook ``name`` of ``tp``, callable without an instance.

    Field hooks are classmethods (or staticmethods). A plain instance method
    satisfies the runtime Protocol check but cannot be called on the type.
    """
    if isinstance(inspect.getattr_static(tp, name), types.FunctionType):
        raise UnsupportedTypeError(type_name(tp), key=key)
    return getattr(tp, name)


def _run_hook(key: str, hook: ScalarParser, raw: str) -> Any:
    try:
        return hook(raw)
    except Exception as exc:
        raise ConversionError(key, str(exc)) from exc


def parse_integer(key: str, tp: type, raw: str) -> int:
    if not _INTEGER.fullmatch(raw):
        raise ConversionError(key, "must be an integer")
    value = int(raw, 10)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ConversionError(key, "must be an integer")
    if tp is int:
        return value
    return _run_hook(key, tp, value)


def decode_scalar(key: str, tp: Any, raw: str, *, registry: ScalarRegistry = DEFAULT_REGISTRY) -> Any:
    """Decode ``raw`` into a value of type ``tp``.

    First match wins: ``parse_string`` hook, ``fromisoformat`` text
    deserialization, built-in kinds (bool, str, int), the special-type
    registry. Anything else is unsupported.

    Raises:
        ConversionError: ``raw`` is not a valid value of ``tp``.
        UnsupportedTypeError: ``tp`` has no decoder.
    """
    if isinstance(tp, type):
        if isinstance(tp, StringParser):
            return _run_hook(key, class_hook(key, tp, "parse_string"), raw)
        if isinstance(tp, TextParser):
            return _run_hook(key, class_hook(key, tp, "fromisoformat"), raw)

        if issubclass(tp, bool):
            # presence-only flag, value shape already checked by the field decoder
            return True
        if issubclass(tp, str):
            return raw if tp is str else _run_hook(key, tp, raw)
        if issubclass(tp, int):
            return parse_integer(key, tp, raw)

    entry = registry.lookup(tp)
    if entry is not None:
        try:
            return entry.parser(raw)
        except ValueError as exc:
            raise ConversionError(key, entry.message) from exc

    raise UnsupportedTypeError(type_name(tp), key=key)
