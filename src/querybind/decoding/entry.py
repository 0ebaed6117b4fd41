"""Decoder entry point -- multimap in, populated record out."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TypeVar

from querybind.core.config import DecoderSettings
from querybind.core.exceptions import UnknownParameterError, UnsupportedTypeError
from querybind.core.protocols import ValuesParser
from querybind.core.types import KnownKeys, Multimap, MultimapLike
from querybind.decoding.scalars import DEFAULT_REGISTRY, ScalarRegistry
from querybind.decoding.walker import walk_record
from querybind.models.descriptor import allocate_record, is_record, is_record_type, type_name

logger = logging.getLogger(__name__)

R = TypeVar("R")


def as_multimap(values: MultimapLike) -> Multimap:
    """Copy query input into a plain ``dict[str, list[str]]``.

    Accepts a mapping of key to value list, a multidict with ``getlist()``
    (Starlette/FastAPI ``QueryParams``, Werkzeug ``MultiDict``), and bare
    string values, which count as a single value.
    """
    getlist = getattr(values, "getlist", None)
    if callable(getlist):
        return {key: list(getlist(key)) for key in values.keys()}

    multimap: Multimap = {}
    for key, value in values.items():
        multimap[key] = [value] if isinstance(value, str) else list(value)
    return multimap


class QueryDecoder:
    """Decodes query multimaps into dataclass or pydantic records."""

    def __init__(
        self,
        settings: DecoderSettings | None = None,
        registry: ScalarRegistry | None = None,
    ) -> None:
        self._settings = settings or DecoderSettings()
        self._registry = registry or DEFAULT_REGISTRY
        if not self._settings.reject_unknown_keys:
            logger.warning("Unknown query parameters will be ignored (reject_unknown_keys=False)")

    @property
    def settings(self) -> DecoderSettings:
        return self._settings

    @property
    def registry(self) -> ScalarRegistry:
        return self._registry

    def decode(self, values: MultimapLike, target: R | type[R]) -> R:
        """Decode ``values`` into ``target`` and return the populated record.

        ``target`` is either a record instance, mutated in place, or a record
        class, instantiated from its defaults first.

        Raises:
            QueryDecodeError: Input rejected; ``status_code`` is 400.
        """
        multimap = as_multimap(values)

        if isinstance(target, type):
            if not is_record_type(target) and not isinstance(target, ValuesParser):
                raise UnsupportedTypeError(type_name(target))
            record = allocate_record(target) if is_record_type(target) else target()
        else:
            record = target

        if not multimap:
            return record

        if isinstance(record, ValuesParser):
            logger.debug("%s parses its own values", type(record).__name__)
            record.parse_values(multimap)
            return record

        if not is_record(record):
            raise UnsupportedTypeError(type_name(type(record)))

        logger.debug("Decoding %d query keys into %s", len(multimap), type(record).__name__)
        known_keys: KnownKeys = set()
        walk_record(
            known_keys, multimap, record,
            separator=self._settings.list_separator, registry=self._registry,
        )

        if self._settings.reject_unknown_keys:
            for key in multimap:
                if key not in known_keys:
                    logger.debug("Rejecting unknown query parameter %r", key)
                    raise UnknownParameterError(key)
        return record


@lru_cache(maxsize=1)
def default_decoder() -> QueryDecoder:
    return QueryDecoder()


def decode(values: MultimapLike, target: R | type[R]) -> R:
    """Decode with the default decoder (settings read from the environment)."""
    return default_decoder().decode(values, target)
