"""Query decoding engine: entry point, struct walker, field and scalar decoders."""

from __future__ import annotations

from querybind.core.config import DecoderSettings
from querybind.decoding.entry import QueryDecoder, as_multimap, decode, default_decoder
from querybind.decoding.scalars import ScalarRegistry


def create_decoder(
    settings: DecoderSettings | None = None,
    registry: ScalarRegistry | None = None,
) -> QueryDecoder:
    """Create a decoder wired from settings and an optional extended registry.

    Returns:
        QueryDecoder using ``settings`` (environment defaults when omitted).
    """
    if settings is None:
        settings = DecoderSettings()
    return QueryDecoder(settings=settings, registry=registry or ScalarRegistry.default())


__all__ = ["QueryDecoder", "ScalarRegistry", "as_multimap", "create_decoder", "decode", "default_decoder"]
