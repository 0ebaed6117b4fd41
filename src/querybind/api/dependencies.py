"""FastAPI dependency that decodes the request query string into a record."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from fastapi import HTTPException, Request

from querybind.core.exceptions import QueryDecodeError
from querybind.decoding.entry import QueryDecoder, default_decoder

R = TypeVar("R")


def query_record(record_type: type[R], decoder: QueryDecoder | None = None) -> Callable[[Request], R]:
    """Build a dependency returning ``record_type`` decoded from ``request.query_params``.

    Decode failures become ``HTTPException`` with the error's status code.

    Example:
        @router.get("/search")
        async def search(params: SearchParams = Depends(query_record(SearchParams))): ...
    """

    def dependency(request: Request) -> R:
        active = decoder or default_decoder()
        try:
            return active.decode(request.query_params, record_type)
        except QueryDecodeError as exc:
            raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    return dependency
