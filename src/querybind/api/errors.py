"""Map querybind decode errors onto FastAPI responses."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from querybind.core.exceptions import QueryDecodeError


async def query_decode_error_handler(request: Request, exc: QueryDecodeError) -> JSONResponse:
    body = {"detail": exc.message}
    if exc.key is not None:
        body["key"] = exc.key
    return JSONResponse(status_code=exc.status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Answer uncaught ``QueryDecodeError`` with its status code and message."""
    app.add_exception_handler(QueryDecodeError, query_decode_error_handler)
