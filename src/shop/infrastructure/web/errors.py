"""Maps domain exceptions to HTTP responses.

The domain raises typed exceptions without any notion of status codes;
this module is the single place where a kind of failure becomes a status.
Messages are passed through verbatim.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shop.domain.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    StorageError,
    ValidationError,
)
from shop.infrastructure.web.schemas import failure
from shop.utils.logging import get_logger

logger = get_logger(__name__)

STATUS_BY_ERROR: dict[type[DomainException], int] = {
    ValidationError: 400,
    EntityNotFoundError: 404,
    ConflictError: 409,
    StorageError: 500,
}


def status_for(exc: DomainException) -> int:
    for error_type, status in STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status
    return 500


def register_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(DomainException)
    async def domain_error(_request: Request, exc: DomainException) -> JSONResponse:
        status = status_for(exc)
        if status >= 500:
            logger.error(f"{type(exc).__name__}: {exc}")
        extra = {"fields": list(exc.fields)} if isinstance(exc, ValidationError) and exc.fields else {}
        return JSONResponse(status_code=status, content=failure(str(exc), **extra))

    @app.exception_handler(RequestValidationError)
    async def malformed_request(_request: Request, exc: RequestValidationError) -> JSONResponse:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}"
            for err in exc.errors()
        )
        return JSONResponse(status_code=400, content=failure(f"Malformed request: {problems}"))

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        message = str(exc.detail)
        if exc.status_code == 404 and message == "Not Found":
            message = f"Route not found: {request.method} {request.url.path}"
        return JSONResponse(status_code=exc.status_code, content=failure(message))

    @app.exception_handler(Exception)
    async def unexpected_error(_request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error while processing request")
        return JSONResponse(status_code=500, content=failure(str(exc) or "Internal server error"))
