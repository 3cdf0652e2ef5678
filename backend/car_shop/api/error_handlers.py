"""Error Handlers — global exception handlers rendering the {"error": message} envelope.

Invariants:
    - CarShopError → its own status and message
    - SQLAlchemyError / OSError → translate_store_error(): 400 with the store
      message, 404 "Record not found", or 500 "Internal server error"
    - RequestValidationError → 400 with field-level summary
    - Exception (catch-all) → 500, never leaks internal details
    - 5xx are logged with traceback; 4xx at warning level without one

Design Decisions:
    - Single point of classification: routes and the repository never catch
      store errors, they surface here
    - OSError is routed through the store handler because a refused or timed
      out connection reaches us unwrapped from the asyncpg driver
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from car_shop.core.errors import CarShopError, InternalError
from car_shop.infrastructure.store_errors import translate_store_error

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_car_shop_error_handler(app)
    _register_store_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _render(request: Request, exc: CarShopError, cause: Exception) -> JSONResponse:
    extra = {
        "error_code": exc.code,
        "path": request.url.path,
        "method": request.method,
        "status_code": exc.http_status,
    }
    if exc.http_status >= 500:
        logger.error(
            f"{exc.code} on {request.method} {request.url.path}: {cause}",
            extra=extra, exc_info=cause,
        )
    else:
        logger.warning(f"{exc.code}: {exc.message}", extra=extra)
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_car_shop_error_handler(app: FastAPI) -> None:
    """Register car shop domain error handler."""

    @app.exception_handler(CarShopError)
    async def car_shop_error_handler(request: Request, exc: CarShopError):
        return _render(request, exc, exc)


def _register_store_error_handler(app: FastAPI) -> None:
    """Register relational store error handler."""

    async def store_error_handler(request: Request, exc: Exception):
        return _render(request, translate_store_error(exc), exc)

    app.add_exception_handler(SQLAlchemyError, store_error_handler)
    app.add_exception_handler(OSError, store_error_handler)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register framework HTTP error handler (unknown route, wrong method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all; never leaks internal details."""
        return _render(request, InternalError(), exc)


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build the validation error envelope."""
    problems = "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    )
    return {"error": f"Invalid request data: {problems}"}
