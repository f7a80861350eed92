"""
Error envelopes for unmatched routes and unhandled exceptions.
"""
import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from devops_demo.schemas.reports import ErrorResponse
from devops_demo.services.runtime import utc_now_iso

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND = "Route not found"
INTERNAL_SERVER_ERROR = "Internal server error"


def original_url(request: Request) -> str:
    """Request target as the client sent it: path plus query string."""
    path = request.url.path
    if request.url.query:
        return f"{path}?{request.url.query}"
    return path


def _envelope(status_code: int, body: ErrorResponse, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
        headers=headers,
    )


def not_found_response(request: Request) -> JSONResponse:
    return _envelope(
        404,
        ErrorResponse(error=ROUTE_NOT_FOUND, path=original_url(request), timestamp=utc_now_iso()),
    )


def internal_error_response(exc: Exception, include_details: bool) -> JSONResponse:
    return _envelope(
        500,
        ErrorResponse(
            error=INTERNAL_SERVER_ERROR,
            timestamp=utc_now_iso(),
            details=str(exc) if include_details else None,
        ),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unknown path and unknown method on a known path are both "no route"
    if exc.status_code in (404, 405):
        return not_found_response(request)

    return _envelope(
        exc.status_code,
        ErrorResponse(error=str(exc.detail), timestamp=utc_now_iso()),
        headers=getattr(exc, "headers", None),
    )


def register_error_handlers(app: FastAPI, include_details: bool):
    """
    Install the 404 handler and the catch-all 500 boundary.

    The boundary is an HTTP middleware around the whole routing stack, so
    any exception escaping a handler ends up as the 500 envelope.
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    @app.middleware("http")
    async def error_boundary(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as e:
            logger.exception(
                "Unhandled error",
                extra={"method": request.method, "path": original_url(request), "error": str(e)},
            )
            return internal_error_response(e, include_details)
