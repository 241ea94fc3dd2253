"""
Centralized error handling.

Every error forwarded out of a route or dependency resolves here into a
client-visible response. Form flows never reach these handlers: they
answer with a flash-and-redirect instead (see ``FormRedirect``).
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from payload_guard.api.models import ErrorResponse
from payload_guard.config.settings import get_settings
from payload_guard.domain.exceptions import HandlerError, PayloadValidationError
from payload_guard.validation import failures_from_errors

logger = logging.getLogger(__name__)

NOT_FOUND_BODY = "404 not found"


class FormRedirect(Exception):
    """Abort the request with a redirect to ``path`` (flash already queued)."""

    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.path = path


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the JSON failure body shared by every error handler."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(status_code=status_code, message=message).model_dump(by_alias=True),
    )


async def handle_errors(request: Request, exc: HandlerError) -> JSONResponse:
    """
    Render a forwarded HandlerError as ``{"statusCode", "message"}``.

    A missing status code defaults to 500 and is written back onto the
    error so later consumers see the status that was sent.
    """
    if exc.status_code is None:
        exc.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)

    return error_response(exc.status_code, exc.message)


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Route FastAPI's native body validation errors through handle_errors."""
    details = failures_from_errors(exc.errors(), strip_prefix=("body",))
    return await handle_errors(request, PayloadValidationError(details))


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Give framework HTTP errors (405, ...) the same JSON shape."""
    return await handle_errors(request, HandlerError(str(exc.detail), status_code=exc.status_code))


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    """Last resort for exceptions nothing else claimed."""
    logger.error(
        "Unhandled exception on %s %s: %s", request.method, request.url.path, exc, exc_info=exc
    )
    message = "Internal Server Error"
    settings = getattr(request.app.state, "settings", None) or get_settings()
    if settings.debug:
        message = f"{message}: {exc}"
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


async def handle_form_redirect(request: Request, exc: FormRedirect) -> RedirectResponse:
    return RedirectResponse(exc.path, status_code=status.HTTP_303_SEE_OTHER)


async def not_found(request: Request, exc: Exception) -> PlainTextResponse:
    """No route matched."""
    return PlainTextResponse(NOT_FOUND_BODY, status_code=status.HTTP_404_NOT_FOUND)


def register_error_handlers(app: FastAPI) -> None:
    """Install the error handlers on ``app``."""
    app.add_exception_handler(HandlerError, handle_errors)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(FormRedirect, handle_form_redirect)
    app.add_exception_handler(status.HTTP_404_NOT_FOUND, not_found)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected)
