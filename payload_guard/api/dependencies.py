"""
FastAPI dependencies - Request validation stages.

This module provides Depends() factories that validate the request body
before a route runs. Two failure policies are offered and each route
picks one explicitly:

- ``validate_body``: JSON endpoints; failures are forwarded to the
  centralized error handler.
- ``validate_form``: HTML form endpoints; failures are flashed and the
  client is redirected.
"""

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import Request, status
from pydantic import BaseModel

from payload_guard.adapters.session import SessionFlashStore
from payload_guard.api.errors import FormRedirect
from payload_guard.domain.exceptions import HandlerError, PayloadValidationError
from payload_guard.domain.ports import FlashCategory
from payload_guard.validation import make_validator

logger = logging.getLogger(__name__)

BodyDependency = Callable[[Request], Awaitable[dict[str, Any]]]


def get_flash_store(request: Request) -> SessionFlashStore:
    """
    Get the flash store for the current session.

    Requires SessionMiddleware to be installed on the application.
    """
    return SessionFlashStore(request.session)


async def read_json_body(request: Request) -> Any:
    """
    Read the request body as JSON.

    An empty body reads as ``{}``.

    Raises:
        HandlerError: 400 if the body is not valid JSON
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except (ValueError, RecursionError):
        raise HandlerError("Invalid JSON body", status_code=status.HTTP_400_BAD_REQUEST) from None


async def read_form_body(request: Request) -> dict[str, Any]:
    """Read URL-encoded or multipart form fields into a plain dict."""
    form = await request.form()
    return {key: value for key, value in form.items()}


def validate_body(schema: type[BaseModel]) -> BodyDependency:
    """
    Create a dependency validating the JSON body against ``schema``.

    On success the normalized payload replaces the body: it is stored on
    ``request.state.body`` and returned to the route. On failure a
    PayloadValidationError is raised for the centralized error handler.

    Args:
        schema: pydantic model class describing the body

    Returns:
        Dependency callable for ``Depends()``
    """
    validate = make_validator(schema)

    async def dependency(request: Request) -> dict[str, Any]:
        payload = await read_json_body(request)
        result = await validate(payload)
        if not result.ok:
            raise PayloadValidationError(result.failures)

        request.state.body = result.value
        return result.value

    return dependency


def validate_form(schema: type[BaseModel], redirect_path: str) -> BodyDependency:
    """
    Create a dependency validating submitted form fields against ``schema``.

    On success behaves like ``validate_body``. On failure the failure
    messages are queued, in order, under the ``validationFailure`` flash
    category and the request ends with a redirect to ``redirect_path``;
    the centralized error handler is never involved.

    Args:
        schema: pydantic model class describing the form
        redirect_path: Where to send the client when validation fails

    Returns:
        Dependency callable for ``Depends()``
    """
    validate = make_validator(schema)

    async def dependency(request: Request) -> dict[str, Any]:
        payload = await read_form_body(request)
        result = await validate(payload)
        if not result.ok:
            logger.info("Form rejected on %s: %s", request.url.path, result.messages)
            get_flash_store(request).push(FlashCategory.VALIDATION_FAILURE, result.messages)
            raise FormRedirect(redirect_path)

        request.state.body = result.value
        return result.value

    return dependency
