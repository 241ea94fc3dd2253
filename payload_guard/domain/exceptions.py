"""
Domain exceptions - Errors forwarded to the centralized error handler.

This module defines the errors a pipeline stage may raise to abort the
request. Each carries an optional HTTP status; the handler defaults a
missing status to 500.
"""

from collections.abc import Iterable

from .results import ValidationFailure


class HandlerError(Exception):
    """Base class for errors rendered by the centralized error handler."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class PayloadValidationError(HandlerError):
    """
    Payload failed schema validation.

    Carries every failure found, in the order the schema engine reported
    them. The message joins the individual failure messages.

    Always a 400: unlike the Express/Joi demo this app is modelled on,
    where a Joi error carries no status and the inline and custom
    middleware routes answer 500, every validation route here answers
    400, as celebrate-validated routes did.
    """

    def __init__(self, details: Iterable[ValidationFailure]) -> None:
        self.details = list(details)
        message = "; ".join(failure.message for failure in self.details)
        super().__init__(message or "Validation failed", status_code=400)
