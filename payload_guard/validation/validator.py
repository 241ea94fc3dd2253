"""
Validator factory - Binds a schema to a reusable validation function.

The returned validator never raises on bad input: it resolves to a
ValidationResult holding either the normalized payload or every failure
found. pydantic validates all fields before reporting, so callers can
present every problem at once.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ValidationError

from payload_guard.domain import ValidationFailure, ValidationResult, Validator


def failures_from_errors(
    errors: Iterable[Mapping[str, Any]],
    strip_prefix: Sequence[str] = (),
) -> tuple[ValidationFailure, ...]:
    """
    Convert pydantic error dicts to ValidationFailure records.

    Each message is prefixed with the dotted field path so it still makes
    sense once detached from the path (flash messages keep only the text).

    Args:
        errors: Error dicts as returned by ``ValidationError.errors()``
        strip_prefix: Leading location segments to drop (e.g. ``("body",)``
            for FastAPI request validation errors)

    Returns:
        Failures in the order pydantic reported them
    """
    failures = []
    prefix = tuple(strip_prefix)
    for error in errors:
        path = tuple(error.get("loc", ()))
        if prefix and path[: len(prefix)] == prefix:
            path = path[len(prefix) :]
        label = ".".join(str(part) for part in path)
        message = f"{label}: {error['msg']}" if label else error["msg"]
        failures.append(ValidationFailure(message=message, path=path, kind=error["type"]))
    return tuple(failures)


def make_validator(schema: type[BaseModel]) -> Validator:
    """
    Create a validator bound to ``schema``.

    Args:
        schema: pydantic model class describing the expected payload

    Returns:
        Async callable validating a payload mapping against ``schema``
    """

    async def validate(payload: Mapping[str, Any]) -> ValidationResult:
        try:
            model = schema.model_validate(payload)
        except ValidationError as exc:
            return ValidationResult.failure(failures_from_errors(exc.errors()))
        return ValidationResult.success(model.model_dump(mode="json", exclude_unset=True))

    validate.__name__ = f"validate_{schema.__name__}"
    return validate
