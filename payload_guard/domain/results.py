"""
Validation results - Explicit success/failure values.

The validation step returns a ValidationResult instead of raising, so
the pipeline layer decides whether to continue, redirect, or forward an
error to the centralized handler.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationFailure:
    """A single field-level constraint violation."""

    message: str
    path: tuple[str | int, ...]
    kind: str


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating a payload against a schema.

    Exactly one of ``value`` (the normalized payload) or ``failures``
    (non-empty, in reporting order) is set.
    """

    value: dict[str, Any] | None = None
    failures: tuple[ValidationFailure, ...] = ()

    def __post_init__(self) -> None:
        if (self.value is None) == (not self.failures):
            raise ValueError("ValidationResult needs either a value or failures, not both")

    @classmethod
    def success(cls, value: dict[str, Any]) -> "ValidationResult":
        return cls(value=value)

    @classmethod
    def failure(cls, failures: tuple[ValidationFailure, ...]) -> "ValidationResult":
        return cls(failures=tuple(failures))

    @property
    def ok(self) -> bool:
        return self.value is not None

    @property
    def messages(self) -> list[str]:
        """Failure messages in reporting order (empty on success)."""
        return [failure.message for failure in self.failures]

    def unwrap(self) -> dict[str, Any]:
        """
        Return the normalized payload.

        Raises:
            PayloadValidationError: If validation failed
        """
        # Local import: exceptions imports this module
        from .exceptions import PayloadValidationError

        if self.value is None:
            raise PayloadValidationError(self.failures)
        return self.value
