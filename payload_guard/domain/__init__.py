"""
Domain layer - Validation outcomes and error types with zero framework imports.

This package defines the values exchanged between the schema validator,
the pipeline stages and the centralized error handler, plus the port
interfaces adapters implement.
"""

from .exceptions import HandlerError, PayloadValidationError
from .ports import FlashCategory, FlashStore, Validator
from .results import ValidationFailure, ValidationResult

__all__ = [
    "FlashCategory",
    "FlashStore",
    "HandlerError",
    "PayloadValidationError",
    "ValidationFailure",
    "ValidationResult",
    "Validator",
]
