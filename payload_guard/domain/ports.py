"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) the validation flows need
from the outside world: a schema validator and a session flash store.
Adapters implement these protocols.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Protocol

from .results import ValidationResult


class FlashCategory(str, Enum):
    """
    Flash message categories shared by routes and templates.

    Values are the names templates use to read the drained messages.
    """

    MESSAGE_SUCCESS = "messageSuccess"
    MESSAGE_FAILURE = "messageFailure"
    VALIDATION_FAILURE = "validationFailure"


class Validator(Protocol):
    """Port interface for a schema-bound payload validator."""

    async def __call__(self, payload: Mapping[str, Any]) -> ValidationResult:
        """
        Validate an untyped payload.

        Args:
            payload: Field-name to value mapping supplied by the caller

        Returns:
            ValidationResult holding the normalized payload or every failure
        """
        ...


class FlashStore(Protocol):
    """Port interface for session-scoped, read-once flash messages."""

    def push(self, category: FlashCategory, messages: str | list[str]) -> None:
        """
        Queue one or more messages under a category.

        Args:
            category: Flash category to queue under
            messages: A single message or an ordered list of messages
        """
        ...

    def drain(self, category: FlashCategory) -> list[str]:
        """
        Return and clear the queued messages of a category.

        Returns:
            Queued messages in push order; empty list if none
        """
        ...
