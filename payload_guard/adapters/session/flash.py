"""
Session flash store adapter - Implements FlashStore protocol.

This module keeps flash messages inside the Starlette session mapping,
so they survive exactly one redirect and are discarded once read.
"""

from collections.abc import MutableMapping
from typing import Any

from payload_guard.domain.ports import FlashCategory

FLASH_SESSION_KEY = "_flash"


class SessionFlashStore:
    """
    Implements FlashStore protocol over a session mapping.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Messages are stored as ``session["_flash"][category] -> list[str]``.
    """

    def __init__(self, session: MutableMapping[str, Any]) -> None:
        self._session = session

    def push(self, category: FlashCategory, messages: str | list[str]) -> None:
        if isinstance(messages, str):
            messages = [messages]
        if not messages:
            return

        # Reassign so signed-cookie sessions see the change
        flashes = dict(self._session.get(FLASH_SESSION_KEY, {}))
        flashes[category.value] = [*flashes.get(category.value, []), *messages]
        self._session[FLASH_SESSION_KEY] = flashes

    def drain(self, category: FlashCategory) -> list[str]:
        flashes = self._session.get(FLASH_SESSION_KEY)
        if not flashes or category.value not in flashes:
            return []

        flashes = dict(flashes)
        messages = flashes.pop(category.value)
        if flashes:
            self._session[FLASH_SESSION_KEY] = flashes
        else:
            del self._session[FLASH_SESSION_KEY]
        return list(messages)
