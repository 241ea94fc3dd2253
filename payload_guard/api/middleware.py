"""
Flash-to-view middleware.

Drains pending flash messages on every request and exposes them to the
templates rendered while handling it. Must run inside SessionMiddleware.
"""

from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from payload_guard.adapters.session import SessionFlashStore
from payload_guard.domain.ports import FlashCategory


class FlashMessagesMiddleware(BaseHTTPMiddleware):
    """
    Copy flash messages into ``request.state.flash_messages``.

    Each category is read once and cleared, so a message shows on the
    first page rendered after it was queued and never again.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        store = SessionFlashStore(request.session)
        request.state.flash_messages = {
            category.value: store.drain(category) for category in FlashCategory
        }
        return await call_next(request)
