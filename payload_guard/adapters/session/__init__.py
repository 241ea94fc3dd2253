"""Session adapters - Flash messages kept in the request session."""

from .flash import FLASH_SESSION_KEY, SessionFlashStore

__all__ = ["FLASH_SESSION_KEY", "SessionFlashStore"]
