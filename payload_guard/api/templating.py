"""
Server-side templates.

Every template receives the flash lists drained for the current request
under their category names (``messageSuccess``, ``messageFailure``,
``validationFailure``).
"""

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates

from payload_guard.domain.ports import FlashCategory

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


def flash_context(request: Request) -> dict[str, Any]:
    """Context processor exposing the drained flash messages."""
    drained = getattr(request.state, "flash_messages", {})
    return {category.value: drained.get(category.value, []) for category in FlashCategory}


templates = Jinja2Templates(directory=TEMPLATES_DIR, context_processors=[flash_context])
