"""
Signup routes - Server-rendered form with flash-and-redirect validation.

Failures never produce a JSON error: they are flashed and the browser is
sent back to the form.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from payload_guard.adapters.session import SessionFlashStore
from payload_guard.api.dependencies import get_flash_store, read_form_body, validate_form
from payload_guard.api.templating import templates
from payload_guard.domain.ports import FlashCategory
from payload_guard.validation import UserCreate, make_validator

logger = logging.getLogger(__name__)

router = APIRouter(tags=["signup"])

SIGNUP_PATH = "/signup"
SUCCESS_MESSAGE = "Success valid input"

validate_user = make_validator(UserCreate)


@router.get(SIGNUP_PATH, response_class=HTMLResponse, summary="Show the signup form")
async def show_signup(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(request, "signup.html")


@router.post(SIGNUP_PATH, summary="Submit the signup form")
async def signup(
    user: dict[str, Any] = Depends(validate_form(UserCreate, SIGNUP_PATH)),
    flash: SessionFlashStore = Depends(get_flash_store),
) -> RedirectResponse:
    """Flash a success message for a valid submission and go back to the form."""
    logger.info("Signup accepted for %s", user.get("email"))
    flash.push(FlashCategory.MESSAGE_SUCCESS, SUCCESS_MESSAGE)
    return RedirectResponse(SIGNUP_PATH, status_code=status.HTTP_303_SEE_OTHER)


@router.post(f"{SIGNUP_PATH}/inline", summary="Submit the signup form (inline validation)")
async def signup_inline(
    request: Request,
    flash: SessionFlashStore = Depends(get_flash_store),
) -> RedirectResponse:
    """Same flow as POST /signup, validating inside the route."""
    result = await validate_user(await read_form_body(request))
    if result.ok:
        logger.info("Signup accepted for %s", result.value.get("email"))
        flash.push(FlashCategory.MESSAGE_SUCCESS, SUCCESS_MESSAGE)
    else:
        logger.info("Signup rejected: %s", result.messages)
        flash.push(FlashCategory.VALIDATION_FAILURE, result.messages)
    return RedirectResponse(SIGNUP_PATH, status_code=status.HTTP_303_SEE_OTHER)
