"""
API routes package.

Combines the product (JSON) and signup (HTML form) routers.
"""

from fastapi import APIRouter

from payload_guard.api.routes.products import router as products_router
from payload_guard.api.routes.signup import router as signup_router

router = APIRouter()
router.include_router(products_router)
router.include_router(signup_router)

__all__ = ["router"]
