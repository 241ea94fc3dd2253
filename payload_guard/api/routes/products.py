"""
Product routes - Three equivalent ways to validate a JSON body.

- POST /products  - validator called inline in the route
- POST /products2 - reusable validation dependency
- POST /products3 - FastAPI's own body validation

All three report failures through the centralized error handler.
"""

from typing import Any

from fastapi import APIRouter, Depends, Request

from payload_guard.api.dependencies import read_json_body, validate_body
from payload_guard.api.models import (
    EditedProductResponse,
    ErrorResponse,
    PayloadResponse,
    ValidatedProductResponse,
)
from payload_guard.validation import ProductCreate, ProductEdit, make_validator

router = APIRouter(tags=["products"])

validate_product_create = make_validator(ProductCreate)

error_responses: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Validation error"},
}


@router.post(
    "/products",
    response_model=ValidatedProductResponse,
    responses=error_responses,
    summary="Create a product (inline validation)",
)
async def create_product(request: Request) -> ValidatedProductResponse:
    """Validate the body in the route and echo the normalized product."""
    result = await validate_product_create(await read_json_body(request))
    return ValidatedProductResponse(validated_product=result.unwrap())


@router.post(
    "/products2",
    response_model=PayloadResponse,
    responses=error_responses,
    summary="Create a product (validation dependency)",
)
async def create_product_with_dependency(
    payload: dict[str, Any] = Depends(validate_body(ProductCreate)),
) -> PayloadResponse:
    """Echo the payload normalized by the validation dependency."""
    return PayloadResponse(payload=payload)


@router.post(
    "/products3",
    response_model=PayloadResponse,
    responses=error_responses,
    summary="Create a product (FastAPI body validation)",
)
async def create_product_with_framework(product: ProductCreate) -> PayloadResponse:
    """Echo the product FastAPI validated against the request body."""
    return PayloadResponse(payload=product.model_dump(mode="json", exclude_unset=True))


@router.patch(
    "/products/{product_id}",
    response_model=EditedProductResponse,
    responses=error_responses,
    summary="Edit a product",
)
async def edit_product(
    product_id: int,
    payload: dict[str, Any] = Depends(validate_body(ProductEdit)),
) -> EditedProductResponse:
    """Echo the validated changes for a product."""
    return EditedProductResponse(product_id=product_id, payload=payload)
