"""
API response models.

Pydantic models for response serialization and OpenAPI schema generation.
JSON keys keep the camelCase names clients already consume.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ValidatedProductResponse(ApiModel):
    """Response for a product validated inline in the route."""

    status: str = "success"
    validated_product: dict[str, Any] = Field(alias="validatedProduct")


class PayloadResponse(ApiModel):
    """Response echoing a payload validated before the route ran."""

    status: str = "success"
    payload: dict[str, Any]


class EditedProductResponse(ApiModel):
    """Response for a validated product edit."""

    status: str = "success"
    product_id: int = Field(alias="productId")
    payload: dict[str, Any]


class ErrorResponse(ApiModel):
    """Standard error response model."""

    status_code: int = Field(alias="statusCode")
    message: str
