"""
Payload schemas - Declarative rules for product and user payloads.

Schemas are pydantic models: immutable after class creation and safe to
share across concurrent requests. Unknown keys are rejected and strings
must not be empty.
"""

from typing import Annotated

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    ValidationError,
    field_validator,
)
from pydantic_core import PydanticCustomError

# Reused by reference in both product schemas
Price = Annotated[float, Field(ge=0.01, allow_inf_nan=False, description="Price, at least 0.01")]

Password = Annotated[
    str,
    Field(min_length=7, pattern=r"^[a-zA-Z0-9]+$", description="Alphanumeric, min 7 characters"),
]

EDIT_PRICE_MESSAGE = "when editing price must be number greater than 0.01"


class PayloadSchema(BaseModel):
    """Base configuration shared by every payload schema."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        str_min_length=1,
    )


class ProductCreate(PayloadSchema):
    """Schema for creating a product."""

    description: str
    price: Price


class ProductEdit(PayloadSchema):
    """Schema for editing a product; every field is optional."""

    description: str | None = None
    price: Price | None = None

    @field_validator("price", mode="wrap")
    @classmethod
    def _price_message(cls, value, handler):
        try:
            return handler(value)
        except ValidationError:
            raise PydanticCustomError("edit_price", EDIT_PRICE_MESSAGE) from None


class UserCreate(PayloadSchema):
    """Schema for the signup form."""

    email: EmailStr | None = None
    name: str | None = None
    password: Password | None = None
