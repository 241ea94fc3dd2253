"""Schema validation - pydantic schemas and the validator factory."""

from .schemas import ProductCreate, ProductEdit, UserCreate
from .validator import failures_from_errors, make_validator

__all__ = [
    "ProductCreate",
    "ProductEdit",
    "UserCreate",
    "failures_from_errors",
    "make_validator",
]
