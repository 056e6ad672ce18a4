# app/models/products.py

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, field_serializer


class ProductIn(BaseModel):
    """Request body for creating or replacing a product."""

    name: str = Field(..., min_length=1)
    # Mirrors the NUMERIC(10,2) column
    price: Decimal = Field(default=Decimal("0.00"), max_digits=10, decimal_places=2)


class ProductOut(BaseModel):
    id: int
    name: str
    price: Decimal

    class Config:
        from_attributes = True

    @field_serializer("price", when_used="json")
    def _price_as_number(self, price: Decimal) -> float:
        return float(price)


class ErrorOut(BaseModel):
    error: str


class DeleteResult(BaseModel):
    result: Literal["success"] = "success"
