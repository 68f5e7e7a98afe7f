"""
Pydantic models for product data.

``ProductBase`` holds the five writable attributes shared by create and
update payloads; ``ProductRead`` adds the system generated ``id`` for
responses.  Types are strict: a price sent as ``"1.5"`` or a stock flag
sent as ``"true"`` is rejected rather than coerced, and an integer price
stays an integer.  The stock flag is exposed on the wire as ``inStock``.
"""

import math
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, field_validator


class ProductBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, strict=True, examples=["Pen"])
    description: str = Field(..., min_length=1, strict=True, examples=["Blue pen"])
    price: Union[StrictInt, StrictFloat] = Field(..., examples=[1.5])
    category: str = Field(..., min_length=1, strict=True, examples=["Stationery"])
    in_stock: bool = Field(..., alias="inStock", strict=True, examples=[True])

    @field_validator("price")
    @classmethod
    def price_must_be_finite(cls, v):
        if isinstance(v, float) and not math.isfinite(v):
            raise ValueError("Price must be a finite number")
        return v


class ProductCreate(ProductBase):
    """Schema for creating or replacing a product.

    Any ``id`` sent by the client is ignored.
    """
    pass


class ProductRead(ProductBase):
    """Schema for a stored product returned by the API."""

    id: str


class ProductPage(BaseModel):
    """Pagination envelope around a slice of products."""

    page: int
    limit: int
    total: int
    data: List[ProductRead]
