"""
Pydantic schemas for Product model.
"""
from typing import Literal, Optional
from datetime import datetime
import uuid
from decimal import Decimal
from pydantic import BaseModel, Field, ConfigDict, field_validator


class ProductBase(BaseModel):
    """Base product schema."""
    name: str = Field(..., min_length=1, max_length=500)
    description: str = ""
    category: str = Field(default="", max_length=255)
    price: Decimal = Field(default=Decimal("0"), ge=0, decimal_places=2)
    cost: Decimal = Field(default=Decimal("0"), ge=0, decimal_places=2)
    stock: int = Field(default=0, ge=0)
    min_stock: int = Field(default=0, ge=0)
    sku: str = Field(..., min_length=1, max_length=100)
    image_url: Optional[str] = None


class ProductCreate(ProductBase):
    """Schema for creating a product."""


class ProductUpdate(BaseModel):
    """Schema for updating a product. Only provided fields are changed."""
    name: Optional[str] = Field(None, min_length=1, max_length=500)
    description: Optional[str] = None
    category: Optional[str] = Field(None, max_length=255)
    price: Optional[Decimal] = Field(None, ge=0, decimal_places=2)
    cost: Optional[Decimal] = Field(None, ge=0, decimal_places=2)
    stock: Optional[int] = Field(None, ge=0)
    min_stock: Optional[int] = Field(None, ge=0)
    sku: Optional[str] = Field(None, min_length=1, max_length=100)
    image_url: Optional[str] = None

    @field_validator(
        "name", "description", "category", "price", "cost", "stock", "min_stock", "sku"
    )
    @classmethod
    def reject_null(cls, value):
        # Omit a field to leave it unchanged; only image_url can be cleared
        if value is None:
            raise ValueError("Field cannot be null")
        return value


class ProductResponse(ProductBase):
    """Schema for product response."""
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    is_low_stock: bool
    stock_status: str


ProductSortField = Literal["name", "stock", "price", "category"]
SortOrder = Literal["asc", "desc"]


class ProductListResponse(BaseModel):
    """Filtered product list response."""
    items: list[ProductResponse]
    total: int
