"""Pydantic schemas for products and inventory levels."""

from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

InventoryLevel = Literal["full", "medium", "low", "none"]


class ProductBase(BaseModel):
    """Base product schema."""
    name: str = Field(..., max_length=255)
    weight: Optional[str] = None
    brand: Optional[str] = None
    last_price: Optional[float] = Field(None, ge=0)
    last_purchase_date: Optional[date] = None
    inventory_level: Optional[InventoryLevel] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Product name is required")
        return value

    @field_validator("weight", "brand")
    @classmethod
    def empty_to_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None


class HouseProductCreate(ProductBase):
    """Schema for house product creation."""
    supermarket: Optional[str] = None


class AirbnbProductCreate(ProductBase):
    """Schema for airbnb product creation."""
    supplier: Optional[str] = None


class HouseProduct(HouseProductCreate):
    """Schema for house product response."""
    id: str

    model_config = ConfigDict(from_attributes=True)


class AirbnbProduct(AirbnbProductCreate):
    """Schema for airbnb product response."""
    id: str

    model_config = ConfigDict(from_attributes=True)


class InventoryLevelUpdate(BaseModel):
    """Schema for changing the stock level of a product."""
    inventory_level: Optional[InventoryLevel] = None
