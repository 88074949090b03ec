"""Pydantic schemas for shopping carts."""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

SUPERMARKETS = ["Walmart", "Pricesmart", "Super Selectos", "Agromercado"]


class CartItemBase(BaseModel):
    """Base cart line item schema."""
    product_id: Optional[str] = None
    product_name: str
    weight: Optional[str] = None
    brand: Optional[str] = None
    price: float = Field(..., ge=0)

    @field_validator("product_name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Please fill in name and price")
        return value


class HouseCartItemIn(CartItemBase):
    """House cart item as sent by the client."""
    supermarket: str = Field(..., min_length=1, description="Please select a supermarket")


class AirbnbCartItemIn(CartItemBase):
    """Airbnb cart item as sent by the client."""
    supplier: str = Field(..., min_length=1, description="Please fill in supplier name")


class Carts(BaseModel):
    """Both carts of a shopping trip."""
    house_items: List[HouseCartItemIn] = []
    airbnb_items: List[AirbnbCartItemIn] = []


class CheckoutRequest(Carts):
    """Schema for saving both carts."""
    purchase_date: Optional[date] = None  # Defaults to today


class HouseCartItem(HouseCartItemIn):
    """Schema for saved house cart item."""
    id: str

    model_config = ConfigDict(from_attributes=True)


class AirbnbCartItem(AirbnbCartItemIn):
    """Schema for saved airbnb cart item."""
    id: str

    model_config = ConfigDict(from_attributes=True)


class CartBase(BaseModel):
    """Base saved cart schema."""
    id: str
    total_amount: float
    date: date
    is_completed: bool

    model_config = ConfigDict(from_attributes=True)


class HouseCart(CartBase):
    """Schema for saved house cart."""
    supermarket: str
    items: List[HouseCartItem] = []


class AirbnbCart(CartBase):
    """Schema for saved airbnb cart."""
    supplier: str
    items: List[AirbnbCartItem] = []


class SavedCart(BaseModel):
    """Summary of one cart written by a checkout."""
    cart_id: str
    total_amount: float
    store: str
    expense_description: str
    item_count: int


class CheckoutResult(BaseModel):
    """Schema for checkout response."""
    message: str
    house: Optional[SavedCart] = None
    airbnb: Optional[SavedCart] = None


class PreviewItem(BaseModel):
    """Cart item compared with the last price paid."""
    product_name: str
    price: float
    last_price: Optional[float] = None
    price_difference: Optional[float] = None


class CartPreview(BaseModel):
    """Running total of one cart."""
    total: float
    items: List[PreviewItem]


class Preview(BaseModel):
    """Schema for cart preview response."""
    house: CartPreview
    airbnb: CartPreview
    combined_total: float
