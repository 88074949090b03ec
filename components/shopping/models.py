"""Shopping cart models for the house and airbnb property."""

from sqlalchemy import Boolean, Column, Date, ForeignKey, Numeric, String
from sqlalchemy.orm import relationship

from components.core.database import Base, IdMixin, UserOwnedMixin


class Cart(UserOwnedMixin, Base):
    """Saved house shopping cart."""
    __tablename__ = "carts"
    store_field = "supermarket"

    total_amount = Column(Numeric(10, 2), nullable=False)
    supermarket = Column(String(100), nullable=False)
    date = Column(Date, nullable=False)
    is_completed = Column(Boolean, nullable=False, default=False)

    # Relationship with CartItems
    items = relationship("CartItem", back_populates="cart", cascade="all, delete-orphan")


class CartItem(IdMixin, Base):
    """Line item of a house cart."""
    __tablename__ = "cart_items"
    store_field = "supermarket"

    cart_id = Column(String(36), ForeignKey("carts.id", ondelete="CASCADE"), nullable=False)
    product_id = Column(String(36), ForeignKey("products.id", ondelete="SET NULL"), nullable=True)
    product_name = Column(String(255), nullable=False)
    weight = Column(String(50), nullable=True)
    brand = Column(String(100), nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    supermarket = Column(String(100), nullable=False)

    cart = relationship("Cart", back_populates="items")


class AirbnbCart(UserOwnedMixin, Base):
    """Saved airbnb supplies cart."""
    __tablename__ = "airbnb_carts"
    store_field = "supplier"

    total_amount = Column(Numeric(10, 2), nullable=False)
    supplier = Column(String(100), nullable=False)
    date = Column(Date, nullable=False)
    is_completed = Column(Boolean, nullable=False, default=False)

    # Relationship with AirbnbCartItems
    items = relationship("AirbnbCartItem", back_populates="cart", cascade="all, delete-orphan")


class AirbnbCartItem(IdMixin, Base):
    """Line item of an airbnb cart."""
    __tablename__ = "airbnb_cart_items"
    store_field = "supplier"

    cart_id = Column(String(36), ForeignKey("airbnb_carts.id", ondelete="CASCADE"), nullable=False)
    product_id = Column(String(36), ForeignKey("airbnb_products.id", ondelete="SET NULL"), nullable=True)
    product_name = Column(String(255), nullable=False)
    weight = Column(String(50), nullable=True)
    brand = Column(String(100), nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    supplier = Column(String(100), nullable=False)

    cart = relationship("AirbnbCart", back_populates="items")
