"""Product models for the house and airbnb inventories."""

from sqlalchemy import Column, Date, Enum, Numeric, String

from components.core.database import Base, UserOwnedMixin

INVENTORY_LEVELS = ("full", "medium", "low", "none")


class ProductMixin(UserOwnedMixin):
    """Columns shared by both product tables."""
    name = Column(String(255), nullable=False, index=True)
    weight = Column(String(50), nullable=True)
    brand = Column(String(100), nullable=True)
    last_price = Column(Numeric(10, 2), nullable=True)
    last_purchase_date = Column(Date, nullable=True)
    inventory_level = Column(Enum(*INVENTORY_LEVELS, name="inventory_level"), nullable=True)


class Product(ProductMixin, Base):
    """House product bought at a supermarket."""
    __tablename__ = "products"
    store_field = "supermarket"

    supermarket = Column(String(100), nullable=True)


class AirbnbProduct(ProductMixin, Base):
    """Airbnb supply bought from a supplier."""
    __tablename__ = "airbnb_products"
    store_field = "supplier"

    supplier = Column(String(100), nullable=True)
