"""Repository for shopping cart operations."""

from datetime import date
from typing import Dict, List, NamedTuple, Sequence

import structlog
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from components.core.database import generate_id
from components.finance.models import AirbnbExpense, Expense
from components.inventory.models import AirbnbProduct, Product
from components.inventory.repository import ProductRepository
from components.shopping.models import AirbnbCart, AirbnbCartItem, Cart, CartItem
from components.shopping import schemas

logger = structlog.get_logger(__name__)


class CartKind(NamedTuple):
    """Tables and labels used when saving one kind of cart."""
    cart_model: type
    item_model: type
    product_model: type
    expense_model: type
    store_field: str
    expense_category: str
    expense_label: str


CART_KINDS: Dict[str, CartKind] = {
    "house": CartKind(Cart, CartItem, Product, Expense, "supermarket", "groceries", "Groceries"),
    "airbnb": CartKind(AirbnbCart, AirbnbCartItem, AirbnbProduct, AirbnbExpense, "supplier", "supplies", "Supplies"),
}


class UnknownProductError(LookupError):
    """A cart item references a product that does not exist."""

    def __init__(self, product_id: str):
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


def expense_description(label: str, stores: Sequence[str]) -> str:
    """'Groceries - Walmart' or 'Groceries - Walmart, Pricesmart'."""
    unique_stores = list(dict.fromkeys(store for store in stores if store))
    return f"{label} - {', '.join(unique_stores)}"


class ShoppingRepository:
    """Repository for carts, cart items and checkout."""

    def __init__(self, session: AsyncSession, user_id: str):
        """Initialize repository with database session."""
        self.session = session
        self.user_id = user_id

    async def get_carts(self, kind: str) -> List:
        """Get saved carts with their items, most recent first."""
        cart_model = CART_KINDS[kind].cart_model
        result = await self.session.execute(
            select(cart_model)
            .where(cart_model.user_id == self.user_id)
            .options(selectinload(cart_model.items))
            .order_by(cart_model.date.desc(), cart_model.created_at.desc())
        )
        return list(result.scalars().all())

    async def preview(self, carts: schemas.Carts) -> schemas.Preview:
        """Totals of both carts and each item's price change since the last purchase."""
        house = await self._preview_cart("house", carts.house_items)
        airbnb = await self._preview_cart("airbnb", carts.airbnb_items)
        return schemas.Preview(
            house=house,
            airbnb=airbnb,
            combined_total=house.total + airbnb.total,
        )

    async def _preview_cart(self, kind: str, items: Sequence[schemas.CartItemBase]) -> schemas.CartPreview:
        products = ProductRepository(self.session, CART_KINDS[kind].product_model, self.user_id)
        preview_items = []
        for item in items:
            last_price = None
            if item.product_id:
                product = await products.get_by_id(item.product_id)
                if product is not None and product.last_price is not None:
                    last_price = float(product.last_price)
            preview_items.append(schemas.PreviewItem(
                product_name=item.product_name,
                price=item.price,
                last_price=last_price,
                price_difference=item.price - last_price if last_price is not None else None,
            ))
        return schemas.CartPreview(
            total=sum(item.price for item in items),
            items=preview_items,
        )

    async def checkout(self, request: schemas.CheckoutRequest, today: date) -> schemas.CheckoutResult:
        """
        Save both carts.

        For every non-empty cart this writes the cart, its items, refreshes
        or creates the purchased products (stock back to "full") and adds a
        single expense for the cart total. Everything is committed at once;
        any failure rolls the whole checkout back.

        Raises:
            UnknownProductError: an item references a missing product
        """
        purchase_date = request.purchase_date or today
        result = schemas.CheckoutResult(message="Carts saved successfully!")

        try:
            if request.house_items:
                result.house = await self._save_cart("house", request.house_items, purchase_date)
            if request.airbnb_items:
                result.airbnb = await self._save_cart("airbnb", request.airbnb_items, purchase_date)
            await self.session.commit()
        except (SQLAlchemyError, UnknownProductError):
            await self.session.rollback()
            logger.exception("checkout_failed")
            raise

        logger.info(
            "carts_saved",
            house_total=result.house.total_amount if result.house else None,
            airbnb_total=result.airbnb.total_amount if result.airbnb else None,
        )
        return result

    async def _save_cart(self, kind: str, items: Sequence, purchase_date: date) -> schemas.SavedCart:
        config = CART_KINDS[kind]
        products = ProductRepository(self.session, config.product_model, self.user_id)
        stores = [getattr(item, config.store_field) for item in items]
        total = sum(item.price for item in items)

        cart = config.cart_model(
            id=generate_id(),
            user_id=self.user_id,
            total_amount=total,
            date=purchase_date,
            is_completed=True,
            **{config.store_field: stores[0]},
        )
        self.session.add(cart)
        await self.session.flush()

        for item, store in zip(items, stores):
            product = await self._refresh_product(products, config, item, store, purchase_date)
            self.session.add(config.item_model(
                cart_id=cart.id,
                product_id=product.id,
                product_name=item.product_name,
                weight=item.weight,
                brand=item.brand,
                price=item.price,
                **{config.store_field: store},
            ))

        description = expense_description(config.expense_label, stores)
        self.session.add(config.expense_model(
            user_id=self.user_id,
            amount=total,
            description=description,
            category=config.expense_category,
            is_recurring=False,
            date=purchase_date,
        ))
        await self.session.flush()

        return schemas.SavedCart(
            cart_id=cart.id,
            total_amount=total,
            store=stores[0],
            expense_description=description,
            item_count=len(items),
        )

    async def _refresh_product(
        self,
        products: ProductRepository,
        config: CartKind,
        item: schemas.CartItemBase,
        store: str,
        purchase_date: date,
    ):
        """Update the bought product, or create it when the item is new."""
        fields = {
            "last_price": item.price,
            "last_purchase_date": purchase_date,
            "brand": item.brand or None,
            "weight": item.weight or None,
            "inventory_level": "full",
            config.store_field: store,
        }

        if item.product_id:
            product = await products.get_by_id(item.product_id)
            if product is None:
                raise UnknownProductError(item.product_id)
            for name, value in fields.items():
                setattr(product, name, value)
            return product

        product = config.product_model(
            id=generate_id(),
            user_id=self.user_id,
            name=item.product_name,
            **fields,
        )
        self.session.add(product)
        await self.session.flush()
        return product
