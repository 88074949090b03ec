"""Repository for product and inventory operations."""

from typing import List, Optional, Type, Union

import structlog
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from components.inventory.models import AirbnbProduct, Product
from components.inventory import schemas

logger = structlog.get_logger(__name__)

ProductModel = Union[Type[Product], Type[AirbnbProduct]]

SUGGESTION_LIMIT = 5


class ProductRepository:
    """Repository for one product table."""

    def __init__(self, session: AsyncSession, model: ProductModel, user_id: str):
        """Initialize repository with database session."""
        self.session = session
        self.model = model
        self.user_id = user_id

    @property
    def store_column(self):
        """Supermarket column for the house, supplier column for the airbnb."""
        return getattr(self.model, self.model.store_field)

    async def get_all(
        self,
        search: Optional[str] = None,
        store: Optional[str] = None,
        inventory_level: Optional[str] = None,
    ) -> List:
        """Get products ordered by name with optional filtering."""
        query = select(self.model).where(self.model.user_id == self.user_id)

        if search:
            query = query.where(func.lower(self.model.name).contains(search.lower()))
        if store:
            query = query.where(func.lower(self.store_column).contains(store.lower()))
        if inventory_level:
            query = query.where(self.model.inventory_level == inventory_level)

        query = query.order_by(self.model.name)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_by_id(self, product_id: str):
        """Get product by ID."""
        result = await self.session.execute(
            select(self.model).where(
                self.model.id == product_id,
                self.model.user_id == self.user_id,
            )
        )
        return result.scalar_one_or_none()

    async def create(
        self,
        product: Union[schemas.HouseProductCreate, schemas.AirbnbProductCreate],
    ):
        """Create a new product."""
        db_product = self.model(user_id=self.user_id, **product.model_dump())
        self.session.add(db_product)
        await self.session.commit()
        await self.session.refresh(db_product)
        logger.info("product_created", table=self.model.__tablename__, name=db_product.name)
        return db_product

    async def update_level(self, product_id: str, level: Optional[str]):
        """Set the inventory level of a product."""
        db_product = await self.get_by_id(product_id)
        if not db_product:
            return None

        db_product.inventory_level = level
        await self.session.commit()
        await self.session.refresh(db_product)
        logger.info("inventory_level_updated", product_id=product_id, level=level)
        return db_product

    async def get_stores(self) -> List[str]:
        """Distinct non-empty supermarkets or suppliers."""
        return await self.get_values(self.model.store_field)

    async def get_values(self, column_name: str) -> List[str]:
        """Distinct non-empty values of a text column."""
        column = getattr(self.model, column_name)
        result = await self.session.execute(
            select(column)
            .where(self.model.user_id == self.user_id, column.is_not(None), column != "")
            .distinct()
            .order_by(column)
        )
        return list(result.scalars().all())


async def get_suggestions(session: AsyncSession, user_id: str, kind: str, text: str) -> List[str]:
    """
    Autocomplete values for the product form.

    Names come from house products, brands from both product tables.
    """
    if not text:
        return []

    if kind == "name":
        values = await ProductRepository(session, Product, user_id).get_values("name")
    else:
        values = await ProductRepository(session, Product, user_id).get_values("brand")
        values += await ProductRepository(session, AirbnbProduct, user_id).get_values("brand")
        values = sorted(set(values))

    needle = text.lower()
    suggestions: List[str] = []
    for value in values:
        if needle in value.lower() and value not in suggestions:
            suggestions.append(value)
        if len(suggestions) == SUGGESTION_LIMIT:
            break
    return suggestions
