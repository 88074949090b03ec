"""Product and inventory endpoints for the house and the airbnb property."""

from typing import List, Literal, Optional, Type

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.init_db import get_db, get_user_id
from components.inventory.models import AirbnbProduct, Product
from components.inventory.repository import ProductRepository, get_suggestions
from components.inventory import schemas


def inventory_router(prefix: str, model, create_schema: Type, product_schema: Type, tag: str) -> APIRouter:
    """Router for one product table."""
    router = APIRouter(
        prefix=prefix,
        tags=[tag],
        responses={404: {"description": "Not found"}},
    )
    store_field = model.store_field

    @router.get("/", response_model=List[product_schema])
    async def list_products(
        search: Optional[str] = Query(None, description="Part of the product name"),
        store: Optional[str] = Query(None, description=f"Part of the {store_field} name"),
        inventory_level: Optional[schemas.InventoryLevel] = Query(None),
        db: AsyncSession = Depends(get_db),
        user_id: str = Depends(get_user_id)
    ):
        """Get products ordered by name with optional filtering."""
        repo = ProductRepository(db, model, user_id)
        return await repo.get_all(search=search, store=store, inventory_level=inventory_level)

    @router.post("/", response_model=product_schema, status_code=201)
    async def create_product(
        product: create_schema,
        db: AsyncSession = Depends(get_db),
        user_id: str = Depends(get_user_id)
    ):
        """Add a product."""
        return await ProductRepository(db, model, user_id).create(product)

    @router.get("/stores", response_model=List[str])
    async def list_stores(
        db: AsyncSession = Depends(get_db),
        user_id: str = Depends(get_user_id)
    ):
        """Get the distinct stores products were bought at."""
        return await ProductRepository(db, model, user_id).get_stores()

    @router.patch("/{product_id}/level", response_model=product_schema)
    async def update_inventory_level(
        product_id: str,
        update: schemas.InventoryLevelUpdate,
        db: AsyncSession = Depends(get_db),
        user_id: str = Depends(get_user_id)
    ):
        """Set how much of a product is left (null clears the level)."""
        product = await ProductRepository(db, model, user_id).update_level(product_id, update.inventory_level)
        if product is None:
            raise HTTPException(status_code=404, detail="Product not found")
        return product

    return router


house_inventory = inventory_router(
    "/house/inventory", Product, schemas.HouseProductCreate, schemas.HouseProduct, "house"
)
airbnb_inventory = inventory_router(
    "/airbnb/inventory", AirbnbProduct, schemas.AirbnbProductCreate, schemas.AirbnbProduct, "airbnb"
)


@house_inventory.get("/suggestions", response_model=List[str])
async def product_suggestions(
    kind: Literal["name", "brand"] = Query(..., description="Which field to complete"),
    q: str = Query("", description="Text typed so far"),
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """
    Autocomplete for the product form.

    Returns up to 5 known names (house products) or brands (house and
    airbnb products) containing ``q``.
    """
    return await get_suggestions(db, user_id, kind, q)


routers = [house_inventory, airbnb_inventory]
