"""Shopping cart endpoints."""

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.init_db import get_db, get_user_id
from components.shopping.repository import ShoppingRepository, UnknownProductError
from components.shopping import schemas

router = APIRouter(
    prefix="/shopping",
    tags=["shopping"],
    responses={404: {"description": "Not found"}},
)


@router.get("/supermarkets", response_model=List[str])
async def list_supermarkets():
    """Get the supermarkets a house cart can be bought at."""
    return schemas.SUPERMARKETS


@router.post("/preview", response_model=schemas.Preview)
async def preview_carts(
    carts: schemas.Carts,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """
    Get the running totals of both carts.

    Items that reference a product with a known last price also carry the
    difference between the current and the last price paid.
    """
    return await ShoppingRepository(db, user_id).preview(carts)


@router.post("/checkout", response_model=schemas.CheckoutResult, status_code=201)
async def checkout(
    request: schemas.CheckoutRequest,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """
    Save both carts.

    Each non-empty cart is stored with its items, the purchased products are
    refreshed (or created) in the inventory with their stock set to full, and
    one expense is added per cart: groceries for the house, supplies for the
    airbnb.
    """
    if not request.house_items and not request.airbnb_items:
        raise HTTPException(status_code=400, detail="Both carts are empty")

    try:
        return await ShoppingRepository(db, user_id).checkout(request, date.today())
    except UnknownProductError as exc:
        raise HTTPException(status_code=404, detail=str(exc))


@router.get("/carts/house", response_model=List[schemas.HouseCart])
async def list_house_carts(
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Get saved house carts with their items, most recent first."""
    return await ShoppingRepository(db, user_id).get_carts("house")


@router.get("/carts/airbnb", response_model=List[schemas.AirbnbCart])
async def list_airbnb_carts(
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Get saved airbnb carts with their items, most recent first."""
    return await ShoppingRepository(db, user_id).get_carts("airbnb")
