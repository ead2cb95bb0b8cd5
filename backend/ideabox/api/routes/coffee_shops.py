from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.api.deps import get_db
from ideabox.core.errors import NotFoundError
from ideabox.repos.coffee_shop_repo import CoffeeShopRepo
from ideabox.schemas.coffee_shop import CoffeeShopOut

router = APIRouter()


@router.get("/{shop_id}", response_model=CoffeeShopOut)
async def get_coffee_shop(shop_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    shop = await CoffeeShopRepo(db).get(shop_id)
    if not shop:
        raise NotFoundError("coffee shop", shop_id)
    return shop
