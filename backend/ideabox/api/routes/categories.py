from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.api.deps import get_db, get_current_user
from ideabox.schemas.category import CategoryCreated, CategoryIn, CategoryOut, CategoryPage
from ideabox.services.category import CategoryService

router = APIRouter()


@router.post("", response_model=CategoryCreated, status_code=status.HTTP_201_CREATED)
async def create_category(
    shop_id: uuid.UUID,
    payload: CategoryIn,
    db: AsyncSession = Depends(get_db),
    user=Depends(get_current_user),
):
    category = await CategoryService(db).create(user.id, shop_id, payload.title, payload.description)
    await db.commit()
    return CategoryCreated(id=category.id)


@router.get("", response_model=CategoryPage)
async def list_categories(
    shop_id: uuid.UUID,
    page: int = 0,
    limit: int = 0,
    db: AsyncSession = Depends(get_db),
):
    items, total = await CategoryService(db).list_for_shop(shop_id, page, limit)
    return CategoryPage(data=[CategoryOut.model_validate(c) for c in items], total=total)


@router.get("/{category_id}", response_model=CategoryOut)
async def get_category(shop_id: uuid.UUID, category_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    return await CategoryService(db).get(shop_id, category_id)


@router.put("/{category_id}", response_model=CategoryOut)
async def update_category(
    shop_id: uuid.UUID,
    category_id: uuid.UUID,
    payload: CategoryIn,
    db: AsyncSession = Depends(get_db),
    user=Depends(get_current_user),
):
    category = await CategoryService(db).update(user.id, shop_id, category_id, payload.title, payload.description)
    await db.commit()
    return category


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    shop_id: uuid.UUID,
    category_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user=Depends(get_current_user),
):
    await CategoryService(db).delete(user.id, shop_id, category_id)
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
