from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.api.deps import get_db, get_current_user
from ideabox.schemas.reward_type import RewardTypeCreate, RewardTypeOut, RewardTypeUpdate
from ideabox.services.reward_type import RewardTypeService

router = APIRouter()


@router.get("/rewards/type/{reward_type_id}", response_model=RewardTypeOut)
async def get_reward_type(reward_type_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    return await RewardTypeService(db).get(reward_type_id)


@router.get("/coffee-shops/{shop_id}/rewards/type", response_model=list[RewardTypeOut])
async def list_reward_types(
    shop_id: uuid.UUID,
    page: int = 0,
    limit: int = 0,
    db: AsyncSession = Depends(get_db),
):
    return await RewardTypeService(db).list_for_shop(shop_id, page, limit)


@router.post("/admin/rewards/type", response_model=RewardTypeOut, status_code=status.HTTP_201_CREATED)
async def create_reward_type(
    payload: RewardTypeCreate,
    db: AsyncSession = Depends(get_db),
    user=Depends(get_current_user),
):
    rt = await RewardTypeService(db).create(user.id, payload.coffee_shop_id, payload.description)
    await db.commit()
    return rt


@router.put("/admin/rewards/type/{reward_type_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_reward_type(
    reward_type_id: uuid.UUID,
    payload: RewardTypeUpdate,
    db: AsyncSession = Depends(get_db),
    user=Depends(get_current_user),
):
    await RewardTypeService(db).update(user.id, reward_type_id, payload.description)
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/admin/rewards/type/{reward_type_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_reward_type(
    reward_type_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user=Depends(get_current_user),
):
    await RewardTypeService(db).delete(user.id, reward_type_id)
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
