from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.api.deps import get_db, get_current_user
from ideabox.schemas.coffee_shop import CoffeeShopOut
from ideabox.schemas.user import UserOut
from ideabox.schemas.worker_coffee_shop import AddWorkerRequest, WorkerCoffeeShopOut
from ideabox.services.worker_coffee_shop import WorkerCoffeeShopService

router = APIRouter()


@router.post("/admin/worker-coffee-shops", response_model=WorkerCoffeeShopOut, status_code=status.HTTP_201_CREATED)
async def add_worker(payload: AddWorkerRequest, db: AsyncSession = Depends(get_db), user=Depends(get_current_user)):
    rel = await WorkerCoffeeShopService(db).add_worker(user.id, payload.worker_id, payload.coffee_shop_id)
    out = WorkerCoffeeShopOut.model_validate(rel)
    await db.commit()
    return out


@router.delete("/admin/worker-coffee-shops/{relation_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_worker(relation_id: uuid.UUID, db: AsyncSession = Depends(get_db), user=Depends(get_current_user)):
    await WorkerCoffeeShopService(db).remove_worker(user.id, relation_id)
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/admin/coffee-shops/{shop_id}/workers", response_model=list[UserOut])
async def list_workers(
    shop_id: uuid.UUID,
    page: int = 0,
    limit: int = 0,
    db: AsyncSession = Depends(get_db),
    user=Depends(get_current_user),
):
    return await WorkerCoffeeShopService(db).list_workers(user.id, shop_id, page, limit)


@router.get("/users/{worker_id}/coffee-shops", response_model=list[CoffeeShopOut])
async def list_my_coffee_shops(
    worker_id: uuid.UUID,
    page: int = 0,
    limit: int = 0,
    db: AsyncSession = Depends(get_db),
    user=Depends(get_current_user),
):
    return await WorkerCoffeeShopService(db).list_shops_for_worker(user.id, worker_id, page, limit)
