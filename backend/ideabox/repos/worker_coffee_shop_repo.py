from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.core.errors import ConflictError
from ideabox.models.worker_coffee_shop import WorkerCoffeeShop


class WorkerCoffeeShopRepo:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, worker_id: uuid.UUID, coffee_shop_id: uuid.UUID) -> WorkerCoffeeShop:
        rel = WorkerCoffeeShop(worker_id=worker_id, coffee_shop_id=coffee_shop_id)
        self.session.add(rel)
        try:
            await self.session.flush()
        except IntegrityError as e:
            # Partial unique index on active rows: a concurrent add won the race.
            await self.session.rollback()
            raise ConflictError(f"user {worker_id} is already a worker in shop {coffee_shop_id}") from e

        res = await self.session.execute(
            select(WorkerCoffeeShop)
            .where(WorkerCoffeeShop.id == rel.id)
            .execution_options(populate_existing=True)
        )
        return res.scalar_one()

    async def get(self, relation_id: uuid.UUID) -> WorkerCoffeeShop | None:
        res = await self.session.execute(
            select(WorkerCoffeeShop).where(WorkerCoffeeShop.id == relation_id, WorkerCoffeeShop.visible())
        )
        return res.scalar_one_or_none()

    async def get_active(self, worker_id: uuid.UUID, coffee_shop_id: uuid.UUID) -> WorkerCoffeeShop | None:
        res = await self.session.execute(
            select(WorkerCoffeeShop).where(
                WorkerCoffeeShop.worker_id == worker_id,
                WorkerCoffeeShop.coffee_shop_id == coffee_shop_id,
                WorkerCoffeeShop.visible(),
            )
        )
        return res.scalars().first()

    async def is_worker_in_shop(self, worker_id: uuid.UUID, coffee_shop_id: uuid.UUID) -> bool:
        return await self.get_active(worker_id, coffee_shop_id) is not None

    async def list_for_shop(self, coffee_shop_id: uuid.UUID, *, limit: int, offset: int) -> list[WorkerCoffeeShop]:
        res = await self.session.execute(
            select(WorkerCoffeeShop)
            .where(WorkerCoffeeShop.coffee_shop_id == coffee_shop_id, WorkerCoffeeShop.visible())
            .order_by(WorkerCoffeeShop.created_at, WorkerCoffeeShop.id)
            .limit(limit)
            .offset(offset)
        )
        return list(res.scalars().all())

    async def list_for_worker(self, worker_id: uuid.UUID, *, limit: int, offset: int) -> list[WorkerCoffeeShop]:
        res = await self.session.execute(
            select(WorkerCoffeeShop)
            .where(WorkerCoffeeShop.worker_id == worker_id, WorkerCoffeeShop.visible())
            .order_by(WorkerCoffeeShop.created_at, WorkerCoffeeShop.id)
            .limit(limit)
            .offset(offset)
        )
        return list(res.scalars().all())

    async def soft_delete(self, rel: WorkerCoffeeShop) -> None:
        rel.mark_deleted()
        await self.session.flush()
