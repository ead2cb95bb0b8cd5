from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.models.reward_type import RewardType


class RewardTypeRepo:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, coffee_shop_id: uuid.UUID, description: str) -> RewardType:
        rt = RewardType(coffee_shop_id=coffee_shop_id, description=description)
        self.session.add(rt)
        await self.session.flush()
        return rt

    async def get(self, reward_type_id: uuid.UUID) -> RewardType | None:
        res = await self.session.execute(
            select(RewardType).where(RewardType.id == reward_type_id, RewardType.visible())
        )
        return res.scalar_one_or_none()

    async def list_for_shop(self, coffee_shop_id: uuid.UUID, *, limit: int, offset: int) -> list[RewardType]:
        res = await self.session.execute(
            select(RewardType)
            .where(RewardType.coffee_shop_id == coffee_shop_id, RewardType.visible())
            .order_by(RewardType.created_at, RewardType.id)
            .limit(limit)
            .offset(offset)
        )
        return list(res.scalars().all())

    async def update(self, rt: RewardType, *, description: str) -> RewardType:
        rt.description = description
        await self.session.flush()
        return rt

    async def soft_delete(self, rt: RewardType) -> None:
        rt.mark_deleted()
        await self.session.flush()
