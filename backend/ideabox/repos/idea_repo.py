from __future__ import annotations

import uuid

from sqlalchemy import select, desc
from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.models.idea import Idea


class IdeaRepo:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(
        self,
        *,
        coffee_shop_id: uuid.UUID,
        creator_id: uuid.UUID,
        title: str,
        description: str,
        category_id: uuid.UUID | None = None,
    ) -> Idea:
        idea = Idea(
            coffee_shop_id=coffee_shop_id,
            creator_id=creator_id,
            category_id=category_id,
            title=title,
            description=description,
        )
        self.session.add(idea)
        await self.session.flush()
        return idea

    async def get(self, idea_id: uuid.UUID) -> Idea | None:
        res = await self.session.execute(select(Idea).where(Idea.id == idea_id, Idea.visible()))
        return res.scalar_one_or_none()

    async def list_for_shop(self, coffee_shop_id: uuid.UUID, *, limit: int, offset: int) -> list[Idea]:
        res = await self.session.execute(
            select(Idea)
            .where(Idea.coffee_shop_id == coffee_shop_id, Idea.visible())
            .order_by(desc(Idea.created_at), Idea.id)
            .limit(limit)
            .offset(offset)
        )
        return list(res.scalars().all())

    async def soft_delete(self, idea: Idea) -> None:
        idea.mark_deleted()
        await self.session.flush()
