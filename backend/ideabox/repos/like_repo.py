from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.core.errors import ConflictError
from ideabox.models.like import IdeaLike


class LikeRepo:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, user_id: uuid.UUID, idea_id: uuid.UUID) -> IdeaLike:
        like = IdeaLike(user_id=user_id, idea_id=idea_id)
        self.session.add(like)
        try:
            await self.session.flush()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConflictError("idea already liked") from e
        return like

    async def get_active(self, user_id: uuid.UUID, idea_id: uuid.UUID) -> IdeaLike | None:
        res = await self.session.execute(
            select(IdeaLike).where(IdeaLike.user_id == user_id, IdeaLike.idea_id == idea_id, IdeaLike.visible())
        )
        return res.scalars().first()

    async def soft_delete(self, like: IdeaLike) -> None:
        like.mark_deleted()
        await self.session.flush()
