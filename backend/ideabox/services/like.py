from __future__ import annotations

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.core.errors import ConflictError, NotFoundError
from ideabox.repos.idea_repo import IdeaRepo
from ideabox.repos.like_repo import LikeRepo

log = logging.getLogger(__name__)


class LikeService:
    """Any authenticated user may like a visible idea once."""

    def __init__(self, session: AsyncSession):
        self.ideas = IdeaRepo(session)
        self.likes = LikeRepo(session)

    async def _require_idea(self, idea_id: uuid.UUID) -> None:
        if not await self.ideas.get(idea_id):
            raise NotFoundError("idea", idea_id)

    async def like(self, actor_id: uuid.UUID, idea_id: uuid.UUID) -> None:
        await self._require_idea(idea_id)
        if await self.likes.get_active(actor_id, idea_id):
            raise ConflictError("idea already liked")
        like = await self.likes.create(actor_id, idea_id)
        log.info("[like] actor=%s liked idea=%s like=%s", actor_id, idea_id, like.id)

    async def unlike(self, actor_id: uuid.UUID, idea_id: uuid.UUID) -> None:
        await self._require_idea(idea_id)
        like = await self.likes.get_active(actor_id, idea_id)
        if not like:
            raise NotFoundError("like", idea_id)
        await self.likes.soft_delete(like)
        log.info("[like] actor=%s unliked idea=%s", actor_id, idea_id)

    async def has_liked(self, actor_id: uuid.UUID, idea_id: uuid.UUID) -> bool:
        await self._require_idea(idea_id)
        return await self.likes.get_active(actor_id, idea_id) is not None
