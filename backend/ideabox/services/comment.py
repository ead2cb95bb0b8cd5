from __future__ import annotations

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.core.errors import InternalError, NotFoundError, NotValidError
from ideabox.models.comment import IdeaComment
from ideabox.models.idea import Idea
from ideabox.repos.comment_repo import CommentRepo
from ideabox.repos.idea_repo import IdeaRepo
from ideabox.services.access_control import AccessControl
from ideabox.services.pagination import clamp_page

log = logging.getLogger(__name__)


class CommentService:
    """Comments are staff-only: any active worker of the idea's shop, whatever their role."""

    def __init__(self, session: AsyncSession):
        self.access = AccessControl(session)
        self.ideas = IdeaRepo(session)
        self.comments = CommentRepo(session)

    async def _idea_for_worker(self, actor_id: uuid.UUID, idea_id: uuid.UUID) -> Idea:
        idea = await self.ideas.get(idea_id)
        if not idea:
            raise NotFoundError("idea", idea_id)
        if idea.coffee_shop_id is None:
            log.error("[comment] idea %s has no coffee shop", idea_id)
            raise InternalError("idea is not associated with a coffee shop")
        await self.access.require_active_worker(actor_id, idea.coffee_shop_id)
        return idea

    async def create(self, actor_id: uuid.UUID, idea_id: uuid.UUID, text: str, author_name: str) -> IdeaComment:
        await self._idea_for_worker(actor_id, idea_id)
        comment = await self.comments.create(idea_id, actor_id, text, author_name)
        log.info("[comment] actor=%s commented idea=%s comment=%s", actor_id, idea_id, comment.id)
        return comment

    async def list_for_idea(
        self,
        actor_id: uuid.UUID,
        idea_id: uuid.UUID,
        page: int | None = None,
        limit: int | None = None,
    ) -> list[IdeaComment]:
        await self._idea_for_worker(actor_id, idea_id)
        window = clamp_page(page, limit)
        return await self.comments.list_for_idea(idea_id, limit=window.limit, offset=window.offset)

    async def delete(self, actor_id: uuid.UUID, idea_id: uuid.UUID, comment_id: uuid.UUID) -> None:
        await self._idea_for_worker(actor_id, idea_id)

        comment = await self.comments.get(comment_id)
        if not comment:
            raise NotFoundError("comment", comment_id)
        if comment.idea_id != idea_id:
            log.warning("[comment] comment=%s does not belong to idea=%s", comment_id, idea_id)
            raise NotValidError("comment does not belong to this idea")

        await self.comments.soft_delete(comment)
        log.info("[comment] actor=%s deleted comment=%s", actor_id, comment_id)
