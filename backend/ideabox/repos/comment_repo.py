from __future__ import annotations

import uuid

from sqlalchemy import select, desc
from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.models.comment import IdeaComment


class CommentRepo:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, idea_id: uuid.UUID, creator_id: uuid.UUID, text: str, author_name: str) -> IdeaComment:
        comment = IdeaComment(idea_id=idea_id, creator_id=creator_id, text=text, author_name=author_name)
        self.session.add(comment)
        await self.session.flush()
        return comment

    async def get(self, comment_id: uuid.UUID) -> IdeaComment | None:
        res = await self.session.execute(
            select(IdeaComment).where(IdeaComment.id == comment_id, IdeaComment.visible())
        )
        return res.scalar_one_or_none()

    async def list_for_idea(self, idea_id: uuid.UUID, *, limit: int, offset: int) -> list[IdeaComment]:
        # newest first
        res = await self.session.execute(
            select(IdeaComment)
            .where(IdeaComment.idea_id == idea_id, IdeaComment.visible())
            .order_by(desc(IdeaComment.created_at), IdeaComment.id)
            .limit(limit)
            .offset(offset)
        )
        return list(res.scalars().all())

    async def soft_delete(self, comment: IdeaComment) -> None:
        comment.mark_deleted()
        await self.session.flush()
