from __future__ import annotations

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.core.errors import AccessDeniedError, NotFoundError, NotValidError
from ideabox.models.idea import Idea
from ideabox.repos.category_repo import CategoryRepo
from ideabox.repos.coffee_shop_repo import CoffeeShopRepo
from ideabox.repos.idea_repo import IdeaRepo
from ideabox.services.access_control import AccessControl
from ideabox.services.pagination import clamp_page

log = logging.getLogger(__name__)


class IdeaService:
    def __init__(self, session: AsyncSession):
        self.access = AccessControl(session)
        self.shops = CoffeeShopRepo(session)
        self.categories = CategoryRepo(session)
        self.ideas = IdeaRepo(session)

    async def create(
        self,
        actor_id: uuid.UUID,
        shop_id: uuid.UUID,
        title: str,
        description: str,
        category_id: uuid.UUID | None = None,
    ) -> Idea:
        if not await self.shops.get(shop_id):
            raise NotFoundError("coffee shop", shop_id)
        if category_id is not None and not await self.categories.get(category_id, shop_id):
            raise NotValidError("category does not belong to this coffee shop")

        idea = await self.ideas.create(
            coffee_shop_id=shop_id,
            creator_id=actor_id,
            title=title,
            description=description,
            category_id=category_id,
        )
        log.info("[idea] actor=%s submitted idea=%s to shop=%s", actor_id, idea.id, shop_id)
        return idea

    async def get(self, idea_id: uuid.UUID) -> Idea:
        idea = await self.ideas.get(idea_id)
        if not idea:
            raise NotFoundError("idea", idea_id)
        return idea

    async def list_for_shop(self, shop_id: uuid.UUID, page: int | None = None, limit: int | None = None) -> list[Idea]:
        window = clamp_page(page, limit)
        return await self.ideas.list_for_shop(shop_id, limit=window.limit, offset=window.offset)

    async def delete(self, actor_id: uuid.UUID, idea_id: uuid.UUID) -> None:
        """The author may withdraw their idea; otherwise manage authority over the shop is needed."""
        idea = await self.get(idea_id)
        if idea.creator_id != actor_id:
            if idea.coffee_shop_id is None:
                raise AccessDeniedError("only the author can delete this idea")
            await self.access.can_manage(actor_id, idea.coffee_shop_id)
        await self.ideas.soft_delete(idea)
        log.info("[idea] actor=%s deleted idea=%s", actor_id, idea_id)
