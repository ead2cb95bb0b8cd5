from __future__ import annotations

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.core.errors import NotFoundError
from ideabox.models.category import Category
from ideabox.repos.category_repo import CategoryRepo
from ideabox.services.access_control import AccessControl
from ideabox.services.pagination import clamp_page

log = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, session: AsyncSession):
        self.access = AccessControl(session)
        self.categories = CategoryRepo(session)

    async def create(self, actor_id: uuid.UUID, shop_id: uuid.UUID, title: str, description: str | None) -> Category:
        await self.access.can_manage(actor_id, shop_id)
        category = await self.categories.create(shop_id, title, description)
        log.info("[category] actor=%s created category=%s in shop=%s", actor_id, category.id, shop_id)
        return category

    async def update(
        self,
        actor_id: uuid.UUID,
        shop_id: uuid.UUID,
        category_id: uuid.UUID,
        title: str,
        description: str | None,
    ) -> Category:
        await self.access.can_manage(actor_id, shop_id)
        category = await self.categories.get(category_id, shop_id)
        if not category:
            raise NotFoundError("category", category_id)
        return await self.categories.update(category, title=title, description=description)

    async def delete(self, actor_id: uuid.UUID, shop_id: uuid.UUID, category_id: uuid.UUID) -> None:
        await self.access.can_manage(actor_id, shop_id)
        category = await self.categories.get(category_id, shop_id)
        if not category:
            raise NotFoundError("category", category_id)
        await self.categories.soft_delete(category)
        log.info("[category] actor=%s deleted category=%s", actor_id, category_id)

    async def get(self, shop_id: uuid.UUID, category_id: uuid.UUID) -> Category:
        category = await self.categories.get(category_id, shop_id)
        if not category:
            raise NotFoundError("category", category_id)
        return category

    async def list_for_shop(
        self,
        shop_id: uuid.UUID,
        page: int | None = None,
        limit: int | None = None,
    ) -> tuple[list[Category], int]:
        window = clamp_page(page, limit)
        return await self.categories.list_for_shop(shop_id, limit=window.limit, offset=window.offset)
