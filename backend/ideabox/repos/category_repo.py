from __future__ import annotations

import uuid

from sqlalchemy import select, func, desc
from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.models.category import Category


class CategoryRepo:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, coffee_shop_id: uuid.UUID, title: str, description: str | None) -> Category:
        category = Category(coffee_shop_id=coffee_shop_id, title=title, description=description)
        self.session.add(category)
        await self.session.flush()
        return category

    async def get(self, category_id: uuid.UUID, coffee_shop_id: uuid.UUID) -> Category | None:
        res = await self.session.execute(
            select(Category).where(
                Category.id == category_id,
                Category.coffee_shop_id == coffee_shop_id,
                Category.visible(),
            )
        )
        return res.scalar_one_or_none()

    async def list_for_shop(self, coffee_shop_id: uuid.UUID, *, limit: int, offset: int) -> tuple[list[Category], int]:
        cond = [Category.coffee_shop_id == coffee_shop_id, Category.visible()]
        total = (await self.session.execute(select(func.count(Category.id)).where(*cond))).scalar_one()
        res = await self.session.execute(
            select(Category).where(*cond).order_by(desc(Category.created_at), Category.id).limit(limit).offset(offset)
        )
        return list(res.scalars().all()), int(total or 0)

    async def update(self, category: Category, *, title: str, description: str | None) -> Category:
        category.title = title
        category.description = description
        await self.session.flush()
        return category

    async def soft_delete(self, category: Category) -> None:
        category.mark_deleted()
        await self.session.flush()
