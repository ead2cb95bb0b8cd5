from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.models.coffee_shop import CoffeeShop


class CoffeeShopRepo:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, shop_id: uuid.UUID) -> CoffeeShop | None:
        res = await self.session.execute(select(CoffeeShop).where(CoffeeShop.id == shop_id, CoffeeShop.visible()))
        return res.scalar_one_or_none()

    async def create(
        self,
        creator_id: uuid.UUID,
        name: str,
        address: str,
        *,
        contacts: str | None = None,
        welcome_message: str | None = None,
        rules: str | None = None,
    ) -> CoffeeShop:
        shop = CoffeeShop(
            creator_id=creator_id,
            name=name,
            address=address,
            contacts=contacts,
            welcome_message=welcome_message,
            rules=rules,
        )
        self.session.add(shop)
        await self.session.flush()
        return shop
