from __future__ import annotations

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.core.errors import NotFoundError
from ideabox.models.reward_type import RewardType
from ideabox.repos.reward_type_repo import RewardTypeRepo
from ideabox.services.access_control import AccessControl
from ideabox.services.pagination import clamp_page

log = logging.getLogger(__name__)


class RewardTypeService:
    def __init__(self, session: AsyncSession):
        self.access = AccessControl(session)
        self.reward_types = RewardTypeRepo(session)

    async def _get_or_404(self, reward_type_id: uuid.UUID) -> RewardType:
        rt = await self.reward_types.get(reward_type_id)
        if not rt:
            raise NotFoundError("reward_type", reward_type_id)
        return rt

    async def create(self, actor_id: uuid.UUID, shop_id: uuid.UUID, description: str) -> RewardType:
        await self.access.can_manage(actor_id, shop_id)
        rt = await self.reward_types.create(shop_id, description)
        log.info("[reward-type] actor=%s created reward_type=%s in shop=%s", actor_id, rt.id, shop_id)
        return rt

    async def update(self, actor_id: uuid.UUID, reward_type_id: uuid.UUID, description: str) -> RewardType:
        rt = await self._get_or_404(reward_type_id)
        await self.access.can_manage(actor_id, rt.coffee_shop_id)
        return await self.reward_types.update(rt, description=description)

    async def delete(self, actor_id: uuid.UUID, reward_type_id: uuid.UUID) -> None:
        rt = await self._get_or_404(reward_type_id)
        await self.access.can_manage(actor_id, rt.coffee_shop_id)
        await self.reward_types.soft_delete(rt)
        log.info("[reward-type] actor=%s deleted reward_type=%s", actor_id, reward_type_id)

    async def get(self, reward_type_id: uuid.UUID) -> RewardType:
        return await self._get_or_404(reward_type_id)

    async def list_for_shop(
        self,
        shop_id: uuid.UUID,
        page: int | None = None,
        limit: int | None = None,
    ) -> list[RewardType]:
        window = clamp_page(page, limit)
        return await self.reward_types.list_for_shop(shop_id, limit=window.limit, offset=window.offset)
