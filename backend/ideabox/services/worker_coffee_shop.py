from __future__ import annotations

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.core.errors import ConflictError, NotFoundError
from ideabox.models.coffee_shop import CoffeeShop
from ideabox.models.user import User
from ideabox.models.worker_coffee_shop import WorkerCoffeeShop
from ideabox.repos.user_repo import UserRepo
from ideabox.repos.worker_coffee_shop_repo import WorkerCoffeeShopRepo
from ideabox.services.access_control import AccessControl, require_self
from ideabox.services.pagination import clamp_page

log = logging.getLogger(__name__)


class WorkerCoffeeShopService:
    """Staff roster of a coffee shop: relations go absent -> active -> deleted."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.access = AccessControl(session)
        self.users = UserRepo(session)
        self.relations = WorkerCoffeeShopRepo(session)

    async def add_worker(self, actor_id: uuid.UUID, worker_id: uuid.UUID, shop_id: uuid.UUID) -> WorkerCoffeeShop:
        await self.access.can_manage(actor_id, shop_id)

        if not await self.users.exists(worker_id):
            log.info("[roster] add: worker %s does not exist", worker_id)
            raise NotFoundError("user", worker_id)

        if await self.relations.is_worker_in_shop(worker_id, shop_id):
            log.info("[roster] add: user %s already works in shop %s", worker_id, shop_id)
            raise ConflictError(f"user {worker_id} is already a worker in shop {shop_id}")

        rel = await self.relations.create(worker_id, shop_id)
        log.info("[roster] actor=%s added worker=%s to shop=%s relation=%s", actor_id, worker_id, shop_id, rel.id)
        return rel

    async def remove_worker(self, actor_id: uuid.UUID, relation_id: uuid.UUID) -> None:
        rel = await self.relations.get(relation_id)
        if not rel:
            raise NotFoundError("worker_coffee_shop", relation_id)

        await self.access.can_manage(actor_id, rel.coffee_shop_id)

        await self.relations.soft_delete(rel)
        log.info("[roster] actor=%s removed relation=%s", actor_id, relation_id)

    async def list_workers(
        self,
        actor_id: uuid.UUID,
        shop_id: uuid.UUID,
        page: int | None = None,
        limit: int | None = None,
    ) -> list[User]:
        await self.access.can_manage(actor_id, shop_id)

        window = clamp_page(page, limit)
        rels = await self.relations.list_for_shop(shop_id, limit=window.limit, offset=window.offset)
        log.debug("[roster] listed %s workers of shop=%s", len(rels), shop_id)
        return [r.worker for r in rels]

    async def list_shops_for_worker(
        self,
        actor_id: uuid.UUID,
        worker_id: uuid.UUID,
        page: int | None = None,
        limit: int | None = None,
    ) -> list[CoffeeShop]:
        # Self-service only; a global admin gets no override here.
        require_self(actor_id, worker_id, "you can only view your own coffee shops")

        window = clamp_page(page, limit)
        rels = await self.relations.list_for_worker(worker_id, limit=window.limit, offset=window.offset)
        return [r.coffee_shop for r in rels]
