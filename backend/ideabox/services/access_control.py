"""Who may act on a coffee shop.

Two independent axes decide it: the actor's global role and their membership
in the shop's roster. ``decide_manage`` is the whole policy over those facts;
``AccessControl`` only gathers the facts, in the order that keeps lookups to a
minimum (the creator check needs nothing beyond the shop row).
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.core.errors import AccessDeniedError, NotFoundError
from ideabox.models.enums import RoleName
from ideabox.models.worker_coffee_shop import WorkerCoffeeShop
from ideabox.repos.coffee_shop_repo import CoffeeShopRepo
from ideabox.repos.user_repo import UserRepo
from ideabox.repos.worker_coffee_shop_repo import WorkerCoffeeShopRepo

log = logging.getLogger(__name__)

NOT_SHOP_ADMIN = "user is not an admin for this coffee shop"
NOT_SHOP_WORKER = "user is not a worker for this coffee shop"


@dataclass(frozen=True)
class ShopAuthority:
    is_creator: bool
    global_role: str | None
    active_membership: WorkerCoffeeShop | None = None


@dataclass(frozen=True)
class AccessDecision:
    allowed: bool
    reason: str


def decide_manage(authority: ShopAuthority) -> AccessDecision:
    if authority.is_creator:
        return AccessDecision(True, "is creator")
    if authority.global_role != RoleName.admin.value:
        return AccessDecision(False, NOT_SHOP_ADMIN)
    if authority.active_membership is not None:
        return AccessDecision(True, "admin-role worker")
    return AccessDecision(False, NOT_SHOP_ADMIN)


def require_self(actor_id: uuid.UUID, target_id: uuid.UUID, reason: str) -> None:
    if actor_id != target_id:
        log.warning("[access] denied: actor=%s tried to act as %s", actor_id, target_id)
        raise AccessDeniedError(reason)


class AccessControl:
    def __init__(self, session: AsyncSession):
        self.shops = CoffeeShopRepo(session)
        self.users = UserRepo(session)
        self.workers = WorkerCoffeeShopRepo(session)

    async def resolve(self, actor_id: uuid.UUID, shop_id: uuid.UUID) -> ShopAuthority:
        shop = await self.shops.get(shop_id)
        if not shop:
            raise NotFoundError("coffee shop", shop_id)
        if shop.creator_id == actor_id:
            return ShopAuthority(is_creator=True, global_role=None)

        actor = await self.users.get(actor_id)
        if not actor:
            raise NotFoundError("user", actor_id)
        role = actor.role_name
        if role != RoleName.admin.value:
            return ShopAuthority(is_creator=False, global_role=role)

        membership = await self.workers.get_active(actor_id, shop_id)
        return ShopAuthority(is_creator=False, global_role=role, active_membership=membership)

    async def can_manage(self, actor_id: uuid.UUID, shop_id: uuid.UUID) -> AccessDecision:
        """Allow the shop creator or an admin-role active worker; raise otherwise."""
        decision = decide_manage(await self.resolve(actor_id, shop_id))
        if not decision.allowed:
            log.warning("[access] manage denied: actor=%s shop=%s reason=%s", actor_id, shop_id, decision.reason)
            raise AccessDeniedError(decision.reason)
        log.debug("[access] manage granted: actor=%s shop=%s (%s)", actor_id, shop_id, decision.reason)
        return decision

    async def require_active_worker(self, actor_id: uuid.UUID, shop_id: uuid.UUID) -> WorkerCoffeeShop:
        membership = await self.workers.get_active(actor_id, shop_id)
        if membership is None:
            log.warning("[access] worker check failed: actor=%s shop=%s", actor_id, shop_id)
            raise AccessDeniedError(NOT_SHOP_WORKER)
        return membership
