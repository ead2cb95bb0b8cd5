from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ideabox.models.enums import RoleName
from ideabox.models.user import Role
from ideabox.repos.user_repo import UserRepo

log = logging.getLogger(__name__)


async def ensure_admin_role(session_maker: async_sessionmaker[AsyncSession]) -> Role:
    """Create the global admin role if the database does not have it yet. Safe to call on every start."""
    async with session_maker() as session:
        role = await UserRepo(session).ensure_role(RoleName.admin.value)
        await session.commit()
    log.info("[roles] admin role ready id=%s", role.id)
    return role
