from __future__ import annotations

import uuid

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.models.user import Role, User


class UserRepo:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, user_id: uuid.UUID) -> User | None:
        res = await self.session.execute(select(User).where(User.id == user_id, User.visible()))
        return res.scalar_one_or_none()

    async def exists(self, user_id: uuid.UUID) -> bool:
        res = await self.session.execute(select(func.count(User.id)).where(User.id == user_id, User.visible()))
        return int(res.scalar_one() or 0) > 0

    async def get_by_login(self, login: str) -> User | None:
        res = await self.session.execute(select(User).where(User.login == login, User.visible()))
        return res.scalar_one_or_none()

    async def create(
        self,
        *,
        name: str | None = None,
        login: str | None = None,
        phone: str | None = None,
        password_hash: str | None = None,
        role_id: uuid.UUID | None = None,
    ) -> User:
        user = User(name=name, login=login, phone=phone, password_hash=password_hash, role_id=role_id)
        self.session.add(user)
        await self.session.flush()
        # Pull the joined role so callers can read role_name without a lazy load.
        await self.session.refresh(user, attribute_names=["role"])
        return user

    async def get_role_by_name(self, name: str) -> Role | None:
        res = await self.session.execute(select(Role).where(Role.name == name))
        return res.scalar_one_or_none()

    async def ensure_role(self, name: str) -> Role:
        role = await self.get_role_by_name(name)
        if role:
            return role
        role = Role(name=name)
        self.session.add(role)
        await self.session.flush()
        return role
