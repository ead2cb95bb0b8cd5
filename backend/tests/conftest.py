from __future__ import annotations

import os

# Must be set before ideabox.core.config is imported.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from ideabox.api.deps import get_db
from ideabox.core.security import create_access_token
from ideabox.main import app
from ideabox.models import Base
from ideabox.models.enums import RoleName
from ideabox.repos.coffee_shop_repo import CoffeeShopRepo
from ideabox.repos.idea_repo import IdeaRepo
from ideabox.repos.user_repo import UserRepo
from ideabox.repos.worker_coffee_shop_repo import WorkerCoffeeShopRepo


# ── Helpers ──────────────────────────────────────────────────────────

class Seed:
    """Creates rows in their own committed session, the way another request would."""

    def __init__(self, session_maker):
        self.session_maker = session_maker

    async def user(self, name: str, *, admin: bool = False):
        async with self.session_maker() as s:
            repo = UserRepo(s)
            role_id = None
            if admin:
                role_id = (await repo.ensure_role(RoleName.admin.value)).id
            user = await repo.create(name=name, login=name, role_id=role_id)
            await s.commit()
            return user

    async def shop(self, creator, name: str = "Test Shop"):
        async with self.session_maker() as s:
            shop = await CoffeeShopRepo(s).create(creator.id, name, "1 Bean St")
            await s.commit()
            return shop

    async def membership(self, worker, shop):
        async with self.session_maker() as s:
            rel = await WorkerCoffeeShopRepo(s).create(worker.id, shop.id)
            await s.commit()
            return rel

    async def idea(self, shop, creator, title: str = "More oat milk"):
        async with self.session_maker() as s:
            idea = await IdeaRepo(s).create(
                coffee_shop_id=shop.id if shop is not None else None,
                creator_id=creator.id,
                title=title,
                description="Please stock oat milk on weekends.",
            )
            await s.commit()
            return idea


# ── Fixtures ─────────────────────────────────────────────────────────

@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def engine():
    eng = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
async def session(session_maker):
    async with session_maker() as s:
        yield s


@pytest.fixture
def seed(session_maker):
    return Seed(session_maker)


@pytest.fixture
async def client(session_maker):
    async def _get_db():
        async with session_maker() as s:
            yield s

    app.dependency_overrides[get_db] = _get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def auth():
    def _headers(user) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(str(user.id))}"}

    return _headers
