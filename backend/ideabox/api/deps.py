from __future__ import annotations

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.core.db import get_session
from ideabox.core.errors import UnauthorizedError
from ideabox.core.security import actor_id_from_token
from ideabox.repos.user_repo import UserRepo

bearer = HTTPBearer(auto_error=False)


async def get_db() -> AsyncSession:
    async for s in get_session():
        yield s


async def get_current_user(
    creds: HTTPAuthorizationCredentials | None = Depends(bearer),
    db: AsyncSession = Depends(get_db),
):
    """The authenticated actor. A missing or unusable identity is always 401, never 403."""
    if creds is None or not creds.credentials:
        raise UnauthorizedError("user not authorized")
    try:
        actor_id = actor_id_from_token(creds.credentials)
    except Exception:
        raise UnauthorizedError("invalid token")

    user = await UserRepo(db).get(actor_id)
    if not user:
        raise UnauthorizedError("user not authorized")
    return user
