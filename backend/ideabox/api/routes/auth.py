from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.api.deps import get_db, get_current_user
from ideabox.core.errors import ConflictError, UnauthorizedError
from ideabox.core.security import hash_password, verify_password, create_access_token
from ideabox.models.enums import RoleName
from ideabox.repos.coffee_shop_repo import CoffeeShopRepo
from ideabox.repos.user_repo import UserRepo
from ideabox.schemas.auth import AdminRegisterRequest, LoginRequest, MeOut, RegisterRequest, TokenResponse

router = APIRouter()


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(payload: RegisterRequest, db: AsyncSession = Depends(get_db)):
    repo = UserRepo(db)
    if await repo.get_by_login(payload.login):
        raise ConflictError("login already registered")
    user = await repo.create(name=payload.name, login=payload.login, password_hash=hash_password(payload.password))
    await db.commit()
    return TokenResponse(access_token=create_access_token(str(user.id)))


@router.post("/admin/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register_admin(payload: AdminRegisterRequest, db: AsyncSession = Depends(get_db)):
    """Sign up a coffee-shop owner: an admin-role user plus the shop they create."""
    repo = UserRepo(db)
    if await repo.get_by_login(payload.login):
        raise ConflictError("login already registered")
    role = await repo.ensure_role(RoleName.admin.value)
    user = await repo.create(login=payload.login, password_hash=hash_password(payload.password), role_id=role.id)
    await CoffeeShopRepo(db).create(creator_id=user.id, name=payload.coffee_shop_name, address=payload.address)
    await db.commit()
    return TokenResponse(access_token=create_access_token(str(user.id)))


@router.post("/admin/login", response_model=TokenResponse)
async def login_admin(payload: LoginRequest, db: AsyncSession = Depends(get_db)):
    user = await UserRepo(db).get_by_login(payload.login)
    if not user or not verify_password(payload.password, user.password_hash):
        raise UnauthorizedError("invalid credentials")
    if user.role_name != RoleName.admin.value:
        raise UnauthorizedError("invalid credentials")
    return TokenResponse(access_token=create_access_token(str(user.id)))


@router.get("/me", response_model=MeOut)
async def me(user=Depends(get_current_user)):
    return MeOut(id=user.id, name=user.name, login=user.login, role=user.role_name)
