from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import jwt
from passlib.context import CryptContext

from ideabox.core.config import settings

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")
ALGORITHM = "HS256"


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str | None) -> bool:
    # Users onboarded by phone have no password at all.
    if not password_hash:
        return False
    return pwd_context.verify(password, password_hash)


def create_access_token(user_id: uuid.UUID | str, ttl_minutes: int | None = None) -> str:
    ttl = ttl_minutes or settings.JWT_ACCESS_TTL_MIN
    now = datetime.now(timezone.utc)
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=ttl)).timestamp()),
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=ALGORITHM)


def decode_token(token: str) -> dict[str, Any]:
    return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[ALGORITHM])


def actor_id_from_token(token: str) -> uuid.UUID:
    """Raises ValueError (or a jose error) when the token or its subject is unusable."""
    payload = decode_token(token)
    return uuid.UUID(str(payload.get("sub")))
