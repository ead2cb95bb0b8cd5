from __future__ import annotations

import uuid

from pydantic import BaseModel


class UserOut(BaseModel):
    id: uuid.UUID
    name: str | None = None
    phone: str | None = None

    class Config:
        from_attributes = True
