from __future__ import annotations

import uuid

from pydantic import BaseModel


class CoffeeShopOut(BaseModel):
    id: uuid.UUID
    name: str
    address: str
    contacts: str | None = None
    welcome_message: str | None = None
    rules: str | None = None

    class Config:
        from_attributes = True
